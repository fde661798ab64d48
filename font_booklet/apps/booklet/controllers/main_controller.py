import logging

from PyQt6.QtWidgets import QMessageBox, QApplication
from PyQt6.QtCore import Qt

from font_booklet.core.app import CoreApp, BOOKMARKS_CHANGED, SAMPLE_TEXT_CHANGED, CATALOG_CHANGED
from font_booklet.core.services.font_watcher import FontWatcherService, is_font_file
from font_booklet.apps.booklet.views.main_window import MainWindow
from font_booklet.apps.booklet.views.sample_text_dialog import SampleTextDialog
from font_booklet.apps.booklet.views.settings_dialog import SettingsDialog
from font_booklet.utils.logging import setup_logging

logger = logging.getLogger(__name__)


class MainController:
    """
    MVC Controller: The Glue.
    Responsibilities:
    1. Handle user actions from Views (toggle bookmark, filter, edit sample).
    2. Call Model (CoreApp) to fetch/update data.
    3. Update Views when CoreApp reports a change.
    """
    def __init__(self, app_core: CoreApp = None, load_fonts=True):
        self.app_core = app_core if app_core is not None else CoreApp()
        self.filtering_to_bookmarked = False
        self.sample_dialog = None

        # Initialize Views
        self.main_window = MainWindow()

        # Connect Signals
        self.main_window.act_filter_bookmarked.toggled.connect(self.on_filter_toggled)
        self.main_window.act_edit_sample.triggered.connect(self.open_sample_editor)
        self.main_window.act_reload.triggered.connect(self.reload_catalog)
        self.main_window.act_settings.triggered.connect(self.open_settings)
        self.main_window.font_list.bookmark_toggle_requested.connect(self.on_bookmark_toggle_requested)
        self.main_window.font_list.bookmark_set_requested.connect(self.on_bookmark_set_requested)

        self.app_core.add_observer(self.on_core_changed)

        self.font_watcher = self._create_font_watcher()

        if load_fonts:
            self.reload_catalog()
            self.start_font_watcher()
        else:
            self.refresh_list()

    def show(self):
        self.main_window.show()

    def shutdown(self):
        self.font_watcher.stop_watching()
        self.app_core.remove_observer(self.on_core_changed)

    def _create_font_watcher(self):
        watcher = FontWatcherService()
        watcher.handler.font_created.connect(self.on_font_file_added)
        watcher.handler.font_deleted.connect(self.on_font_file_removed)
        watcher.handler.font_moved.connect(self.on_font_file_moved)
        return watcher

    def start_font_watcher(self):
        settings = self.app_core.settings
        if not (settings.watch_font_dirs and settings.font_dirs):
            return
        try:
            self.font_watcher.start_watching(settings.font_dirs)
        except Exception as e:
            logger.exception("Font watcher failed to start")
            QMessageBox.critical(self.main_window, "Error", f"Could not watch font folders: {str(e)}")

    def reload_catalog(self):
        try:
            QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)
            # CoreApp notifies CATALOG_CHANGED, which refreshes the list
            self.app_core.load_catalog()
        except Exception as e:
            logger.exception("Font catalog reload failed")
            QMessageBox.critical(self.main_window, "Error", f"Could not load fonts: {str(e)}")
        finally:
            QApplication.restoreOverrideCursor()

    def refresh_list(self):
        df = self.app_core.visible_faces(self.filtering_to_bookmarked)
        self.main_window.font_list.load_faces(
            df,
            self.app_core.sample_text,
            self.app_core.bookmarks,
            self.app_core.settings.sample_point_size
        )
        families = df['family'].nunique() if not df.empty else 0
        self.main_window.set_counts(families, len(df))

    def on_core_changed(self, event, value):
        if event == BOOKMARKS_CHANGED:
            if self.filtering_to_bookmarked:
                self.refresh_list()
            else:
                self.main_window.font_list.update_bookmarks(value)
        elif event == SAMPLE_TEXT_CHANGED:
            self.main_window.font_list.set_sample_text(value)
        elif event == CATALOG_CHANGED:
            self.refresh_list()

    def on_bookmark_toggle_requested(self, face):
        self.app_core.toggle_bookmark(face)

    def on_bookmark_set_requested(self, face, bookmarked):
        self.app_core.set_bookmarked(face, bookmarked)

    def on_filter_toggled(self, checked):
        self.filtering_to_bookmarked = checked
        self.refresh_list()

    def open_sample_editor(self):
        dialog = SampleTextDialog(self.app_core.sample_text, self.main_window)
        dialog.text_edited.connect(self.app_core.replace_sample_text)
        dialog.pangram_requested.connect(lambda: self.on_pangram_requested(dialog))
        dialog.finished.connect(lambda result: self.on_sample_editor_closed(dialog))
        self.sample_dialog = dialog
        dialog.open()
        return dialog

    def on_pangram_requested(self, dialog):
        try:
            dialog.set_text(self.app_core.random_pangram())
        except ValueError as e:
            QMessageBox.warning(self.main_window, "Pangram", str(e))

    def on_sample_editor_closed(self, dialog):
        committed = self.app_core.commit_sample_text(dialog.text())
        dialog.set_text(committed)
        self.sample_dialog = None

    def open_settings(self):
        settings = self.app_core.settings
        dialog = SettingsDialog(settings.config, self.main_window)
        if dialog.exec():
            settings.save_config(dialog.get_settings())
            setup_logging(settings.log_level)
            # A stopped watchdog observer cannot be restarted
            self.font_watcher.stop_watching()
            self.font_watcher = self._create_font_watcher()
            self.reload_catalog()
            self.start_font_watcher()

    def on_font_file_added(self, path):
        logger.info("Font file added: %s. Reloading...", path)
        self.app_core.register_font_file(path)
        self.reload_catalog()

    def on_font_file_removed(self, path):
        logger.info("Font file removed: %s. Reloading...", path)
        self.app_core.unregister_font_file(path)
        self.reload_catalog()

    def on_font_file_moved(self, src_path, dest_path):
        logger.info("Font file moved: %s -> %s. Reloading...", src_path, dest_path)
        self.app_core.unregister_font_file(src_path)
        if is_font_file(dest_path):
            self.app_core.register_font_file(dest_path)
        self.reload_catalog()
