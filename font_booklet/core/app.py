import logging
from pathlib import Path

from .settings import Settings
from .storage import Storage
from .catalog import FontCatalog
from .data_processor import DataProcessor
from .sample_text import SampleText
from .services.bookmark_service import BookmarkService

logger = logging.getLogger(__name__)

BOOKMARKS_CHANGED = "bookmarks"
SAMPLE_TEXT_CHANGED = "sample_text"
CATALOG_CHANGED = "catalog"


class CoreApp:
    """
    Application state holder. Built once at start-up and handed to the
    controller (GUI) or the CLI.
    """
    def __init__(self, config_path="config/settings.json", catalog=None):
        self.settings = Settings(config_path)
        self.storage = Storage(self.settings.db_path)
        self.data_processor = DataProcessor()
        self.bookmark_service = BookmarkService(self.storage)
        self.sample = SampleText(self.storage)
        self.catalog = catalog if catalog is not None else FontCatalog()
        self._font_ids = {}
        self._observers = []

        self.bookmark_service.load()

    def add_observer(self, observer_callback):
        """
        Add a callback function to receive state changes.
        Callback signature: callback(event, value)
        """
        self._observers.append(observer_callback)

    def remove_observer(self, observer_callback):
        if observer_callback in self._observers:
            self._observers.remove(observer_callback)

    def _notify(self, event, value):
        for callback in self._observers:
            callback(event, value)

    # Catalog

    def load_catalog(self):
        """
        Register the configured font directories and rebuild the catalog
        from the Qt font database. Needs a QGuiApplication.
        """
        self._font_ids.update(FontCatalog.register_font_dirs(
            self.settings.font_dirs, skip=set(self._font_ids)))
        self.catalog = FontCatalog.from_qt()
        self._notify(CATALOG_CHANGED, self.catalog)
        return self.catalog

    def register_font_file(self, path):
        path = str(Path(path))
        if path in self._font_ids:
            return self._font_ids[path]
        font_id = FontCatalog.register_font_file(path)
        if font_id != -1:
            self._font_ids[path] = font_id
        return font_id

    def unregister_font_file(self, path):
        font_id = self._font_ids.pop(str(Path(path)), None)
        if font_id is None:
            return False
        return FontCatalog.unregister_font(font_id)

    def visible_faces(self, filtering=False):
        return self.data_processor.visible_faces(
            self.catalog.df, self.bookmark_service.members, filtering)

    def visible_families(self, filtering=False):
        return self.data_processor.visible_families(
            self.catalog.df, self.bookmark_service.members, filtering)

    # Bookmarks

    @property
    def bookmarks(self):
        return self.bookmark_service.members

    def is_bookmarked(self, face):
        return self.bookmark_service.is_bookmarked(face)

    def toggle_bookmark(self, face):
        """Toggle a face's bookmark, persist, notify. Returns the new status."""
        new_status = self.bookmark_service.toggle(face)
        self.bookmark_service.save()
        logger.info("Bookmark %s: %s", "added" if new_status else "removed", face)
        self._notify(BOOKMARKS_CHANGED, self.bookmark_service.members)
        return new_status

    def set_bookmarked(self, face, bookmarked):
        if bookmarked:
            self.bookmark_service.bookmark(face)
        else:
            self.bookmark_service.remove_bookmark(face)
        self.bookmark_service.save()
        self._notify(BOOKMARKS_CHANGED, self.bookmark_service.members)

    # Sample text

    @property
    def sample_text(self):
        return self.sample.text

    def replace_sample_text(self, text):
        self.sample.replace(text)
        self._notify(SAMPLE_TEXT_CHANGED, text)

    def commit_sample_text(self, text=None):
        committed = self.sample.commit(text)
        self._notify(SAMPLE_TEXT_CHANGED, committed)
        return committed

    def random_pangram(self, rng=None):
        new_sample = self.sample.shuffle(rng)
        self._notify(SAMPLE_TEXT_CHANGED, new_sample)
        return new_sample
