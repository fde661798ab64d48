import sys
import json
import pytest
from PyQt6.QtWidgets import QApplication, QMessageBox

from font_booklet.core import pangrams
from font_booklet.core.app import CoreApp
from font_booklet.core.catalog import FontCatalog
from font_booklet.apps.booklet.controllers.main_controller import MainController

@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app

@pytest.fixture
def controller(qapp, tmp_path):
    config_path = tmp_path / "settings.json"
    config_path.write_text(json.dumps({"db_path": str(tmp_path / "defaults.db")}))
    catalog = FontCatalog.from_families({
        "Helvetica": ["Helvetica", "Helvetica-Bold"],
        "Courier": ["Courier"],
    })
    controller = MainController(CoreApp(str(config_path), catalog=catalog), load_fonts=False)
    yield controller
    controller.shutdown()
    controller.main_window.close()

def test_ui_startup(controller):
    """
    Smoke test: Ensure MainController initializes MainWindow without error.
    """
    assert controller.main_window is not None
    assert controller.main_window.isVisible() is False
    assert set(controller.main_window.font_list.face_items) == {"Helvetica", "Helvetica-Bold", "Courier"}
    assert controller.main_window.font_list.topLevelItemCount() == 2

def test_click_toggles_bookmark(controller):
    font_list = controller.main_window.font_list
    item = font_list.face_items["Courier"]

    font_list.itemClicked.emit(item, 0)
    assert controller.app_core.is_bookmarked("Courier")
    assert font_list.is_marked("Courier")

    font_list.itemClicked.emit(item, 0)
    assert not controller.app_core.is_bookmarked("Courier")
    assert not font_list.is_marked("Courier")

def test_filter_to_bookmarked(controller):
    font_list = controller.main_window.font_list
    controller.app_core.toggle_bookmark("Helvetica-Bold")

    controller.main_window.act_filter_bookmarked.setChecked(True)
    assert list(font_list.face_items) == ["Helvetica-Bold"]
    assert font_list.topLevelItemCount() == 1

    # Removing the last bookmark empties the filtered list
    controller.on_bookmark_set_requested("Helvetica-Bold", False)
    assert font_list.face_items == {}
    assert font_list.topLevelItemCount() == 0

    controller.main_window.act_filter_bookmarked.setChecked(False)
    assert len(font_list.face_items) == 3

def test_sample_editor(controller):
    font_list = controller.main_window.font_list
    dialog = controller.open_sample_editor()

    dialog.btn_pangram.click()
    drawn = dialog.text()
    assert drawn != pangrams.STANDARD
    assert font_list.face_items["Courier"].text(1) == drawn

    # Empty text falls back to the standard pangram on Done
    dialog.set_text("")
    dialog.text_edited.emit("")
    dialog.accept()
    assert controller.app_core.sample_text == pangrams.STANDARD
    assert font_list.face_items["Courier"].text(1) == pangrams.STANDARD

@pytest.fixture
def shown_errors(monkeypatch):
    errors = []
    monkeypatch.setattr(QMessageBox, "critical", staticmethod(lambda *args: errors.append(args)))
    return errors

def test_startup_with_missing_font_folder(qapp, tmp_path, shown_errors):
    config_path = tmp_path / "settings.json"
    config_path.write_text(json.dumps({
        "db_path": str(tmp_path / "defaults.db"),
        "font_dirs": [str(tmp_path / "gone")],
        "watch_font_dirs": True,
    }))
    controller = MainController(CoreApp(str(config_path)), load_fonts=True)
    try:
        assert shown_errors == []
        assert controller.font_watcher.watches == []
        assert controller.main_window.font_list.topLevelItemCount() == len(controller.app_core.catalog.families())
    finally:
        controller.shutdown()
        controller.main_window.close()

def test_watcher_failure_is_reported(controller, monkeypatch, shown_errors):
    def fail(paths):
        raise OSError("inotify watch limit reached")
    controller.app_core.settings.config["font_dirs"] = ["/fonts"]
    monkeypatch.setattr(controller.font_watcher, "start_watching", fail)

    controller.start_font_watcher()

    assert len(shown_errors) == 1
    assert "inotify watch limit reached" in shown_errors[0][2]

def test_font_file_events_update_catalog(controller, monkeypatch, tmp_path):
    registered, removed = [], []
    font_ids = iter([11, 12])
    monkeypatch.setattr(FontCatalog, "register_font_file",
                        staticmethod(lambda path: registered.append(path) or next(font_ids)))
    monkeypatch.setattr(FontCatalog, "unregister_font",
                        staticmethod(lambda font_id: removed.append(font_id) or True))
    reloaded = FontCatalog.from_families({"Inter": ["Inter / Regular"]})
    monkeypatch.setattr(FontCatalog, "from_qt", staticmethod(lambda: reloaded))

    handler = controller.font_watcher.handler
    font_list = controller.main_window.font_list
    added = str(tmp_path / "Inter.ttf")

    handler.font_created.emit(added)
    assert controller.app_core._font_ids == {added: 11}
    assert controller.app_core.catalog is reloaded
    assert list(font_list.face_items) == ["Inter / Regular"]

    handler.font_deleted.emit(added)
    assert controller.app_core._font_ids == {}
    assert removed == [11]

    # A file that was never registered has nothing to remove
    handler.font_deleted.emit(str(tmp_path / "Unknown.ttf"))
    assert removed == [11]

    # A finished download renamed into place
    partial = str(tmp_path / "Mono.tmp")
    final = str(tmp_path / "Mono.ttf")
    handler.font_moved.emit(partial, final)
    assert controller.app_core._font_ids == {final: 12}
    assert removed == [11]

    # Moving a font out to a non-font name only unregisters it
    handler.font_moved.emit(final, str(tmp_path / "Mono.bak"))
    assert controller.app_core._font_ids == {}
    assert removed == [11, 12]
    assert registered == [added, final]
