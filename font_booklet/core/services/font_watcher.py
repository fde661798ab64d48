import logging
from pathlib import Path

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler
from PyQt6.QtCore import QObject, pyqtSignal

from font_booklet.core.catalog import FONT_EXTENSIONS

logger = logging.getLogger(__name__)


def is_font_file(path):
    return str(path).lower().endswith(FONT_EXTENSIONS)


class FontFileHandler(QObject, FileSystemEventHandler):
    """
    Handles file system events and emits Qt signals.
    """
    # Signals to update UI
    font_created = pyqtSignal(str)
    font_deleted = pyqtSignal(str)
    font_moved = pyqtSignal(str, str) # src, dest

    def __init__(self):
        QObject.__init__(self) # Init Qt Object

    def on_created(self, event):
        if not event.is_directory and is_font_file(event.src_path):
            logger.info("Font file created: %s", event.src_path)
            self.font_created.emit(event.src_path)

    def on_deleted(self, event):
        if not event.is_directory and is_font_file(event.src_path):
            logger.info("Font file deleted: %s", event.src_path)
            self.font_deleted.emit(event.src_path)

    def on_moved(self, event):
        if not event.is_directory and (is_font_file(event.src_path) or is_font_file(event.dest_path)):
            logger.info("Font file moved: %s -> %s", event.src_path, event.dest_path)
            self.font_moved.emit(event.src_path, event.dest_path)


class FontWatcherService(QObject):
    """
    Service to watch font directories for added or removed font files.
    """
    def __init__(self):
        super().__init__()
        self.observer = Observer()
        self.handler = FontFileHandler()
        self.watches = []

    def start_watching(self, paths):
        for watch in self.watches:
            self.observer.unschedule(watch)
        self.watches = []
        for path in paths:
            if not Path(path).is_dir():
                logger.warning("Font directory does not exist, not watching: %s", path)
                continue
            self.watches.append(self.observer.schedule(self.handler, str(path), recursive=True))
        if not self.observer.is_alive():
            self.observer.start()
        logger.info("Watching %d font directories", len(self.watches))

    def stop_watching(self):
        if self.observer.is_alive():
            self.observer.stop()
            self.observer.join()
        self.watches = []
