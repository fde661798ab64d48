import logging
from pathlib import Path

import pandas as pd

from .data_processor import CATALOG_COLUMNS, DataProcessor

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".otf", ".ttc")
# Face ids are "<family> / <style>"; a space alone is ambiguous in multi-word names
FACE_SEPARATOR = " / "


class FontCatalog:
    """
    Read-only, ordered list of font families and their faces.
    Wraps a DataFrame with one row per face: family, face, style.
    """
    def __init__(self, df: pd.DataFrame = None):
        if df is None:
            df = pd.DataFrame(columns=CATALOG_COLUMNS)
        self.df = df.reset_index(drop=True)

    @classmethod
    def from_families(cls, families):
        """
        Build a catalog from {surname: [face, ...]} or an iterable of
        (surname, faces) pairs. The face identifier doubles as the style.
        """
        items = families.items() if hasattr(families, "items") else families
        rows = []
        for surname, faces in items:
            for face in faces:
                rows.append({'family': surname, 'face': face, 'style': face})
        return cls(pd.DataFrame(rows, columns=CATALOG_COLUMNS))

    @classmethod
    def from_styles(cls, family_styles):
        """
        Build a catalog from (family, styles) pairs, naming each face
        "<family> / <style>".

        Face ids must be unique. A family that itself contains the separator
        can still clash with another family; the later face is skipped and
        logged.
        """
        rows = []
        seen = set()
        for family, styles in family_styles:
            for style in styles:
                face = f"{family}{FACE_SEPARATOR}{style}"
                if face in seen:
                    logger.warning("Duplicate face id %r, skipping", face)
                    continue
                seen.add(face)
                rows.append({'family': family, 'face': face, 'style': style})
        return cls(pd.DataFrame(rows, columns=CATALOG_COLUMNS))

    @classmethod
    def from_qt(cls):
        """
        Build a catalog from the Qt font database.
        A QGuiApplication must exist before calling this.
        """
        from PyQt6.QtGui import QFontDatabase

        catalog = cls.from_styles(
            (family, QFontDatabase.styles(family))
            for family in QFontDatabase.families()
            if not QFontDatabase.isPrivateFamily(family)
        )
        logger.info("Font catalog loaded: %d families, %d faces",
                    len(catalog.families()), len(catalog))
        return catalog
    @staticmethod
    def register_font_file(path):
        """
        Register a single font file with Qt.
        Returns the application font id, or -1 when Qt rejects the file.
        """
        from PyQt6.QtGui import QFontDatabase

        font_id = QFontDatabase.addApplicationFont(str(path))
        if font_id == -1:
            logger.warning("Could not load font file: %s", path)
        else:
            logger.debug("Registered %s as %s", path,
                         QFontDatabase.applicationFontFamilies(font_id))
        return font_id

    @staticmethod
    def unregister_font(font_id):
        from PyQt6.QtGui import QFontDatabase

        return QFontDatabase.removeApplicationFont(font_id)

    @classmethod
    def register_font_dirs(cls, font_dirs, skip=()):
        """
        Register every font file found under the given directories, except
        paths listed in `skip`. Returns {path: font_id} for the files Qt accepted.
        """
        registered = {}
        for font_dir in font_dirs:
            path_obj = Path(font_dir)
            if not path_obj.exists():
                logger.warning("Font directory does not exist: %s", font_dir)
                continue
            for item in sorted(path_obj.rglob('*')):
                if str(item) in skip:
                    continue
                if item.is_file() and item.suffix.lower() in FONT_EXTENSIONS:
                    font_id = cls.register_font_file(item)
                    if font_id != -1:
                        registered[str(item)] = font_id
        return registered

    def __len__(self):
        return len(self.df)

    def __contains__(self, face):
        return bool((self.df['face'] == face).any())

    def faces(self):
        return list(self.df['face'])

    def families(self):
        """Families in catalog order, each with its faces in catalog order."""
        return DataProcessor().group_families(self.df)
