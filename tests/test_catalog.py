import sys

import pytest
from PyQt6.QtWidgets import QApplication

from font_booklet.core.catalog import FACE_SEPARATOR, FontCatalog
from font_booklet.core.data_processor import CATALOG_COLUMNS, Family

@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app

def test_from_families():
    catalog = FontCatalog.from_families({"Helvetica": ["Helvetica", "Helvetica-Bold"]})
    assert len(catalog) == 2
    assert catalog.faces() == ["Helvetica", "Helvetica-Bold"]
    assert catalog.families() == [Family("Helvetica", ("Helvetica", "Helvetica-Bold"))]
    assert "Helvetica-Bold" in catalog
    assert "Helvetica-Oblique" not in catalog

def test_empty_catalog():
    catalog = FontCatalog()
    assert len(catalog) == 0
    assert catalog.families() == []
    assert list(catalog.df.columns) == CATALOG_COLUMNS

def test_from_qt(qapp):
    catalog = FontCatalog.from_qt()
    assert list(catalog.df.columns) == CATALOG_COLUMNS
    for row in catalog.df.itertuples(index=False):
        assert row.face == f"{row.family}{FACE_SEPARATOR}{row.style}"
    assert catalog.df["face"].is_unique

def test_from_styles_keeps_multi_word_families_apart():
    catalog = FontCatalog.from_styles([("Foo", ["Bar Baz"]), ("Foo Bar", ["Baz"])])
    assert catalog.faces() == ["Foo / Bar Baz", "Foo Bar / Baz"]
    assert [f.surname for f in catalog.families()] == ["Foo", "Foo Bar"]

def test_from_styles_skips_duplicate_face_ids():
    # Both spell "A / B / C"
    catalog = FontCatalog.from_styles([("A", ["B / C"]), ("A / B", ["C"]), ("A", ["Bold"])])
    assert catalog.faces() == ["A / B / C", "A / Bold"]
    assert list(catalog.df["family"]) == ["A", "A"]

def test_register_font_dirs_skips_missing_and_invalid(qapp, tmp_path):
    (tmp_path / "broken.ttf").write_bytes(b"not a font")
    (tmp_path / "readme.txt").write_text("ignore me")
    registered = FontCatalog.register_font_dirs([str(tmp_path), str(tmp_path / "missing")])
    assert registered == {}
