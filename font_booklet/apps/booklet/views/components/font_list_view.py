from PyQt6.QtWidgets import QTreeWidget, QTreeWidgetItem, QHeaderView, QAbstractItemView, QMenu
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction, QBrush, QColor, QFontDatabase

BOOKMARK_MARK = "★"
BOOKMARK_BRUSH = QBrush(QColor("#dc3545"))
CAPTION_BRUSH = QBrush(QColor("#6c757d"))

COL_FACE = 0
COL_SAMPLE = 1
COL_BOOKMARK = 2


class FontListView(QTreeWidget):
    """
    Font list grouped into one section per family.
    Each face row shows its name, the sample text in that face and a
    bookmark mark. Clicking a face row asks for a bookmark toggle.
    """

    # Signals
    bookmark_toggle_requested = pyqtSignal(str) # face
    bookmark_set_requested = pyqtSignal(str, bool) # face, bookmarked

    def __init__(self, parent=None):
        super().__init__(parent)
        self.face_items = {}
        self.point_size = 24
        self.setup_ui()

    def setup_ui(self):
        self.setColumnCount(3)
        self.setHeaderLabels(["Face", "Sample", ""])
        self.setRootIsDecorated(False)
        self.setAlternatingRowColors(True)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setUniformRowHeights(False)

        header = self.header()
        header.setSectionResizeMode(COL_FACE, QHeaderView.ResizeMode.Interactive)
        header.setSectionResizeMode(COL_SAMPLE, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(COL_BOOKMARK, QHeaderView.ResizeMode.Fixed)
        header.setStretchLastSection(False)
        self.setColumnWidth(COL_FACE, 220)
        self.setColumnWidth(COL_BOOKMARK, 32)

        self.itemClicked.connect(self._on_item_clicked)

        # Context Menu
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.customContextMenuRequested.connect(self.show_context_menu)

    def load_faces(self, df, sample_text, bookmarks, point_size=None):
        """
        Rebuild the list from a DataFrame with family, face and style columns.
        """
        if point_size is not None:
            self.point_size = point_size

        self.clear()
        self.face_items = {}
        if df is None or df.empty:
            return

        for surname, group in df.groupby('family', sort=False):
            family_item = QTreeWidgetItem(self)
            family_item.setText(COL_FACE, surname)
            family_item.setFirstColumnSpanned(True)
            family_item.setFlags(Qt.ItemFlag.ItemIsEnabled)
            font = family_item.font(COL_FACE)
            font.setBold(True)
            family_item.setFont(COL_FACE, font)

            for row in group.itertuples(index=False):
                item = QTreeWidgetItem(family_item)
                item.setText(COL_FACE, row.face)
                item.setForeground(COL_FACE, CAPTION_BRUSH)
                item.setData(COL_FACE, Qt.ItemDataRole.UserRole, row.face)
                item.setText(COL_SAMPLE, sample_text)
                item.setFont(COL_SAMPLE, QFontDatabase.font(row.family, row.style, self.point_size))
                item.setForeground(COL_BOOKMARK, BOOKMARK_BRUSH)
                self._set_mark(item, row.face in bookmarks)
                self.face_items[row.face] = item

        self.expandAll()

    def _set_mark(self, item, bookmarked):
        item.setText(COL_BOOKMARK, BOOKMARK_MARK if bookmarked else "")

    def set_sample_text(self, text):
        for item in self.face_items.values():
            item.setText(COL_SAMPLE, text)

    def update_bookmarks(self, bookmarks):
        for face, item in self.face_items.items():
            self._set_mark(item, face in bookmarks)

    def is_marked(self, face):
        item = self.face_items.get(face)
        return item is not None and item.text(COL_BOOKMARK) == BOOKMARK_MARK

    def _on_item_clicked(self, item, column):
        face = item.data(COL_FACE, Qt.ItemDataRole.UserRole)
        if face:
            self.bookmark_toggle_requested.emit(face)

    def show_context_menu(self, pos):
        item = self.itemAt(pos)
        if item is None:
            return
        face = item.data(COL_FACE, Qt.ItemDataRole.UserRole)
        if not face:
            return

        menu = QMenu(self)
        if self.is_marked(face):
            action = QAction("Remove Bookmark", self)
            action.triggered.connect(lambda: self.bookmark_set_requested.emit(face, False))
        else:
            action = QAction("Bookmark", self)
            action.triggered.connect(lambda: self.bookmark_set_requested.emit(face, True))
        menu.addAction(action)
        menu.exec(self.viewport().mapToGlobal(pos))
