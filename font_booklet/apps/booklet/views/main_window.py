from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QToolBar, QSizePolicy, QLabel
from PyQt6.QtGui import QAction
from PyQt6.QtCore import Qt
from font_booklet.apps.booklet.views.components.font_list_view import FontListView

class MainWindow(QMainWindow):
    """
    MVC View: The main application window.
    Font list in the centre, actions in the bottom toolbar.
    """
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Fonts")
        self.resize(900, 700)

        # Central Widget
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        self.font_list = FontListView()
        main_layout.addWidget(self.font_list)

        # Toolbar
        self.toolbar = QToolBar("Main Toolbar")
        self.toolbar.setMovable(False)
        self.addToolBar(Qt.ToolBarArea.BottomToolBarArea, self.toolbar)

        self.act_edit_sample = QAction("Sample Text", self)
        self.act_edit_sample.setToolTip("Edit the text previewed in every face")
        self.toolbar.addAction(self.act_edit_sample)

        self.act_reload = QAction("Reload Fonts", self)
        self.act_reload.setToolTip("Rebuild the font list from installed fonts")
        self.toolbar.addAction(self.act_reload)

        self.act_settings = QAction("Settings", self)
        self.act_settings.setToolTip("Configure application settings")
        self.toolbar.addAction(self.act_settings)

        empty = QWidget()
        empty.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self.toolbar.addWidget(empty)

        # Filter Toggle
        self.act_filter_bookmarked = QAction("Bookmarked", self)
        self.act_filter_bookmarked.setCheckable(True)
        self.act_filter_bookmarked.setChecked(False)
        self.act_filter_bookmarked.setToolTip("Show bookmarked faces only")
        self.toolbar.addAction(self.act_filter_bookmarked)

        self.lbl_count = QLabel("")
        self.statusBar().addPermanentWidget(self.lbl_count)

    def set_counts(self, families, faces):
        self.lbl_count.setText(f"{families} families, {faces} faces")
