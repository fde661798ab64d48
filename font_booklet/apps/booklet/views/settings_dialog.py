from PyQt6.QtWidgets import (QDialog, QVBoxLayout, QFormLayout, QLineEdit,
                             QDialogButtonBox, QCheckBox, QSpinBox, QComboBox)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class SettingsDialog(QDialog):
    """
    Dialog to manage application settings.
    """
    def __init__(self, current_settings, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.resize(400, 220)
        self.current_settings = current_settings

        self.setup_ui()
        self.load_settings()

    def setup_ui(self):
        layout = QVBoxLayout(self)

        form_layout = QFormLayout()

        # Preview size
        self.spin_point_size = QSpinBox()
        self.spin_point_size.setRange(6, 144)
        self.spin_point_size.setSuffix(" pt")
        form_layout.addRow("Sample Size:", self.spin_point_size)

        # Font directories (separated by ';')
        self.edit_font_dirs = QLineEdit()
        self.edit_font_dirs.setToolTip("Extra font folders, separated by ';'")
        form_layout.addRow("Font Folders:", self.edit_font_dirs)

        self.chk_watch = QCheckBox("Reload when font files change")
        form_layout.addRow("", self.chk_watch)

        # DB Path (read-only, changing it requires a restart)
        self.edit_db_path = QLineEdit()
        self.edit_db_path.setReadOnly(True)
        self.edit_db_path.setToolTip("Path to the SQLite defaults store.")
        form_layout.addRow("Database Path:", self.edit_db_path)

        self.combo_log_level = QComboBox()
        self.combo_log_level.addItems(LOG_LEVELS)
        form_layout.addRow("Log Level:", self.combo_log_level)

        layout.addLayout(form_layout)

        # Buttons
        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def load_settings(self):
        self.spin_point_size.setValue(int(self.current_settings.get("sample_point_size", 24)))
        self.edit_font_dirs.setText(";".join(self.current_settings.get("font_dirs", [])))
        self.chk_watch.setChecked(self.current_settings.get("watch_font_dirs", True))
        self.edit_db_path.setText(self.current_settings.get("db_path", "data/defaults.db"))
        level = self.current_settings.get("log_level", "INFO").upper()
        if level in LOG_LEVELS:
            self.combo_log_level.setCurrentText(level)

    def get_settings(self):
        """
        Return the updated settings dictionary.
        """
        font_dirs = [d.strip() for d in self.edit_font_dirs.text().split(";") if d.strip()]
        return {
            "sample_point_size": self.spin_point_size.value(),
            "font_dirs": font_dirs,
            "watch_font_dirs": self.chk_watch.isChecked(),
            "log_level": self.combo_log_level.currentText()
        }
