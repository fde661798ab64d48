from PyQt6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLineEdit, QPushButton, QLabel
from PyQt6.QtCore import pyqtSignal

from font_booklet.core import pangrams


class SampleTextDialog(QDialog):
    """
    Dialog to edit the sample text.
    Passive View: emits the edits, the controller stores them.
    """

    text_edited = pyqtSignal(str)
    pangram_requested = pyqtSignal()

    def __init__(self, text, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Sample Text")
        self.setup_ui()
        self.set_text(text)

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Sample Text"))

        self.txt_sample = QLineEdit()
        self.txt_sample.setPlaceholderText(pangrams.STANDARD)
        self.txt_sample.setClearButtonEnabled(True)
        self.txt_sample.textEdited.connect(self.text_edited.emit)
        layout.addWidget(self.txt_sample)

        btn_layout = QHBoxLayout()
        self.btn_pangram = QPushButton("Pangram!")
        self.btn_pangram.setToolTip("Replace with a random pangram")
        self.btn_pangram.setAutoDefault(False)
        self.btn_pangram.clicked.connect(self.pangram_requested.emit)
        btn_layout.addWidget(self.btn_pangram)

        self.btn_done = QPushButton("Done")
        self.btn_done.setDefault(True)
        self.btn_done.clicked.connect(self.accept)
        btn_layout.addWidget(self.btn_done)

        layout.addLayout(btn_layout)

    def set_text(self, text):
        self.txt_sample.setText(text)

    def text(self):
        return self.txt_sample.text()
