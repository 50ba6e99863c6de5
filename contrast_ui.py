from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame
from PySide6.QtCore import Qt, Signal

from contrast_utils import AA_LARGE, AA_NORMAL
from widgets import ColorBox


class ContrastWarningDialog(QDialog):
    """
    Shown before a palette is built when the base color, or its darkest
    shade, is too light to be used on white.
    """
    try_new_color = Signal()
    auto_adjust = Signal()

    def __init__(self, color_hex, issues, parent=None, base_min=AA_LARGE, dark_min=AA_NORMAL):
        super().__init__(parent)
        self.setWindowTitle("Contrast Warning")
        self.resize(440, 420)
        self.setWindowFlags(Qt.Dialog | Qt.WindowCloseButtonHint)

        self.color_hex = color_hex
        self.issues = issues
        self.base_min = base_min
        self.dark_min = dark_min

        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout()
        layout.setSpacing(16)
        self.setLayout(layout)

        title = QLabel("Contrast Warning", objectName="SectionTitle")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        layout.addWidget(QLabel("The selected color has contrast issues that may affect accessibility:"))

        self.issue_labels = []
        if self.issues.base_contrast < self.base_min:
            self.add_issue(layout,
                           f"Base color contrast is {self.issues.base_contrast:.2f}:1 "
                           f"(needs {self.base_min:g}:1 for large text and UI elements)")
        if self.issues.dark_shade_contrast < self.dark_min:
            self.add_issue(layout,
                           f"Darkest shade contrast is {self.issues.dark_shade_contrast:.2f}:1 "
                           f"(needs {self.dark_min:g}:1 for normal text)")

        # Preview
        preview_row = QHBoxLayout()
        swatch = ColorBox(self.color_hex)
        swatch.setFixedSize(48, 48)
        preview_row.addWidget(swatch)
        preview_row.addWidget(QLabel(f"Current color: {self.color_hex}", objectName="CodeLabel"))
        preview_row.addStretch()
        layout.addLayout(preview_row)

        buttons = QHBoxLayout()
        self.try_new_btn = QPushButton("Try New Color")
        self.try_new_btn.clicked.connect(self.on_try_new_color)
        self.auto_adjust_btn = QPushButton("Auto-Adjust Color")
        self.auto_adjust_btn.setObjectName("PrimaryButton")
        self.auto_adjust_btn.clicked.connect(self.on_auto_adjust)
        buttons.addWidget(self.try_new_btn)
        buttons.addWidget(self.auto_adjust_btn)
        layout.addLayout(buttons)

        hint = QLabel("Auto-adjust will preserve the hue while adjusting saturation and brightness for better contrast.")
        hint.setWordWrap(True)
        hint.setObjectName("HintLabel")
        layout.addWidget(hint)
        layout.addStretch()

    def add_issue(self, layout, text):
        frame = QFrame()
        frame.setObjectName("IssueBox")
        row = QHBoxLayout(frame)
        lbl = QLabel(text)
        lbl.setWordWrap(True)
        row.addWidget(lbl)
        layout.addWidget(frame)
        self.issue_labels.append(lbl)

    def on_try_new_color(self):
        self.try_new_color.emit()
        self.accept()

    def on_auto_adjust(self):
        self.auto_adjust.emit()
        self.accept()
