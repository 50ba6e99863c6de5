from PySide6.QtWidgets import QLabel, QFrame, QVBoxLayout, QHBoxLayout, QApplication
from PySide6.QtCore import Qt, Signal, QTimer, Property

from color_logic import hex_to_rgb, rgb_to_hsl_string
from contrast_utils import get_contrast_ratio, wcag_levels, readable_text_color, WHITE


def copy_to_clipboard(text):
    QApplication.clipboard().setText(text)


def contrast_badge_text(ratio):
    levels = wcag_levels(ratio)
    if levels["AAA"]:
        grade = "AAA"
    elif levels["AA"]:
        grade = "AA"
    elif levels["AA Large"]:
        grade = "AA Large"
    else:
        grade = "Fail"
    return f"{ratio:.2f}:1 {grade}"


class CopyLabel(QLabel):
    """
    A label that copies its text to clipboard on click.
    Uses dynamic property to handle flash styling without resetting font styles.
    """
    copied = Signal(str)

    def __init__(self, text, parent=None):
        super().__init__(text, parent)
        self.setObjectName("CodeLabel")
        self.setCursor(Qt.PointingHandCursor)
        self.setAlignment(Qt.AlignCenter)

        self._flashing = False

        self.flash_timer = QTimer(self)
        self.flash_timer.timeout.connect(self.reset_style)
        self.flash_timer.setSingleShot(True)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            copy_to_clipboard(self.text())
            self.flash_effect()
            self.copied.emit(self.text())

    def get_flashing(self):
        return self._flashing

    def set_flashing(self, val):
        self._flashing = val
        self.style().unpolish(self)
        self.style().polish(self)

    flashing = Property(bool, get_flashing, set_flashing)

    def flash_effect(self):
        self.set_flashing(True)
        self.flash_timer.start(150)

    def reset_style(self):
        self.set_flashing(False)


class ColorBox(QFrame):
    """
    A plain, non-clickable color box.
    """
    def __init__(self, color_hex, parent=None):
        super().__init__(parent)
        self.setObjectName("Swatch")
        self.set_color(color_hex)

    def set_color(self, color_hex):
        self.color_hex = color_hex
        self.setStyleSheet(f"background-color: {color_hex};")


class ShadeSwatch(QFrame):
    """
    One ramp entry: percentage, position, hex and contrast against white,
    drawn on the shade itself. Clicking copies the hex code.
    """
    copied = Signal(str)

    def __init__(self, shade, index, parent=None):
        super().__init__(parent)
        self.shade = shade
        self.setObjectName("ShadeSwatch")
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumSize(150, 120)
        self.setToolTip(f"{rgb_to_hsl_string(*hex_to_rgb(shade.hex))} - click to copy HEX code")

        text_color = readable_text_color(shade.hsl)
        self.setStyleSheet(f"QFrame#ShadeSwatch {{ background-color: {shade.hex}; border-radius: 10px; }}"
                           f"QLabel {{ color: {text_color}; background: transparent; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)

        self.percentage_lbl = QLabel(f"{shade.percentage}%", objectName="ShadePercentage")
        self.index_lbl = QLabel(f"Shade {index + 1}", objectName="ShadeIndex")
        layout.addWidget(self.percentage_lbl)
        layout.addWidget(self.index_lbl)
        layout.addStretch()

        bottom = QHBoxLayout()
        self.hex_lbl = QLabel(shade.hex, objectName="ShadeHex")
        self.badge_lbl = QLabel(contrast_badge_text(get_contrast_ratio(shade.hex, WHITE)),
                                objectName="ContrastBadge")
        bottom.addWidget(self.hex_lbl)
        bottom.addStretch()
        bottom.addWidget(self.badge_lbl)
        layout.addLayout(bottom)

        self.reset_timer = QTimer(self)
        self.reset_timer.setSingleShot(True)
        self.reset_timer.timeout.connect(self.reset_label)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            copy_to_clipboard(self.shade.hex)
            self.hex_lbl.setText("Copied!")
            self.reset_timer.start(2000)
            self.copied.emit(self.shade.hex)

    def reset_label(self):
        self.hex_lbl.setText(self.shade.hex)
