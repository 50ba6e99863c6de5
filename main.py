import sys
import os
import logging
from PySide6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout,
                               QHBoxLayout, QPushButton, QLabel, QGridLayout, QLineEdit,
                               QScrollArea, QStackedWidget, QFileDialog, QMessageBox)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QIcon

from styles import STYLESHEET
from color_logic import is_valid_hex, normalize_hex, generate_color_ramp
from contrast_utils import assess_palette_contrast, auto_adjust_color
from export_utils import write_palette_json, write_palette_png, default_export_path
from icon_gen import create_app_icon
from widgets import ColorBox, CopyLabel, ShadeSwatch
from contrast_ui import ContrastWarningDialog
from settings import load_settings, save_settings, settings_path

logger = logging.getLogger(__name__)

INVALID_HEX_MESSAGE = "Please enter a valid HEX color code (e.g., #FF5733 or #F73)"
EMPTY_HEX_MESSAGE = "Please enter a HEX color code"
GRID_COLUMNS = 4


def load_icon():
    base_path = getattr(sys, '_MEIPASS', os.path.dirname(os.path.abspath(__file__)))
    for name in ["icon.ico", "icon.png"]:
        path = os.path.join(base_path, name)
        if os.path.exists(path):
            return QIcon(path)
    return create_app_icon()


class ColorInputPanel(QWidget):
    """
    Hex entry form. Emits the normalized hex once the input is valid.
    """
    color_submitted = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setSpacing(12)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.addStretch()

        title = QLabel("Theme Palette Generator", objectName="AppTitle")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("Enter a HEX color code to generate a 12 shade palette", objectName="HintLabel")
        subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(subtitle)

        layout.addWidget(QLabel("HEX Color Code"))

        row = QHBoxLayout()
        self.hex_edit = QLineEdit()
        self.hex_edit.setPlaceholderText("#FF5733")
        self.hex_edit.setMaxLength(7)
        self.hex_edit.textChanged.connect(self.on_text_changed)
        self.hex_edit.returnPressed.connect(self.submit)
        row.addWidget(self.hex_edit)

        self.preview = ColorBox("transparent")
        self.preview.setFixedSize(36, 36)
        self.preview.hide()
        row.addWidget(self.preview)
        layout.addLayout(row)

        self.error_lbl = QLabel("", objectName="ErrorLabel")
        self.error_lbl.hide()
        layout.addWidget(self.error_lbl)

        self.generate_btn = QPushButton("Generate Palette")
        self.generate_btn.setObjectName("PrimaryButton")
        self.generate_btn.setCursor(Qt.PointingHandCursor)
        self.generate_btn.setEnabled(False)
        self.generate_btn.clicked.connect(self.submit)
        layout.addWidget(self.generate_btn)

        layout.addStretch()

    def set_error(self, message):
        self.error_lbl.setText(message)
        self.error_lbl.setVisible(bool(message))
        self.hex_edit.setProperty("invalid", bool(message))
        self.hex_edit.style().unpolish(self.hex_edit)
        self.hex_edit.style().polish(self.hex_edit)

    def on_text_changed(self, text):
        valid = is_valid_hex(text)
        if text and not valid:
            self.set_error(INVALID_HEX_MESSAGE)
        else:
            self.set_error("")

        if valid:
            self.preview.set_color(normalize_hex(text))
            self.preview.show()
        else:
            self.preview.hide()

        self.generate_btn.setEnabled(valid)

    def submit(self):
        text = self.hex_edit.text()
        if not text.strip():
            self.set_error(EMPTY_HEX_MESSAGE)
            return
        if not is_valid_hex(text):
            self.set_error(INVALID_HEX_MESSAGE)
            return
        self.color_submitted.emit(normalize_hex(text))

    def clear(self):
        self.hex_edit.clear()
        self.set_error("")


class PalettePanel(QWidget):
    """
    The generated ramp as a grid of swatches, plus export actions.
    """
    reset_requested = Signal()
    hex_copied = Signal(str)
    export_json_requested = Signal()
    export_png_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.base_hex = None
        self.shades = []
        self.swatches = []

        layout = QVBoxLayout(self)
        layout.setSpacing(10)
        layout.setContentsMargins(10, 10, 10, 10)

        # Header: base color + actions
        header = QHBoxLayout()
        self.base_swatch = ColorBox("transparent")
        self.base_swatch.setFixedSize(48, 48)
        header.addWidget(self.base_swatch)

        title_box = QVBoxLayout()
        title_box.addWidget(QLabel("Theme Palette", objectName="SectionTitle"))
        self.base_lbl = CopyLabel("")
        self.base_lbl.setAlignment(Qt.AlignLeft)
        self.base_lbl.copied.connect(self.hex_copied.emit)
        title_box.addWidget(self.base_lbl)
        header.addLayout(title_box)
        header.addStretch()

        self.export_json_btn = QPushButton("Export JSON")
        self.export_json_btn.clicked.connect(lambda: self.export_json_requested.emit())
        header.addWidget(self.export_json_btn)

        self.export_png_btn = QPushButton("Export PNG")
        self.export_png_btn.clicked.connect(lambda: self.export_png_requested.emit())
        header.addWidget(self.export_png_btn)

        self.reset_btn = QPushButton("New Palette")
        self.reset_btn.setObjectName("PrimaryButton")
        self.reset_btn.clicked.connect(lambda: self.reset_requested.emit())
        header.addWidget(self.reset_btn)

        layout.addLayout(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        content.setObjectName("PaletteContainer")
        self.grid = QGridLayout(content)
        self.grid.setSpacing(10)
        scroll.setWidget(content)
        layout.addWidget(scroll)

        hint = QLabel("Click any color swatch to copy its HEX code to your clipboard.", objectName="HintLabel")
        layout.addWidget(hint)

    def set_palette(self, base_hex, shades):
        self.base_hex = base_hex
        self.shades = shades
        self.base_swatch.set_color(base_hex)
        self.base_lbl.setText(base_hex)

        while self.grid.count():
            child = self.grid.takeAt(0)
            if child.widget(): child.widget().deleteLater()

        self.swatches = []
        for i, shade in enumerate(shades):
            swatch = ShadeSwatch(shade, i)
            swatch.copied.connect(self.hex_copied.emit)
            self.grid.addWidget(swatch, i // GRID_COLUMNS, i % GRID_COLUMNS)
            self.swatches.append(swatch)


class MainWindow(QMainWindow):
    def __init__(self, settings=None, settings_file=None):
        super().__init__()
        self.setWindowTitle("Shade Ramp")
        self.resize(760, 640)
        self.setWindowIcon(load_icon())

        # Settings are only written back when a settings file is given
        self.settings_file = settings_file
        self.app_settings = settings if settings is not None else load_settings(settings_file)
        if self.app_settings.get("always_on_top"):
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        self.base_color = ""
        self.shades = []
        self.contrast_dialog = None

        self.setup_ui()

    def setup_ui(self):
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.input_panel = ColorInputPanel()
        self.input_panel.color_submitted.connect(self.handle_color_submit)
        self.stack.addWidget(self.input_panel)

        self.palette_panel = PalettePanel()
        self.palette_panel.reset_requested.connect(self.reset)
        self.palette_panel.export_json_requested.connect(self.export_json)
        self.palette_panel.export_png_requested.connect(self.export_png)
        self.palette_panel.hex_copied.connect(self.on_hex_copied)
        self.stack.addWidget(self.palette_panel)

    @property
    def base_min(self):
        return float(self.app_settings["base_min_contrast"])

    @property
    def dark_min(self):
        return float(self.app_settings["dark_shade_min_contrast"])

    def on_hex_copied(self, color_hex):
        self.statusBar().showMessage(f"Copied {color_hex}", 2000)

    def handle_color_submit(self, color_hex):
        issues = assess_palette_contrast(color_hex, self.base_min, self.dark_min)
        self.base_color = color_hex

        if issues.has_issues:
            logger.info("%s has contrast issues: base %.2f, darkest %.2f",
                        color_hex, issues.base_contrast, issues.dark_shade_contrast)
            self.show_contrast_warning(color_hex, issues)
        else:
            self.generate_palette(color_hex)

    def show_contrast_warning(self, color_hex, issues):
        self.contrast_dialog = ContrastWarningDialog(color_hex, issues, self,
                                                     base_min=self.base_min, dark_min=self.dark_min)
        self.contrast_dialog.try_new_color.connect(self.reset)
        self.contrast_dialog.auto_adjust.connect(self.handle_auto_adjust)
        self.contrast_dialog.open()

    def handle_auto_adjust(self):
        adjusted = auto_adjust_color(self.base_color, self.base_min, self.dark_min)
        self.generate_palette(adjusted)

    def generate_palette(self, color_hex):
        self.base_color = color_hex
        self.shades = generate_color_ramp(color_hex)
        self.palette_panel.set_palette(color_hex, self.shades)
        self.stack.setCurrentWidget(self.palette_panel)

    def reset(self):
        self.base_color = ""
        self.shades = []
        self.input_panel.clear()
        self.stack.setCurrentWidget(self.input_panel)

    # --- Export ---

    def ask_export_path(self, ext, file_filter):
        default = default_export_path(self.base_color, ext, self.app_settings.get("export_dir", ""))
        path, _ = QFileDialog.getSaveFileName(self, "Export Palette", default, file_filter)
        return path

    def export_json(self):
        path = self.ask_export_path("json", "JSON Files (*.json)")
        if path:
            self.run_export(write_palette_json, path)

    def export_png(self):
        path = self.ask_export_path("png", "PNG Images (*.png)")
        if path:
            self.run_export(write_palette_png, path)

    def run_export(self, writer, path):
        try:
            writer(self.shades, path)
        except OSError as e:
            logger.error("Export to %s failed: %s", path, e)
            QMessageBox.warning(self, "Export Failed", f"Could not write {path}:\n{e}")
            return False
        self.remember_export_dir(path)
        return True

    def remember_export_dir(self, path):
        export_dir = os.path.dirname(os.path.abspath(path))
        if export_dir == self.app_settings.get("export_dir"):
            return
        self.app_settings["export_dir"] = export_dir
        if self.settings_file:
            save_settings(self.app_settings, self.settings_file)


def run():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    os.environ["QT_AUTO_SCREEN_SCALE_FACTOR"] = "1"
    app = QApplication(sys.argv)
    app.setStyleSheet(STYLESHEET)

    window = MainWindow(settings_file=settings_path())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
