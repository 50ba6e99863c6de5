STYLESHEET = """
QMainWindow {
    background-color: #121212;
    color: #e0e0e0;
}

QWidget {
    font-family: 'Roboto', 'Inter', 'Segoe UI', monospace;
    font-size: 14px;
    color: #e0e0e0;
}

QLabel {
    color: #e0e0e0;
}

QLabel#AppTitle {
    font-weight: bold;
    font-size: 22px;
    color: #ffffff;
}

QLabel#SectionTitle {
    font-weight: bold;
    font-size: 15px;
    margin-top: 8px;
    margin-bottom: 4px;
    color: #ffffff;
}

QLabel#ErrorLabel {
    color: #F44336;
    font-size: 12px;
}

QLabel#HintLabel {
    color: #aaaaaa;
    font-size: 12px;
}

/* Hex input */
QLineEdit {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 8px;
    padding: 8px 10px;
    font-family: monospace;
    font-size: 16px;
    color: #ffffff;
}
QLineEdit:focus {
    border-color: #009EEC;
}
QLineEdit[invalid="true"] {
    border-color: #F44336;
}

/* Buttons */
QPushButton {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 8px;
    padding: 6px 12px;
    font-weight: bold;
    color: #e0e0e0;
}

QPushButton:hover {
    background-color: #2c2c2c;
    border-color: #444444;
}

QPushButton:pressed {
    background-color: #383838;
}

QPushButton:disabled {
    color: #555555;
    border-color: #222222;
}

QPushButton#PrimaryButton {
    background-color: #009EEC;
    border-color: #009EEC;
    color: #ffffff;
    border-radius: 10px;
    padding: 10px;
    font-size: 15px;
}

QPushButton#PrimaryButton:hover {
    background-color: #0086C9;
}

QPushButton#PrimaryButton:disabled {
    background-color: #1e1e1e;
    border-color: #333333;
    color: #555555;
}

/* Color Swatches */
QFrame#Swatch {
    border-radius: 6px;
    border: 1px solid #333333;
}

QFrame#ShadeSwatch {
    border: 1px solid #333333;
}

QLabel#ShadePercentage {
    font-weight: bold;
    font-size: 14px;
}

QLabel#ShadeIndex {
    font-size: 11px;
}

QLabel#ShadeHex {
    font-family: monospace;
    font-size: 13px;
    font-weight: bold;
}

QLabel#ContrastBadge {
    font-size: 10px;
}

QFrame#IssueBox {
    background-color: #2a1616;
    border: 1px solid #F44336;
    border-radius: 6px;
}

QScrollArea {
    border: none;
    background-color: transparent;
}

QWidget#PaletteContainer {
    background-color: #121212;
}

QLabel#CodeLabel {
    font-family: monospace;
    font-size: 13px;
    color: #aaaaaa;
}
QLabel#CodeLabel:hover {
    color: #ffffff;
}
QLabel#CodeLabel[flashing="true"] {
    color: #4CAF50;
}

QDialog {
    background-color: #121212;
    color: #e0e0e0;
}

/* Scrollbar */
QScrollBar:vertical {
    border: none;
    background: #121212;
    width: 10px;
    margin: 0px 0px 0px 0px;
}
QScrollBar::handle:vertical {
    background: #333333;
    min-height: 20px;
    border-radius: 5px;
}
QScrollBar::handle:vertical:hover {
    background: #555555;
}
QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {
    border: none;
    background: none;
}
QScrollBar::add-page:vertical, QScrollBar::sub-page:vertical {
    background: none;
}
"""
