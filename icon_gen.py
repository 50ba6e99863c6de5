from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor, QPainterPath
from PySide6.QtCore import Qt, QRectF

from color_logic import generate_color_ramp

ICON_BASE_COLOR = "#009EEC"


def create_app_icon(base_hex=ICON_BASE_COLOR):
    """
    Generates the application icon: a disc cut into vertical bands,
    one per shade of the ramp of base_hex.
    """
    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)

    clip = QPainterPath()
    clip.addEllipse(QRectF(4, 4, 56, 56))
    painter.setClipPath(clip)
    painter.setPen(Qt.NoPen)

    shades = generate_color_ramp(base_hex)
    band = 56.0 / len(shades)
    # Lightest on the left
    for i, shade in enumerate(reversed(shades)):
        painter.setBrush(QColor(shade.hex))
        painter.drawRect(QRectF(4 + i * band, 4, band + 0.5, 56))

    painter.end()

    return QIcon(pixmap)
