from PySide6.QtGui import QIcon, QPainter, QColor
from PySide6.QtCore import Qt

from color_logic import HSL
from config import WheelGeometry
from wheel_logic import render_wheel
from widgets import rgba_to_pixmap

ICON_GEOMETRY = WheelGeometry(size=64, ring_margin=2, indicator_radius=0)


def create_app_icon():
    """
    Generates the application icon: a small color wheel with a dark hub.
    """
    rgba = render_wheel(HSL(0.0, 0.0, 50.0), ICON_GEOMETRY, indicator=False)
    pixmap = rgba_to_pixmap(rgba)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setBrush(QColor("#121212"))
    painter.setPen(Qt.NoPen)
    hub = int(ICON_GEOMETRY.inner_radius * 0.5)
    c = int(ICON_GEOMETRY.center)
    painter.drawEllipse(c - hub, c - hub, 2 * hub, 2 * hub)
    painter.end()

    return QIcon(pixmap)
