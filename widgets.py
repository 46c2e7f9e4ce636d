from PySide6.QtWidgets import QWidget, QLabel, QFrame, QVBoxLayout, QApplication, QSizePolicy
from PySide6.QtCore import Qt, Signal, QTimer, Property
from PySide6.QtGui import QPainter, QImage, QPixmap

from color_logic import rgb_to_hsl_string, rgb_to_cmyk
from config import WheelGeometry
from contrast_utils import CONTRAST_HEX, contrast_hex
from wheel_logic import PointerEvent, render_wheel, render_slider


def rgba_to_pixmap(rgba):
    """Wraps an RGBA uint8 buffer from wheel_logic in a QPixmap."""
    height, width = rgba.shape[:2]
    img = QImage(rgba.data, width, height, 4 * width, QImage.Format.Format_RGBA8888)
    # QImage does not own the buffer; copy before it goes out of scope
    return QPixmap.fromImage(img.copy())


class PointerCanvas(QWidget):
    """
    Base for the wheel and slider: blits a buffer and feeds mouse events to a
    shared PickerSession.
    """
    colorPicked = Signal(str)

    target = None

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session
        self._pixmap = None
        self.setCursor(Qt.CrossCursor)

    @property
    def geometry_spec(self) -> WheelGeometry:
        return self.session.geometry

    def _dispatch(self, kind, event):
        pos = event.position()
        new_hex = self.session.handle(PointerEvent(kind, self.target, pos.x(), pos.y()))
        if new_hex is not None:
            self.colorPicked.emit(new_hex)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._dispatch("down", event)

    def mouseMoveEvent(self, event):
        # Qt keeps delivering moves to the pressed widget while dragging
        if self.session.dragging is not None:
            self._dispatch("move", event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._dispatch("up", event)

    def render_buffer(self):
        raise NotImplementedError

    def refresh(self):
        self._pixmap = rgba_to_pixmap(self.render_buffer())
        self.update()

    def paintEvent(self, event):
        if not self._pixmap:
            return
        painter = QPainter(self)
        painter.drawPixmap(0, 0, self._pixmap)


class ColorWheelWidget(PointerCanvas):
    """Hue ring around a saturation disk."""
    target = "wheel"

    def __init__(self, session, parent=None):
        super().__init__(session, parent)
        size = self.geometry_spec.size
        self.setFixedSize(size, size)
        self.refresh()

    def render_buffer(self):
        return render_wheel(self.session.hsl, self.geometry_spec)


class LightnessSlider(PointerCanvas):
    """Horizontal lightness sweep at the current hue and saturation."""
    target = "slider"

    def __init__(self, session, parent=None):
        super().__init__(session, parent)
        g = self.geometry_spec
        self.setFixedSize(g.slider_width, g.slider_height)
        self.setCursor(Qt.PointingHandCursor)
        self.refresh()

    def render_buffer(self):
        return render_slider(self.session.hsl, self.geometry_spec)


class CopyLabel(QLabel):
    """
    A label that copies its text to clipboard on click.
    Uses dynamic property to handle flash styling without resetting font styles.
    """
    hovered = Signal(bool)

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
            QApplication.clipboard().setText(self.text())
            self.flash_effect()

    def enterEvent(self, event):
        self.hovered.emit(True)
        super().enterEvent(event)

    def leaveEvent(self, event):
        self.hovered.emit(False)
        super().leaveEvent(event)

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


class SwatchFrame(QFrame):
    """
    A color box showing its hex code in the black/white contrast color.
    """

    def __init__(self, color_hex, text_hex=None, parent=None):
        super().__init__(parent)
        self.color_hex = color_hex
        self.text_hex = text_hex or contrast_hex(color_hex)
        self.setObjectName("Swatch")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 4)
        layout.addStretch()
        self.caption = QLabel(color_hex)
        self.caption.setObjectName("SwatchCaption")
        self.caption.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.caption)

        self.default_style = (f"QFrame#Swatch {{ background-color: {self.color_hex}; }}"
                              f" QLabel#SwatchCaption {{ color: {self.text_hex}; }}")
        self.setStyleSheet(self.default_style)

    def set_outline(self, active):
        if active:
            self.setStyleSheet(self.default_style +
                               f" QFrame#Swatch {{ border: 2px solid {self.text_hex}; }}")
        else:
            self.setStyleSheet(self.default_style)


class PaletteItem(QWidget):
    """
    Composite widget: Swatch + Hex + RGB + HSL + CMYK
    Hovering a label outlines the swatch.
    """
    def __init__(self, entry):
        super().__init__()
        self.color_hex = entry["hex"]
        r, g, b = entry["rgb"]

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.box = SwatchFrame(self.color_hex, CONTRAST_HEX[entry["contrast"]])
        self.box.setFixedSize(96, 72)
        self.box.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        layout.addWidget(self.box, 0, Qt.AlignCenter)

        self.labels = [
            CopyLabel(self.color_hex),
            CopyLabel(f"rgb({r}, {g}, {b})"),
            CopyLabel(rgb_to_hsl_string(r, g, b)),
            CopyLabel("cmyk({},{},{},{})".format(*rgb_to_cmyk(r, g, b))),
        ]
        for lbl in self.labels:
            layout.addWidget(lbl, 0, Qt.AlignCenter)
            lbl.hovered.connect(self.on_label_hover)

    def on_label_hover(self, hovered):
        self.box.set_outline(hovered)
