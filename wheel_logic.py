"""
Polar mapping between the circular picker, its lightness slider and HSL.

Pointer input is reduced to a new HSL value by pure functions; the pixel
buffers that paint the widgets are likewise pure functions of the current HSL
and the wheel geometry, vectorized with NumPy.
"""
import logging
import math
from dataclasses import dataclass, replace

import numpy as np
from PIL import Image

from color_logic import HSL, hex_to_hsl, hsl_to_hex, normalize_hex
from config import WheelGeometry

logger = logging.getLogger(__name__)

__all__ = ["PointerEvent", "PickerSession", "hue_from_offset", "wheel_point_to_hsl",
           "slider_x_to_lightness", "reduce_pointer", "indicator_position",
           "hsl_to_rgb_array", "render_wheel", "render_slider", "buffer_to_image"]

POINTER_KINDS = ("down", "move", "up")
POINTER_TARGETS = ("wheel", "slider")


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in coordinates relative to the target widget's top-left."""
    kind: str
    target: str
    x: float
    y: float = 0.0

    def __post_init__(self):
        if self.kind not in POINTER_KINDS:
            raise ValueError(f"Unknown pointer event kind: {self.kind!r}")
        if self.target not in POINTER_TARGETS:
            raise ValueError(f"Unknown pointer target: {self.target!r}")


# --- Forward mapping (pointer -> color) ---

def hue_from_offset(dx, dy):
    """Angle of (dx, dy) from the wheel center in degrees, with up as 0."""
    return (math.degrees(math.atan2(dy, dx)) + 90.0) % 360.0


def wheel_point_to_hsl(dx, dy, lightness, geometry=WheelGeometry()):
    """
    Maps an offset from the wheel center to a color at the held lightness.

    The outer ring is fully saturated; inside the inner disk saturation grows
    linearly with the radius. Returns None when the point lies outside the
    wheel.
    """
    distance = math.hypot(dx, dy)
    if distance > geometry.outer_radius:
        return None

    if distance >= geometry.inner_radius:
        saturation = 100.0
    else:
        saturation = (distance / geometry.inner_radius) * 100.0

    return HSL(hue_from_offset(dx, dy), saturation, lightness)


def slider_x_to_lightness(x, geometry=WheelGeometry(), left=0.0):
    lightness = (x - left) / geometry.slider_width * 100.0
    return max(0.0, min(100.0, lightness))


def reduce_pointer(hsl, event, geometry=WheelGeometry()):
    """
    (current HSL, pointer event) -> new HSL.

    Releases and pointers outside the wheel leave the color unchanged.
    """
    if event.kind == "up":
        return hsl

    if event.target == "wheel":
        new_hsl = wheel_point_to_hsl(event.x - geometry.center, event.y - geometry.center,
                                     hsl.l, geometry)
        return hsl if new_hsl is None else new_hsl

    return HSL(hsl.h, hsl.s, slider_x_to_lightness(event.x, geometry))


class PickerSession:
    """
    Holds the color for one picker and routes pointer drags.

    A press on the wheel or slider starts a drag on that widget; moves are
    applied to the dragged widget until the release, wherever they land.
    """

    def __init__(self, base_hex, geometry=None):
        self.geometry = geometry or WheelGeometry()
        self._hex = normalize_hex(base_hex)
        self.hsl = hex_to_hsl(self._hex)
        self.dragging = None

    @property
    def hex(self):
        return self._hex

    def set_color(self, hex_str):
        """
        Adopts an externally chosen color. Returns True if the color changed.

        Re-submitting the hex this session last produced keeps the exact HSL,
        so hue and saturation do not drift through hex quantization.
        """
        normalized = normalize_hex(hex_str)
        if normalized == self._hex:
            return False
        self._hex = normalized
        self.hsl = hex_to_hsl(normalized)
        return True

    def handle(self, event):
        """Applies a pointer event. Returns the new hex, or None if unchanged."""
        if event.kind == "down":
            self.dragging = event.target
        elif event.kind == "up":
            self.dragging = None
            return None
        elif self.dragging is None:
            return None
        elif event.target != self.dragging:
            event = replace(event, target=self.dragging)

        new_hsl = reduce_pointer(self.hsl, event, self.geometry)
        if new_hsl == self.hsl:
            return None

        self.hsl = new_hsl
        self._hex = hsl_to_hex(*new_hsl)
        logger.debug("Picker %s -> %s (h=%.1f s=%.1f l=%.1f)",
                     event.target, self._hex, *new_hsl)
        return self._hex


# --- Rendering (color -> pixels) ---

def indicator_position(hsl, geometry=WheelGeometry()):
    """Pixel position of the selection ring for the given color."""
    angle = math.radians(hsl.h - 90.0)
    if hsl.s < 60:
        distance = (hsl.s / 100.0) * geometry.inner_radius
    else:
        distance = geometry.ring_mid_radius
    return (geometry.center + math.cos(angle) * distance,
            geometry.center + math.sin(angle) * distance)


def hsl_to_rgb_array(h, s, l):
    """Vectorized HSL (degrees, percent, percent) to uint8 RGB channels."""
    h, s, l = np.broadcast_arrays(np.asarray(h, dtype=np.float64),
                                  np.asarray(s, dtype=np.float64),
                                  np.asarray(l, dtype=np.float64))
    h = np.mod(h, 360.0)
    s = np.clip(s, 0.0, 100.0) / 100.0
    l = np.clip(l, 0.0, 100.0) / 100.0

    c = (1.0 - np.abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - np.abs(np.mod(h / 60.0, 2.0) - 1.0))
    m = l - c / 2.0
    zero = np.zeros_like(c)

    sector = np.clip(np.floor(h / 60.0).astype(np.int64), 0, 5)
    conds = [sector == i for i in range(6)]
    r = np.select(conds, [c, x, zero, zero, x, c])
    g = np.select(conds, [x, c, c, x, zero, zero])
    b = np.select(conds, [zero, zero, x, c, c, x])

    def to_byte(v):
        return np.clip(np.floor((v + m) * 255.0 + 0.5), 0, 255).astype(np.uint8)

    return to_byte(r), to_byte(g), to_byte(b)


def _draw_ring(rgba, cx, cy, radius):
    height, width = rgba.shape[:2]
    y, x = np.ogrid[0:height, 0:width]
    band = np.abs(np.hypot(x - cx, y - cy) - radius)
    rgba[band <= 1.0] = (255, 255, 255, 255)
    rgba[band <= 0.5] = (0, 0, 0, 255)


def render_wheel(hsl, geometry=WheelGeometry(), indicator=True):
    """
    RGBA buffer (size x size x 4) of the wheel for the current color.

    The ring is painted at lightness 50; the inner disk uses the current
    lightness. Pixels outside the wheel are fully transparent.
    """
    size = geometry.size
    y, x = np.mgrid[0:size, 0:size].astype(np.float64)
    dx = x - geometry.center
    dy = y - geometry.center

    distance = np.hypot(dx, dy)
    hue = np.mod(np.degrees(np.arctan2(dy, dx)) + 90.0, 360.0)

    ring = (distance <= geometry.outer_radius) & (distance >= geometry.inner_radius)
    disk = distance < geometry.inner_radius
    inside = ring | disk

    saturation = np.where(ring, 100.0, distance / geometry.inner_radius * 100.0)
    lightness = np.where(ring, 50.0, hsl.l)
    r, g, b = hsl_to_rgb_array(hue, saturation, lightness)

    rgba = np.zeros((size, size, 4), dtype=np.uint8)
    rgba[..., 0] = np.where(inside, r, 0)
    rgba[..., 1] = np.where(inside, g, 0)
    rgba[..., 2] = np.where(inside, b, 0)
    rgba[..., 3] = np.where(inside, 255, 0)

    if indicator:
        ix, iy = indicator_position(hsl, geometry)
        _draw_ring(rgba, ix, iy, geometry.indicator_radius)

    return rgba


def render_slider(hsl, geometry=WheelGeometry(), indicator=True):
    """
    RGBA buffer (height x width x 4) sweeping lightness 0 -> 100 at the
    current hue and saturation.
    """
    width, height = geometry.slider_width, geometry.slider_height
    sweep = np.linspace(0.0, 100.0, width)
    r, g, b = hsl_to_rgb_array(hsl.h, hsl.s, sweep)

    row = np.empty((width, 4), dtype=np.uint8)
    row[:, 0], row[:, 1], row[:, 2], row[:, 3] = r, g, b, 255
    rgba = np.repeat(row[np.newaxis, :, :], height, axis=0)

    if indicator:
        col = min(width - 1, int(round(hsl.l / 100.0 * width)))
        rgba[:, max(0, col - 1):col + 2] = (255, 255, 255, 255)
        rgba[:, col] = (0, 0, 0, 255)

    return rgba


def buffer_to_image(rgba):
    return Image.fromarray(np.ascontiguousarray(rgba, dtype=np.uint8))
