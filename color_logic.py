import math
import re
from collections import namedtuple

HSL = namedtuple("HSL", ["h", "s", "l"])

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class InvalidFormat(ValueError):
    """Raised when a string cannot be read as a 3- or 6-digit hex color."""


def _round_channel(v):
    # Half-up rounding, clamped to a byte
    return max(0, min(255, int(math.floor(v + 0.5))))


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


def hex_to_rgb(hex_str):
    """
    Convert '#RGB', '#RRGGBB' (prefix optional) to an (r, g, b) tuple, 0-255.
    """
    if not isinstance(hex_str, str):
        raise InvalidFormat(f"Expected a hex string, got {type(hex_str).__name__}")
    match = _HEX_RE.match(hex_str.strip())
    if not match:
        raise InvalidFormat(f"Not a hex color: {hex_str!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join([c * 2 for c in digits])
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r, g, b):
    return "#{:02X}{:02X}{:02X}".format(_round_channel(r), _round_channel(g), _round_channel(b))


def normalize_hex(hex_str):
    return rgb_to_hex(*hex_to_rgb(hex_str))


def rgb_to_hsl(r, g, b):
    """
    Convert RGB (0-255) to HSL with h in [0, 360) and s, l in [0, 100].
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2.0

    if mx == mn:
        return HSL(0.0, 0.0, l * 100.0)

    d = mx - mn
    s = d / (1.0 - abs(2.0 * l - 1.0))

    if mx == r:
        h = 60.0 * (((g - b) / d) % 6)
    elif mx == g:
        h = 60.0 * ((b - r) / d + 2.0)
    else:
        h = 60.0 * ((r - g) / d + 4.0)

    return HSL(h % 360.0, _clamp(s * 100.0, 0.0, 100.0), l * 100.0)


def hex_to_hsl(hex_str):
    return rgb_to_hsl(*hex_to_rgb(hex_str))


def hsl_to_rgb(h, s, l):
    """
    Convert HSL (h degrees, s and l in percent) to an (r, g, b) tuple, 0-255.

    Hue wraps modulo 360; saturation and lightness are clamped to [0, 100].
    """
    h = h % 360.0
    s = _clamp(s, 0.0, 100.0) / 100.0
    l = _clamp(l, 0.0, 100.0) / 100.0

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2 - 1.0))
    m = l - c / 2.0

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (_round_channel((r + m) * 255),
            _round_channel((g + m) * 255),
            _round_channel((b + m) * 255))


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def rotate_hue(h, degrees):
    """
    Rotate hue by degrees, wrapping into [0, 360).
    """
    return (h + degrees) % 360.0


def rgb_to_cmyk(r, g, b):
    """
    Convert RGB to CMYK (0-100).
    """
    if (r, g, b) == (0, 0, 0):
        return 0, 0, 0, 100

    r = r / 255.0
    g = g / 255.0
    b = b / 255.0

    k = 1 - max(r, g, b)
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)

    return (round(c * 100), round(m * 100), round(y * 100), round(k * 100))


def rgb_to_hsl_string(r, g, b):
    h, s, l = rgb_to_hsl(r, g, b)
    return f"hsl({round(h) % 360}, {round(s)}%, {round(l)}%)"
