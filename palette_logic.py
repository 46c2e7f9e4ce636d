import logging

from PIL import Image, ImageDraw, ImageFont

from color_logic import HSL, hex_to_hsl, hsl_to_hex, hsl_to_rgb, rotate_hue
from contrast_utils import CONTRAST_HEX, LUMA_THRESHOLD, get_contrast_color

logger = logging.getLogger(__name__)

# Hue offsets in degrees, one per output color
HUE_OFFSETS = {
    "complementary": [0, 180],
    "split":         [0, 150, 210],
    "monochromatic": [0, 0, 0],
    "analogous":     [0, 30, -30],
    "triadic":       [0, 120, 240],
    "square":        [0, 90, 180, 270],
}

# Lightness multipliers; types not listed keep the base lightness
LIGHTNESS_FACTORS = {
    "monochromatic": [1.0, 0.6, 1.4],
}

PALETTE_TYPES = ("complementary", "split", "monochromatic", "analogous", "triadic", "square")

PALETTE_LABELS = {
    "complementary": "Complementary",
    "split": "Split Complementary",
    "monochromatic": "Monochromatic",
    "analogous": "Analogous",
    "triadic": "Triadic",
    "square": "Square",
}


def _offsets_for(palette_type):
    try:
        return HUE_OFFSETS[palette_type]
    except KeyError:
        raise ValueError(
            f"Unknown palette type {palette_type!r}; expected one of {', '.join(PALETTE_TYPES)}"
        ) from None


def palette_size(palette_type):
    return len(_offsets_for(palette_type))


def palette_hsl(base_hsl, palette_type):
    """
    Apply the harmony rule to an HSL triple.

    Returns a list of HSL tuples; hue wraps into [0, 360) and lightness is
    clamped to [0, 100].
    """
    offsets = _offsets_for(palette_type)
    factors = LIGHTNESS_FACTORS.get(palette_type, [1.0] * len(offsets))
    h, s, l = base_hsl
    return [
        HSL(rotate_hue(h, deg), s, max(0.0, min(100.0, l * factor)))
        for deg, factor in zip(offsets, factors)
    ]


def generate_palette(base_hex, palette_type):
    """
    Generate the ordered palette for base_hex under the given harmony rule.

    Index 0 is the base color itself. Raises InvalidFormat for a malformed
    base and ValueError for an unknown palette type.
    """
    base = hex_to_hsl(base_hex)
    palette = [hsl_to_hex(*c) for c in palette_hsl(base, palette_type)]
    logger.debug("Palette %s for %s: %s", palette_type, base_hex, palette)
    return palette


def generate_palette_entries(base_hex, palette_type, threshold=LUMA_THRESHOLD):
    """
    Same as generate_palette, with display data attached to each color.
    """
    base = hex_to_hsl(base_hex)
    entries = []
    for c in palette_hsl(base, palette_type):
        hex_val = hsl_to_hex(*c)
        entries.append({
            "hex": hex_val,
            "rgb": hsl_to_rgb(*c),
            "hsl": c,
            "contrast": get_contrast_color(hex_val, threshold),
        })
    logger.debug("Palette %s for %s: %s", palette_type, base_hex, [e["hex"] for e in entries])
    return entries


def render_palette_image(palette, swatch_size=120, threshold=LUMA_THRESHOLD):
    """
    Draws the palette as a horizontal strip of square swatches, each labelled
    with its hex code in the matching contrast color.
    """
    img = Image.new("RGB", (swatch_size * len(palette), swatch_size), (0, 0, 0))
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for i, hex_val in enumerate(palette):
        x0 = i * swatch_size
        draw.rectangle([x0, 0, x0 + swatch_size - 1, swatch_size - 1], fill=hex_val)
        text_color = CONTRAST_HEX[get_contrast_color(hex_val, threshold)]
        left, top, right, bottom = draw.textbbox((0, 0), hex_val, font=font)
        tx = x0 + (swatch_size - (right - left)) // 2
        ty = swatch_size - (bottom - top) - 8
        draw.text((tx, ty), hex_val, fill=text_color, font=font)

    return img
