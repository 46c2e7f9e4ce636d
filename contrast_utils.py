from color_logic import hex_to_rgb

BLACK = "black"
WHITE = "white"

CONTRAST_HEX = {BLACK: "#000000", WHITE: "#FFFFFF"}

# Luma above this reads better with black text
LUMA_THRESHOLD = 128


def calculate_luma(r, g, b):
    """
    Perceptual luma of an RGB (0-255) color using the Rec. 601 weights.
    """
    return 0.299 * r + 0.587 * g + 0.114 * b


def get_contrast_color(hex_str, threshold=LUMA_THRESHOLD):
    """
    Returns "black" or "white", whichever is more legible on top of hex_str.

    Raises InvalidFormat for a malformed hex string.
    """
    lum = calculate_luma(*hex_to_rgb(hex_str))
    return BLACK if lum > threshold else WHITE


def contrast_hex(hex_str, threshold=LUMA_THRESHOLD):
    return CONTRAST_HEX[get_contrast_color(hex_str, threshold)]
