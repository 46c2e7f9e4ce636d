import pytest

from color_logic import InvalidFormat
from contrast_utils import BLACK, WHITE, calculate_luma, contrast_hex, get_contrast_color


def test_black_and_white_extremes():
    assert get_contrast_color("#000000") == WHITE
    assert get_contrast_color("#FFFFFF") == BLACK


@pytest.mark.parametrize("hex_str, expected", [
    ("#FFFF00", BLACK),   # luma ~226
    ("#06FFA5", BLACK),
    ("#0000FF", WHITE),   # luma ~29
    ("#0B5BFF", WHITE),
    ("#7F7F7F", WHITE),
    ("#818181", BLACK),
])
def test_threshold_decision(hex_str, expected):
    assert get_contrast_color(hex_str) == expected


def test_custom_threshold():
    assert get_contrast_color("#7F7F7F", threshold=100) == BLACK


def test_calculate_luma_weights():
    assert calculate_luma(255, 255, 255) == pytest.approx(255)
    assert calculate_luma(255, 0, 0) == pytest.approx(76.245)
    assert calculate_luma(0, 255, 0) == pytest.approx(149.685)


def test_contrast_hex():
    assert contrast_hex("#FFFFFF") == "#000000"
    assert contrast_hex("#000") == "#FFFFFF"


def test_malformed_input_propagates():
    with pytest.raises(InvalidFormat):
        get_contrast_color("#12")
