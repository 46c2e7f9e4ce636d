import pytest

from color_logic import (HSL, InvalidFormat, hex_to_rgb, rgb_to_hex, normalize_hex,
                         rgb_to_hsl, hex_to_hsl, hsl_to_rgb, hsl_to_hex, rotate_hue,
                         rgb_to_cmyk, rgb_to_hsl_string)

SAMPLE_HEXES = ["#0B5BFF", "#FF006E", "#06FFA5", "#FFBE0B", "#8338EC", "#FB5607",
                "#3A86FF", "#06D6A0", "#000000", "#FFFFFF", "#808080", "#1A1A1A"]


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


def test_hex_to_rgb():
    assert hex_to_rgb("#0B5BFF") == (11, 91, 255)
    assert hex_to_rgb("0b5bff") == (11, 91, 255)
    assert hex_to_rgb("  #ffffff ") == (255, 255, 255)


def test_hex_to_rgb_short_form_duplicates_nibbles():
    assert hex_to_rgb("#abc") == (0xAA, 0xBB, 0xCC)
    assert hex_to_rgb("F00") == (255, 0, 0)


@pytest.mark.parametrize("bad", ["", "#", "#12", "#1234", "12345", "#1234567",
                                 "#GGGGGG", "red", "##FFFFFF", None, 0xFFFFFF])
def test_hex_to_rgb_rejects_malformed(bad):
    with pytest.raises(InvalidFormat):
        hex_to_rgb(bad)


def test_invalid_format_is_value_error():
    assert issubclass(InvalidFormat, ValueError)


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex(255, 0, 0) == "#FF0000"
    assert rgb_to_hex(300, -5, 127.5) == "#FF0080"
    assert rgb_to_hex(10.4, 10.6, 0) == "#0A0B00"


@pytest.mark.parametrize("c", SAMPLE_HEXES + ["#abcdef", "#0b5bff"])
def test_hex_round_trip(c):
    assert rgb_to_hex(*hex_to_rgb(c)) == c.upper()


def test_normalize_hex():
    assert normalize_hex("abc") == "#AABBCC"
    assert normalize_hex("#0b5bff") == "#0B5BFF"


def test_rgb_to_hsl_primaries():
    assert rgb_to_hsl(255, 0, 0) == HSL(0.0, 100.0, 50.0)
    assert rgb_to_hsl(0, 255, 0) == pytest.approx((120.0, 100.0, 50.0))
    assert rgb_to_hsl(0, 0, 255) == pytest.approx((240.0, 100.0, 50.0))
    assert rgb_to_hsl(255, 0, 255) == pytest.approx((300.0, 100.0, 50.0))


def test_achromatic_has_zero_saturation():
    h, s, l = hex_to_hsl("#808080")
    assert s == 0
    assert h == 0
    assert l == pytest.approx(50.196, abs=0.01)
    assert hex_to_hsl("#FFFFFF") == HSL(0.0, 0.0, 100.0)
    assert hex_to_hsl("#000000") == HSL(0.0, 0.0, 0.0)


def test_hex_to_hsl_reference_blue():
    h, s, l = hex_to_hsl("#0B5BFF")
    assert h == pytest.approx(220.33, abs=0.01)
    assert s == pytest.approx(100.0, abs=0.01)
    assert l == pytest.approx(52.16, abs=0.01)


@pytest.mark.parametrize("c", SAMPLE_HEXES)
def test_hsl_values_in_range(c):
    h, s, l = hex_to_hsl(c)
    assert 0 <= h < 360
    assert 0 <= s <= 100
    assert 0 <= l <= 100


def test_hsl_to_rgb_sectors():
    assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
    assert hsl_to_rgb(60, 100, 50) == (255, 255, 0)
    assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
    assert hsl_to_rgb(180, 100, 50) == (0, 255, 255)
    assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)
    assert hsl_to_rgb(300, 100, 50) == (255, 0, 255)
    assert hsl_to_rgb(0, 0, 50) == (128, 128, 128)


def test_hsl_to_hex_wraps_hue_and_clamps():
    assert hsl_to_hex(360, 100, 50) == "#FF0000"
    assert hsl_to_hex(-120, 100, 50) == "#0000FF"
    assert hsl_to_hex(0, 150, 120) == "#FFFFFF"
    assert hsl_to_hex(0, -10, -5) == "#000000"


@pytest.mark.parametrize("c", SAMPLE_HEXES)
def test_hsl_round_trip_within_one_per_channel(c):
    back = hex_to_rgb(hsl_to_hex(*hex_to_hsl(c)))
    for a, b in zip(back, hex_to_rgb(c)):
        assert abs(a - b) <= 1


def test_repeated_round_trips_do_not_drift():
    original = hex_to_rgb("#3A86FF")
    c = "#3A86FF"
    for _ in range(20):
        c = hsl_to_hex(*hex_to_hsl(c))
    for a, b in zip(hex_to_rgb(c), original):
        assert abs(a - b) <= 1


# Hue is ill-conditioned at low saturation and extreme lightness (one hex step
# swings it by many degrees), so this grid stays in the high-chroma band.
@pytest.mark.parametrize("h", range(0, 360, 15))
@pytest.mark.parametrize("s, l", [(100, 50), (80, 40), (80, 60), (100, 45)])
def test_hsl_to_hex_to_hsl_within_one_unit(h, s, l):
    h2, s2, l2 = hex_to_hsl(hsl_to_hex(h, s, l))
    assert hue_distance(h, h2) <= 1
    assert abs(s - s2) <= 1
    assert abs(l - l2) <= 1


def test_rotate_hue_wraps():
    assert rotate_hue(350, 30) == 20
    assert rotate_hue(10, -30) == 340
    assert rotate_hue(0, 360) == 0


def test_rgb_to_cmyk():
    assert rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 100)
    assert rgb_to_cmyk(255, 0, 0) == (0, 100, 100, 0)
    assert rgb_to_cmyk(255, 255, 255) == (0, 0, 0, 0)


def test_rgb_to_hsl_string():
    assert rgb_to_hsl_string(255, 0, 0) == "hsl(0, 100%, 50%)"
    assert rgb_to_hsl_string(0, 0, 255) == "hsl(240, 100%, 50%)"
