import pytest

from m3theme.color import Color, Hct, SeedColorError, hct_to_rgb, parse_rgb, rgb_to_hct, sanitize_degrees


def test_rgb_to_hct_reference_seed():
    hct = rgb_to_hct(28, 32, 39)
    assert hct.hue == pytest.approx(218.1818, abs=1e-3)
    assert hct.chroma == pytest.approx(120 * 11 / 39, abs=1e-6)
    assert hct.tone == pytest.approx(100 * 39 / 255, abs=1e-6)


def test_rgb_to_hct_gray_and_black_have_no_chroma():
    assert rgb_to_hct(1, 1, 1).chroma == 0
    assert rgb_to_hct(1, 1, 1).hue == 0
    black = rgb_to_hct(0, 0, 0)
    assert (black.hue, black.chroma, black.tone) == (0, 0, 0)


def test_magenta_hue_wraps_into_range():
    assert rgb_to_hct(255, 0, 255).hue == pytest.approx(300)


@pytest.mark.parametrize("rgb", [
    (255, 0, 0), (0, 255, 0), (0, 0, 255),
    (255, 255, 0), (0, 255, 255), (255, 0, 255),
    (255, 255, 255), (0, 0, 0),
])
def test_saturated_and_extreme_colors_round_trip_exactly(rgb):
    assert hct_to_rgb(rgb_to_hct(*rgb)) == Color(*rgb)


@pytest.mark.parametrize("rgb", [
    (28, 32, 39), (200, 100, 50), (12, 200, 180), (128, 128, 128),
    (1, 1, 1), (90, 10, 240), (250, 249, 3), (77, 0, 31),
])
def test_round_trip_within_one_step(rgb):
    back = hct_to_rgb(rgb_to_hct(*rgb))
    assert back.a == 255
    for original, restored in zip(rgb, (back.r, back.g, back.b)):
        assert abs(original - restored) <= 1


def test_channels_are_truncated_not_rounded():
    # 0.5 * 255 = 127.5
    assert Hct(0.0, 0.0, 50.0).to_rgb() == Color(127, 127, 127)


def test_hue_360_uses_last_sextant():
    assert hct_to_rgb(Hct(360.0, 120.0, 100.0)) == Color(255, 0, 0)


def test_chroma_above_ceiling_is_capped():
    assert hct_to_rgb(Hct(0.0, 200.0, 100.0)) == Color(255, 0, 0)


def test_out_of_range_tone_is_clamped():
    assert hct_to_rgb(Hct(0.0, 0.0, 120.0)) == Color(255, 255, 255)
    assert hct_to_rgb(Hct(0.0, 0.0, -10.0)) == Color(0, 0, 0)


@pytest.mark.parametrize("degrees,expected", [
    (-90.0, 270.0),
    (720.0, 0.0),
    (360.0, 0.0),
    (59.5, 59.5),
    (-360.0, 0.0),
    (425.0, 65.0),
])
def test_sanitize_degrees(degrees, expected):
    result = sanitize_degrees(degrees)
    assert result == pytest.approx(expected)
    assert 0 <= result < 360


def test_parse_rgb():
    assert parse_rgb("28,32,39") == Color(28, 32, 39)
    assert parse_rgb(" 28, 32 ,39 ") == Color(28, 32, 39)


@pytest.mark.parametrize("text,message", [
    ("1,2", "invalid RGB format"),
    ("1,2,3,4", "invalid RGB format"),
    ("256,0,0", "invalid red value: 256"),
    ("a,0,0", "invalid red value: a"),
    ("0,-1,0", "invalid green value: -1"),
    ("0,0,1.5", "invalid blue value: 1.5"),
])
def test_parse_rgb_rejects_bad_input(text, message):
    with pytest.raises(SeedColorError, match=message):
        parse_rgb(text)


def test_seed_color_error_is_value_error():
    assert issubclass(SeedColorError, ValueError)


def test_to_hex():
    assert Color(28, 32, 39).to_hex() == "#1c2027"
    assert Color(255, 0, 10).to_hex() == "#ff000a"
