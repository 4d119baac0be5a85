import logging
import os

import numpy as np
import pytest

from tinct import make_color, Color, FormatType, desaturate, triad
from tinct.exceptions import AmbiguousRatioWarning


def test_hex_input():
    color = make_color("#FF0000")
    assert color.ok
    assert color.to_hex() == "ff0000"
    assert color.to_hex_string() == "#ff0000"
    assert color.alpha == 1

def test_rgb_record_input(no_warnings):
    color = make_color({"r": 255, "g": 128, "b": 0})
    assert color.value[0] == 255.0
    assert color.value[3] == 1.0
    assert color.to_rgb() == {"r": 255, "g": 128, "b": 0}
    assert color.to_rgb_string() == "rgb(255, 128, 0)"

def test_rgb_string_switches_to_rgba():
    assert make_color({"r": 0, "g": 0, "b": 0}).to_rgb_string() == "rgb(0, 0, 0)"
    assert make_color({"r": 0, "g": 0, "b": 0, "a": 0.5}).to_rgb_string() == "rgba(0, 0, 0, 0.5)"

def test_hsl_string_switches_to_hsla():
    color = make_color("rgba(255,0,0,0.5)")
    assert color.alpha == 0.5
    assert color.to_hsl_string() == "hsla(0, 100%, 50%, 0.5)"
    assert make_color("red").to_hsl_string() == "hsl(0, 100%, 50%)"

def test_hsv_views():
    color = make_color("red")
    assert color.to_hsv() == {"h": 0.0, "s": 1.0, "v": 1.0}
    assert color.to_hsv_string() == "hsv(0, 100%, 100%)"
    assert color.to_hsl() == {"h": 0.0, "s": 1.0, "l": 0.5}

def test_hsv_record_input():
    assert make_color({"h": 120, "s": "100%", "v": "100%"}).to_hex() == "00ff00"

def test_hsl_string_input():
    color = make_color("hsl(120, 100%, 25%)")
    assert color.to_hex() == "008000"
    assert color.to_name() == "green"

def test_hsv_string_input():
    assert make_color("hsv(0, 100%, 100%)").to_hex() == "ff0000"

def test_rgb_keys_take_priority():
    color = make_color({"r": 0, "g": 0, "b": 255, "h": 0, "s": 100, "l": 50})
    assert color.to_hex() == "0000ff"

def test_transparent():
    color = make_color("transparent")
    assert color.ok
    assert color.alpha == 0
    assert color.to_rgb_string() == "rgba(0, 0, 0, 0)"

def test_to_name():
    assert make_color("#ff0000").to_name() == "red"
    assert make_color("#ff0001").to_name() is False
    assert make_color("#00ffff").to_name() == "cyan"
    assert make_color("#808080").to_name() == "grey"

def test_channels_are_clamped():
    assert make_color({"r": 300, "g": -20, "b": 128}).to_hex() == "ff0080"
    assert make_color({"r": 0, "g": 0, "b": 0, "a": 2}).alpha == 1.0

def test_one_is_read_as_full_scale_with_warning():
    with pytest.warns(AmbiguousRatioWarning, match=r"Channel\(s\) r equal to 1"):
        color = make_color({"r": 1, "g": 0, "b": 0})
    assert color.to_hex() == "ff0000"

    with pytest.warns(AmbiguousRatioWarning):
        assert make_color({"h": 0, "s": 1, "l": 0.5}).to_hex() == "ff0000"

def test_skip_ratio_keeps_absolute_one(no_warnings):
    assert make_color({"r": 1, "g": 0, "b": 0}, skip_ratio=True).to_hex() == "010000"

def test_explicit_format_type(no_warnings):
    assert make_color({"r": 1, "g": 0, "b": 0}, format_type="int").to_hex() == "010000"
    assert make_color({"r": 1, "g": 0.5, "b": 0}, format_type=FormatType.FLOAT).to_hex() == "ff8000"
    assert make_color({"r": 100, "g": 50, "b": 0}, format_type=FormatType.PERCENTAGE).to_hex() == "ff8000"
    assert make_color({"h": 0.5, "s": 1, "l": 0.5}, format_type=FormatType.FLOAT).to_hex() == "00ffff"

def test_alpha_and_unknown_keys_do_not_warn(no_warnings):
    assert make_color({"r": 255, "g": 0, "b": 0, "a": 1}).alpha == 1.0
    assert not make_color({"x": 1}).ok

def test_strings_are_never_rewritten(no_warnings):
    assert make_color("rgb(1, 0, 0)").to_hex() == "010000"

def test_input_record_is_not_mutated():
    record = {"r": 1, "g": 0, "b": 0}
    with pytest.warns(AmbiguousRatioWarning):
        make_color(record)
    assert record == {"r": 1, "g": 0, "b": 0}

@pytest.mark.parametrize("value", [
    "not a color",
    "",
    42,
    None,
    ["r", "g", "b"],
    {"r": 255, "g": 0},
    {"r": "abc", "g": 0, "b": 0},
    {"r": float("nan"), "g": 0, "b": 0},
    {"h": 0, "s": "50%", "l": "x%"},
])
def test_invalid_input_falls_back_to_white(value):
    color = make_color(value)
    assert not color.ok
    assert color.to_hex() == "ffffff"
    assert color.alpha == 1

def test_invalid_input_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="tinct.colors.color"):
        make_color("nope")
    assert "Unrecognized color string" in caplog.text

def test_color_passes_through():
    color = make_color("red")
    assert make_color(color) is color
    assert make_color(color, format_type="float") is color

def test_color_is_immutable():
    color = make_color("red")
    with pytest.raises(AttributeError):
        color.r = 0
    with pytest.raises(AttributeError):
        color._r = 0
    with pytest.raises(AttributeError):
        color.extra = 1
    assert color.to_hex() == "ff0000"

def test_small_channels_are_rounded():
    color = make_color({"r": 0.4, "g": 0.6, "b": 0}, format_type=FormatType.INT)
    assert color.value[:3] == (0, 1, 0)

def test_repr():
    assert repr(make_color("red")) == "Color('rgb(255, 0, 0)', ok=True)"
    assert isinstance(make_color("red"), Color)

def test_percentages_match_absolute_values():
    assert make_color("rgb(100%, 0%, 0%)").to_hex() == make_color("rgb(255,0,0)").to_hex() == "ff0000"
    assert make_color("rgb(50%, 50%, 50%)").to_hex() == "7f7f7f"

def test_numpy_scalar_records(no_warnings):
    color = make_color({"r": np.int64(255), "g": np.int64(0), "b": np.int64(0)})
    assert color.ok
    assert color.to_hex() == "ff0000"
    assert make_color({"h": np.float32(120), "s": np.uint8(100), "v": np.float64(100)}).to_hex() == "00ff00"

def test_numpy_one_is_read_as_full_scale():
    with pytest.warns(AmbiguousRatioWarning):
        color = make_color({"r": np.int64(1), "g": np.int64(0), "b": np.int64(0)})
    assert color.to_hex() == "ff0000"

def test_record_strings_follow_the_token_grammar():
    assert not make_color({"r": "1e3", "g": 0, "b": 0}).ok
    assert not make_color({"r": "2_55", "g": 0, "b": 0}).ok
    assert make_color({"r": " 255 ", "g": "0", "b": "0%"}).to_hex() == "ff0000"

def test_ratio_warning_points_at_the_caller():
    with pytest.warns(AmbiguousRatioWarning) as record:
        make_color({"r": 1, "g": 0, "b": 0})
        desaturate({"r": 1, "g": 0, "b": 0})
        triad({"h": 0, "s": 1, "l": 0.5})
    assert len(record) == 3
    assert all(os.path.abspath(w.filename) == os.path.abspath(__file__) for w in record)
