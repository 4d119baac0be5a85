from tinct import make_color, desaturate, saturate, greyscale, lighten, darken, complement


def test_complement():
    assert complement("#ff0000").to_hex() == "00ffff"
    assert complement("#00ffff").to_hex() == "ff0000"

def test_greyscale():
    assert greyscale("red").to_hex() == "808080"
    assert greyscale("#808080").to_hex() == "808080"

def test_lighten_and_darken():
    assert lighten("red").to_hex() == "ff3333"
    assert darken("red").to_hex() == "cc0000"
    assert lighten("#000", 50).to_hex() == "808080"
    assert darken("#fff", 100).to_hex() == "000000"

def test_lightness_is_clamped():
    assert lighten("#fff", 50).to_hex() == "ffffff"
    assert darken("#000", 50).to_hex() == "000000"

def test_saturation_round_trip():
    half = desaturate("#ff0000", 50)
    assert abs(half.to_hsl()["s"] - 0.5) < 1e-9
    assert saturate(half, 50).to_hex() == "ff0000"
    assert saturate("red", 50).to_hex() == "ff0000"

def test_default_amount_is_ten_points():
    hsl = desaturate("red").to_hsl()
    assert abs(hsl["s"] - 0.9) < 1e-9
    assert abs(hsl["l"] - 0.5) < 1e-9

def test_alpha_is_kept():
    source = "rgba(255, 0, 0, 0.5)"
    for derived in (desaturate(source), saturate(source), greyscale(source),
                    lighten(source), darken(source), complement(source)):
        assert derived.alpha == 0.5

def test_source_is_unchanged():
    red = make_color("red")
    lighter = lighten(red, 20)
    assert lighter is not red
    assert red.to_hex() == "ff0000"
    assert lighter.to_hsl_string() == "hsl(0, 100%, 70%)"

def test_invalid_input_derives_from_white():
    assert lighten("not a color").to_hex() == "ffffff"
    assert darken("not a color", 100).to_hex() == "000000"
