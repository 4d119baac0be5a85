import pytest

from tinct import make_color
from tinct.colors.names import NAMES, HEX_NAMES
from tinct.conversions import expand_hex


def test_css3_keyword_count():
    assert len(NAMES) == 147
    assert "burntsienna" not in NAMES

def test_tables_are_read_only():
    with pytest.raises(TypeError):
        NAMES["red"] = "000"
    with pytest.raises(TypeError):
        HEX_NAMES["ff0000"] = "notred"

def test_inverse_table_uses_expanded_hex():
    assert all(len(key) == 6 for key in HEX_NAMES)
    assert HEX_NAMES["ff0000"] == "red"
    assert HEX_NAMES["ffffff"] == "white"

def test_shared_codes_keep_last_keyword():
    assert HEX_NAMES["00ffff"] == "cyan"
    assert HEX_NAMES["ff00ff"] == "magenta"
    assert HEX_NAMES["808080"] == "grey"
    assert HEX_NAMES["a9a9a9"] == "darkgrey"

def test_every_keyword_builds_its_color():
    for name, hex_value in NAMES.items():
        color = make_color(name)
        assert color.ok, name
        assert color.to_hex() == expand_hex(hex_value), name
        assert HEX_NAMES[color.to_hex()] == color.to_name()
