import json

import pytest

from py_nft_metadata import Rgb, TypeMismatch


def test_from_hex():
    assert Rgb.from_hex("f2f2f2") == Rgb(r=242, g=242, b=242)
    assert Rgb.from_hex("0A0B0C") == Rgb(r=10, g=11, b=12)


def test_to_hex():
    color = Rgb(r=242, g=242, b=242)
    assert color.to_hex() == "f2f2f2"
    assert str(Rgb(r=0, g=1, b=255)) == "0001ff"
    assert json.loads(color.model_dump_json()) == "f2f2f2"


@pytest.mark.parametrize("value", ["f2f2f2f2", "f2f2", "#f2f2f", "gggggg", " f2f2f", ""])
def test_not_a_color(value):
    with pytest.raises(TypeMismatch):
        Rgb.from_hex(value)


def test_component_out_of_range():
    with pytest.raises(TypeMismatch) as e:
        Rgb(r=300, g=0, b=0)
    assert e.value.field == "r"
