from __future__ import annotations

import pytest

from spicerack.naming import ALPHABET, bucket_key, properly_capitalize_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("cinnamon", "Cinnamon"),
        ("  SMOKED   paprika ", "Smoked Paprika"),
        ("bbq seasoning", "BBQ Seasoning"),
        ("msg", "MSG"),
        ("herbs of provence", "Herbs of Provence"),
        ("the spice blend", "The Spice Blend"),
        ("salt and pepper", "Salt and Pepper"),
        ("", ""),
        ("   ", ""),
        (None, ""),
    ],
)
def test_properly_capitalize_name(raw, expected):
    assert properly_capitalize_name(raw) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Cinnamon", "C"),
        ("za'atar", "Z"),
        ("Épazote", "E"),
        ("5-Spice Powder", "S"),
        ("123", None),
        ("", None),
    ],
)
def test_bucket_key(name, expected):
    assert bucket_key(name) == expected


def test_alphabet_is_ordered_a_to_z():
    assert "".join(ALPHABET) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
