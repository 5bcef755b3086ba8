import pytest

from lending_library.utils.validators import NumberValidator, TextValidator


def test_text_validator():
    assert TextValidator.clean("  Alice ") == "Alice"
    assert TextValidator.is_non_empty("x")
    assert not TextValidator.is_non_empty("   ")
    assert not TextValidator.is_non_empty(None)


@pytest.mark.parametrize("raw,expected", [
    ("3", 3),
    (" 42 ", 42),
    ("-7", -7),
    ("+5", 5),
    ("abc", None),
    ("", None),
    ("1_000", None),
    ("2.5", None),
    ("²", None),
])
def test_parse_int(raw, expected):
    assert NumberValidator.parse_int(raw) == expected


@pytest.mark.parametrize("raw,expected", [("1", 1), ("0", None), ("-2", None), ("x", None)])
def test_parse_positive_int(raw, expected):
    assert NumberValidator.parse_positive_int(raw) == expected
