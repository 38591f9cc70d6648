import pytest

from brack.change import Absolute, Relative, looks_like_change, parse_change
from brack.common import ChangeParseError


def test_inc_change() -> None:
    assert parse_change("+10") == Relative(10.0)
    assert parse_change("-10") == Relative(-10.0)


def test_absolute_change() -> None:
    assert parse_change("50") == Absolute(50.0)
    assert parse_change("12.5") == Absolute(12.5)


def test_fractional_relative() -> None:
    assert parse_change("+2.5") == Relative(2.5)
    assert parse_change("-0.5") == Relative(-0.5)


@pytest.mark.parametrize("token", ["+abc", "-", "+", "abc", "", "50%", "nan", "+nan", "1_0", "+1_0", " 50", "50 ", "+ 5"])
def test_invalid_change(token: str) -> None:
    with pytest.raises(ChangeParseError):
        parse_change(token)


def test_leading_minus_is_always_relative() -> None:
    assert isinstance(parse_change("-5"), Relative)


@pytest.mark.parametrize("token,expected", [
    ("+10", True),
    ("-10", True),
    ("+abc", True),
    ("50", True),
    ("0.5", True),
    ("intel_backlight", False),
    ("acpi_video0", False),
    ("1_0", False),
    (" 50", False),
])
def test_looks_like_change(token: str, expected: bool) -> None:
    assert looks_like_change(token) is expected
