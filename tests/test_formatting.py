"""Tests for display formatting."""
import pytest

from trademeter.services.formatting import (
    NEGATIVE,
    POSITIVE,
    format_change,
    format_market_cap,
    format_price,
    format_shares,
    html_text,
)


def test_positive_change():
    text, style = format_change(1.23, 0.45)
    assert text == "+$1.23 (+0.45%)"
    assert style == POSITIVE


def test_negative_change():
    text, style = format_change(-2.00, -1.10)
    assert text == "-$2.00 (-1.10%)"
    assert style == NEGATIVE


def test_zero_change_is_positive():
    text, style = format_change(0.0, 0.0)
    assert text == "+$0.00 (+0.00%)"
    assert style == POSITIVE


def test_change_without_percent():
    assert format_change(3.5, None) == ("+$3.50", POSITIVE)


def test_missing_change():
    assert format_change(None, None) == ("N/A", None)


@pytest.mark.parametrize("value,expected", [
    (2.8e12, "$2.80T"),
    (2_500_000_000_000, "$2.50T"),
    (745_300_000_000, "$745.30B"),
    (1_000_000_000, "$1.00B"),
    (12_340_000, "$12.34M"),
    (950_000, "$950,000"),
    (None, "N/A"),
])
def test_market_cap(value, expected):
    assert format_market_cap(value) == expected


def test_finnhub_millions_after_scaling():
    """Finnhub reports 2,800,000 (millions) for a $2.8T company."""
    assert format_market_cap(2_800_000 * 1_000_000) == "$2.80T"


def test_shares():
    assert format_shares(15_204_137_000) == "15.20B"
    assert format_shares(None) == "N/A"


@pytest.mark.parametrize("value,expected", [
    (190.5, "$190.50"),
    (0, "$0.00"),
    (None, "N/A"),
])
def test_price(value, expected):
    assert format_price(value) == expected


def test_html_text_escapes_markup():
    assert html_text('<img src=x onerror="alert(1)">') == "&lt;img src=x onerror=&quot;alert(1)&quot;&gt;"
    assert html_text("AT&T") == "AT&amp;T"


@pytest.mark.parametrize("value, expected", [
    (None, "N/A"),
    ("", "N/A"),
    (0, "0"),
    ("$190.50", "$190.50"),
])
def test_html_text_plain_values(value, expected):
    assert html_text(value) == expected
