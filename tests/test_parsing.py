from __future__ import annotations

import pytest

from breakpointchart.parsing import parse_bend_points, parse_dollars


@pytest.mark.parametrize(
    "text, expected",
    [("$1,234", 1234.0), ("1234.5", 1234.5), (" 1,000 ", 1000.0), ("0", 0.0)],
)
def test_parse_dollars(text, expected):
    assert parse_dollars(text) == expected


@pytest.mark.parametrize("text", ["", "  ", "abc", "-5", "$-1,000"])
def test_parse_dollars_rejects(text):
    with pytest.raises(ValueError):
        parse_dollars(text)


def test_parse_bend_points_comma_and_semicolon():
    assert parse_bend_points("1174,7078") == (1174.0, 7078.0)
    assert parse_bend_points("$1,174; $7,078") == (1174.0, 7078.0)


@pytest.mark.parametrize("text", ["1174", "1,2,3", "7078,1174"])
def test_parse_bend_points_rejects(text):
    with pytest.raises(ValueError):
        parse_bend_points(text)


@pytest.mark.parametrize("text", ["nan", "inf", "-inf", "$Infinity"])
def test_parse_dollars_rejects_non_finite(text):
    with pytest.raises(ValueError):
        parse_dollars(text)


def test_parse_bend_points_rejects_non_finite():
    with pytest.raises(ValueError):
        parse_bend_points("1000,nan")
