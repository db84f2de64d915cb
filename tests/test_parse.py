import logging

import pytest
from pydantic import ValidationError

from datecodes.errors import InvalidFormatError, MissingArgumentError
from datecodes.models import Country
from datecodes.parse import parse_1990s_code, parse_early_1980s_code, parse_late_1980s_code

FRANCE = Country.FRANCE
USA = Country.USA


# --- early 1980s ---


@pytest.mark.parametrize(
    "code, year, month",
    [
        ("801", 1980, 1),
        ("8010", 1980, 10),
        ("812", 1981, 2),
        ("836", 1983, 6),
        ("8312", 1983, 12),
        ("864", 1986, 4),
        ("8611", 1986, 11),
    ],
)
def test_early_1980s(code, year, month):
    decoded = parse_early_1980s_code(code)
    assert (decoded.year, decoded.month) == (year, month)


@pytest.mark.parametrize("code", ["83", "83678", "800", "8013", "791", "901", "8a1", "80+1", "80 1"])
def test_early_1980s_invalid(code):
    with pytest.raises(InvalidFormatError):
        parse_early_1980s_code(code)


@pytest.mark.parametrize("code", [None, ""])
def test_early_1980s_missing(code):
    with pytest.raises(MissingArgumentError):
        parse_early_1980s_code(code)


# --- late 1980s ---


@pytest.mark.parametrize(
    "code, countries, location_code, year, month",
    [
        ("861TH", (FRANCE,), "TH", 1986, 1),
        ("8710SD", (FRANCE, USA), "SD", 1987, 10),
        ("874VX", (FRANCE,), "VX", 1987, 4),
        ("889FC", (USA,), "FC", 1988, 9),
        ("8912FL", (FRANCE, USA), "FL", 1989, 12),
    ],
)
def test_late_1980s(code, countries, location_code, year, month):
    decoded = parse_late_1980s_code(code)
    assert decoded.countries == countries
    assert decoded.location_code == location_code
    assert (decoded.year, decoded.month) == (year, month)


@pytest.mark.parametrize(
    "code",
    ["87VX", "87451VX", "800VX", "8013VX", "791VX", "901VX", "801QQ", "861th", "8X1TH"],
)
def test_late_1980s_invalid(code):
    with pytest.raises(InvalidFormatError):
        parse_late_1980s_code(code)


def test_late_1980s_unknown_location_reports_argument():
    with pytest.raises(InvalidFormatError) as excinfo:
        parse_late_1980s_code("801QQ")
    assert excinfo.value.argument == "location_code"
    assert excinfo.value.value == "QQ"


@pytest.mark.parametrize("code", [None, ""])
def test_late_1980s_missing(code):
    with pytest.raises(MissingArgumentError):
        parse_late_1980s_code(code)


# --- 1990s ---


@pytest.mark.parametrize(
    "code, countries, location_code, year, month",
    [
        ("TH0910", (FRANCE,), "TH", 1990, 1),
        ("FC0935", (USA,), "FC", 1995, 3),
        ("SD1001", (FRANCE, USA), "SD", 2001, 10),
        ("VI1025", (FRANCE,), "VI", 2005, 12),
        ("RC0076", (Country.ITALY,), "RC", 2006, 7),
    ],
)
def test_1990s(code, countries, location_code, year, month):
    decoded = parse_1990s_code(code)
    assert decoded.countries == countries
    assert decoded.location_code == location_code
    assert (decoded.year, decoded.month) == (year, month)


@pytest.mark.parametrize(
    "code",
    ["R0017", "RI00170", "RI1930", "RI0819", "RI0017", "RI0900", "QQ0910", "TH0X10"],
)
def test_1990s_invalid(code):
    with pytest.raises(InvalidFormatError):
        parse_1990s_code(code)


@pytest.mark.parametrize("code", [None, ""])
def test_1990s_missing(code):
    with pytest.raises(MissingArgumentError) as excinfo:
        parse_1990s_code(code)
    assert excinfo.value.argument == "date_code"


def test_results_are_frozen():
    decoded = parse_1990s_code("TH0910")
    with pytest.raises(ValidationError):
        decoded.year = 1991


@pytest.mark.parametrize("parse", [parse_early_1980s_code, parse_late_1980s_code, parse_1990s_code])
def test_missing_code_is_logged(parse, caplog):
    caplog.set_level(logging.DEBUG, logger="datecodes")
    with pytest.raises(MissingArgumentError):
        parse("")
    assert "Rejected missing date code" in caplog.text
