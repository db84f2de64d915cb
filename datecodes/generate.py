"""
Date code generation.

Each scheme takes either a (year, month) pair or a calendar date. The date
forms only read year and month and delegate to the same validation as the
pair forms.

Schemes:
- early 1980s: "YYM" / "YYMM", no location
- late 1980s:  "YYM" / "YYMM" followed by the location code
- 1990s:       location code, then month and year digits interleaved
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Tuple

from . import rules
from .errors import DateCodeRangeError, InvalidFormatError, MissingArgumentError

logger = logging.getLogger(__name__)


def _validate_year_month(year: int, month: int, first_year: int, end_year: int) -> None:
    """Check year in [first_year, end_year) and month in MONTHS."""
    if year < first_year or year >= end_year:
        logger.debug("Rejected year %r outside [%d, %d)", year, first_year, end_year)
        raise DateCodeRangeError(
            f"Year {year} is outside [{first_year}, {end_year})",
            argument="year",
            value=year,
        )

    first_month, last_month = rules.MONTHS
    if month < first_month or month > last_month:
        logger.debug("Rejected month %r", month)
        raise DateCodeRangeError(
            f"Month {month} is outside [{first_month}, {last_month}]",
            argument="month",
            value=month,
        )


def _validate_location_code(location_code: Optional[str]) -> str:
    """Return the uppercased location code, or raise."""
    if not location_code:
        logger.debug("Rejected missing location code")
        raise MissingArgumentError("location_code")

    location = location_code.upper()
    # upper() can lengthen a string ("ß" -> "SS").
    if len(location_code) != rules.LOCATION_CODE_LENGTH or len(location) != rules.LOCATION_CODE_LENGTH:
        logger.debug("Rejected location code %r: wrong length", location_code)
        raise InvalidFormatError(
            f"Factory location code must be {rules.LOCATION_CODE_LENGTH} letters, got {location_code!r}",
            argument="location_code",
            value=location_code,
        )

    if not all(ch.isalpha() for ch in location_code):
        logger.debug("Rejected location code %r: not letters", location_code)
        raise InvalidFormatError(
            f"Factory location code is incorrect: {location_code!r}",
            argument="location_code",
            value=location_code,
        )

    return location


def _year_month(value: date) -> Tuple[int, int]:
    return value.year, value.month


# --- early 1980s ---


def generate_early_1980s_code(year: int, month: int) -> str:
    """
    Generate an early-1980s code: two-digit year then month, unpadded.

    1980-01 -> "801", 1980-12 -> "8012".
    """
    _validate_year_month(year, month, *rules.EARLY_1980S_YEARS)

    code = f"{year % 100}{month}"
    logger.debug("Generated early 1980s code %s for %d-%02d", code, year, month)
    return code


def generate_early_1980s_code_from_date(value: date) -> str:
    return generate_early_1980s_code(*_year_month(value))


# --- late 1980s ---


def generate_late_1980s_code(location_code: Optional[str], year: int, month: int) -> str:
    """
    Generate a late-1980s code: two-digit year, unpadded month, location code.

    ("bc", 1987, 1) -> "871BC".
    """
    _validate_year_month(year, month, *rules.LATE_1980S_YEARS)
    location = _validate_location_code(location_code)

    code = f"{year % 100}{month}{location}"
    logger.debug("Generated late 1980s code %s for %d-%02d", code, year, month)
    return code


def generate_late_1980s_code_from_date(location_code: Optional[str], value: date) -> str:
    return generate_late_1980s_code(location_code, *_year_month(value))


# --- 1990s ---


def _interleave(location: str, year: int, month: int) -> str:
    yy = f"{year % 100:02d}"
    mm = f"{month:02d}"
    return f"{location}{mm[0]}{yy[0]}{mm[1]}{yy[1]}"


def generate_1990s_code(location_code: Optional[str], year: int, month: int) -> str:
    """
    Generate a 1990s code: location code plus interleaved month/year digits.

    Accepts years 1990 to 2005. ("th", 1990, 1) -> "TH0910".
    """
    _validate_year_month(year, month, *rules.NINETIES_YEARS)
    location = _validate_location_code(location_code)

    code = _interleave(location, year, month)
    logger.debug("Generated 1990s code %s for %d-%02d", code, year, month)
    return code


def generate_1990s_code_from_date(location_code: Optional[str], value: date) -> str:
    """
    Same as generate_1990s_code, but 2006 is accepted as well.

    ("rc", date(2006, 7, 1)) -> "RC0076".
    """
    year, month = _year_month(value)
    first_year, _ = rules.NINETIES_YEARS
    _validate_year_month(year, month, first_year, rules.NINETIES_LAST_YEAR + 1)
    location = _validate_location_code(location_code)

    code = _interleave(location, year, month)
    logger.debug("Generated 1990s code %s for %d-%02d", code, year, month)
    return code
