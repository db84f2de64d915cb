"""
Date code parsing.

Parsers treat their input as untrusted: anything that does not decode to a
valid date (and known factory location, where the scheme has one) raises
InvalidFormatError. None or "" raises MissingArgumentError.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from . import rules
from .countries import get_countries
from .errors import InvalidFormatError, MissingArgumentError
from .models import Country, EarlyDateCode, LocatedDateCode

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def _require_code(code: Optional[str], lengths: Tuple[int, ...]) -> str:
    if not code:
        logger.debug("Rejected missing date code")
        raise MissingArgumentError("date_code")

    if len(code) not in lengths:
        logger.debug("Rejected date code %r: length %d", code, len(code))
        raise InvalidFormatError(
            f"Incorrect date code {code!r}: expected length {' or '.join(map(str, lengths))}",
            argument="date_code",
            value=code,
        )
    return code


def _to_int(digits: str, argument: str, code: str) -> int:
    if not digits or not set(digits) <= _DIGITS:
        logger.debug("Rejected date code %r: %s is not numeric", code, argument)
        raise InvalidFormatError(
            f"Incorrect date code {code!r}: {argument} {digits!r} is not numeric",
            argument=argument,
            value=digits,
        )
    return int(digits)


def _check_year(year: int, first_year: int, end_year: int, code: str) -> None:
    if year < first_year or year >= end_year:
        logger.debug("Rejected date code %r: year %d", code, year)
        raise InvalidFormatError(
            f"Incorrect date in {code!r}: year {year}",
            argument="year",
            value=year,
        )


def _check_month(month: int, code: str) -> None:
    first_month, last_month = rules.MONTHS
    if month < first_month or month > last_month:
        logger.debug("Rejected date code %r: month %d", code, month)
        raise InvalidFormatError(
            f"Incorrect date in {code!r}: month {month}",
            argument="month",
            value=month,
        )


def _lookup(location_code: str, code: str) -> List[Country]:
    countries = get_countries(location_code)
    if not countries:
        raise InvalidFormatError(
            f"Incorrect date code {code!r}: unknown factory location {location_code!r}",
            argument="location_code",
            value=location_code,
        )
    return countries


def parse_early_1980s_code(code: Optional[str]) -> EarlyDateCode:
    """
    Decode "YYM" / "YYMM" into year and month.

    "801" -> 1980-01, "8612" -> 1986-12.
    """
    code = _require_code(code, rules.EARLY_1980S_CODE_LENGTHS)

    year = _to_int(rules.TWENTIETH_CENTURY + code[:2], "year", code)
    _check_year(year, *rules.EARLY_1980S_YEARS, code)

    month = _to_int(code[2:].rjust(2, "0"), "month", code)
    _check_month(month, code)

    logger.debug("Parsed early 1980s code %s as %d-%02d", code, year, month)
    return EarlyDateCode(year=year, month=month)


def parse_late_1980s_code(code: Optional[str]) -> LocatedDateCode:
    """
    Decode "YYM??" / "YYMM??" into year, month and factory location.

    The location code is matched case-sensitively. "8710SD" -> 1987-10 at SD
    (France, USA).
    """
    code = _require_code(code, rules.LATE_1980S_CODE_LENGTHS)

    location_code = code[-2:]
    countries = _lookup(location_code, code)

    year = _to_int(rules.TWENTIETH_CENTURY + code[:2], "year", code)
    _check_year(year, *rules.LATE_1980S_YEARS, code)

    month = _to_int(code[2:-2].rjust(2, "0"), "month", code)
    _check_month(month, code)

    logger.debug("Parsed late 1980s code %s as %d-%02d", code, year, month)
    return LocatedDateCode(
        year=year,
        month=month,
        location_code=location_code,
        countries=tuple(countries),
    )


def parse_1990s_code(code: Optional[str]) -> LocatedDateCode:
    """
    Decode "??MYMY" into factory location, year and month.

    Month digits sit at positions 2 and 4, year digits at 3 and 5. A year
    starting with "0" is in the 2000s, anything else in the 1990s.
    "TH0910" -> 1990-01 at TH.
    """
    code = _require_code(code, (rules.NINETIES_CODE_LENGTH,))

    location_code = code[:2]
    countries = _lookup(location_code, code)

    year_digits = code[3] + code[5]
    century = rules.TWENTY_FIRST_CENTURY if year_digits[0] == "0" else rules.TWENTIETH_CENTURY
    year = _to_int(century + year_digits, "year", code)
    first_year, _ = rules.NINETIES_YEARS
    _check_year(year, first_year, rules.NINETIES_LAST_YEAR + 1, code)

    month = _to_int(code[2] + code[4], "month", code)
    _check_month(month, code)

    logger.debug("Parsed 1990s code %s as %d-%02d", code, year, month)
    return LocatedDateCode(
        year=year,
        month=month,
        location_code=location_code,
        countries=tuple(countries),
    )
