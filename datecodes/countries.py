"""
Factory location code to country lookup.

A location code can belong to several countries when production was shared,
so lookups return every matching country in table order.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional

from .errors import MissingArgumentError
from .models import Country

logger = logging.getLogger(__name__)


FACTORY_LOCATIONS: Mapping[Country, FrozenSet[str]] = MappingProxyType({
    Country.FRANCE: frozenset({
        "A0", "A1", "A2", "AA", "AH", "AN", "AR", "AS", "BA", "BJ",
        "BU", "DR", "DU", "DT", "CO", "CT", "CX", "ET", "FL", "LW",
        "MB", "MI", "NO", "RA", "RI", "SD", "SF", "SL", "SN", "SP",
        "SR", "TA", "TJ", "TH", "TN", "TR", "TS", "VI", "VX",
    }),
    Country.GERMANY: frozenset({"LP", "OL"}),
    Country.ITALY: frozenset({
        "BC", "BO", "CE", "FN", "FO", "MA", "NZ", "OB", "PL", "RC",
        "RE", "SA", "TD",
    }),
    Country.SPAIN: frozenset({"CA", "LO", "LB", "LM", "LW", "GI", "UB"}),
    Country.SWITZERLAND: frozenset({"DI", "FA"}),
    Country.USA: frozenset({"FC", "FH", "LA", "OS", "SD", "FL", "TX"}),
})


def get_countries(location_code: Optional[str]) -> List[Country]:
    """
    Return the countries whose factories use `location_code`.

    Matching is exact and case-sensitive; callers uppercase first.
    An unknown code yields an empty list.
    """
    if not location_code:
        logger.debug("Rejected missing location code")
        raise MissingArgumentError("location_code")

    matches = [
        country
        for country in Country
        if location_code in FACTORY_LOCATIONS.get(country, frozenset())
    ]
    if not matches:
        logger.debug("No country uses factory location code %r", location_code)
    return matches


def is_known_location(location_code: Optional[str]) -> bool:
    return bool(get_countries(location_code))
