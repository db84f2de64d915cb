from .countries import FACTORY_LOCATIONS, get_countries, is_known_location
from .errors import DateCodeError, DateCodeRangeError, InvalidFormatError, MissingArgumentError
from .generate import (
    generate_1990s_code,
    generate_1990s_code_from_date,
    generate_early_1980s_code,
    generate_early_1980s_code_from_date,
    generate_late_1980s_code,
    generate_late_1980s_code_from_date,
)
from .models import Country, EarlyDateCode, LocatedDateCode
from .parse import parse_1990s_code, parse_early_1980s_code, parse_late_1980s_code

__all__ = [
    "Country",
    "DateCodeError",
    "DateCodeRangeError",
    "EarlyDateCode",
    "FACTORY_LOCATIONS",
    "InvalidFormatError",
    "LocatedDateCode",
    "MissingArgumentError",
    "generate_1990s_code",
    "generate_1990s_code_from_date",
    "generate_early_1980s_code",
    "generate_early_1980s_code_from_date",
    "generate_late_1980s_code",
    "generate_late_1980s_code_from_date",
    "get_countries",
    "is_known_location",
    "parse_1990s_code",
    "parse_early_1980s_code",
    "parse_late_1980s_code",
]
