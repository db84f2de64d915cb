"""
Deterministic date code rules.

Year bounds are (inclusive, exclusive) unless named otherwise.
"""

EARLY_1980S_YEARS = (1980, 1990)
LATE_1980S_YEARS = (1980, 1990)
NINETIES_YEARS = (1990, 2006)
# Calendar-date generation and parsing of 1990s codes accept 2006 itself.
NINETIES_LAST_YEAR = 2006

MONTHS = (1, 12)  # inclusive

LOCATION_CODE_LENGTH = 2

EARLY_1980S_CODE_LENGTHS = (3, 4)
LATE_1980S_CODE_LENGTHS = (5, 6)
NINETIES_CODE_LENGTH = 6

TWENTIETH_CENTURY = "19"
TWENTY_FIRST_CENTURY = "20"
