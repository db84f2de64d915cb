"""
Date code error types.

Every failure raised by this package derives from DateCodeError, which is a
ValueError.
"""

from typing import Any, Optional


class DateCodeError(ValueError):
    """Base exception for all date code errors."""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.argument = argument
        self.value = value


class MissingArgumentError(DateCodeError):
    """
    A required string argument is None or empty.

    Raised for location codes and date codes alike.
    """

    def __init__(self, argument: str):
        super().__init__(f"{argument} is required", argument=argument)


class DateCodeRangeError(DateCodeError):
    """
    A numeric year or month is outside the scheme's bounds.

    Only raised while generating codes, where the caller passes numbers.
    """
    pass


class InvalidFormatError(DateCodeError):
    """
    A string argument has the wrong shape or content.

    Covers wrong length, non-letters in a location code, non-digits in a
    date code, decoded dates out of range and unknown location codes.
    """
    pass
