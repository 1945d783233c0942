"""Generic leaf validators.

Leaf validators are pure functions checking one scalar value. They return
``None`` when the value is valid and a ValidationError without a path
otherwise; ValidationContext places the error under the field name.
"""

import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from bom_validator.open_enum import UnknownValue
from bom_validator.validation.results import ValidationError

NORMALIZED_STRING_MESSAGE = (
    "NormalizedString contains invalid characters \\r \\n \\t or \\r\\n"
)
DATE_TIME_MESSAGE = "DateTime does not conform to ISO 8601"


def pattern_validator(
    pattern: re.Pattern[str], message: str
) -> Callable[[Any], ValidationError | None]:
    """Build a validator requiring ``str(value)`` to fully match ``pattern``.

    The compiled pattern is shared by every call of the returned validator.
    """

    def validate(value: Any) -> ValidationError | None:
        if pattern.fullmatch(str(value)) is None:
            return ValidationError(message)
        return None

    return validate


def validate_known(value: Any, message: str) -> ValidationError | None:
    """Fail when an open enumeration holds a value outside its known members."""
    if isinstance(value, UnknownValue):
        return ValidationError(message)
    return None


def validate_normalized_string(value: Any) -> ValidationError | None:
    """Normalized strings may not contain carriage returns, line feeds or tabs."""
    text = str(value)
    if any(char in text for char in "\r\n\t"):
        return ValidationError(NORMALIZED_STRING_MESSAGE)
    return None


def validate_date_time(value: Any) -> ValidationError | None:
    text = str(value)
    # A date on its own is not a date-time
    if "T" not in text:
        return ValidationError(DATE_TIME_MESSAGE)
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return ValidationError(DATE_TIME_MESSAGE)
    return None
