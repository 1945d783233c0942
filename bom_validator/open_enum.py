"""Open enumerations: a fixed set of known values plus a lossless fallback.

Schema values unknown to this library are kept verbatim in an
``UnknownValue`` so a document survives parsing and re-emission unchanged;
validation then reports them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)
U = TypeVar("U", bound="UnknownValue")


@dataclass(frozen=True)
class UnknownValue:
    """Value that matched none of the known members of an open enumeration."""

    value: str

    def __str__(self) -> str:
        return self.value


def parse_open_enum(enum_type: type[E], unknown_type: type[U], value: str) -> E | U:
    """Map ``value`` to the member with exactly that value, else keep it as unknown.

    Never fails: every input string has a result.
    """
    try:
        return enum_type(value)
    except ValueError:
        return unknown_type(value)
