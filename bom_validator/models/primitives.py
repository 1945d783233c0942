"""Scalar value types shared by the document entities.

These wrap the raw text found in a document. Construction never fails;
the matching leaf validators decide whether a value is acceptable.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BomReference:
    """Identifier other parts of the document use to refer to an element."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NormalizedString:
    """String that may not contain line breaks or tabs."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DateTime:
    """ISO 8601 date-time, e.g. ``2024-01-31T12:00:00Z``."""

    value: str

    def __str__(self) -> str:
        return self.value
