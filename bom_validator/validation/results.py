"""Validation result types.

This module defines the value objects produced by every validation call:
path-tagged errors and the passed/failed result that carries them.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

PathSegment = str | int


def format_path(path: tuple[PathSegment, ...]) -> str:
    """Render a path as ``workflows[2].properties[0].name``."""
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered


@dataclass(frozen=True)
class ValidationError:
    """A single violation found while validating an entity.

    Attributes:
        message: Human readable description of the violation
        path: Location in the entity tree, outermost segment first.
            Field names are strings, list indices are integers.
    """

    message: str
    path: tuple[PathSegment, ...] = ()

    def prefixed(self, *segments: PathSegment) -> "ValidationError":
        """Return a copy located under the given segments."""
        return ValidationError(self.message, (*segments, *self.path))

    @property
    def location(self) -> str:
        return format_path(self.path)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.location}: {self.message}"


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of validating an entity.

    An empty result is the passed outcome; a failed result always carries
    at least one error. Merging concatenates errors in order and never
    deduplicates, so the passed result is the identity for merging.
    """

    errors: tuple[ValidationError, ...] = ()

    @classmethod
    def failed_with(cls, *errors: ValidationError) -> "ValidationResult":
        """Build a failed result.

        Raises:
            ValueError: If no errors are given
        """
        if not errors:
            raise ValueError("A failed ValidationResult needs at least one error")
        return cls(tuple(errors))

    @classmethod
    def from_errors(cls, errors: Iterable[ValidationError]) -> "ValidationResult":
        """Build a result that passes when ``errors`` is empty."""
        return cls(tuple(errors))

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.success

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        if other.success:
            return self
        if self.success:
            return other
        return ValidationResult(self.errors + other.errors)

    def __add__(self, other: "ValidationResult") -> "ValidationResult":
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self.merge(other)

    def prefixed(self, *segments: PathSegment) -> "ValidationResult":
        """Return a copy with every error located under the given segments."""
        if self.success:
            return self
        return ValidationResult(tuple(e.prefixed(*segments) for e in self.errors))

    def format_error(self, max_errors: int | None = None) -> str:
        """Format errors for reports.

        Args:
            max_errors: Maximum number of errors to list, all when None

        Returns:
            Empty string if validation succeeded.
        """
        if self.success:
            return ""
        shown = self.errors if max_errors is None else self.errors[:max_errors]
        lines = [f"- {error}" for error in shown]
        hidden = len(self.errors) - len(shown)
        if hidden > 0:
            lines.append(f"... and {hidden} more")
        return "## Validation Errors\n" + "\n".join(lines)


PASSED = ValidationResult()


# Helpers building expected errors in the shape of the document tree.


def field(name: PathSegment, *messages: str) -> list[ValidationError]:
    """Errors reported directly on a named field."""
    return [ValidationError(message, (name,)) for message in messages]


def struct(name: PathSegment, errors: Iterable[ValidationError]) -> list[ValidationError]:
    """Errors of a nested structure stored under ``name``."""
    return [error.prefixed(name) for error in errors]


def list_errors(
    name: PathSegment | None,
    items: Mapping[int, Iterable[ValidationError]],
) -> list[ValidationError]:
    """Errors of list elements keyed by index, stored under ``name``.

    Pass ``None`` as name for list entities whose errors start at the index.
    """
    prefix = () if name is None else (name,)
    return [
        error.prefixed(*prefix, index)
        for index, errors in sorted(items.items())
        for error in errors
    ]
