"""Fluent accumulator composing field, struct and list checks of one entity."""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from bom_validator.validation.results import (
    PASSED,
    ValidationError,
    ValidationResult,
)

if TYPE_CHECKING:
    from bom_validator.spec_version import SpecVersion
    from bom_validator.validation.validate import Validate

T = TypeVar("T")

LeafValidator = Callable[[T], ValidationError | None]
ItemValidator = Callable[[T], ValidationResult]

DUPLICATE_MESSAGE = "Item is a duplicate of the item at index {first}"


def validate_list(items: Iterable[T], validator: ItemValidator) -> ValidationResult:
    """Validate every element, tagging errors with the element's index."""
    result = PASSED
    for index, item in enumerate(items):
        result = result.merge(validator(item).prefixed(index))
    return result


def _first_occurrence(items: list[Any], index: int) -> int | None:
    """Index of the first element equal to ``items[index]`` if it comes earlier."""
    for earlier in range(index):
        if items[earlier] == items[index]:
            return earlier
    return None


def validate_unique_list(
    items: Iterable[T], validator: ItemValidator
) -> ValidationResult:
    """Validate every element and flag repeated ones.

    Elements are compared by equality against all earlier elements. The
    first occurrence of a value is never flagged; each later occurrence gets
    one duplicate error at its index, followed by its own validation errors.
    """
    items = list(items)
    result = PASSED
    for index, item in enumerate(items):
        first = _first_occurrence(items, index)
        if first is not None:
            result = result.merge(
                ValidationResult.failed_with(
                    ValidationError(DUPLICATE_MESSAGE.format(first=first), (index,))
                )
            )
        result = result.merge(validator(item).prefixed(index))
    return result


class ValidationContext:
    """Collects the validation outcome of each named field of an entity.

    Every ``add_*`` method records an outcome and returns the context for
    chaining; ``build`` merges the outcomes, in the order they were added,
    into one ValidationResult with each error located under its field name.

    Example:
        >>> ValidationContext().add_field("alg", alg, validate_hash_algorithm).build()
    """

    def __init__(self):
        self._outcomes: list[tuple[str, ValidationResult]] = []

    def _add(self, name: str, result: ValidationResult) -> "ValidationContext":
        if result.failed:
            self._outcomes.append((name, result))
        return self

    def add_custom(self, name: str, result: ValidationResult) -> "ValidationContext":
        """Fold an already computed result under ``name``."""
        return self._add(name, result)

    def add_field(
        self, name: str, value: T, validator: LeafValidator
    ) -> "ValidationContext":
        """Run a leaf validator on a scalar value."""
        error = validator(value)
        if error is None:
            return self
        return self._add(name, ValidationResult.failed_with(error))

    def add_field_option(
        self, name: str, value: T | None, validator: LeafValidator
    ) -> "ValidationContext":
        """Like ``add_field``; an absent value contributes nothing."""
        if value is None:
            return self
        return self.add_field(name, value, validator)

    def add_struct(
        self, name: str, struct: "Validate", version: "SpecVersion"
    ) -> "ValidationContext":
        """Validate a nested structure and fold its errors under ``name``."""
        return self._add(name, struct.validate_version(version))

    def add_struct_option(
        self, name: str, struct: "Validate | None", version: "SpecVersion"
    ) -> "ValidationContext":
        """Like ``add_struct``; an absent structure contributes nothing.

        Required fields are enforced by the entity's own types, not here.
        """
        if struct is None:
            return self
        return self.add_struct(name, struct, version)

    def add_list(
        self, name: str, items: Iterable[T], validator: ItemValidator
    ) -> "ValidationContext":
        """Validate each element; errors are tagged with ``name`` and the index."""
        return self._add(name, validate_list(items, validator))

    def add_list_option(
        self, name: str, items: Iterable[T] | None, validator: ItemValidator
    ) -> "ValidationContext":
        if items is None:
            return self
        return self.add_list(name, items, validator)

    def add_unique_list(
        self, name: str, items: Iterable[T], validator: ItemValidator
    ) -> "ValidationContext":
        """Like ``add_list`` and additionally flag duplicated elements."""
        return self._add(name, validate_unique_list(items, validator))

    def add_unique_list_option(
        self, name: str, items: Iterable[T] | None, validator: ItemValidator
    ) -> "ValidationContext":
        if items is None:
            return self
        return self.add_unique_list(name, items, validator)

    def build(self) -> ValidationResult:
        """Merge all recorded outcomes into a single result."""
        result = PASSED
        for name, outcome in self._outcomes:
            result = result.merge(outcome.prefixed(name))
        return result
