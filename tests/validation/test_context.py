"""Tests for ValidationContext and the list helpers."""

from dataclasses import dataclass

from bom_validator.spec_version import SpecVersion
from bom_validator.validation.context import (
    ValidationContext,
    validate_list,
    validate_unique_list,
)
from bom_validator.validation.results import (
    PASSED,
    ValidationError,
    ValidationResult,
    field,
    list_errors,
    struct,
)
from bom_validator.validation.validate import Validate


def non_empty(value: str) -> ValidationError | None:
    if not value:
        return ValidationError("Value must not be empty")
    return None


@dataclass(frozen=True)
class Item(Validate):
    name: str

    def validate(self, version: SpecVersion) -> ValidationResult:
        return ValidationContext().add_field("name", self.name, non_empty).build()


@dataclass
class Container(Validate):
    items: list[Item]
    child: Item | None = None

    def validate(self, version: SpecVersion) -> ValidationResult:
        return (
            ValidationContext()
            .add_struct_option("child", self.child, version)
            .add_unique_list(
                "items", self.items, lambda item: item.validate_version(version)
            )
            .build()
        )


def validate_item(item: Item) -> ValidationResult:
    return item.validate_version(SpecVersion.V1_5)


class TestAddField:
    def test_passing_field_contributes_nothing(self):
        result = ValidationContext().add_field("name", "x", non_empty).build()
        assert result == PASSED

    def test_failing_field_is_tagged_with_name(self):
        result = ValidationContext().add_field("name", "", non_empty).build()
        assert list(result.errors) == field("name", "Value must not be empty")

    def test_field_option_skips_none(self):
        result = ValidationContext().add_field_option("name", None, non_empty).build()
        assert result == PASSED

    def test_returns_context_for_chaining(self):
        context = ValidationContext()
        assert context.add_field("name", "x", non_empty) is context


class TestAddStruct:
    def test_absent_struct_contributes_nothing(self):
        result = (
            ValidationContext()
            .add_struct_option("child", None, SpecVersion.V1_5)
            .build()
        )
        assert result == PASSED

    def test_struct_errors_are_nested(self):
        result = (
            ValidationContext()
            .add_struct_option("child", Item(""), SpecVersion.V1_5)
            .build()
        )
        assert list(result.errors) == struct(
            "child", field("name", "Value must not be empty")
        )

    def test_custom_result_is_folded_under_name(self):
        custom = ValidationResult.failed_with(ValidationError("custom"))
        result = ValidationContext().add_custom("extra", custom).build()
        assert list(result.errors) == field("extra", "custom")


class TestAddList:
    def test_each_failing_element_is_indexed(self):
        result = (
            ValidationContext()
            .add_list("items", [Item(""), Item("ok"), Item("")], validate_item)
            .build()
        )
        assert list(result.errors) == list_errors(
            "items",
            {
                0: field("name", "Value must not be empty"),
                2: field("name", "Value must not be empty"),
            },
        )

    def test_plain_list_accepts_duplicates(self):
        assert validate_list([Item("a"), Item("a")], validate_item) == PASSED

    def test_list_option_skips_none(self):
        result = ValidationContext().add_list_option("items", None, validate_item).build()
        assert result == PASSED


class TestUniqueList:
    def test_later_duplicate_is_flagged_not_first(self):
        result = validate_unique_list(
            [Item("a"), Item("b"), Item("a")], validate_item
        )
        assert result.errors == (
            ValidationError("Item is a duplicate of the item at index 0", (2,)),
        )

    def test_every_repeat_is_flagged(self):
        result = validate_unique_list(
            [Item("a"), Item("a"), Item("a")], validate_item
        )
        assert [e.path for e in result.errors] == [(1,), (2,)]
        assert all("index 0" in e.message for e in result.errors)

    def test_duplicate_and_invalid_element_reports_both(self):
        result = (
            ValidationContext()
            .add_unique_list("items", [Item(""), Item("")], validate_item)
            .build()
        )
        assert list(result.errors) == [
            ValidationError("Value must not be empty", ("items", 0, "name")),
            ValidationError("Item is a duplicate of the item at index 0", ("items", 1)),
            ValidationError("Value must not be empty", ("items", 1, "name")),
        ]

    def test_unique_list_option_skips_none(self):
        result = (
            ValidationContext()
            .add_unique_list_option("items", None, validate_item)
            .build()
        )
        assert result == PASSED

    def test_accepts_any_iterable(self):
        result = validate_unique_list(iter([Item("a"), Item("a")]), validate_item)
        assert [e.path for e in result.errors] == [(1,)]


class TestBuild:
    def test_errors_follow_declaration_order(self):
        container = Container(items=[Item("x"), Item("x")], child=Item(""))
        result = container.validate_version(SpecVersion.V1_5)
        assert [e.path for e in result.errors] == [
            ("child", "name"),
            ("items", 1),
        ]

    def test_validation_is_idempotent(self):
        container = Container(items=[Item(""), Item("")], child=Item(""))
        first = container.validate_version(SpecVersion.V1_5)
        second = container.validate_version(SpecVersion.V1_5)
        assert first == second
        assert container.items == [Item(""), Item("")]
