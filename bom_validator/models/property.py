"""Name-value properties attached to most entities."""

from dataclasses import dataclass, field

from bom_validator.models.primitives import NormalizedString
from bom_validator.spec_version import SpecVersion
from bom_validator.validation.context import ValidationContext, validate_list
from bom_validator.validation.results import ValidationResult
from bom_validator.validation.validate import Validate
from bom_validator.validation.validators import validate_normalized_string


@dataclass(frozen=True)
class Property(Validate):
    name: NormalizedString
    value: NormalizedString

    def validate(self, version: SpecVersion) -> ValidationResult:
        return (
            ValidationContext()
            .add_field("name", self.name, validate_normalized_string)
            .add_field("value", self.value, validate_normalized_string)
            .build()
        )


@dataclass
class Properties(Validate):
    items: list[Property] = field(default_factory=list)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def validate(self, version: SpecVersion) -> ValidationResult:
        return validate_list(self.items, lambda p: p.validate_version(version))
