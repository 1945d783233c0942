"""Software and hardware components listed in a document."""

from dataclasses import dataclass, field
from enum import Enum

from bom_validator.models.hash import Hashes
from bom_validator.models.primitives import BomReference, NormalizedString
from bom_validator.models.property import Properties
from bom_validator.open_enum import UnknownValue, parse_open_enum
from bom_validator.spec_version import SpecVersion
from bom_validator.validation.context import ValidationContext, validate_unique_list
from bom_validator.validation.results import ValidationError, ValidationResult
from bom_validator.validation.validate import Validate
from bom_validator.validation.validators import (
    validate_known,
    validate_normalized_string,
)


@dataclass(frozen=True)
class UnknownClassification(UnknownValue):
    """Component type not known to this library, kept verbatim."""


class Classification(str, Enum):
    """Type of a component."""

    APPLICATION = "application"
    FRAMEWORK = "framework"
    LIBRARY = "library"
    CONTAINER = "container"
    OPERATING_SYSTEM = "operating-system"
    DEVICE = "device"
    FIRMWARE = "firmware"
    FILE = "file"
    PLATFORM = "platform"
    DEVICE_DRIVER = "device-driver"
    MACHINE_LEARNING_MODEL = "machine-learning-model"
    DATA = "data"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def new_unchecked(cls, value: str) -> "Classification | UnknownClassification":
        return parse_open_enum(cls, UnknownClassification, value)

    def introduced_in(self) -> SpecVersion:
        """First schema version that defines this classification."""
        if self in _ADDED_IN_1_5:
            return SpecVersion.V1_5
        return SpecVersion.V1_3


_ADDED_IN_1_5 = frozenset(
    {
        Classification.PLATFORM,
        Classification.DEVICE_DRIVER,
        Classification.MACHINE_LEARNING_MODEL,
        Classification.DATA,
    }
)


def validate_classification(
    classification: Classification | UnknownClassification, version: SpecVersion
) -> ValidationError | None:
    error = validate_known(classification, "Unknown classification")
    if error is not None:
        return error
    if version < classification.introduced_in():
        return ValidationError(
            f"Classification {classification} is not defined for version {version}"
        )
    return None


@dataclass
class Component(Validate):
    component_type: Classification | UnknownClassification
    name: NormalizedString
    bom_ref: BomReference | None = None
    version: NormalizedString | None = None
    description: NormalizedString | None = None
    hashes: Hashes | None = None
    properties: Properties | None = None

    def validate(self, version: SpecVersion) -> ValidationResult:
        return (
            ValidationContext()
            .add_field(
                "component_type",
                self.component_type,
                lambda c: validate_classification(c, version),
            )
            .add_field("name", self.name, validate_normalized_string)
            .add_field_option("version", self.version, validate_normalized_string)
            .add_field_option(
                "description", self.description, validate_normalized_string
            )
            .add_struct_option("hashes", self.hashes, version)
            .add_struct_option("properties", self.properties, version)
            .build()
        )


@dataclass
class Components(Validate):
    """List of components; the schema requires its items to be unique."""

    items: list[Component] = field(default_factory=list)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def validate(self, version: SpecVersion) -> ValidationResult:
        return validate_unique_list(self.items, lambda c: c.validate_version(version))
