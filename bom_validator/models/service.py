"""Services (APIs, endpoints) a system depends on."""

from dataclasses import dataclass, field

from bom_validator.models.primitives import BomReference, NormalizedString
from bom_validator.models.property import Properties
from bom_validator.spec_version import SpecVersion
from bom_validator.validation.context import ValidationContext, validate_unique_list
from bom_validator.validation.results import ValidationError, ValidationResult
from bom_validator.validation.validate import Validate
from bom_validator.validation.validators import validate_normalized_string


@dataclass
class Service(Validate):
    name: NormalizedString
    bom_ref: BomReference | None = None
    version: NormalizedString | None = None
    description: NormalizedString | None = None
    authenticated: bool | None = None
    # Only defined from 1.5 onwards
    trust_zone: NormalizedString | None = None
    properties: Properties | None = None

    def validate_version(self, version: SpecVersion) -> ValidationResult:
        context = (
            ValidationContext()
            .add_field("name", self.name, validate_normalized_string)
            .add_field_option("version", self.version, validate_normalized_string)
            .add_field_option(
                "description", self.description, validate_normalized_string
            )
        )

        if self.trust_zone is not None:
            if version < SpecVersion.V1_5:
                context.add_custom(
                    "trust_zone",
                    ValidationResult.failed_with(
                        ValidationError(
                            f"trust_zone is not defined for version {version}"
                        )
                    ),
                )
            else:
                context.add_field(
                    "trust_zone", self.trust_zone, validate_normalized_string
                )

        return context.add_struct_option("properties", self.properties, version).build()


@dataclass
class Services(Validate):
    """List of services; the schema requires its items to be unique."""

    items: list[Service] = field(default_factory=list)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def validate(self, version: SpecVersion) -> ValidationResult:
        return validate_unique_list(self.items, lambda s: s.validate_version(version))
