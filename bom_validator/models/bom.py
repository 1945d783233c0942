"""The document root."""

import re
from dataclasses import dataclass
from uuid import UUID, uuid4

from bom_validator.models.component import Components
from bom_validator.models.formulation import Formula
from bom_validator.models.service import Services
from bom_validator.spec_version import SpecVersion
from bom_validator.validation.context import ValidationContext
from bom_validator.validation.results import ValidationResult
from bom_validator.validation.validate import Validate
from bom_validator.validation.validators import pattern_validator

SERIAL_NUMBER_PATTERN = re.compile(
    r"urn:uuid:[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


@dataclass(frozen=True)
class UrnUuid:
    """Serial number of a document, ``urn:uuid:`` followed by a UUID."""

    value: str

    @classmethod
    def generate(cls) -> "UrnUuid":
        return cls.from_uuid(uuid4())

    @classmethod
    def from_uuid(cls, uuid: UUID) -> "UrnUuid":
        return cls(f"urn:uuid:{uuid}")

    def __str__(self) -> str:
        return self.value


validate_serial_number = pattern_validator(
    SERIAL_NUMBER_PATTERN, "SerialNumber does not match RFC 4122 UUID format"
)


@dataclass
class Bom(Validate):
    """A bill-of-materials document.

    ``version`` is the document's own revision counter, not the schema
    version, which is chosen by the caller.
    """

    version: int = 1
    serial_number: UrnUuid | None = None
    components: Components | None = None
    services: Services | None = None
    formulation: list[Formula] | None = None

    def validate(self, version: SpecVersion) -> ValidationResult:
        return (
            ValidationContext()
            .add_field_option("serial_number", self.serial_number, validate_serial_number)
            .add_struct_option("components", self.components, version)
            .add_struct_option("services", self.services, version)
            .add_unique_list_option(
                "formulation",
                self.formulation,
                lambda formula: formula.validate_version(version),
            )
            .build()
        )
