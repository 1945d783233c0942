"""Formulas: how the components of a document were manufactured."""

from dataclasses import dataclass

from bom_validator.models.component import Components
from bom_validator.models.formulation.workflow import Workflow
from bom_validator.models.primitives import BomReference
from bom_validator.models.property import Properties
from bom_validator.models.service import Services
from bom_validator.spec_version import SpecVersion
from bom_validator.validation.context import ValidationContext
from bom_validator.validation.results import ValidationError, ValidationResult
from bom_validator.validation.validate import Validate


@dataclass
class Formula(Validate):
    """Components, services and workflows used to build a product.

    Formulas only exist from 1.5 onwards; in earlier versions a formula is
    rejected without looking at its contents.
    """

    bom_ref: BomReference | None = None
    components: Components | None = None
    services: Services | None = None
    workflows: list[Workflow] | None = None
    properties: Properties | None = None

    def validate_version(self, version: SpecVersion) -> ValidationResult:
        match version:
            case SpecVersion.V1_3 | SpecVersion.V1_4:
                return ValidationResult.failed_with(
                    ValidationError(f"Formula is not defined for version {version}")
                )
            case _:
                # components, services and workflows are uniqueItems
                return (
                    ValidationContext()
                    .add_unique_list_option(
                        "components",
                        self.components,
                        lambda component: component.validate_version(version),
                    )
                    .add_unique_list_option(
                        "services",
                        self.services,
                        lambda service: service.validate_version(version),
                    )
                    .add_unique_list_option(
                        "workflows",
                        self.workflows,
                        lambda workflow: workflow.validate_version(version),
                    )
                    .add_struct_option("properties", self.properties, version)
                    .build()
                )
