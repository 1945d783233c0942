"""Validation framework for bill-of-materials documents.

Entities implement the Validate capability and compose their rules with
ValidationContext. Results are values listing every violation with its
location in the document.
"""

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
from bom_validator.validation.service import DocumentValidationError, ValidationService
from bom_validator.validation.validate import Validate

__all__ = [
    "PASSED",
    "DocumentValidationError",
    "Validate",
    "ValidationContext",
    "ValidationError",
    "ValidationResult",
    "ValidationService",
    "field",
    "list_errors",
    "struct",
    "validate_list",
    "validate_unique_list",
]
