"""Validation service for checking whole documents.

This module provides the entry point used by the parsing and serialization
layers: validate a root entity against a schema version, log the outcome,
and report or reject failed documents.
"""

from bom_validator.config import get_settings
from bom_validator.spec_version import SpecVersion
from bom_validator.utils.logging import get_logger
from bom_validator.validation.results import ValidationResult
from bom_validator.validation.validate import Validate

logger = get_logger(__name__)


class DocumentValidationError(ValueError):
    """Raised when a document is rejected because validation failed."""

    def __init__(self, result: ValidationResult, version: SpecVersion):
        self.result = result
        self.version = version
        super().__init__(
            f"Document is not valid for version {version}: "
            f"{len(result.errors)} error(s)"
        )


class ValidationService:
    """Runs entity validation for a schema version and reports the outcome.

    When no version is given the configured default is used, see
    ``ValidationSettings.spec_version``.
    """

    def __init__(self, spec_version: SpecVersion | None = None):
        """Initialize service.

        Args:
            spec_version: Version used when a call does not name one
        """
        self.spec_version = spec_version or get_settings().validation.spec_version

    def validate(
        self, entity: Validate, version: SpecVersion | None = None
    ) -> ValidationResult:
        """Validate an entity and its whole subtree.

        Args:
            entity: Root entity to validate
            version: Schema version, the service default when None

        Returns:
            ValidationResult listing every violation found
        """
        version = version or self.spec_version
        result = entity.validate_version(version)

        if result.success:
            logger.debug(
                "Validation passed",
                entity=type(entity).__name__,
                spec_version=str(version),
            )
        else:
            logger.warning(
                "Validation failed",
                entity=type(entity).__name__,
                spec_version=str(version),
                error_count=len(result.errors),
            )
        return result

    def has_errors(self, result: ValidationResult) -> bool:
        """Check if validation failed."""
        return result.failed

    def format_error_report(self, result: ValidationResult) -> str:
        """Format errors for the caller, capped at the configured maximum.

        Returns:
            Formatted error report string, empty when validation passed
        """
        return result.format_error(get_settings().validation.max_reported_errors)

    def ensure_valid(
        self, entity: Validate, version: SpecVersion | None = None
    ) -> ValidationResult:
        """Validate an entity and reject it when any violation is found.

        Raises:
            DocumentValidationError: If validation failed
        """
        version = version or self.spec_version
        result = self.validate(entity, version)
        if result.failed:
            raise DocumentValidationError(result, version)
        return result
