"""The Validate capability implemented by every document entity."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bom_validator.spec_version import SpecVersion
    from bom_validator.validation.results import ValidationResult


class Validate:
    """Base class for document entities that can be validated.

    Entities whose rules depend on the schema version override
    ``validate_version``. Entities with the same rules in every version
    override ``validate`` instead; they still receive the version so it can
    be passed on to their children.

    Validation never mutates the entity and always reports every violation
    of the whole subtree in one call.

    A subclass overriding neither method is accepted when it is defined and
    only raises NotImplementedError when validation is called.
    """

    def validate_version(self, version: "SpecVersion") -> "ValidationResult":
        """Validate this entity against the given schema version."""
        return self.validate(version)

    def validate(self, version: "SpecVersion") -> "ValidationResult":
        """Validate with rules that do not depend on the schema version."""
        if type(self).validate_version is not Validate.validate_version:
            return self.validate_version(version)
        raise NotImplementedError(
            f"{type(self).__name__} must implement validate() or validate_version()"
        )
