"""Tests for the Validate capability base class."""

import pytest

from bom_validator.spec_version import SpecVersion
from bom_validator.validation.results import PASSED, ValidationError, ValidationResult
from bom_validator.validation.validate import Validate


class VersionIndependent(Validate):
    def validate(self, version):
        return PASSED


class VersionDependent(Validate):
    def validate_version(self, version):
        if version < SpecVersion.V1_5:
            return ValidationResult.failed_with(ValidationError("too old"))
        return PASSED


class Incomplete(Validate):
    pass


class TestValidate:
    def test_validate_version_delegates_to_validate(self):
        assert VersionIndependent().validate_version(SpecVersion.V1_3) == PASSED

    def test_validate_delegates_to_validate_version(self):
        assert VersionDependent().validate(SpecVersion.V1_3).failed
        assert VersionDependent().validate(SpecVersion.V1_5) == PASSED

    def test_missing_implementation_raises(self):
        with pytest.raises(NotImplementedError, match="Incomplete"):
            Incomplete().validate_version(SpecVersion.V1_5)

    def test_incomplete_subclass_can_be_defined_and_instantiated(self):
        class AlsoIncomplete(Validate):
            pass

        entity = AlsoIncomplete()
        with pytest.raises(NotImplementedError):
            entity.validate(SpecVersion.V1_3)
