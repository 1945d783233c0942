"""Validation of bill-of-materials documents against versioned schemas."""

from bom_validator.spec_version import SpecVersion, UnsupportedSpecVersionError

__all__ = ["SpecVersion", "UnsupportedSpecVersionError"]
