"""Content hashes of components and files."""

import re
from dataclasses import dataclass, field
from enum import Enum

from bom_validator.open_enum import UnknownValue, parse_open_enum
from bom_validator.spec_version import SpecVersion
from bom_validator.validation.context import ValidationContext, validate_list
from bom_validator.validation.results import ValidationError, ValidationResult
from bom_validator.validation.validate import Validate
from bom_validator.validation.validators import pattern_validator, validate_known

# Digest lengths of MD5, SHA-1, SHA-256, SHA-384 and SHA-512 sized algorithms
HASH_VALUE_PATTERN = re.compile(
    r"[a-fA-F0-9]{32}|[a-fA-F0-9]{40}|[a-fA-F0-9]{64}|[a-fA-F0-9]{96}|[a-fA-F0-9]{128}"
)


@dataclass(frozen=True)
class UnknownHashAlgorithm(UnknownValue):
    """Hash algorithm name not known to this library, kept verbatim."""


class HashAlgorithm(str, Enum):
    """Algorithm used to create a hash."""

    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"
    SHA3_256 = "SHA3-256"
    SHA3_384 = "SHA3-384"
    SHA3_512 = "SHA3-512"
    BLAKE2B_256 = "BLAKE2b-256"
    BLAKE2B_384 = "BLAKE2b-384"
    BLAKE2B_512 = "BLAKE2b-512"
    BLAKE3 = "BLAKE3"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def new_unchecked(cls, value: str) -> "HashAlgorithm | UnknownHashAlgorithm":
        """Parse an algorithm name; unrecognised names become UnknownHashAlgorithm."""
        return parse_open_enum(cls, UnknownHashAlgorithm, value)


@dataclass(frozen=True)
class HashValue:
    """Hex digest as found in the document.

    Any string is accepted here; ``validate_hash_value`` decides validity.
    """

    value: str

    def __str__(self) -> str:
        return self.value


def validate_hash_algorithm(
    algorithm: HashAlgorithm | UnknownHashAlgorithm,
) -> ValidationError | None:
    return validate_known(algorithm, "Unknown HashAlgorithm")


validate_hash_value = pattern_validator(
    HASH_VALUE_PATTERN, "HashValue does not match regular expression"
)


@dataclass(frozen=True)
class Hash(Validate):
    """Algorithm tag plus digest value."""

    alg: HashAlgorithm | UnknownHashAlgorithm
    content: HashValue

    def validate(self, version: SpecVersion) -> ValidationResult:
        return (
            ValidationContext()
            .add_field("alg", self.alg, validate_hash_algorithm)
            .add_field("content", self.content, validate_hash_value)
            .build()
        )


@dataclass
class Hashes(Validate):
    """Ordered list of hashes.

    The schema does not mark this list as unique, so repeated hashes are
    accepted.
    """

    items: list[Hash] = field(default_factory=list)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def validate(self, version: SpecVersion) -> ValidationResult:
        return validate_list(self.items, lambda h: h.validate_version(version))
