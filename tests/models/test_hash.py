"""Tests for hashes and the hash algorithm enumeration."""

import pytest

from bom_validator.models.hash import (
    Hash,
    HashAlgorithm,
    Hashes,
    HashValue,
    UnknownHashAlgorithm,
    validate_hash_algorithm,
    validate_hash_value,
)
from bom_validator.spec_version import SpecVersion
from bom_validator.validation.results import (
    PASSED,
    ValidationError,
    field,
    list_errors,
)


class TestHashAlgorithm:
    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_known_names_round_trip(self, algorithm):
        parsed = HashAlgorithm.new_unchecked(str(algorithm))
        assert parsed is algorithm
        assert str(parsed) == algorithm.value

    def test_sha1_display_name(self):
        assert HashAlgorithm.new_unchecked("SHA-1") is HashAlgorithm.SHA1
        assert str(HashAlgorithm.SHA1) == "SHA-1"

    @pytest.mark.parametrize("text", ["unknown algorithm", "sha-1", "", "SHA-1 "])
    def test_unknown_names_are_preserved(self, text):
        parsed = HashAlgorithm.new_unchecked(text)
        assert parsed == UnknownHashAlgorithm(text)
        assert str(parsed) == text

    def test_validate_hash_algorithm(self):
        assert validate_hash_algorithm(HashAlgorithm.BLAKE3) is None
        assert validate_hash_algorithm(UnknownHashAlgorithm("x")) == ValidationError(
            "Unknown HashAlgorithm"
        )


class TestValidateHashValue:
    @pytest.mark.parametrize("length", [32, 40, 64, 96, 128])
    def test_digest_lengths_pass(self, length):
        assert validate_hash_value(HashValue("aB" * (length // 2))) is None

    @pytest.mark.parametrize(
        "text",
        [
            "not a hash",
            "a" * 31,
            "a" * 33,
            "a" * 129,
            "g" * 32,
            "a3bf1f3d584747e2569483783ddee45b trailing",
        ],
    )
    def test_invalid_values_fail(self, text):
        assert validate_hash_value(HashValue(text)) == ValidationError(
            "HashValue does not match regular expression"
        )


class TestHashes:
    def test_valid_hashes_pass(self):
        hashes = Hashes(
            [Hash(HashAlgorithm.MD5, HashValue("a3bf1f3d584747e2569483783ddee45b"))]
        )
        for version in SpecVersion:
            assert hashes.validate_version(version) == PASSED

    def test_invalid_hash_reports_both_fields(self):
        hashes = Hashes(
            [
                Hash(
                    UnknownHashAlgorithm("unknown algorithm"),
                    HashValue("not a hash"),
                )
            ]
        )

        result = hashes.validate_version(SpecVersion.V1_3)

        assert list(result.errors) == list_errors(
            None,
            {
                0: field("alg", "Unknown HashAlgorithm")
                + field("content", "HashValue does not match regular expression")
            },
        )

    def test_repeated_hashes_are_allowed(self):
        digest = Hash(HashAlgorithm.MD5, HashValue("a3bf1f3d584747e2569483783ddee45b"))
        assert Hashes([digest, digest]).validate_version(SpecVersion.V1_5) == PASSED

    def test_empty_hashes_pass(self):
        assert Hashes().validate_version(SpecVersion.V1_5) == PASSED
