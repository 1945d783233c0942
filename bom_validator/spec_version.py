"""Supported generations of the bill-of-materials schema."""

from enum import Enum


class UnsupportedSpecVersionError(ValueError):
    """Raised when a version string names no supported schema generation."""


class SpecVersion(str, Enum):
    """Schema generation a document is validated against.

    Members are ordered by release, so ``version >= SpecVersion.V1_5``
    reads as "from 1.5 onwards".
    """

    V1_3 = "1.3"
    V1_4 = "1.4"
    V1_5 = "1.5"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "SpecVersion":
        """Parse a dotted version string such as ``1.5``.

        Raises:
            UnsupportedSpecVersionError: If the version is not supported
        """
        try:
            return cls(value.strip())
        except ValueError:
            supported = ", ".join(v.value for v in cls)
            raise UnsupportedSpecVersionError(
                f"Unsupported spec version '{value}'. Supported versions: {supported}"
            ) from None

    @classmethod
    def latest(cls) -> "SpecVersion":
        return list(cls)[-1]

    def _position(self) -> int:
        return list(SpecVersion).index(self)

    def __lt__(self, other):
        if not isinstance(other, SpecVersion):
            return NotImplemented
        return self._position() < other._position()

    def __le__(self, other):
        if not isinstance(other, SpecVersion):
            return NotImplemented
        return self._position() <= other._position()

    def __gt__(self, other):
        if not isinstance(other, SpecVersion):
            return NotImplemented
        return self._position() > other._position()

    def __ge__(self, other):
        if not isinstance(other, SpecVersion):
            return NotImplemented
        return self._position() >= other._position()
