"""
Supported PostgreSQL major versions and inclusive version ranges.
"""

import re
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from pgmeta.errors import UnsupportedVersionError

_SERVER_VERSION_RE = re.compile(r"(?:PostgreSQL\s+)?(\d+)(?:\.\d+)*")


class TargetVersion(IntEnum):
    """PostgreSQL major version a shape is resolved for."""

    V14 = 14
    V15 = 15
    V16 = 16
    V17 = 17
    V18 = 18

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, value: Any) -> "TargetVersion":
        """
        Coerce ``value`` into a supported version.

        Accepts a ``TargetVersion``, a major version number, a
        ``server_version_num`` (``160002``), or a version string such as
        ``"16"``, ``"16.2"`` or the output of ``SELECT version()``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise UnsupportedVersionError(value, cls._supported())

        major = None
        if isinstance(value, int):
            major = value // 10000 if value >= 100000 else value
        elif isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.parse(int(text))
            match = _SERVER_VERSION_RE.match(text)
            if match:
                major = int(match.group(1))

        try:
            return cls(major)
        except ValueError:
            raise UnsupportedVersionError(value, cls._supported()) from None

    @classmethod
    def _supported(cls) -> tuple[int, ...]:
        return tuple(v.value for v in cls)


class VersionRange(BaseModel):
    """Inclusive range of versions in which a table or column exists."""

    model_config = ConfigDict(frozen=True)

    since: TargetVersion = TargetVersion.V14
    until: TargetVersion = TargetVersion.V18

    @model_validator(mode="after")
    def _check_bounds(self) -> "VersionRange":
        if self.since > self.until:
            raise ValueError(f"Empty version range: {self.since} > {self.until}")
        return self

    def __contains__(self, version: Any) -> bool:
        try:
            return self.since <= TargetVersion.parse(version) <= self.until
        except UnsupportedVersionError:
            return False

    def __str__(self) -> str:
        if self.since == self.until:
            return str(self.since)
        return f"{self.since}-{self.until}"

    def covers(self, other: "VersionRange") -> bool:
        return self.since <= other.since and other.until <= self.until

    def overlaps(self, other: "VersionRange") -> bool:
        return self.since <= other.until and other.since <= self.until

    def versions(self) -> tuple[TargetVersion, ...]:
        return tuple(v for v in TargetVersion if self.since <= v <= self.until)
