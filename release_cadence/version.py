"""Version parsing and derivation utilities."""

from dataclasses import dataclass
from typing import Optional
import re

from .errors import InvalidVersionError


@dataclass(frozen=True, order=True)
class Version:
    """A major.minor release line, such as 1.8."""

    major: int
    minor: int

    VERSION_PATTERN = re.compile(r'^(\d+)\.(\d+)$')

    def __post_init__(self):
        for name in ("major", "minor"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionError(
                    f"Invalid {name} component {value!r}: expected a non-negative integer"
                )

    @classmethod
    def parse(cls, version_str: str) -> 'Version':
        """Parse version string like '1.7' or '1.10'."""
        match = cls.VERSION_PATTERN.match(version_str.strip())
        if not match:
            raise InvalidVersionError(f"Invalid version format: {version_str!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    def next_version(self) -> 'Version':
        """The following minor version, whether or not it was ever released."""
        return Version(self.major, self.minor + 1)

    def previous_version(self) -> Optional['Version']:
        """The preceding minor version, or None for a .0 minor."""
        if self.minor == 0:
            return None
        return Version(self.major, self.minor - 1)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"
