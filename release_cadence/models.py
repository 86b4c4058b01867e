"""Data models for release events and their durations."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from enum import Enum

from .config import SECONDS_PER_DAY
from .version import Version


class Phase(Enum):
    BETA = "beta"
    RELEASE_CANDIDATE = "rc"
    GENERAL_AVAILABILITY = "ga"

    @classmethod
    def from_marker(cls, marker: str) -> 'Phase':
        """Map a tag's phase marker ("beta", "rc", "." or "") to a Phase."""
        try:
            return _MARKERS[marker]
        except KeyError:
            raise ValueError(f"Unknown phase marker: {marker!r}") from None

    @property
    def marker(self) -> str:
        """Marker written between version and number in a tag."""
        if self is Phase.GENERAL_AVAILABILITY:
            return "."
        return self.value

    @property
    def label(self) -> str:
        """Suffix used after the version in report row labels."""
        if self is Phase.GENERAL_AVAILABILITY:
            return ""
        return self.value

    @property
    def order(self) -> int:
        return _ORDER[self]


_MARKERS = {
    "beta": Phase.BETA,
    "rc": Phase.RELEASE_CANDIDATE,
    ".": Phase.GENERAL_AVAILABILITY,
    "": Phase.GENERAL_AVAILABILITY,
}

_ORDER = {
    Phase.BETA: 0,
    Phase.RELEASE_CANDIDATE: 1,
    Phase.GENERAL_AVAILABILITY: 2,
}


@dataclass(frozen=True)
class ReleaseEvent:
    """A single tagged release: go1.7rc2 at its tag date."""

    version: Version
    phase: Phase
    sequence: int
    timestamp: datetime

    def tag(self, prefix: str = "go") -> str:
        """Rebuild the canonical tag name, e.g. 'go1.7', 'go1.7.2', 'go1.7beta1'."""
        base = f"{prefix}{self.version}"
        if self.phase is Phase.GENERAL_AVAILABILITY:
            if self.sequence == 0:
                return base
            return f"{base}.{self.sequence}"
        return f"{base}{self.phase.marker}{self.sequence}"

    @property
    def name(self) -> str:
        """Tag without prefix, e.g. '1.7rc2'."""
        return self.tag(prefix="")


@dataclass
class ReleaseRecord:
    """A release event plus how long it stayed current."""

    event: ReleaseEvent
    duration: Optional[timedelta] = field(default=None)

    @property
    def sequence(self) -> int:
        return self.event.sequence

    @property
    def timestamp(self) -> datetime:
        return self.event.timestamp

    @property
    def is_closed(self) -> bool:
        """A zero span counts as still open, so it is closed again at now."""
        return bool(self.duration)

    def close(self, at: datetime) -> Optional[timedelta]:
        """Set the duration to end at the given time; returns the replaced value."""
        previous = self.duration
        self.duration = at - self.timestamp
        return previous

    @property
    def days(self) -> int:
        """Whole days current, truncated toward zero. Unset durations count as 0."""
        if self.duration is None:
            return 0
        days = abs(self.duration) // timedelta(seconds=SECONDS_PER_DAY)
        return days if self.duration >= timedelta(0) else -days
