"""Configuration for tag schemes and report settings."""

from dataclasses import dataclass, replace
from typing import Dict, Optional


SECONDS_PER_DAY = 86400

# Git's default date format, as printed by %(authordate):
#   Thu Jun 2 10:00:23 2016 +1000
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Y %z"


@dataclass(frozen=True)
class TagScheme:
    """How a product names its release tags and how tag listings are laid out."""

    name: str
    display_name: str
    # Literal text before the major.minor version, e.g. "go" in go1.7rc1
    prefix: str
    # Separator between tag and date on each input line
    delimiter: str = "\t"
    timestamp_format: str = TIMESTAMP_FORMAT

    def with_overrides(
        self,
        prefix: Optional[str] = None,
        delimiter: Optional[str] = None,
    ) -> 'TagScheme':
        """Return a copy with command-line overrides applied."""
        changes = {}
        if prefix is not None:
            changes["prefix"] = prefix
        if delimiter is not None:
            changes["delimiter"] = delimiter
        if not changes:
            return self
        return replace(self, **changes)


TAG_SCHEMES: Dict[str, TagScheme] = {
    "go": TagScheme(
        name="go",
        display_name="Go",
        prefix="go",
    ),
}

DEFAULT_SCHEME = TAG_SCHEMES["go"]
