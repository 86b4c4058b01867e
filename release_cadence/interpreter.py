"""Interpret tag listing lines as release events."""

from datetime import datetime
from typing import Iterator, Optional
import re
import logging

from .config import DEFAULT_SCHEME, TagScheme
from .errors import MalformedSequenceError, MalformedTimestampError
from .models import Phase, ReleaseEvent
from .version import Version

logger = logging.getLogger(__name__)


class TagInterpreter:
    """Turns lines like 'refs/tags/go1.7rc1<TAB>Thu Jul 7 16:41:29 2016 -0700'
    into ReleaseEvents.

    Tags look like <prefix><major>.<minor>, optionally followed by a phase
    marker ("beta", "rc" or ".") and a release number:

        go1.8  go1.8beta1  go1.9rc2  go1.8.1

    Lines carrying any other tag are skipped.
    """

    def __init__(self, scheme: TagScheme = DEFAULT_SCHEME):
        self.scheme = scheme
        self.pattern = re.compile(
            re.escape(scheme.prefix)
            + r'([0-9]+\.[0-9]+)(\.|rc|beta|)([0-9+]*)'
            + re.escape(scheme.delimiter)
            + r'(.*)$'
        )

    def interpret(self, text: str) -> Iterator[ReleaseEvent]:
        """Yield an event for every matching line, in input order."""
        for line in text.splitlines():
            event = self.interpret_line(line)
            if event is not None:
                yield event

    def interpret_line(self, line: str) -> Optional[ReleaseEvent]:
        """Interpret one line. Returns None when the line carries an unrelated tag."""
        match = self.pattern.search(line.rstrip("\r\n"))
        if not match:
            if line.strip():
                logger.debug(f"Skipping unrecognized line: {line!r}")
            return None

        tag = match.group(0).split(self.scheme.delimiter, 1)[0]
        version = Version.parse(match.group(1))
        phase = Phase.from_marker(match.group(2))
        sequence = self._parse_sequence(match.group(3), tag)
        timestamp = self._parse_timestamp(match.group(4).strip(), tag)

        return ReleaseEvent(
            version=version,
            phase=phase,
            sequence=sequence,
            timestamp=timestamp,
        )

    @staticmethod
    def _parse_sequence(raw: str, tag: str) -> int:
        if raw == "":
            return 0
        if not raw.isdigit():
            raise MalformedSequenceError(tag, f"invalid unsigned integer {raw!r}")
        return int(raw)

    def _parse_timestamp(self, raw: str, tag: str) -> datetime:
        try:
            return datetime.strptime(raw, self.scheme.timestamp_format)
        except ValueError as e:
            raise MalformedTimestampError(tag, str(e)) from e


def interpret_tags(text: str, scheme: TagScheme = DEFAULT_SCHEME) -> Iterator[ReleaseEvent]:
    """Yield the release events found in a tag listing."""
    return TagInterpreter(scheme).interpret(text)
