"""Release ledger: per-version, per-phase release history and durations."""

from datetime import datetime
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import logging

from .config import DEFAULT_SCHEME, TagScheme
from .errors import OutOfOrderError
from .interpreter import TagInterpreter
from .models import Phase, ReleaseEvent, ReleaseRecord
from .report import render_csv
from .version import Version

logger = logging.getLogger(__name__)

GA = Phase.GENERAL_AVAILABILITY


class ReleaseLedger:
    """Releases for all versions and all phases.

    Records are stored as version -> phase -> list, each list in arrival
    order. Input is expected in chronological order, so each list is also
    ordered by release number. Intermediate levels are created on insert;
    lookups never create them.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._releases: Dict[Version, Dict[Phase, List[ReleaseRecord]]] = {}

    def __len__(self) -> int:
        return sum(len(records) for _, _, records in self.buckets())

    def __contains__(self, version: Version) -> bool:
        return version in self._releases

    # ---- insertion ---------------------------------------------------

    def insert(
        self,
        version: Version,
        phase: Phase,
        sequence: int,
        timestamp: datetime,
    ) -> Optional[ReleaseRecord]:
        """Record a release. Returns the new record, or None if it was dropped."""
        phases = self._releases.setdefault(version, {})
        event = ReleaseEvent(version, phase, sequence, timestamp)

        if phase is GA and self.get(version.next_version(), GA):
            # Once the next minor is out, later patches to this one (usually
            # small security fixes) are ignored: the next minor's .0 marks
            # the end of this line.
            logger.debug(f"Ignoring {event.name}: {version.next_version()} is already released")
            return None

        record = ReleaseRecord(event)
        bucket = phases.setdefault(phase, [])
        if bucket:
            self._check_order(bucket[-1], record)
        bucket.append(record)
        return record

    def add(self, event: ReleaseEvent) -> Optional[ReleaseRecord]:
        return self.insert(event.version, event.phase, event.sequence, event.timestamp)

    def _check_order(self, last: ReleaseRecord, record: ReleaseRecord):
        problem = None
        if record.sequence <= last.sequence:
            problem = f"release number {record.sequence} does not follow {last.sequence}"
        elif record.timestamp < last.timestamp:
            problem = f"dated {record.timestamp} before {last.timestamp}"
        if problem is None:
            return

        message = f"{record.event.name} out of order: {problem}"
        if self.strict:
            raise OutOfOrderError(message)
        logger.warning(message)

    # ---- lookup ------------------------------------------------------

    def get(self, version: Optional[Version], phase: Phase) -> Sequence[ReleaseRecord]:
        """Records for a version and phase, or an empty tuple."""
        if version is None:
            return ()
        return self._releases.get(version, {}).get(phase, ())

    def last(self, version: Optional[Version], phase: Phase) -> Optional[ReleaseRecord]:
        """Latest record for a version and phase, if any."""
        records = self.get(version, phase)
        return records[-1] if records else None

    def versions(self) -> List[Version]:
        return sorted(self._releases)

    def phases(self, version: Version) -> List[Phase]:
        return sorted(self._releases.get(version, {}), key=lambda p: p.order)

    def buckets(self) -> Iterator[Tuple[Version, Phase, List[ReleaseRecord]]]:
        """Yield (version, phase, records) by version, then beta, rc, GA."""
        for version in self.versions():
            for phase in self.phases(version):
                yield version, phase, self._releases[version][phase]

    def records(self) -> Iterator[ReleaseRecord]:
        for _, _, records in self.buckets():
            yield from records

    # ---- durations ---------------------------------------------------

    def assign_durations(self, now: datetime):
        """Set how long each release was current.

        A release stays current until the next release of its kind: beta2
        closes beta1, rc1 closes the last beta, the .0 release closes the
        last rc and the previous minor's last GA release, and .2 closes .1.
        Whatever is still open afterwards (the current beta, rc or GA) is
        closed at now.
        """
        if now.tzinfo is None:
            raise ValueError("now must be timezone-aware")

        for version, phase, records in self.buckets():
            for i, record in enumerate(records):
                if i > 0:
                    # beta2, rc2, .2 etc.
                    self._close(records[i - 1], record.timestamp)
                elif phase is Phase.RELEASE_CANDIDATE:
                    self._close(self.last(version, Phase.BETA), record.timestamp)
                elif phase is GA:
                    self._close(self.last(version, Phase.RELEASE_CANDIDATE), record.timestamp)
                    self._close(self.last(version.previous_version(), GA), record.timestamp)
                # beta1 starts a new version and closes nothing.

        still_current = 0
        for record in self.records():
            if not record.is_closed:
                record.close(now)
                still_current += 1

        logger.info(f"Assigned durations to {len(self)} releases ({still_current} still current)")

    @staticmethod
    def _close(record: Optional[ReleaseRecord], at: datetime):
        if record is None:
            return
        previous = record.close(at)
        if previous is not None and previous != record.duration:
            logger.warning(
                f"Duration of {record.event.name} changed from {previous} to "
                f"{record.duration}; input may not be in chronological order"
            )

    # ---- output ------------------------------------------------------

    def render(self, show_ga: bool, show_beta: bool, show_rc: bool) -> str:
        """CSV of days each release was current for the selected phases."""
        return render_csv(self, show_ga=show_ga, show_beta=show_beta, show_rc=show_rc)


def build_ledger(
    text: str,
    scheme: TagScheme = DEFAULT_SCHEME,
    strict: bool = False,
) -> ReleaseLedger:
    """Build a ledger from a chronologically ordered tag listing.

    Each line holds a tag and its date separated by the scheme's delimiter:

        refs/tags/go1.7beta1	Thu Jun 2 10:00:23 2016 +1000
        refs/tags/go1.7beta2	Thu Jun 16 15:41:33 2016 -0400
        refs/tags/go1.7rc1	Thu Jul 7 16:41:29 2016 -0700

    Such a listing can be produced with:

        git tag --format '%(refname)%09%(authordate)' --sort=authordate

    Raises a TagParseError subclass when a matching tag has a bad date or
    release number.
    """
    ledger = ReleaseLedger(strict=strict)
    interpreter = TagInterpreter(scheme)

    dropped = 0
    for event in interpreter.interpret(text):
        if ledger.add(event) is None:
            dropped += 1

    logger.info(
        f"Read {len(ledger)} {scheme.display_name} releases across "
        f"{len(ledger.versions())} versions ({dropped} superseded patch releases ignored)"
    )
    return ledger
