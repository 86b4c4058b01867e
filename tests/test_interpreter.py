"""Tests for turning tag listing lines into release events."""

from datetime import datetime, timedelta, timezone

import pytest

from release_cadence.config import DEFAULT_SCHEME
from release_cadence.errors import (
    MalformedSequenceError,
    MalformedTimestampError,
    TagParseError,
)
from release_cadence.interpreter import TagInterpreter, interpret_tags
from release_cadence.models import Phase
from release_cadence.version import Version


@pytest.fixture
def interpreter():
    return TagInterpreter()


class TestInterpretLine:

    def test_beta(self, interpreter):
        event = interpreter.interpret_line("refs/tags/go1.7beta1\tThu Jun 2 10:00:23 2016 +1000")
        assert event.version == Version(1, 7)
        assert event.phase is Phase.BETA
        assert event.sequence == 1
        assert event.timestamp == datetime(2016, 6, 2, 10, 0, 23, tzinfo=timezone(timedelta(hours=10)))

    def test_rc(self, interpreter):
        event = interpreter.interpret_line("go1.9rc2\tMon Jul 18 08:19:17 2016 -0700")
        assert (event.version, event.phase, event.sequence) == (Version(1, 9), Phase.RELEASE_CANDIDATE, 2)

    def test_initial_ga_has_sequence_zero(self, interpreter):
        event = interpreter.interpret_line("refs/tags/go1.7\tMon Aug 15 14:09:32 2016 -0700")
        assert event.phase is Phase.GENERAL_AVAILABILITY
        assert event.sequence == 0

    def test_ga_patch(self, interpreter):
        event = interpreter.interpret_line("refs/tags/go1.7.3\tTue Oct 18 17:02:28 2016 -0700")
        assert (event.version, event.phase, event.sequence) == (Version(1, 7), Phase.GENERAL_AVAILABILITY, 3)

    def test_two_digit_minor_and_sequence(self, interpreter):
        event = interpreter.interpret_line("go1.10.12\tWed Sep 7 12:11:12 2016 -0700")
        assert event.version == Version(1, 10)
        assert event.sequence == 12

    def test_explicit_dot_zero(self, interpreter):
        event = interpreter.interpret_line("go1.21.0\tTue Aug 8 13:58:43 2023 -0400")
        assert (event.version, event.phase, event.sequence) == (Version(1, 21), Phase.GENERAL_AVAILABILITY, 0)

    def test_space_padded_day(self, interpreter):
        event = interpreter.interpret_line("go1.7rc1\tThu Jul  7 16:41:29 2016 -0700")
        assert event.timestamp.day == 7

    def test_trailing_carriage_return(self, interpreter):
        event = interpreter.interpret_line("go1.7rc1\tThu Jul 7 16:41:29 2016 -0700\r")
        assert event.timestamp.utcoffset() == timedelta(hours=-7)

    @pytest.mark.parametrize("line", [
        "refs/tags/weekly.2011-12-22\tThu Dec 22 10:00:00 2011 +1100",
        "refs/tags/release.r60\tMon Sep 5 10:00:00 2011 +1000",
        "refs/tags/go1\tWed Mar 28 12:00:00 2012 +1100",
        "refs/tags/go1.9.2rc2\tMon Oct 2 10:00:00 2017 -0400",
        "refs/tags/go1.7beta1 Thu Jun 2 10:00:23 2016 +1000",
        "",
    ])
    def test_unrelated_lines_are_skipped(self, interpreter, line):
        assert interpreter.interpret_line(line) is None

    def test_bad_date(self, interpreter):
        with pytest.raises(MalformedTimestampError) as exc_info:
            interpreter.interpret_line("refs/tags/go1.7rc1\t2016-07-07 16:41:29")
        assert exc_info.value.tag == "go1.7rc1"
        assert "could not parse date in: go1.7rc1" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_bad_release_number(self, interpreter):
        with pytest.raises(MalformedSequenceError) as exc_info:
            interpreter.interpret_line("refs/tags/go1.7rc1+\tThu Jul 7 16:41:29 2016 -0700")
        assert exc_info.value.tag == "go1.7rc1+"
        assert "could not parse release number" in str(exc_info.value)


class TestInterpret:

    def test_sample_in_input_order(self, sample_tags):
        events = list(interpret_tags(sample_tags))
        assert [e.name for e in events] == [
            "1.7beta1", "1.7beta2", "1.7rc1", "1.7rc2", "1.7", "1.7.1", "1.7.2", "1.7.3",
        ]

    def test_is_lazy(self):
        text = "go1.7rc1\tThu Jul 7 16:41:29 2016 -0700\ngo1.7rc2\tnot a date\n"
        events = interpret_tags(text)
        assert next(events).sequence == 1
        with pytest.raises(TagParseError):
            next(events)

    def test_last_line_without_newline(self):
        events = list(interpret_tags("go1.7rc1\tThu Jul 7 16:41:29 2016 -0700"))
        assert len(events) == 1

    def test_mixed_with_unrelated_tags(self):
        text = (
            "refs/tags/weekly.2011-12-22\tThu Dec 22 10:00:00 2011 +1100\n"
            "refs/tags/go1.7beta1\tThu Jun 2 10:00:23 2016 +1000\n"
            "refs/tags/v0.1.0\tThu Jun 2 10:00:23 2016 +1000\n"
        )
        assert [e.name for e in interpret_tags(text)] == ["1.7beta1"]

    def test_custom_prefix_and_delimiter(self):
        scheme = DEFAULT_SCHEME.with_overrides(prefix="v", delimiter=",")
        text = "refs/tags/v2.3rc1,Thu Jul 7 16:41:29 2016 -0700\n"
        (event,) = interpret_tags(text, scheme)
        assert (event.version, event.phase, event.sequence) == (Version(2, 3), Phase.RELEASE_CANDIDATE, 1)

    def test_prefix_is_literal(self):
        scheme = DEFAULT_SCHEME.with_overrides(prefix="a.b")
        assert list(interpret_tags("axb1.2\tThu Jul 7 16:41:29 2016 -0700\n", scheme)) == []


class TestTagRoundTrip:

    @pytest.mark.parametrize("tag", [
        "go1.7beta1", "go1.7beta12", "go1.10rc2", "go1.7", "go1.7.1", "go1.21.10",
    ])
    def test_tag_round_trips(self, interpreter, tag):
        event = interpreter.interpret_line(f"{tag}\tThu Jul 7 16:41:29 2016 -0700")
        assert event.tag() == tag

        again = interpreter.interpret_line(f"{event.tag()}\tThu Jul 7 16:41:29 2016 -0700")
        assert (again.version, again.phase, again.sequence) == (event.version, event.phase, event.sequence)

    def test_dot_zero_normalizes(self, interpreter):
        event = interpreter.interpret_line("go1.21.0\tTue Aug 8 13:58:43 2023 -0400")
        assert event.tag() == "go1.21"
        again = interpreter.interpret_line(f"{event.tag()}\tTue Aug 8 13:58:43 2023 -0400")
        assert (again.version, again.phase, again.sequence) == (event.version, event.phase, event.sequence)
