"""Shared fixtures: the go1.7 release train as printed by git tag."""

from datetime import datetime, timezone

import pytest


SAMPLE_TAGS = (
    "refs/tags/go1.7beta1\tThu Jun 2 10:00:23 2016 +1000\n"
    "refs/tags/go1.7beta2\tThu Jun 16 15:41:33 2016 -0400\n"
    "refs/tags/go1.7rc1\tThu Jul 7 16:41:29 2016 -0700\n"
    "refs/tags/go1.7rc2\tMon Jul 18 08:19:17 2016 -0700\n"
    "refs/tags/go1.7\tMon Aug 15 14:09:32 2016 -0700\n"
    "refs/tags/go1.7.1\tWed Sep 7 12:11:12 2016 -0700\n"
    "refs/tags/go1.7.2\tMon Oct 17 13:43:23 2016 -0700\n"
    "refs/tags/go1.7.3\tTue Oct 18 17:02:28 2016 -0700\n"
)

# 12 days and 23h after go1.7.3
SAMPLE_NOW = datetime(2016, 11, 1, tzinfo=timezone.utc)


@pytest.fixture
def sample_tags():
    return SAMPLE_TAGS


@pytest.fixture
def sample_now():
    return SAMPLE_NOW


@pytest.fixture
def t0():
    return datetime(2020, 1, 1, tzinfo=timezone.utc)
