"""Shared fixtures for core unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from stanley.core.models import ContentKind, ContentRecord


FIXED_TIME = datetime(2024, 3, 9, 14, 5, 30, tzinfo=timezone(timedelta(hours=1)))


@pytest.fixture(name="note")
def note_fixture():
    return ContentRecord(title="Test Title", kind=ContentKind.note, created_at=FIXED_TIME)


@pytest.fixture(name="post")
def post_fixture():
    return ContentRecord(title="Hello, World! 2024", kind=ContentKind.post, created_at=FIXED_TIME)


@pytest.fixture(name="fixed_time")
def fixed_time_fixture():
    return FIXED_TIME
