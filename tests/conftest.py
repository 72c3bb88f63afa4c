"""
conftest.py
-----------
Shared pytest fixtures for reminder tests.

Provides fixtures for:
- Temporary directories and data file paths
- A fixed clock so time-dependent behaviour is deterministic
- Managers and a seeded ReminderData aggregate
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from reminder.database import ReminderData
from reminder.database.managers import NoteStore, TagRegistry
from reminder.utils.temporal import FixedClock, timestamp_for_date


# ----- Time Fixtures -----

@pytest.fixture
def fixed_now():
    """Reference instant: 2024-03-08 00:00:00 UTC."""
    return timestamp_for_date(2024, 3, 8)


@pytest.fixture
def fixed_clock(fixed_now):
    """Clock frozen at fixed_now; tests may move it with set/advance."""
    return FixedClock(fixed_now)


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def data_file(tmp_dir):
    """Path of a (not yet created) data file."""
    return tmp_dir / "data.json"


# ----- Manager Fixtures -----

@pytest.fixture
def tag_registry(fixed_clock):
    """Empty tag registry."""
    return TagRegistry(clock=fixed_clock)


@pytest.fixture
def seeded_registry(tag_registry):
    """Tag registry holding the basic tags."""
    tag_registry.seed_basic_tags()
    return tag_registry


@pytest.fixture
def note_store(fixed_clock):
    """Empty note store."""
    return NoteStore(clock=fixed_clock)


@pytest.fixture
def reminder_data(data_file, fixed_clock):
    """Freshly bootstrapped aggregate with the basic tags."""
    return ReminderData.ensure_data_file(data_file, clock=fixed_clock)
