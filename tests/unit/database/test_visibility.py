"""
Tests for the due-date visibility engine.

All checks run against a FixedClock so that "now" is explicit.
"""
import pytest

from reminder.database.managers import NoteStore, TagRegistry
from reminder.database.visibility import DueDateVisibility
from reminder.models import NoteStatus
from reminder.utils.temporal import DAY_SECS, FixedClock, timestamp_for_date


@pytest.fixture
def clock():
    return FixedClock(timestamp_for_date(2024, 3, 8))


@pytest.fixture
def registry(clock):
    registry = TagRegistry(clock=clock)
    registry.seed_basic_tags()
    return registry


@pytest.fixture
def engine(registry, clock):
    return DueDateVisibility(registry, clock=clock)


@pytest.fixture
def store(clock):
    return NoteStore(clock=clock)


def make_note(store, tag_ids, due):
    note = store.register(tag_ids, "note")
    store.update_complete_by(note, due)
    return note


class TestPlainDueDate:
    """Notes without a repeat tag."""

    def test_visible_from_seven_days_before(self, engine, store, clock):
        note = make_note(store, [0], "15-03-2024")
        due = timestamp_for_date(2024, 3, 15)

        clock.set(due - 7 * DAY_SECS)
        assert engine.is_visible(note)
        clock.set(due - 7 * DAY_SECS - 1)
        assert not engine.is_visible(note)

    def test_no_upper_bound(self, engine, store, clock):
        note = make_note(store, [0], "15-03-2024")
        clock.set(timestamp_for_date(2024, 3, 15) + 1000 * DAY_SECS)
        assert engine.is_visible(note)

    def test_done_notes_hidden(self, engine, store):
        note = make_note(store, [0], "08-03-2024")
        store.update_status(note, NoteStatus.DONE, set())
        assert not engine.is_visible(note)

    def test_no_due_date_hidden(self, engine, store):
        assert not engine.is_visible(store.register([0], "undated"))


class TestAnnualRecurrence:
    """Notes tagged repeat-annually (id 4 in the basic tags)."""

    @pytest.mark.parametrize("day,visible", [(4, False), (7, True), (8, True), (10, True), (17, True), (18, False)])
    def test_window_around_march_tenth(self, engine, store, clock, day, visible):
        note = make_note(store, [4], "10-03-2019")
        clock.set(timestamp_for_date(2024, 3, day))
        assert engine.is_visible(note) is visible

    def test_window_crosses_year_end(self, engine, store, clock):
        """A 2 January occurrence is already visible on 30 December."""
        note = make_note(store, [4], "02-01-2000")
        clock.set(timestamp_for_date(2024, 12, 30))
        assert engine.is_visible(note)

    def test_repeat_note_stays_pending(self, engine, store, clock):
        note = make_note(store, [4], "10-03-2019")
        store.update_status(note, NoteStatus.DONE, {4, 5})
        assert engine.is_visible(note)


class TestMonthlyRecurrence:
    """Notes tagged repeat-monthly (id 5 in the basic tags)."""

    @pytest.mark.parametrize("month", [1, 2, 6, 11])
    @pytest.mark.parametrize("day,visible", [(10, False), (14, True), (15, True), (18, True), (20, False)])
    def test_window_around_fifteenth(self, engine, store, clock, month, day, visible):
        note = make_note(store, [5], "15-01-2020")
        clock.set(timestamp_for_date(2024, month, day))
        assert engine.is_visible(note) is visible


class TestRepeatGroupEdgeCases:
    """Repeat tags that select no policy."""

    def test_other_repeat_group_tag_has_no_policy(self, engine, registry, store, clock):
        weekly = registry.register("repeat-weekly", "repeat")
        note = make_note(store, [weekly.id], "08-03-2024")
        assert not engine.is_visible(note)

    def test_both_repeat_tags_either_window(self, engine, store, clock):
        note = make_note(store, [4, 5], "15-07-2020")
        clock.set(timestamp_for_date(2024, 3, 14))
        assert engine.is_visible(note)


class TestNotesApproachingDueDate:
    """End-to-end selection."""

    def test_renew_passport_scenario(self, clock):
        """Tags work/repeat-annually get ids 0/1 and the note shows up by identity."""
        registry = TagRegistry(clock=clock)
        work = registry.register("work")
        annually = registry.register("repeat-annually", "repeat")
        assert (work.id, annually.id) == (0, 1)

        store = NoteStore(clock=clock)
        note = store.register([0, 1], "Renew passport")
        store.update_complete_by(note, "08-03-2015")
        other = store.register([0], "Unrelated")

        selected = DueDateVisibility(registry, clock=clock).notes_approaching_due_date(store)
        assert any(n is note for n in selected)
        assert all(n is not other for n in selected)
