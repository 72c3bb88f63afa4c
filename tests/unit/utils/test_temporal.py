"""
Tests for temporal utilities: clocks, date projection and repeat windows.
"""
import pytest

from reminder.utils.temporal import (
    DAY_SECS,
    FixedClock,
    RepeatCandidates,
    SystemClock,
    current_timestamp,
    format_long,
    format_short,
    is_within_repeat_window,
    timestamp_for_date,
    timestamp_for_date_this_year,
    timestamp_for_date_this_year_month,
)


class TestClocks:
    """Test Clock implementations."""

    def test_fixed_clock_is_frozen(self):
        clock = FixedClock(1000)
        assert clock.now() == 1000
        assert current_timestamp(clock) == 1000

    def test_fixed_clock_moves_explicitly(self):
        clock = FixedClock(1000)
        assert clock.advance(5) == 1005
        clock.set(42)
        assert clock.now() == 42

    def test_fixed_clock_cannot_go_backwards_with_advance(self):
        with pytest.raises(ValueError):
            FixedClock(1000).advance(-1)

    def test_system_clock_is_positive(self):
        assert SystemClock().now() > 0
        assert current_timestamp() > 0


class TestTimestampForDate:
    """Test calendar date to epoch conversion."""

    def test_epoch(self):
        assert timestamp_for_date(1970, 1, 2) == DAY_SECS

    def test_day_past_month_end_is_clamped(self):
        assert timestamp_for_date(2023, 6, 31) == timestamp_for_date(2023, 6, 30)
        assert timestamp_for_date(2023, 2, 29) == timestamp_for_date(2023, 2, 28)

    @pytest.mark.parametrize("month,day", [(0, 1), (13, 1), (1, 0)])
    def test_invalid_parts_raise(self, month, day):
        with pytest.raises(ValueError):
            timestamp_for_date(2024, month, day)

    def test_this_year(self, fixed_clock):
        """Projection uses the clock's current year."""
        assert timestamp_for_date_this_year(12, 25, fixed_clock) == timestamp_for_date(2024, 12, 25)

    def test_this_year_month(self, fixed_clock):
        """Projection uses the clock's current year and month."""
        assert timestamp_for_date_this_year_month(15, fixed_clock) == timestamp_for_date(2024, 3, 15)


class TestRepeatWindow:
    """Test is_within_repeat_window bounds."""

    def test_candidates_around(self):
        candidates = RepeatCandidates.around(1000, 100)
        assert list(candidates) == [1000, 900, 1100]

    def test_bounds_are_inclusive(self):
        occurrence = timestamp_for_date(2024, 3, 10)
        candidates = RepeatCandidates.around(occurrence, 365 * DAY_SECS)

        assert is_within_repeat_window(candidates, 3, 7, FixedClock(occurrence - 3 * DAY_SECS))
        assert is_within_repeat_window(candidates, 3, 7, FixedClock(occurrence + 7 * DAY_SECS))
        assert not is_within_repeat_window(candidates, 3, 7, FixedClock(occurrence - 3 * DAY_SECS - 1))
        assert not is_within_repeat_window(candidates, 3, 7, FixedClock(occurrence + 7 * DAY_SECS + 1))

    def test_previous_occurrence_window(self):
        """A window that started last cycle still counts."""
        occurrence = timestamp_for_date(2024, 1, 1)
        candidates = RepeatCandidates.around(occurrence, 365 * DAY_SECS)
        late_december = FixedClock(timestamp_for_date(2024, 12, 30))
        assert is_within_repeat_window(candidates, 3, 7, late_december)


class TestFormatting:
    """Test timestamp display helpers."""

    def test_unset_is_nil(self):
        assert format_short(0) == "nil"
        assert format_long(0) == "nil"

    def test_short(self):
        assert format_short(timestamp_for_date(2024, 3, 10)) == "10-Mar-24"

    def test_long(self):
        assert format_long(timestamp_for_date(2024, 3, 10)) == "Sunday, 10-Mar-24 00:00:00 UTC"

    def test_dates_before_epoch_are_not_nil(self):
        """Negative timestamps are real dates, e.g. a 1965 birthday."""
        birthday = timestamp_for_date(1965, 3, 10)
        assert birthday < 0
        assert format_short(birthday) == "10-Mar-65"
        assert format_long(birthday) == "Wednesday, 10-Mar-65 00:00:00 UTC"
