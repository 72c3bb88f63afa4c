"""
Tests for DataValidator.
"""
import pytest

from reminder.core.exceptions import EmptyInputError, InvalidDateError, ValidationError
from reminder.core.validators import DataValidator
from reminder.utils.temporal import timestamp_for_date


class TestRequireText:
    """Test text normalization helpers."""

    def test_trims(self):
        assert DataValidator.require_text("  hello  ", "Note's text") == "hello"

    @pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
    def test_blank_rejected(self, value):
        """Blank input raises EmptyInputError naming the field."""
        with pytest.raises(EmptyInputError, match="Note's text is empty"):
            DataValidator.require_text(value, "Note's text")

    def test_slug_lowercased(self):
        assert DataValidator.normalize_slug("  Work ") == "work"

    def test_group_blank_is_empty(self):
        assert DataValidator.normalize_group(None) == ""
        assert DataValidator.normalize_group(" Repeat ") == "repeat"


class TestDateValidation:
    """Test due date syntax and parsing."""

    @pytest.mark.parametrize("value", ["1-1-2024", "01-01-2024", "31-12-1999", "nil", " 9-3-2024 "])
    def test_valid_strings(self, value):
        assert DataValidator.is_valid_date_string(value) is True

    @pytest.mark.parametrize("value", ["2024-01-01", "32-01-2024", "01-13-2024", "01-01-1899", "tomorrow", None])
    def test_invalid_strings(self, value):
        assert DataValidator.is_valid_date_string(value) is False

    def test_parse_returns_utc_midnight(self):
        assert DataValidator.parse_due_date("10-03-2024") == timestamp_for_date(2024, 3, 10)

    def test_parse_nil_clears(self):
        assert DataValidator.parse_due_date("nil") == 0

    def test_parse_rejects_bad_syntax(self):
        with pytest.raises(InvalidDateError):
            DataValidator.parse_due_date("2024-03-10")

    def test_parse_rejects_impossible_date(self):
        """Syntactically valid but non-existent dates are rejected."""
        with pytest.raises(InvalidDateError):
            DataValidator.parse_due_date("31-02-2024")

    def test_parse_rejects_epoch_day(self):
        """01-01-1970 would be stored as 0 and read back as 'no due date'."""
        with pytest.raises(InvalidDateError):
            DataValidator.parse_due_date("01-01-1970")

    def test_parse_before_epoch_is_negative(self):
        assert DataValidator.parse_due_date("10-03-1965") == timestamp_for_date(1965, 3, 10) < 0

    def test_parse_rejects_blank(self):
        with pytest.raises(EmptyInputError):
            DataValidator.parse_due_date("  ")

    def test_invalid_date_is_validation_error(self):
        """InvalidDateError belongs to the validation family."""
        assert issubclass(InvalidDateError, ValidationError)


class TestScalarNormalization:
    """Test bool/int coercion used when loading stored data."""

    @pytest.mark.parametrize("value,expected", [(True, True), (None, False), (0, False), ("yes", True), ("false", False)])
    def test_normalize_bool(self, value, expected):
        assert DataValidator.normalize_bool(value) is expected

    def test_normalize_bool_rejects_garbage(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_bool("maybe")

    def test_normalize_int(self):
        assert DataValidator.normalize_int(None) == 0
        assert DataValidator.normalize_int("42") == 42

    @pytest.mark.parametrize("value", [True, "abc", [1]])
    def test_normalize_int_rejects(self, value):
        with pytest.raises(ValidationError):
            DataValidator.normalize_int(value)
