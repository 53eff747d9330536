"""Unit tests for the bounded field editor and the scaling rules."""

from __future__ import annotations

import pytest

from cloudbrowse.views.components.bounded_fields import (
    FIELD_DESIRED,
    FIELD_MAX,
    FIELD_MIN,
    MSG_DESIRED_OUT_OF_RANGE,
    MSG_MIN_GREATER_THAN_MAX,
    BoundedField,
    scale_editor,
)

# =============================================================================
# BoundedField
# =============================================================================


class TestBoundedField:
    """Test clamping of a single field."""

    def test_value_clamped_on_construction(self) -> None:
        """Initial values outside the bounds are clamped."""
        assert BoundedField("n", "N", 150, 0, 100).value == 100
        assert BoundedField("n", "N", -3, 0, 100).value == 0

    def test_increment_stops_at_maximum(self) -> None:
        """Increment never goes above the maximum."""
        field = BoundedField("n", "N", 100, 0, 100)
        field.increment()
        assert field.value == 100

    def test_decrement_stops_at_minimum(self) -> None:
        """Decrement never goes below the minimum."""
        field = BoundedField("n", "N", 0, 0, 100)
        field.decrement()
        assert field.value == 0

    def test_invalid_range_rejected(self) -> None:
        """A field whose minimum exceeds its maximum is rejected."""
        with pytest.raises(ValueError):
            BoundedField("n", "N", 1, 5, 2)


# =============================================================================
# Editor
# =============================================================================


class TestScaleEditor:
    """Test field navigation, validation order and cancel."""

    def test_fields_in_order(self) -> None:
        """The editor lists desired, min and max fields in that order."""
        editor = scale_editor(3, 1, 5)
        assert [f.key for f in editor.fields] == [FIELD_DESIRED, FIELD_MIN, FIELD_MAX]
        assert editor.values() == {FIELD_DESIRED: 3, FIELD_MIN: 1, FIELD_MAX: 5}

    def test_field_cursor_clamps(self) -> None:
        """The field cursor stops at the first and last field."""
        editor = scale_editor(3, 1, 5)
        editor.move_up()
        assert editor.selected_index == 0
        for _ in range(5):
            editor.move_down()
        assert editor.selected_index == 2

    def test_adjust_selected_field(self) -> None:
        """Left and right adjust only the selected field."""
        editor = scale_editor(3, 1, 5)
        editor.move_down()
        editor.increment()
        assert editor.values()[FIELD_MIN] == 2
        editor.decrement()
        editor.decrement()
        assert editor.values()[FIELD_MIN] == 0

    def test_valid_submit_returns_values(self) -> None:
        """A valid submit returns the field values."""
        editor = scale_editor(3, 1, 5)
        assert editor.submit() == {FIELD_DESIRED: 3, FIELD_MIN: 1, FIELD_MAX: 5}
        assert editor.error_message == ""

    def test_min_greater_than_max_reported_first(self) -> None:
        """Min above max is reported before the desired range check."""
        # desired is also out of range; the min/max rule wins.
        editor = scale_editor(0, 5, 3)
        assert editor.submit() is None
        assert editor.error_message == MSG_MIN_GREATER_THAN_MAX

    def test_desired_outside_range(self) -> None:
        """Desired outside min..max is reported."""
        editor = scale_editor(9, 1, 5)
        assert editor.submit() is None
        assert editor.error_message == MSG_DESIRED_OUT_OF_RANGE

    def test_fields_clamped_to_node_bounds(self) -> None:
        """Values above the node limit are clamped to 100."""
        editor = scale_editor(250, 0, 100)
        assert editor.values()[FIELD_DESIRED] == 100

    def test_cancel_clears_error_before_leaving(self) -> None:
        """The first cancel clears an error, the second one leaves."""
        editor = scale_editor(9, 1, 5)
        editor.submit()
        assert editor.cancel() is False
        assert editor.error_message == ""
        assert editor.cancel() is True

    def test_successful_submit_clears_previous_error(self) -> None:
        """Fixing the values and submitting clears the old error."""
        editor = scale_editor(9, 1, 5)
        editor.submit()
        for _ in range(4):
            editor.decrement()
        assert editor.submit() is not None
        assert editor.error_message == ""


class TestScaleExamples:
    """Canonical min/max/desired combinations."""

    @pytest.mark.parametrize(
        ("desired", "minimum", "maximum", "expected"),
        [
            (4, 5, 3, MSG_MIN_GREATER_THAN_MAX),
            (15, 0, 10, MSG_DESIRED_OUT_OF_RANGE),
            (5, 2, 10, ""),
        ],
    )
    def test_submit(self, desired: int, minimum: int, maximum: int, expected: str) -> None:
        """Submit reports the expected message for each combination."""
        editor = scale_editor(desired, minimum, maximum)
        values = editor.submit()
        assert editor.error_message == expected
        if expected:
            assert values is None
        else:
            assert values == {FIELD_DESIRED: 5, FIELD_MIN: 2, FIELD_MAX: 10}
