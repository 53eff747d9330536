"""Bounded field editor used for node-pool scaling.

Each field is an integer held inside ``[minimum, maximum]``. Values are
clamped on every mutation, never wrapped. Submission runs the editor's
validation rules in order; the first failing rule's message blocks the
submit and stays on display until cancelled or fixed.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from cloudbrowse.constants.limits import NODE_COUNT_MAX, NODE_COUNT_MIN

# A rule receives {field key: value} and returns an error message or None.
ValidationRule = Callable[[dict[str, int]], "str | None"]

FIELD_DESIRED = "desired"
FIELD_MIN = "min"
FIELD_MAX = "max"

MSG_MIN_GREATER_THAN_MAX = "Min nodes cannot be greater than max nodes"
MSG_DESIRED_OUT_OF_RANGE = "Desired nodes must be between min and max"


@dataclass
class BoundedField:
    """An editable integer constrained to a closed range."""

    key: str
    label: str
    value: int
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"Field {self.key!r}: minimum {self.minimum} exceeds maximum {self.maximum}"
            )
        self.value = self._clamp(self.value)

    def set(self, value: int) -> None:
        self.value = self._clamp(value)

    def increment(self) -> None:
        self.set(self.value + 1)

    def decrement(self) -> None:
        self.set(self.value - 1)

    def _clamp(self, value: int) -> int:
        return max(self.minimum, min(self.maximum, value))


class BoundedFieldEditor:
    """Ordered bounded fields with a field cursor and validation rules."""

    def __init__(
        self,
        fields: Sequence[BoundedField],
        rules: Sequence[ValidationRule] = (),
    ) -> None:
        if not fields:
            raise ValueError("BoundedFieldEditor needs at least one field")
        self._fields = list(fields)
        self._rules = tuple(rules)
        self._selected = 0
        self.error_message = ""

    @property
    def fields(self) -> tuple[BoundedField, ...]:
        return tuple(self._fields)

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def selected_field(self) -> BoundedField:
        return self._fields[self._selected]

    def values(self) -> dict[str, int]:
        """Current value of every field by key."""
        return {field.key: field.value for field in self._fields}

    def move_up(self) -> None:
        self._selected = max(0, self._selected - 1)

    def move_down(self) -> None:
        self._selected = min(len(self._fields) - 1, self._selected + 1)

    def increment(self) -> None:
        self.selected_field.increment()

    def decrement(self) -> None:
        self.selected_field.decrement()

    def validate(self) -> str | None:
        """Run the rules in order and return the first failure message."""
        values = self.values()
        for rule in self._rules:
            message = rule(values)
            if message:
                return message
        return None

    def submit(self) -> dict[str, int] | None:
        """Validate and return the values, or None (error message set)."""
        message = self.validate()
        if message:
            self.error_message = message
            return None
        self.error_message = ""
        return self.values()

    def cancel(self) -> bool:
        """Handle a cancel signal.

        Returns:
            True when the view should be left, False when an error message
            was showing and has been cleared instead.
        """
        if self.error_message:
            self.error_message = ""
            return False
        return True


# ============================================================================
# Scaling rules
# ============================================================================


def min_not_above_max(values: dict[str, int]) -> str | None:
    if values[FIELD_MIN] > values[FIELD_MAX]:
        return MSG_MIN_GREATER_THAN_MAX
    return None


def desired_within_range(values: dict[str, int]) -> str | None:
    desired = values[FIELD_DESIRED]
    if desired < values[FIELD_MIN] or desired > values[FIELD_MAX]:
        return MSG_DESIRED_OUT_OF_RANGE
    return None


SCALE_RULES: tuple[ValidationRule, ...] = (min_not_above_max, desired_within_range)


def scale_editor(desired: int, minimum: int, maximum: int) -> BoundedFieldEditor:
    """Editor for desired/min/max node counts, each bounded to [0, 100]."""
    return BoundedFieldEditor(
        [
            BoundedField(FIELD_DESIRED, "Desired Nodes", desired, NODE_COUNT_MIN, NODE_COUNT_MAX),
            BoundedField(FIELD_MIN, "Min Nodes", minimum, NODE_COUNT_MIN, NODE_COUNT_MAX),
            BoundedField(FIELD_MAX, "Max Nodes", maximum, NODE_COUNT_MIN, NODE_COUNT_MAX),
        ],
        SCALE_RULES,
    )


__all__ = [
    "FIELD_DESIRED",
    "FIELD_MAX",
    "FIELD_MIN",
    "MSG_DESIRED_OUT_OF_RANGE",
    "MSG_MIN_GREATER_THAN_MAX",
    "SCALE_RULES",
    "BoundedField",
    "BoundedFieldEditor",
    "ValidationRule",
    "desired_within_range",
    "min_not_above_max",
    "scale_editor",
]
