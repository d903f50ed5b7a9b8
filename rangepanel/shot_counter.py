"""Shot counter: a settable shot allowance and the shots still remaining."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_SHOT_COUNT = 99
MIN_SHOT_COUNT = 0


@dataclass
class ShotCounter:
    """Tracks the configured number of shots and how many are left.

    *default_count* is the allowance that a full reset returns to.
    """

    default_count: int
    set_count: int = field(init=False)
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        if self.default_count < MIN_SHOT_COUNT:
            raise ValueError("the default shot count cannot be negative")
        self.set_count = self.default_count
        self.remaining = self.default_count

    @property
    def display_text(self) -> str:
        """The text the counter page shows for the remaining shots."""
        return str(self.remaining)

    def increase(self) -> None:
        """Raise the allowance by one, up to the maximum, and refill."""
        if self.set_count < MAX_SHOT_COUNT:
            self.set_count += 1
        self.remaining = self.set_count

    def decrease(self) -> None:
        """Lower the allowance by one, down to zero, and refill."""
        if self.set_count > MIN_SHOT_COUNT:
            self.set_count -= 1
        self.remaining = self.set_count

    def reset_to_set_count(self) -> None:
        """Refill the remaining shots from the current allowance."""
        self.remaining = self.set_count

    def reset_all_to_default(self) -> None:
        """Return both the allowance and the remaining shots to the default."""
        self.set_count = self.default_count
        self.remaining = self.default_count

    def decrement_shot(self) -> None:
        """Count one shot fired, never going below zero."""
        if self.remaining > 0:
            self.remaining -= 1

    def external_decrement(self, page_active: bool) -> bool:
        """Count a sensed shot, but only while the counter page is on screen.

        Returns whether a shot was counted.
        """
        if page_active and self.remaining > 0:
            self.remaining -= 1
            return True
        return False