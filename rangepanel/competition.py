"""Competition page: live stage time, shots left and a bubble level."""

from __future__ import annotations

from dataclasses import dataclass, field

from rangepanel.bubble_level import BubbleLayout, bubble_layout, format_roll
from rangepanel.shot_counter import ShotCounter
from rangepanel.stage_timer import (
    LABEL_PAUSE,
    LABEL_RESUME,
    LABEL_START,
    StageTimer,
    format_mmss,
)

COLOR_BLACK = 0x000000
COLOR_WARNING = 0xFF0000
WARNING_SECONDS = 30
REFRESH_INTERVAL_MS = 330
LEVEL_INTERVAL_MS = 250


@dataclass
class CompetitionPage:
    """The live competition screen, driven by a stage timer and a shot counter."""

    shots: ShotCounter
    timer: StageTimer = field(default_factory=StageTimer)
    background: int = COLOR_BLACK
    default_background: int | None = None
    active: bool = field(init=False, default=False)
    time_text: str = field(init=False, default="00:00")
    shots_text: str = field(init=False, default="0")
    button_label: str = field(init=False, default=LABEL_START)
    roll_text: str = field(init=False, default=format_roll(0.0))
    level: BubbleLayout = field(init=False)

    def __post_init__(self) -> None:
        self.level = bubble_layout(0.0)
        self.refresh()

    def _restore_background(self) -> None:
        self.background = (
            self.default_background
            if self.default_background is not None
            else COLOR_BLACK
        )

    def refresh(self) -> None:
        """Update the time, shots, button label and warning background."""
        time_sec = max(0, self.timer.remaining)
        self.time_text = format_mmss(time_sec)
        self.shots_text = str(self.shots.remaining)

        if self.timer.running:
            self.button_label = LABEL_PAUSE
        elif 0 < time_sec < self.timer.set_seconds:
            self.button_label = LABEL_RESUME
        else:
            self.button_label = LABEL_START

        if 0 < time_sec <= WARNING_SECONDS:
            self.background = COLOR_WARNING
        else:
            self._restore_background()

    def press_start(self) -> None:
        """Pause a running stage, or start it when time is left."""
        if self.timer.running:
            self.timer.pause()
        elif self.timer.remaining > 0:
            self.timer.start()
        self.refresh()

    def press_reset(self) -> None:
        """Reset the stage time and refill the shots from their allowance."""
        self.timer.reset()
        self.shots.reset_to_set_count()
        self.refresh()

    def handle_recoil(self) -> bool:
        """Count a detected shot while the stage runs. Returns whether it counted."""
        if not self.timer.running:
            return False
        self.shots.decrement_shot()
        self.refresh()
        return True

    def screen_loaded(self) -> None:
        """Start live updates and remember the page's normal background."""
        self.active = True
        self.default_background = self.background
        self.refresh()

    def screen_unloaded(self) -> None:
        """Stop live updates and put the normal background back."""
        self.active = False
        self._restore_background()

    def update_level(self, roll_deg: float) -> BubbleLayout:
        """Show a new roll reading on the bubble level and its readout."""
        self.roll_text = format_roll(roll_deg)
        self.level = bubble_layout(roll_deg)
        return self.level