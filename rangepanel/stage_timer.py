"""Stage timer: a settable countdown with start, pause, resume and reset."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_STAGE_TIME_SECONDS = 5 * 60
MAX_STAGE_TIME_SECONDS = 60 * 60 - 1
MIN_STAGE_TIME_SECONDS = 0
TIME_ADJUST_INCREMENT_SECONDS = 60
TICK_INTERVAL_MS = 1000

LABEL_START = "Start"
LABEL_PAUSE = "Pause"
LABEL_RESUME = "Resume"


def format_mmss(seconds: int) -> str:
    """Render a non-negative number of seconds as ``MM:SS``."""
    if seconds < 0:
        raise ValueError("a countdown cannot show a negative time")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


@dataclass
class StageTimer:
    """A stage countdown whose length is adjusted in whole minutes.

    *set_seconds* is the configured stage length; *remaining* counts down
    from it once per :meth:`tick` while the timer runs.
    """

    set_seconds: int = DEFAULT_STAGE_TIME_SECONDS
    remaining: int = field(init=False)
    running: bool = field(init=False, default=False)
    button_label: str = field(init=False, default=LABEL_START)
    controls_enabled: bool = field(init=False, default=True)

    def __post_init__(self) -> None:
        if not MIN_STAGE_TIME_SECONDS <= self.set_seconds <= MAX_STAGE_TIME_SECONDS:
            raise ValueError(
                f"stage time must lie between {MIN_STAGE_TIME_SECONDS} "
                f"and {MAX_STAGE_TIME_SECONDS} seconds"
            )
        self.remaining = self.set_seconds

    @property
    def display_text(self) -> str:
        """The ``MM:SS`` text the timer page shows."""
        return format_mmss(self.remaining)

    def start(self) -> bool:
        """Start or resume the countdown if it is stopped and time is left.

        Returns whether the timer started.
        """
        if self.running or self.remaining <= 0:
            return False
        self.running = True
        self.button_label = LABEL_PAUSE
        self.controls_enabled = False
        return True

    def pause(self) -> bool:
        """Pause a running countdown. Returns whether it was paused."""
        if not self.running:
            return False
        self.running = False
        self.button_label = LABEL_RESUME
        return True

    def toggle(self) -> bool:
        """Act as the start/pause button: pause if running, otherwise start.

        Returns whether the timer is running afterwards.
        """
        if self.running:
            self.pause()
        else:
            self.start()
        return self.running

    def reset(self) -> None:
        """Stop the countdown and refill it from the configured stage length."""
        self.running = False
        self.remaining = self.set_seconds
        self.button_label = LABEL_START
        self.controls_enabled = True

    def increase(self) -> bool:
        """Add a minute to the stage length, capped at the maximum.

        Ignored while running; returns whether the length was adjusted.
        """
        if self.running:
            return False
        if self.set_seconds <= MAX_STAGE_TIME_SECONDS - TIME_ADJUST_INCREMENT_SECONDS:
            self.set_seconds += TIME_ADJUST_INCREMENT_SECONDS
        else:
            self.set_seconds = MAX_STAGE_TIME_SECONDS
        self.remaining = self.set_seconds
        return True

    def decrease(self) -> bool:
        """Take a minute off the stage length, never going below zero.

        Ignored while running; returns whether the length was adjusted.
        """
        if self.running:
            return False
        if self.set_seconds >= MIN_STAGE_TIME_SECONDS + TIME_ADJUST_INCREMENT_SECONDS:
            self.set_seconds -= TIME_ADJUST_INCREMENT_SECONDS
        else:
            self.set_seconds = MIN_STAGE_TIME_SECONDS
        self.remaining = self.set_seconds
        return True

    def tick(self) -> bool:
        """Advance the running countdown by one second.

        A tick that finds no time left stops the timer. Ticks while stopped
        do nothing. Returns whether the timer is still running.
        """
        if not self.running:
            return False
        if self.remaining > 0:
            self.remaining -= 1
            return True
        self.running = False
        self.remaining = 0
        self.button_label = LABEL_START
        self.controls_enabled = True
        return False