"""Screen navigation: lazily built screens and animated transitions between them."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


class Screen(enum.Enum):
    """The screens of the panel."""

    OPTIONS = "options"
    BUBBLE_LEVEL = "bubble_level"
    ARTIFICIAL_HORIZON = "artificial_horizon"
    SHOT_COUNTER = "shot_counter"
    STAGE_TIMER = "stage_timer"
    COMPETITION = "competition"


class Animation(enum.Enum):
    """How the new screen comes in."""

    NONE = "none"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    FADE_ON = "fade_on"


@dataclass(frozen=True)
class Transition:
    """A screen change: the target, its animation, duration and delay in ms."""

    screen: Screen
    animation: Animation
    speed: int
    delay: int = 0


MENU_SPEED_MS = 500
HORIZON_SPEED_MS = 200

# Button name -> where pressing it leads.
BUTTON_ROUTES: Mapping[str, Transition] = {
    "options.bubble_level": Transition(Screen.BUBBLE_LEVEL, Animation.MOVE_LEFT, MENU_SPEED_MS),
    "options.horizon": Transition(Screen.ARTIFICIAL_HORIZON, Animation.MOVE_LEFT, MENU_SPEED_MS),
    "options.shot_counter": Transition(Screen.SHOT_COUNTER, Animation.MOVE_LEFT, MENU_SPEED_MS),
    "options.stage_timer": Transition(Screen.STAGE_TIMER, Animation.MOVE_LEFT, MENU_SPEED_MS),
    "options.competition": Transition(Screen.COMPETITION, Animation.MOVE_LEFT, MENU_SPEED_MS),
    "horizon.home": Transition(Screen.OPTIONS, Animation.FADE_ON, HORIZON_SPEED_MS),
    "horizon.prev": Transition(Screen.BUBBLE_LEVEL, Animation.MOVE_RIGHT, HORIZON_SPEED_MS),
    "horizon.next": Transition(Screen.SHOT_COUNTER, Animation.MOVE_LEFT, HORIZON_SPEED_MS),
    "shot_counter.home": Transition(Screen.OPTIONS, Animation.MOVE_RIGHT, MENU_SPEED_MS),
    "shot_counter.prev": Transition(Screen.ARTIFICIAL_HORIZON, Animation.MOVE_RIGHT, MENU_SPEED_MS),
    "shot_counter.next": Transition(Screen.STAGE_TIMER, Animation.MOVE_LEFT, MENU_SPEED_MS),
    "stage_timer.home": Transition(Screen.OPTIONS, Animation.MOVE_RIGHT, MENU_SPEED_MS),
    "stage_timer.prev": Transition(Screen.SHOT_COUNTER, Animation.MOVE_RIGHT, MENU_SPEED_MS),
    "stage_timer.next": Transition(Screen.COMPETITION, Animation.MOVE_LEFT, MENU_SPEED_MS),
    "competition.home": Transition(Screen.OPTIONS, Animation.MOVE_RIGHT, MENU_SPEED_MS),
    "competition.prev": Transition(Screen.STAGE_TIMER, Animation.MOVE_RIGHT, MENU_SPEED_MS),
    "competition.next": Transition(Screen.OPTIONS, Animation.MOVE_LEFT, MENU_SPEED_MS),
}


@dataclass
class Navigator:
    """Switches between screens, building each one the first time it is shown.

    *builders* maps a screen to a callable that creates it; a screen with no
    builder is recorded as built without any content.
    """

    builders: Mapping[Screen, Callable[[], Any]] = field(default_factory=dict)
    built: dict[Screen, Any] = field(init=False, default_factory=dict)
    current: Screen | None = field(init=False, default=None)
    history: list[Transition] = field(init=False, default_factory=list)

    def change(
        self,
        screen: Screen,
        animation: Animation = Animation.NONE,
        speed: int = 0,
        delay: int = 0,
    ) -> Transition:
        """Show *screen*, building it first if it does not exist yet."""
        if speed < 0 or delay < 0:
            raise ValueError("speed and delay cannot be negative")
        if screen not in self.built:
            builder = self.builders.get(screen)
            self.built[screen] = builder() if builder is not None else None
        transition = Transition(screen, animation, speed, delay)
        self.current = screen
        self.history.append(transition)
        return transition

    def press(self, button: str) -> Transition:
        """Follow the route of a navigation button."""
        try:
            route = BUTTON_ROUTES[button]
        except KeyError:
            raise ValueError(f"unknown navigation button: {button!r}") from None
        return self.change(route.screen, route.animation, route.speed, route.delay)

    def destroy(self, screen: Screen) -> bool:
        """Delete a built screen so that it is rebuilt when next shown.

        The screen on display cannot be deleted. Returns whether a screen
        was removed.
        """
        if screen is self.current:
            raise ValueError("cannot delete the screen that is on display")
        return self.built.pop(screen, _MISSING) is not _MISSING


_MISSING = object()