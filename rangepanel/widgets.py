"""A small widget tree with flags and states, plus display helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

FLAG_SCROLLABLE = "scrollable"
FLAG_SCROLL_ON_FOCUS = "scroll_on_focus"
FLAG_CLICKABLE = "clickable"
FLAG_FLOATING = "floating"

STATE_CHECKED = "checked"
STATE_DISABLED = "disabled"
STATE_FOCUSED = "focused"

SIZE_CONTENT = "content"
ALIGN_CENTER = "center"

COMP_PAGE4_PAGE4 = 0
COMP_PAGE4_STAGE_TIMER_BTN = 1


class ModifyMode(enum.Enum):
    """How a flag or state is changed."""

    TOGGLE = "toggle"
    ADD = "add"
    REMOVE = "remove"


@dataclass(eq=False)
class Widget:
    """A node in the screen tree; it registers itself with its parent."""

    kind: str = "obj"
    parent: Widget | None = field(default=None, repr=False)
    text: str = ""
    x: int = 0
    y: int = 0
    width: int | str | None = None
    height: int | str | None = None
    align: str | None = None
    flags: set[str] = field(default_factory=set)
    states: set[str] = field(default_factory=set)
    children: list[Widget] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.parent is not None:
            self.parent.children.append(self)

    def add_flag(self, flag: str) -> None:
        self.flags.add(flag)

    def clear_flag(self, flag: str) -> None:
        self.flags.discard(flag)

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    def modify_flag(self, flag: str, mode: ModifyMode) -> None:
        """Toggle, add or remove a flag; any mode but TOGGLE and ADD removes."""
        if mode is ModifyMode.TOGGLE:
            if self.has_flag(flag):
                self.clear_flag(flag)
            else:
                self.add_flag(flag)
        elif mode is ModifyMode.ADD:
            self.add_flag(flag)
        else:
            self.clear_flag(flag)

    def add_state(self, state: str) -> None:
        self.states.add(state)

    def clear_state(self, state: str) -> None:
        self.states.discard(state)

    def has_state(self, state: str) -> bool:
        return state in self.states

    def modify_state(self, state: str, mode: ModifyMode) -> None:
        """Toggle, add or remove a state; any mode but TOGGLE and ADD removes."""
        if mode is ModifyMode.TOGGLE:
            if self.has_state(state):
                self.clear_state(state)
            else:
                self.add_state(state)
        elif mode is ModifyMode.ADD:
            self.add_state(state)
        else:
            self.clear_state(state)


@dataclass(eq=False)
class Component:
    """A reusable group of widgets whose parts are looked up by index."""

    root: Widget
    parts: tuple[Widget, ...]

    def child(self, index: int) -> Widget:
        if not 0 <= index < len(self.parts):
            raise IndexError(f"component has no child {index}")
        return self.parts[index]


def create_stage_timer_button(parent: Widget | None) -> Component:
    """Build the "Stage Timer" menu button component under *parent*."""
    button = Widget(
        kind="button",
        parent=parent,
        x=0,
        y=50,
        width=100,
        height=25,
        align=ALIGN_CENTER,
        flags={FLAG_CLICKABLE, FLAG_SCROLLABLE},
    )
    button.add_flag(FLAG_SCROLL_ON_FOCUS)
    button.clear_flag(FLAG_SCROLLABLE)

    label = Widget(
        kind="label",
        parent=button,
        text="Stage Timer",
        width=SIZE_CONTENT,
        height=SIZE_CONTENT,
        align=ALIGN_CENTER,
    )
    return Component(root=button, parts=(button, label))


def clamp_frame(index: int, count: int) -> int:
    """Clamp an animation frame index into a set of *count* images."""
    if count <= 0:
        raise ValueError("an image set needs at least one frame")
    return max(0, min(index, count - 1))


def format_value_text(prefix: str, value: float, postfix: str) -> str:
    """Render a widget value as an integer between a prefix and a postfix."""
    return f"{prefix}{int(value)}{postfix}"


def checked_text(widget: Widget, text_on: str, text_off: str) -> str:
    """Choose the text that matches the widget's checked state."""
    return text_on if widget.has_state(STATE_CHECKED) else text_off