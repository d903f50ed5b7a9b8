"""Geometry and colours of the bubble level drawn on the competition page."""

from __future__ import annotations

from dataclasses import dataclass

LEVEL_CANVAS_WIDTH = 200
LEVEL_CANVAS_HEIGHT = 40
TUBE_WIDTH = LEVEL_CANVAS_WIDTH - 10
TUBE_HEIGHT = LEVEL_CANVAS_HEIGHT - 10
TUBE_BORDER_RADIUS = 8
BUBBLE_HEIGHT = TUBE_HEIGHT - 2
BUBBLE_WIDTH = BUBBLE_HEIGHT + 12
MAX_ROLL_ANGLE = 30.0

GREEN_LIMIT_DEG = 3.0
YELLOW_LIMIT_DEG = 8.0

COLOR_TUBE = 0xFFFFFF
COLOR_MARKING = 0x000000
COLOR_GREEN = 0x4CAF50
COLOR_YELLOW = 0xFFEB3B
COLOR_RED = 0xF44336
COLOR_ROLL_TEXT = 0xFFFFFF

Rect = tuple[int, int, int, int]


@dataclass(frozen=True)
class BubbleLayout:
    """Rectangles (x, y, width, height) on the canvas and the bubble colour."""

    tube: Rect
    marking: Rect
    bubble: Rect
    bubble_color: int
    tube_radius: int = TUBE_BORDER_RADIUS
    bubble_radius: int = BUBBLE_HEIGHT // 2


def bubble_color(roll_deg: float) -> int:
    """Green when nearly level, yellow for a moderate tilt, red beyond that."""
    tilt = abs(roll_deg)
    if tilt <= GREEN_LIMIT_DEG:
        return COLOR_GREEN
    if tilt <= YELLOW_LIMIT_DEG:
        return COLOR_YELLOW
    return COLOR_RED


def bubble_layout(roll_deg: float) -> BubbleLayout:
    """Lay out the tube, centre mark and bubble for a roll angle in degrees.

    The bubble position saturates at the maximum roll angle; its colour
    follows the actual, unclamped angle.
    """
    shown = max(-MAX_ROLL_ANGLE, min(MAX_ROLL_ANGLE, roll_deg))

    tube_x = (LEVEL_CANVAS_WIDTH - TUBE_WIDTH) // 2
    tube_y = (LEVEL_CANVAS_HEIGHT - TUBE_HEIGHT) // 2
    marking = (tube_x + TUBE_WIDTH // 2 - 1, tube_y + 2, 2, TUBE_HEIGHT - 4)

    travel = max(0, TUBE_WIDTH - BUBBLE_WIDTH)
    normalized = (shown + MAX_ROLL_ANGLE) / (2.0 * MAX_ROLL_ANGLE)
    offset = int(normalized * travel)

    bubble = (
        tube_x + offset,
        tube_y + (TUBE_HEIGHT - BUBBLE_HEIGHT) // 2,
        BUBBLE_WIDTH,
        BUBBLE_HEIGHT,
    )
    return BubbleLayout(
        tube=(tube_x, tube_y, TUBE_WIDTH, TUBE_HEIGHT),
        marking=marking,
        bubble=bubble,
        bubble_color=bubble_color(roll_deg),
    )


def format_roll(roll_deg: float) -> str:
    """Roll readout rounded to whole degrees, with a degree sign."""
    return f"{roll_deg:.0f}\u00b0"