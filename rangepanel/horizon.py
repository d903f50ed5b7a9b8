"""Artificial horizon geometry and its readouts."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Point = tuple[int, int]

MIN_RETICLE_WIDTH = 20
NO_READING = "---"


def horizon_polygon(
    width: int, height: int, pitch_deg: float, roll_deg: float
) -> tuple[Point, Point, Point, Point]:
    """Corners of the filled region bounded by the horizon line.

    The first two points lie past the far side of the region, the last two
    are the ends of the horizon line itself (second end, then first end).
    """
    if width <= 0 or height <= 0:
        raise ValueError("the horizon needs a positive width and height")

    center_x = width // 2
    center_y = height // 2
    roll_rad = math.radians(roll_deg)
    pitch_shift = int(pitch_deg * (height / 90.0))
    half_len = max(width, height)

    s_roll = math.sin(roll_rad)
    c_roll = math.cos(roll_rad)

    p1 = (
        int(center_x - half_len * c_roll),
        int(center_y - half_len * s_roll + pitch_shift),
    )
    p2 = (
        int(center_x + half_len * c_roll),
        int(center_y + half_len * s_roll + pitch_shift),
    )

    offset = width + height
    far1 = (int(p1[0] - offset * s_roll), int(p1[1] + offset * c_roll))
    far2 = (int(p2[0] - offset * s_roll), int(p2[1] + offset * c_roll))
    return far1, far2, p2, p1


def reticle_bar_width(parent_width: int) -> int:
    """Width of the fixed reference bar: three quarters of the parent, at least 20."""
    return max((parent_width * 3) // 4, MIN_RETICLE_WIDTH)


def format_attitude(prefix: str, value: float) -> str:
    """Readout text such as ``P: 12`` with the angle rounded to whole degrees."""
    return f"{prefix}: {value:.0f}"


@dataclass
class ArtificialHorizon:
    """A horizon display of a given size with pitch and roll readouts."""

    width: int
    height: int
    polygon: tuple[Point, Point, Point, Point] = field(init=False)
    reticle_width: int = field(init=False)
    pitch_text: str = field(init=False, default=format_attitude("P", 0).replace("0", NO_READING))
    roll_text: str = field(init=False, default=format_attitude("R", 0).replace("0", NO_READING))

    def __post_init__(self) -> None:
        self.polygon = horizon_polygon(self.width, self.height, 0.0, 0.0)
        self.reticle_width = reticle_bar_width(self.width)

    def update(self, pitch_deg: float, roll_deg: float) -> tuple[Point, Point, Point, Point]:
        """Redraw for a new attitude and refresh the readouts."""
        self.polygon = horizon_polygon(self.width, self.height, pitch_deg, roll_deg)
        self.pitch_text = format_attitude("P", pitch_deg)
        self.roll_text = format_attitude("R", roll_deg)
        return self.polygon