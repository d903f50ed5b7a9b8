"""State and layout logic for a shooting-range handheld panel: shot counter,
stage timer, competition page, bubble level, artificial horizon, battery
gauge, screen navigation and widget helpers."""

__version__ = "0.1.0"