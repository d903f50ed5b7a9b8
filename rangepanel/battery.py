"""LiPo battery charge estimate and its on-screen indicator."""

from __future__ import annotations

from dataclasses import dataclass

SYMBOL_FULL = "\uf240"
SYMBOL_3 = "\uf241"
SYMBOL_2 = "\uf242"
SYMBOL_1 = "\uf243"
SYMBOL_EMPTY = "\uf244"

# (lower voltage, base percentage, span in volts, percentage gained over span)
_CURVE = (
    (4.10, 90, 0.10, 10),
    (4.00, 80, 0.10, 10),
    (3.90, 70, 0.10, 10),
    (3.80, 60, 0.10, 10),
    (3.70, 45, 0.10, 15),
    (3.60, 20, 0.10, 25),
    (3.50, 10, 0.10, 10),
    (3.30, 5, 0.20, 5),
)


def lipo_percentage(voltage: float) -> int:
    """Estimate charge from a single-cell LiPo voltage along its discharge curve."""
    if voltage >= 4.20:
        return 100
    for floor, base, span, gain in _CURVE:
        if voltage >= floor:
            percentage = base + int((voltage - floor) / span * gain)
            return max(0, min(100, percentage))
    return 0


def battery_symbol(percentage: int) -> str:
    """Pick the battery icon glyph for a charge percentage."""
    if percentage > 80:
        return SYMBOL_FULL
    if percentage > 50:
        return SYMBOL_3
    if percentage > 20:
        return SYMBOL_2
    if percentage > 5:
        return SYMBOL_1
    return SYMBOL_EMPTY


@dataclass
class BatteryIndicator:
    """Icon and percentage text shown in the corner of a screen."""

    text: str = "100%"
    symbol: str = SYMBOL_FULL
    percentage: int = 100

    def update(self, voltage: float) -> int:
        """Refresh the indicator from a voltage reading and return the percentage."""
        self.percentage = lipo_percentage(voltage)
        self.text = f"{self.percentage}%"
        self.symbol = battery_symbol(self.percentage)
        return self.percentage