"""
Length units for the field view.

Each unit carries the field-sized axis bounds used by the position chart and the
granularity interactive point placement snaps to.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ConfigurationError
from .trajectory import Waypoint


class Units(str, Enum):
    FEET = "feet"
    METERS = "meters"
    INCHES = "inches"

    @classmethod
    def parse(cls, value) -> Optional["Units"]:
        """Look up a unit by value or name, case-insensitive. None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for unit in cls:
            if key in (unit.value, unit.name.lower()):
                return unit
        return None


@dataclass(frozen=True)
class AxisBounds:
    x_upper: float
    x_tick: float
    y_upper: float
    y_tick: float
    x_lower: float = 0.0
    y_lower: float = 0.0

    def contains(self, x: float, y: float) -> bool:
        return self.x_lower <= x <= self.x_upper and self.y_lower <= y <= self.y_upper


@dataclass(frozen=True)
class AxisLabels:
    x: str
    y: str
    velocity: str


_BOUNDS = {
    Units.FEET: AxisBounds(x_upper=32.0, x_tick=1.0, y_upper=27.0, y_tick=1.0),
    Units.METERS: AxisBounds(x_upper=10.0, x_tick=0.5, y_upper=8.23, y_tick=0.5),
    Units.INCHES: AxisBounds(x_upper=384.0, x_tick=12.0, y_upper=324.0, y_tick=12.0),
}

_SNAP_GRANULARITY = {
    Units.FEET: 0.5,
    Units.METERS: 0.25,
    Units.INCHES: 6.0,
}
DEFAULT_SNAP_GRANULARITY = 0.01

_ABBREVIATIONS = {
    Units.FEET: "ft",
    Units.METERS: "m",
    Units.INCHES: "in",
}


def bounds(unit) -> AxisBounds:
    """Axis bounds and tick spacing of the field view for `unit`."""
    parsed = Units.parse(unit)
    if parsed is None:
        raise ConfigurationError(f"Unsupported unit: {unit!r}")
    return _BOUNDS[parsed]


def granularity(unit) -> float:
    """Snap step for `unit`; unknown units fall back to a hundredth."""
    parsed = Units.parse(unit)
    return _SNAP_GRANULARITY.get(parsed, DEFAULT_SNAP_GRANULARITY)


def round_to(value: float, step: float) -> float:
    """Round to the nearest multiple of `step`, halves away from zero."""
    if not math.isfinite(value):
        return value
    multiples = math.floor(abs(value) / step + 0.5)
    # Drop the residue of multiplying by steps like 0.01
    return math.copysign(round(multiples * step, 10), value)


def snap(value: float, unit) -> float:
    """Snap an interactively placed coordinate to the unit's grid. Never raises."""
    return round_to(value, granularity(unit))


def place_point(raw_x: float, raw_y: float, unit,
                fallback_bounds: Optional[AxisBounds] = None) -> Optional[Waypoint]:
    """
    Turn a click on the field view into a waypoint.

    Both coordinates are snapped first; if either snapped value falls outside
    the unit's axis bounds the placement is rejected and None is returned.
    An unrecognized unit snaps to a hundredth and is checked against
    `fallback_bounds` (the feet field if not given), so placement never fails.
    New waypoints start with a heading of 0.
    """
    x = snap(raw_x, unit)
    y = snap(raw_y, unit)
    parsed = Units.parse(unit)
    if parsed is not None:
        field = _BOUNDS[parsed]
    else:
        field = fallback_bounds or _BOUNDS[Units.FEET]
    if not field.contains(x, y):
        return None
    return Waypoint(x=x, y=y, heading=0.0)


def axis_labels(unit) -> AxisLabels:
    """Chart axis labels for `unit`."""
    parsed = Units.parse(unit)
    if parsed is None:
        raise ConfigurationError(f"Unsupported unit: {unit!r}")
    abbrev = _ABBREVIATIONS[parsed]
    return AxisLabels(
        x=f"X-Position ({abbrev})",
        y=f"Y-Position ({abbrev})",
        velocity=f"Velocity ({abbrev}/s)",
    )
