"""
Chart composition for the position and velocity graphs.

Decides which series a graph shows and what they are called; styling is left
to the frontend.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from .series import Point, position_series, velocity_series
from .trajectory import Topology, Trajectory, Waypoint, WheelId


@dataclass
class ChartSeries:
    name: str
    role: str  # "wheel", "center" or "waypoints"
    points: list[Point] = field(default_factory=list)


_TANK_NAMES = {
    WheelId.FRONT_LEFT: "Left Trajectory",
    WheelId.FRONT_RIGHT: "Right Trajectory",
}

_SWERVE_NAMES = {
    WheelId.FRONT_LEFT: "Front Left Trajectory",
    WheelId.FRONT_RIGHT: "Front Right Trajectory",
    WheelId.BACK_LEFT: "Back Left Trajectory",
    WheelId.BACK_RIGHT: "Back Right Trajectory",
}

# Position graph draws the back modules underneath the front ones
_POSITION_ORDER = {
    Topology.TANK: (WheelId.FRONT_LEFT, WheelId.FRONT_RIGHT),
    Topology.SWERVE: (WheelId.BACK_LEFT, WheelId.BACK_RIGHT, WheelId.FRONT_LEFT, WheelId.FRONT_RIGHT),
}

_VELOCITY_ORDER = {
    Topology.TANK: (WheelId.FRONT_LEFT, WheelId.FRONT_RIGHT),
    Topology.SWERVE: (WheelId.FRONT_LEFT, WheelId.FRONT_RIGHT, WheelId.BACK_LEFT, WheelId.BACK_RIGHT),
}


def wheel_series_name(wheel: WheelId, topology: Topology) -> str:
    names = _TANK_NAMES if Topology(topology) == Topology.TANK else _SWERVE_NAMES
    return names[WheelId(wheel)]


def position_chart(waypoints: Sequence[Waypoint], wheels: Mapping[WheelId, Trajectory],
                   topology: Topology, center: Optional[Trajectory] = None,
                   show_center: bool = False, show_waypoints: bool = True) -> list[ChartSeries]:
    """
    Series for the field view, in drawing order.

    Wheel paths (and the optional center path) need at least two waypoints;
    the waypoint markers are drawn whenever there are any.
    """
    topology = Topology(topology)
    chart = []

    if len(waypoints) > 1:
        for wheel in _POSITION_ORDER[topology]:
            if wheel in wheels:
                chart.append(ChartSeries(name=wheel_series_name(wheel, topology), role="wheel",
                                         points=position_series(wheels[wheel])))

        if show_center and center is not None:
            chart.append(ChartSeries(name="Center Trajectory", role="center",
                                     points=position_series(center)))

    if show_waypoints and waypoints:
        chart.append(ChartSeries(name="Waypoints", role="waypoints",
                                 points=position_series(waypoints)))

    return chart


def velocity_chart(waypoints: Sequence[Waypoint], wheels: Mapping[WheelId, Trajectory],
                   topology: Topology) -> list[ChartSeries]:
    """Wheel velocity over time; empty until the path has two waypoints."""
    topology = Topology(topology)
    if len(waypoints) <= 1:
        return []

    return [
        ChartSeries(name=wheel_series_name(wheel, topology), role="wheel",
                    points=velocity_series(wheels[wheel]))
        for wheel in _VELOCITY_ORDER[topology]
        if wheel in wheels
    ]
