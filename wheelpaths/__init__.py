"""Drivetrain trajectory expansion for tank and swerve robots."""

from .errors import ConfigurationError, InvalidInputError, WheelpathsError
from .expander import expand
from .series import position_series, velocity_series
from .trajectory import (
    DeltaSegment,
    DrivetrainGeometry,
    Topology,
    Trajectory,
    TrajectorySample,
    Waypoint,
    WheelId,
    from_delta_segments,
)
from .units import Units, bounds, place_point, snap

__all__ = [
    'ConfigurationError',
    'InvalidInputError',
    'WheelpathsError',
    'expand',
    'position_series',
    'velocity_series',
    'DeltaSegment',
    'DrivetrainGeometry',
    'Topology',
    'Trajectory',
    'TrajectorySample',
    'Waypoint',
    'WheelId',
    'from_delta_segments',
    'Units',
    'bounds',
    'place_point',
    'snap',
]
