"""
Trajectory data model shared by the expander, series builder and API.

Coordinates are field-frame (x right, y up), headings in radians measured
counter-clockwise from +x. Length units are whatever the session's Units
setting says; geometry and trajectory must use the same one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

import numpy as np

from .errors import ConfigurationError


class Topology(str, Enum):
    """Drivetrain wheel arrangement."""
    TANK = "tank"      # differential, two sides
    SWERVE = "swerve"  # four independently steered modules


class WheelId(str, Enum):
    CENTER = "center"
    FRONT_LEFT = "frontLeft"
    FRONT_RIGHT = "frontRight"
    BACK_LEFT = "backLeft"
    BACK_RIGHT = "backRight"


# Tank drives report their left/right sides under the front wheel ids
TANK_WHEELS = (WheelId.FRONT_LEFT, WheelId.FRONT_RIGHT)
SWERVE_WHEELS = (WheelId.FRONT_LEFT, WheelId.FRONT_RIGHT, WheelId.BACK_LEFT, WheelId.BACK_RIGHT)


@dataclass(frozen=True)
class Waypoint:
    """A user-placed control point."""
    x: float
    y: float
    heading: float = 0.0  # radians


@dataclass(frozen=True)
class TrajectorySample:
    """One time-stamped sample of a trajectory."""
    t: float             # seconds since trajectory start
    x: float
    y: float
    heading: float       # radians
    velocity: float
    acceleration: float = 0.0
    jerk: float = 0.0
    angular_velocity: Optional[float] = None  # rad/s, when the provider knows it
    steering_angle: Optional[float] = None    # swerve modules only, relative to heading


@dataclass(frozen=True)
class DeltaSegment:
    """
    Trajectory segment that carries its own step interval instead of an
    absolute time stamp. Only accepted at the adapter boundary.
    """
    dt: float
    x: float
    y: float
    position: float
    velocity: float
    acceleration: float
    jerk: float
    heading: float


@dataclass(frozen=True)
class Trajectory:
    """Ordered samples belonging to one wheel (or the robot center)."""
    wheel: WheelId
    samples: tuple[TrajectorySample, ...] = ()

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[TrajectorySample]:
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

    @property
    def times(self) -> list[float]:
        return [s.t for s in self.samples]

    @property
    def duration(self) -> float:
        if not self.samples:
            return 0.0
        return self.samples[-1].t - self.samples[0].t


@dataclass(frozen=True)
class DrivetrainGeometry:
    """Wheel placement of the robot, in the session's length unit."""
    wheelbase_width: float               # left to right wheel distance
    wheelbase_length: Optional[float] = None  # front to back, swerve only

    def validate(self, topology: Topology) -> None:
        """Raise ConfigurationError if this geometry can't drive `topology`."""
        if not _is_positive(self.wheelbase_width):
            raise ConfigurationError(f"wheelbase_width must be > 0, got {self.wheelbase_width!r}")
        if topology == Topology.SWERVE:
            if self.wheelbase_length is None:
                raise ConfigurationError("wheelbase_length is required for a swerve drivetrain")
            if not _is_positive(self.wheelbase_length):
                raise ConfigurationError(f"wheelbase_length must be > 0, got {self.wheelbase_length!r}")


def _is_positive(value) -> bool:
    try:
        return bool(np.isfinite(value)) and value > 0
    except TypeError:
        return False


def wrap_angle(angle):
    """Wrap angle(s) to (-pi, pi]. Accepts scalars or numpy arrays."""
    return np.pi - np.mod(np.pi - angle, 2 * np.pi)


def prefix_times(intervals: Iterable[float]) -> list[float]:
    """Absolute start time of each step given per-step intervals (first is 0)."""
    times = []
    elapsed = 0.0
    for dt in intervals:
        times.append(elapsed)
        elapsed += dt
    return times


def from_delta_segments(segments: Optional[Iterable[DeltaSegment]],
                        wheel: WheelId = WheelId.CENTER) -> Trajectory:
    """Convert delta-time segments into an absolute-time Trajectory."""
    segments = list(segments or [])
    times = prefix_times(seg.dt for seg in segments)
    samples = tuple(
        TrajectorySample(
            t=t,
            x=seg.x,
            y=seg.y,
            heading=seg.heading,
            velocity=seg.velocity,
            acceleration=seg.acceleration,
            jerk=seg.jerk,
        )
        for t, seg in zip(times, segments)
    )
    return Trajectory(wheel=wheel, samples=samples)
