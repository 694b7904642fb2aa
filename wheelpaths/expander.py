"""
Drivetrain kinematic expander.

Turns the trajectory of the robot center into one trajectory per physical
wheel:
- Tank: left and right sides, offset perpendicular to the heading
- Swerve: four modules at the rotated corners of the wheelbase rectangle

Every wheel trajectory keeps the center's time stamps, so all wheels run off
the same clock.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .errors import ConfigurationError, InvalidInputError
from .kinematics import create_swerve_kinematics_function, create_tank_kinematics_function
from .trajectory import (
    SWERVE_WHEELS,
    TANK_WHEELS,
    DrivetrainGeometry,
    Topology,
    Trajectory,
    TrajectorySample,
    WheelId,
    wrap_angle,
)

logger = logging.getLogger(__name__)

# Below this a module or the robot is treated as not moving
_STILL_EPS = 1e-12


@dataclass
class CenterMotion:
    """Center trajectory unpacked into numpy columns."""
    samples: tuple[TrajectorySample, ...]
    t: np.ndarray
    x: np.ndarray
    y: np.ndarray
    heading: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray
    jerk: np.ndarray
    omega: np.ndarray

    @classmethod
    def from_samples(cls, samples: tuple[TrajectorySample, ...]) -> "CenterMotion":
        """Unpack and validate at least two samples."""
        def column(name):
            return np.array([getattr(s, name) for s in samples], dtype=float)

        t = column('t')
        x = column('x')
        y = column('y')
        heading = column('heading')
        velocity = column('velocity')
        acceleration = column('acceleration')
        jerk = column('jerk')

        for name, values in (('t', t), ('x', x), ('y', y), ('heading', heading),
                             ('velocity', velocity), ('acceleration', acceleration), ('jerk', jerk)):
            if not np.all(np.isfinite(values)):
                raise InvalidInputError(f"Center trajectory has non-finite {name} values")

        steps = np.diff(t)
        if np.any(steps <= 0):
            bad = int(np.argmax(steps <= 0)) + 1
            raise InvalidInputError(
                f"Center trajectory time must be strictly increasing (sample {bad}: "
                f"t={t[bad]!r} after t={t[bad - 1]!r})"
            )

        if all(s.angular_velocity is not None for s in samples):
            omega = column('angular_velocity')
            if not np.all(np.isfinite(omega)):
                raise InvalidInputError("Center trajectory has non-finite angular_velocity values")
        else:
            # Shortest-path heading change so a wrap at +-pi is not a full spin
            omega = _extend(wrap_angle(np.diff(heading)) / steps)

        return cls(samples=samples, t=t, x=x, y=y, heading=heading, velocity=velocity,
                   acceleration=acceleration, jerk=jerk, omega=omega)

    def __len__(self) -> int:
        return len(self.samples)


def _extend(segment_values: np.ndarray) -> np.ndarray:
    """Per-segment values to per-sample: the last sample repeats the final segment."""
    return np.append(segment_values, segment_values[-1])


def _rate(values: np.ndarray, t: np.ndarray) -> np.ndarray:
    """Per-sample time derivative from forward differences."""
    return _extend(np.diff(values) / np.diff(t))


def expand(center: Optional[Iterable[TrajectorySample]], geometry: DrivetrainGeometry,
           topology: Topology) -> dict[WheelId, Trajectory]:
    """
    Derive per-wheel trajectories from the center trajectory.

    Args:
        center: Center trajectory (a Trajectory or any sequence of samples)
        geometry: Wheel placement, same length unit as the trajectory
        topology: Drivetrain type

    Returns:
        Mapping of wheel id to trajectory; empty for fewer than 2 samples.
        Tank sides are reported as FRONT_LEFT and FRONT_RIGHT.

    Raises:
        ConfigurationError: unusable geometry or unknown topology
        InvalidInputError: non-finite values or non-increasing time
    """
    try:
        topology = Topology(topology)
    except ValueError:
        raise ConfigurationError(f"Unsupported drivetrain topology: {topology!r}")

    geometry.validate(topology)

    samples = tuple(center) if center is not None else ()
    if len(samples) < 2:
        logger.debug("Center trajectory has %d samples, no wheel trajectories", len(samples))
        return {}

    motion = CenterMotion.from_samples(samples)

    if topology == Topology.TANK:
        wheels = _expand_tank(motion, geometry)
    else:
        wheels = _expand_swerve(motion, geometry)

    logger.debug("Expanded %d center samples into %d %s wheel trajectories",
                 len(motion), len(wheels), topology.value)
    return wheels


def _expand_tank(motion: CenterMotion, geometry: DrivetrainGeometry) -> dict[WheelId, Trajectory]:
    f_tank = create_tank_kinematics_function(geometry).map(len(motion))

    state = np.vstack([motion.velocity, motion.omega, motion.x, motion.y, motion.heading])
    sides = f_tank(state).full()

    wheels = {}
    for i, wheel in enumerate(TANK_WHEELS):
        x, y, speed = sides[3 * i], sides[3 * i + 1], sides[3 * i + 2]
        wheels[wheel] = _wheel_trajectory(wheel, motion, x, y, speed)
    return wheels


def _expand_swerve(motion: CenterMotion, geometry: DrivetrainGeometry) -> dict[WheelId, Trajectory]:
    forward_x, forward_y = _forward_direction(motion)

    f_swerve = create_swerve_kinematics_function(geometry).map(len(motion))

    state = np.vstack([motion.velocity * forward_x, motion.velocity * forward_y,
                       motion.omega, motion.x, motion.y, motion.heading])
    modules = f_swerve(state).full()

    reversing = motion.velocity < 0

    wheels = {}
    for i, wheel in enumerate(SWERVE_WHEELS):
        x, y, wvx, wvy = modules[4 * i:4 * i + 4]

        magnitude = np.hypot(wvx, wvy)
        speed = np.where(reversing, -magnitude, magnitude)

        # A module driving backwards points opposite to its velocity vector
        direction = np.arctan2(wvy, wvx) + np.where(reversing, np.pi, 0.0)
        steering = np.where(magnitude > _STILL_EPS, wrap_angle(direction - motion.heading), 0.0)

        wheels[wheel] = _wheel_trajectory(wheel, motion, x, y, speed, steering)
    return wheels


def _forward_direction(motion: CenterMotion) -> tuple[np.ndarray, np.ndarray]:
    """
    Unit vector of the direction the robot treats as forward travel at each
    sample: the path tangent from position deltas, flipped while reversing, or
    the heading when the robot does not move.
    """
    # Central differences inside, one-sided at the ends
    dx = np.gradient(motion.x, motion.t)
    dy = np.gradient(motion.y, motion.t)
    dist = np.hypot(dx, dy)

    moving = dist > _STILL_EPS
    safe_dist = np.where(moving, dist, 1.0)
    flip = np.where(motion.velocity < 0, -1.0, 1.0)

    forward_x = np.where(moving, flip * dx / safe_dist, np.cos(motion.heading))
    forward_y = np.where(moving, flip * dy / safe_dist, np.sin(motion.heading))
    return forward_x, forward_y


def _wheel_trajectory(wheel: WheelId, motion: CenterMotion, x: np.ndarray, y: np.ndarray,
                      speed: np.ndarray, steering: Optional[np.ndarray] = None) -> Trajectory:
    """
    Assemble a wheel trajectory on the center's clock.

    The wheel's acceleration and jerk are the center's plus the first and second
    time derivatives of the speed offset; with no rotation the offset is zero
    and the center values carry over unchanged.
    """
    offset = speed - motion.velocity
    offset_rate = _rate(offset, motion.t)
    offset_rate2 = _rate(offset_rate, motion.t)

    acceleration = motion.acceleration + offset_rate
    jerk = motion.jerk + offset_rate2

    samples = tuple(
        TrajectorySample(
            t=s.t,
            x=float(x[k]),
            y=float(y[k]),
            heading=s.heading,
            velocity=float(speed[k]),
            acceleration=float(acceleration[k]),
            jerk=float(jerk[k]),
            angular_velocity=float(motion.omega[k]),
            steering_angle=None if steering is None else float(steering[k]),
        )
        for k, s in enumerate(motion.samples)
    )
    return Trajectory(wheel=wheel, samples=samples)
