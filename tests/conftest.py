import math

import pytest

from wheelpaths.trajectory import DrivetrainGeometry, Trajectory, TrajectorySample, WheelId, wrap_angle

DT = 0.02


def _build(points, dt=DT):
    """points: iterable of (x, y, heading, velocity)"""
    samples = tuple(
        TrajectorySample(t=k * dt, x=x, y=y, heading=h, velocity=v)
        for k, (x, y, h, v) in enumerate(points)
    )
    return Trajectory(wheel=WheelId.CENTER, samples=samples)


@pytest.fixture
def make_center():
    return _build


@pytest.fixture
def straight_center():
    # 1.5 units/s along a 30 degree line
    heading = math.radians(30)
    v = 1.5
    return _build(
        (v * k * DT * math.cos(heading), v * k * DT * math.sin(heading), heading, v)
        for k in range(50)
    )


@pytest.fixture
def arc_center():
    # Counter-clockwise circle of radius 5 at 0.5 rad/s
    radius, omega = 5.0, 0.5
    points = []
    for k in range(100):
        phi = omega * k * DT
        points.append((radius * math.cos(phi), radius * math.sin(phi),
                       float(wrap_angle(phi + math.pi / 2)), radius * omega))
    return _build(points)


@pytest.fixture
def tank_geometry():
    return DrivetrainGeometry(wheelbase_width=2.0)


@pytest.fixture
def swerve_geometry():
    return DrivetrainGeometry(wheelbase_width=2.0, wheelbase_length=3.0)
