"""
Pydantic models for API request/response types.
"""

from typing import Optional
from pydantic import BaseModel, Field

from .errors import InvalidInputError
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
from .units import Units


# Waypoint models
class WaypointModel(BaseModel):
    x: float = Field(..., description="X position")
    y: float = Field(..., description="Y position")
    heading: float = Field(0.0, description="Heading angle in radians")

    def to_waypoint(self) -> Waypoint:
        return Waypoint(x=self.x, y=self.y, heading=self.heading)

    @classmethod
    def from_waypoint(cls, wp: Waypoint) -> "WaypointModel":
        return cls(x=wp.x, y=wp.y, heading=wp.heading)


# Trajectory models
class SampleRequest(BaseModel):
    """A center trajectory sample, either with absolute time t or step interval dt."""
    t: Optional[float] = Field(None, ge=0.0, description="Absolute time in seconds")
    dt: Optional[float] = Field(None, gt=0.0, description="Step interval in seconds (delta-time shape)")
    x: float = Field(..., description="X position")
    y: float = Field(..., description="Y position")
    heading: float = Field(..., description="Heading angle in radians")
    velocity: float = Field(..., description="Speed along the path")
    acceleration: float = Field(0.0, description="Acceleration along the path")
    jerk: float = Field(0.0, description="Jerk along the path")
    position: float = Field(0.0, description="Distance travelled (delta-time shape)")
    angular_velocity: Optional[float] = Field(None, description="Angular velocity in rad/s, if known")


class SampleResponse(BaseModel):
    t: float
    x: float
    y: float
    heading: float
    velocity: float
    acceleration: float
    jerk: float
    steering_angle: Optional[float] = None

    @classmethod
    def from_sample(cls, s: TrajectorySample) -> "SampleResponse":
        return cls(t=s.t, x=s.x, y=s.y, heading=s.heading, velocity=s.velocity,
                   acceleration=s.acceleration, jerk=s.jerk, steering_angle=s.steering_angle)


class GeometryModel(BaseModel):
    wheelbase_width: float = Field(..., gt=0.0, description="Distance between left and right wheels")
    wheelbase_length: Optional[float] = Field(None, gt=0.0, description="Distance between front and back wheels (swerve)")

    def to_geometry(self) -> DrivetrainGeometry:
        return DrivetrainGeometry(wheelbase_width=self.wheelbase_width,
                                  wheelbase_length=self.wheelbase_length)


# Expand request/response
class ExpandRequest(BaseModel):
    center: list[SampleRequest] = Field(default_factory=list, description="Center trajectory samples")
    topology: Topology = Field(Topology.TANK, description="Drivetrain type: tank or swerve")
    geometry: Optional[GeometryModel] = Field(None, description="Drivetrain geometry (configured default if omitted)")


class ExpandResponse(BaseModel):
    topology: Topology
    sample_count: int
    wheels: dict[WheelId, list[SampleResponse]]


# Chart models
class ChartRequest(BaseModel):
    waypoints: list[WaypointModel] = Field(default_factory=list)
    center: list[SampleRequest] = Field(default_factory=list, description="Center trajectory generated from the waypoints")
    topology: Topology = Field(Topology.TANK)
    geometry: Optional[GeometryModel] = None
    units: Optional[Units] = Field(None, description="Display unit (configured default if omitted)")
    show_center: bool = Field(False, description="Include the center path in the position chart")
    show_waypoints: bool = Field(True, description="Include waypoint markers in the position chart")


class BoundsModel(BaseModel):
    x_upper: float
    x_tick: float
    y_upper: float
    y_tick: float


class LabelsModel(BaseModel):
    x: str
    y: str
    velocity: str


class ChartSeriesModel(BaseModel):
    name: str
    role: str
    points: list[tuple[float, float]]


class ChartResponse(BaseModel):
    units: Units
    bounds: BoundsModel
    labels: LabelsModel
    series: list[ChartSeriesModel]


# Unit models
class UnitInfo(BaseModel):
    unit: Units
    granularity: float
    bounds: BoundsModel
    labels: LabelsModel


class UnitListResponse(BaseModel):
    units: list[UnitInfo]


class SnapRequest(BaseModel):
    value: float
    units: Optional[str] = Field(None, description="Unit name; unrecognized names snap to a hundredth")


class SnapResponse(BaseModel):
    value: float
    snapped: float


class PlaceRequest(BaseModel):
    x: float = Field(..., description="Raw X coordinate of the click")
    y: float = Field(..., description="Raw Y coordinate of the click")
    units: Optional[str] = Field(None, description="Unit name; unrecognized names snap to a hundredth")


class PlaceResponse(BaseModel):
    accepted: bool
    waypoint: Optional[WaypointModel] = None


def center_from_request(samples: list[SampleRequest]) -> Trajectory:
    """
    Build the center trajectory from request samples.

    All samples must use the same shape: absolute t, or delta-time dt which is
    converted to absolute time here.
    """
    if not samples:
        return Trajectory(wheel=WheelId.CENTER)

    if all(s.t is not None for s in samples):
        return Trajectory(wheel=WheelId.CENTER, samples=tuple(
            TrajectorySample(t=s.t, x=s.x, y=s.y, heading=s.heading, velocity=s.velocity,
                             acceleration=s.acceleration, jerk=s.jerk,
                             angular_velocity=s.angular_velocity)
            for s in samples
        ))

    if all(s.dt is not None for s in samples):
        return from_delta_segments(
            DeltaSegment(dt=s.dt, x=s.x, y=s.y, position=s.position, velocity=s.velocity,
                         acceleration=s.acceleration, jerk=s.jerk, heading=s.heading)
            for s in samples
        )

    raise InvalidInputError("Every center sample needs an absolute time t, or every sample a step interval dt")
