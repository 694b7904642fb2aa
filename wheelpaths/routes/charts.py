"""
Position and velocity chart endpoints.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from ..charts import position_chart, velocity_chart
from ..config import get_default_geometry, get_units
from ..errors import InvalidInputError
from ..expander import expand
from ..models import (
    BoundsModel,
    ChartRequest,
    ChartResponse,
    ChartSeriesModel,
    LabelsModel,
    center_from_request,
)
from ..units import axis_labels, bounds

logger = logging.getLogger(__name__)

router = APIRouter()


def _prepare(request: ChartRequest):
    """Resolve defaults and expand the center trajectory."""
    try:
        units = request.units or get_units()
        geometry = request.geometry.to_geometry() if request.geometry else get_default_geometry()
        center = center_from_request(request.center)
        wheels = expand(center, geometry, request.topology)
    except InvalidInputError as e:
        logger.warning("Rejected chart request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    waypoints = [wp.to_waypoint() for wp in request.waypoints]
    return units, waypoints, center, wheels


def _response(units, series) -> ChartResponse:
    b = bounds(units)
    return ChartResponse(
        units=units,
        bounds=BoundsModel(x_upper=b.x_upper, x_tick=b.x_tick, y_upper=b.y_upper, y_tick=b.y_tick),
        labels=LabelsModel(**asdict(axis_labels(units))),
        series=[ChartSeriesModel(name=s.name, role=s.role, points=s.points) for s in series],
    )


@router.post("/charts/position", response_model=ChartResponse)
def position_chart_data(request: ChartRequest):
    """Wheel paths, optional center path and waypoint markers for the field view."""
    units, waypoints, center, wheels = _prepare(request)
    series = position_chart(waypoints, wheels, request.topology, center=center,
                            show_center=request.show_center, show_waypoints=request.show_waypoints)
    return _response(units, series)


@router.post("/charts/velocity", response_model=ChartResponse)
def velocity_chart_data(request: ChartRequest):
    """Velocity over time for each wheel."""
    units, waypoints, _, wheels = _prepare(request)
    return _response(units, velocity_chart(waypoints, wheels, request.topology))
