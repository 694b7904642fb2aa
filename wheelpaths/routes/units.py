"""
Unit system endpoints: axis info, snapping and click-to-place.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from ..config import get_units
from ..errors import ConfigurationError
from ..models import (
    BoundsModel,
    LabelsModel,
    PlaceRequest,
    PlaceResponse,
    SnapRequest,
    SnapResponse,
    UnitInfo,
    UnitListResponse,
    WaypointModel,
)
from ..units import Units, axis_labels, bounds, granularity, place_point, snap

logger = logging.getLogger(__name__)

router = APIRouter()


def _session_units() -> Units:
    """Configured unit, with a malformed setting reported as a bad request."""
    try:
        return get_units()
    except ConfigurationError as e:
        logger.warning("Rejected unit request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/units", response_model=UnitListResponse)
def list_units():
    """Bounds, labels and snap granularity of every supported unit."""
    infos = []
    for unit in Units:
        b = bounds(unit)
        infos.append(UnitInfo(
            unit=unit,
            granularity=granularity(unit),
            bounds=BoundsModel(x_upper=b.x_upper, x_tick=b.x_tick, y_upper=b.y_upper, y_tick=b.y_tick),
            labels=LabelsModel(**asdict(axis_labels(unit))),
        ))
    return UnitListResponse(units=infos)


@router.post("/units/snap", response_model=SnapResponse)
def snap_value(request: SnapRequest):
    """Snap one coordinate. Unknown units snap to a hundredth instead of failing."""
    unit = request.units if request.units is not None else _session_units()
    return SnapResponse(value=request.value, snapped=snap(request.value, unit))


@router.post("/units/place", response_model=PlaceResponse)
def place(request: PlaceRequest):
    """
    Snap a clicked point and turn it into a waypoint.

    A point that lands outside the field after snapping is rejected
    (accepted=false) rather than clamped. Unknown unit names snap to a
    hundredth and use the configured unit's field.
    """
    unit = request.units if request.units is not None else _session_units()
    fallback = None if Units.parse(unit) is not None else bounds(_session_units())
    waypoint = place_point(request.x, request.y, unit, fallback_bounds=fallback)
    if waypoint is None:
        return PlaceResponse(accepted=False, waypoint=None)
    return PlaceResponse(accepted=True, waypoint=WaypointModel.from_waypoint(waypoint))
