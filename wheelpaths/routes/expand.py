"""
Wheel trajectory expansion endpoint.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..config import get_default_geometry
from ..errors import InvalidInputError
from ..expander import expand
from ..models import ExpandRequest, ExpandResponse, SampleResponse, center_from_request

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/expand", response_model=ExpandResponse)
def expand_trajectory(request: ExpandRequest):
    """
    Derive one trajectory per wheel from the center trajectory.

    Tank drives return frontLeft/frontRight (the two sides), swerve drives all
    four modules. Fewer than two center samples give an empty wheel map.
    """
    try:
        geometry = request.geometry.to_geometry() if request.geometry else get_default_geometry()
        center = center_from_request(request.center)
        wheels = expand(center, geometry, request.topology)
    except InvalidInputError as e:
        logger.warning("Rejected expand request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return ExpandResponse(
        topology=request.topology,
        sample_count=len(center),
        wheels={
            wheel: [SampleResponse.from_sample(s) for s in trajectory]
            for wheel, trajectory in wheels.items()
        }
    )
