"""
Distance endpoint
=================

GET /api/distance?x=..&y=..&z=.. -- distance of (x, y, z) from the origin
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from src.api.schemas import DistanceResponse, ErrorResponse
from src.domain.distance import distance_from_origin, point_from_query

router = APIRouter(prefix="/api", tags=["distance"])


@router.get(
    "/distance",
    response_model=DistanceResponse,
    summary="Distance of a 3D point from the origin",
    description=(
        "Missing or blank coordinates count as 0. "
        "Non-numeric coordinates are rejected with 400."
    ),
    responses={400: {"model": ErrorResponse, "description": "Non-numeric input"}},
)
async def get_distance(
    x: Optional[str] = Query(None),
    y: Optional[str] = Query(None),
    z: Optional[str] = Query(None),
):
    # InvalidCoordinate propagates to the handler registered in create_app
    point = point_from_query(x, y, z)
    return DistanceResponse(distance=distance_from_origin(point))
