"""API routes for wind rose layouts and drawings."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from windrose_api.schemas.rose import LayoutResponse, RoseRequest, SampleResponse
from windrose_api.services.rose_service import WindRoseService
from windrose_api.api.dependencies import get_windrose_service
from windrose_layout.exceptions import InvalidInput
from windrose_layout.models.geometry import Point

router = APIRouter(prefix="/roses/{style}", tags=["roses"])


def _check_style(style: str, service: WindRoseService) -> None:
    if not service.has_style(style):
        raise HTTPException(status_code=404, detail=f"Unknown rose style: {style}")


def _center(request: RoseRequest) -> Optional[Point]:
    if request.center is None:
        return None
    return Point(x=request.center.x, y=request.center.y)


@router.get("/sample", response_model=SampleResponse)
async def get_sample(
    style: str,
    windrose_service: WindRoseService = Depends(get_windrose_service),
) -> SampleResponse:
    """Get the built-in sample dataset of a rose style."""
    _check_style(style, windrose_service)
    return {"style": style, "data": windrose_service.get_sample(style)}


@router.post("/layout", response_model=LayoutResponse)
async def get_layout(
    style: str,
    request: RoseRequest,
    windrose_service: WindRoseService = Depends(get_windrose_service),
) -> LayoutResponse:
    """
    Compute the drawable primitives of a wind rose.

    Omitted data and center fall back to the sample dataset and the
    configured default center.
    """
    _check_style(style, windrose_service)
    try:
        primitives = windrose_service.get_layout(style, request.data, _center(request))
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"style": style, "primitives": primitives}


@router.post("/svg")
async def get_svg(
    style: str,
    request: RoseRequest,
    windrose_service: WindRoseService = Depends(get_windrose_service),
) -> Response:
    """Render a wind rose as an SVG image."""
    _check_style(style, windrose_service)
    try:
        svg = windrose_service.render_svg(style, request.data, _center(request))
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=str(e))
    return Response(content=svg, media_type="image/svg+xml")
