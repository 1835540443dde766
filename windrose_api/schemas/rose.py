"""Pydantic schemas for wind rose requests and responses."""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union


class CenterSchema(BaseModel):
    """Center of the rose in surface coordinates."""

    x: float
    y: float


class RoseRequest(BaseModel):
    """Request body for laying out or rendering a wind rose."""

    # {"calm": 8, "N": {"0-10": 3, ...}, ...} or {"N": 10, ...} for mean directional
    data: Optional[Dict[str, Any]] = Field(
        default=None, description="Wind rose dataset; sample data when omitted"
    )
    center: Optional[CenterSchema] = Field(
        default=None, description="Rose center; the configured default when omitted"
    )


class LayoutResponse(BaseModel):
    """Response schema for a computed layout."""

    style: str
    primitives: List[Dict[str, Any]]  # [{"kind": "circle", "cx": ..., ...}, ...]


class SampleResponse(BaseModel):
    """Response schema for a style's sample dataset."""

    style: str
    data: Dict[str, Union[float, Dict[str, float]]]
