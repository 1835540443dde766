"""Registry of rose styles behind a common layout interface."""
from typing import Dict, List, Mapping, Protocol

from windrose_layout.config import (
    SAMPLE_FREQUENCY_DATA,
    SAMPLE_MEAN_DIRECTIONAL_DATA,
    SAMPLE_TELESCOPE_DATA,
)
from windrose_layout.models.geometry import Point
from windrose_layout.models.primitives import Primitive
from windrose_layout.services.frequency_rose import FrequencyRoseLayout
from windrose_layout.services.mean_directional_rose import MeanDirectionalLayout
from windrose_layout.services.telescope_rose import TelescopeRoseLayout


class RoseLayout(Protocol):
    """Anything that turns a dataset into primitives around a center."""

    def layout(self, data: Mapping, center: Point) -> List[Primitive]:
        ...


FREQUENCY = "frequency"
TELESCOPE = "telescope"
MEAN_DIRECTIONAL = "mean-directional"

STYLES = (FREQUENCY, TELESCOPE, MEAN_DIRECTIONAL)

SAMPLE_DATA: Dict[str, Mapping] = {
    FREQUENCY: SAMPLE_FREQUENCY_DATA,
    TELESCOPE: SAMPLE_TELESCOPE_DATA,
    MEAN_DIRECTIONAL: SAMPLE_MEAN_DIRECTIONAL_DATA,
}


def get_layout(style: str) -> RoseLayout:
    """Layout for a style name, using the default style tables."""
    if style == FREQUENCY:
        return FrequencyRoseLayout()
    if style == TELESCOPE:
        return TelescopeRoseLayout()
    if style == MEAN_DIRECTIONAL:
        return MeanDirectionalLayout()
    raise KeyError(f"Unknown rose style {style!r}, expected one of {list(STYLES)}")
