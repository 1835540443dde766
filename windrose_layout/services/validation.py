"""Validation of wind rose datasets before layout."""
from numbers import Real
from typing import Iterable, Mapping, NoReturn, Optional, Sequence
import logging
import math

from windrose_layout.config import CALM_KEY, COMPASS_16
from windrose_layout.exceptions import InvalidInput

log = logging.getLogger("windrose.validation")


def _reject(message: str) -> NoReturn:
    log.warning("Rejecting wind rose data: %s", message)
    raise InvalidInput(message)


def check_value(value, label: str) -> None:
    """Require a finite, non-negative real number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        _reject(f"{label} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        _reject(f"{label} must be finite and non-negative, got {value!r}")


def check_directions(directions: Sequence[str], allowed: Sequence[str] = COMPASS_16) -> None:
    """Require known compass labels presented in clockwise compass order."""
    if not directions:
        _reject("Dataset has no directions")

    previous = -1
    for direction in directions:
        if direction not in allowed:
            _reject(f"Unsupported direction {direction!r}, expected one of {list(allowed)}")
        index = COMPASS_16.index(direction)
        if index <= previous:
            _reject(f"Direction {direction!r} is out of compass order")
        previous = index


def validate_binned(
    data: Mapping,
    allowed_directions: Sequence[str] = COMPASS_16,
    known_bins: Optional[Iterable[str]] = None,
) -> None:
    """
    Validate a direction -> {bin: frequency} dataset with an optional calm.

    Args:
        data: Wind rose dataset
        allowed_directions: Compass labels this style can place
        known_bins: Bin labels with a configured style; None accepts any
    """
    if not isinstance(data, Mapping):
        _reject(f"Dataset must be a mapping, got {type(data).__name__}")

    directions = [key for key in data if key != CALM_KEY]
    check_directions(directions, allowed_directions)
    if CALM_KEY in data:
        check_value(data[CALM_KEY], "calm")

    bins = set(known_bins) if known_bins is not None else None
    for direction in directions:
        speed_bins = data[direction]
        if not isinstance(speed_bins, Mapping):
            _reject(f"Direction {direction!r} must map speed bins to frequencies")
        for bin_label, freq in speed_bins.items():
            if bins is not None and bin_label not in bins:
                _reject(f"No style configured for speed bin {bin_label!r}")
            check_value(freq, f"{direction} {bin_label}")


def validate_scalar(data: Mapping, allowed_directions: Sequence[str] = COMPASS_16) -> None:
    """Validate a direction -> value dataset (mean directional rose)."""
    if not isinstance(data, Mapping):
        _reject(f"Dataset must be a mapping, got {type(data).__name__}")

    directions = [key for key in data if key != CALM_KEY]
    check_directions(directions, allowed_directions)
    for direction in directions:
        check_value(data[direction], direction)
