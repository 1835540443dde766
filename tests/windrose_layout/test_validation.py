"""Tests for dataset validation."""
import math
import pytest

from windrose_layout.config import COMPASS_8
from windrose_layout.exceptions import InvalidInput
from windrose_layout.services.validation import validate_binned, validate_scalar


class TestValidateBinned:
    """Tests for validate_binned."""

    def test_valid_dataset(self):
        """Test that a well formed dataset passes."""
        validate_binned({"calm": 8, "N": {"0-10": 3}, "NE": {"0-10": 1.5}})

    def test_no_directions(self):
        """Test that a calm-only dataset is rejected."""
        with pytest.raises(InvalidInput):
            validate_binned({"calm": 8})

    def test_unknown_direction(self):
        """Test that a non-compass key is rejected."""
        with pytest.raises(InvalidInput):
            validate_binned({"North": {"0-10": 1}})

    def test_out_of_order_directions(self):
        """Test that directions must follow the compass clockwise."""
        with pytest.raises(InvalidInput):
            validate_binned({"E": {"0-10": 1}, "N": {"0-10": 1}})

    @pytest.mark.parametrize("value", [-1, "3", None, True, math.nan, math.inf])
    def test_bad_frequencies(self, value):
        """Test that negative, non-numeric and non-finite values are rejected."""
        with pytest.raises(InvalidInput):
            validate_binned({"N": {"0-10": value}})

    def test_negative_calm(self):
        """Test that a negative calm is rejected."""
        with pytest.raises(InvalidInput):
            validate_binned({"calm": -2, "N": {"0-10": 1}})

    def test_unstyled_bin(self):
        """Test that bins without a style are rejected when styles are given."""
        with pytest.raises(InvalidInput):
            validate_binned({"N": {"40-50": 1}}, known_bins=["0-10"])

    def test_restricted_directions(self):
        """Test that 16-point labels are rejected for an 8-point style."""
        with pytest.raises(InvalidInput):
            validate_binned({"N": {"0-10": 1}, "NNE": {"0-10": 1}}, allowed_directions=COMPASS_8)

    def test_scalar_direction_rejected(self):
        """Test that a direction must hold speed bins."""
        with pytest.raises(InvalidInput):
            validate_binned({"N": 5})


class TestValidateScalar:
    """Tests for validate_scalar."""

    def test_valid_dataset(self):
        """Test that a direction -> speed mapping passes."""
        validate_scalar({"N": 10, "E": 0, "S": 2.5})

    def test_nested_value_rejected(self):
        """Test that binned values are rejected."""
        with pytest.raises(InvalidInput):
            validate_scalar({"N": {"0-10": 1}})

    def test_empty_rejected(self):
        """Test that an empty dataset is rejected."""
        with pytest.raises(InvalidInput):
            validate_scalar({})
