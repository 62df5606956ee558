"""Tests for input validation."""
import math

import pytest

from wire_drop.models import CalculationInput
from wire_drop.utils.validation import (
    InvalidGaugeError,
    ValidationError,
    non_negative,
    positive,
    validate_gauges,
    validate_input,
)


def test_unknown_gauge_carries_value_and_valid_list():
    with pytest.raises(InvalidGaugeError) as info:
        validate_gauges([12, 99, 7])
    err = info.value
    assert err.gauge == 99
    assert err.valid_gauges[0] == 28
    assert 0 not in err.valid_gauges and -2 not in err.valid_gauges
    assert "Invalid gauge number: 99" in str(err)


def test_invalid_gauge_is_a_validation_error():
    assert issubclass(InvalidGaugeError, ValidationError)
    assert issubclass(ValidationError, ValueError)


def test_known_gauges_pass():
    validate_gauges([28, 0, -2, -3, -4])


@pytest.mark.parametrize("voltage", [0.0, -12.0, math.nan, math.inf])
def test_voltage_must_be_positive(voltage):
    inp = CalculationInput(voltage=voltage, current=1.0, one_way_distance=10.0)
    with pytest.raises(ValidationError):
        validate_input(inp)


@pytest.mark.parametrize("field", ["current", "one_way_distance", "max_drop_percent"])
def test_negative_values_rejected(field):
    inp = CalculationInput(voltage=120.0, current=1.0, one_way_distance=10.0)
    setattr(inp, field, -1.0)
    with pytest.raises(ValidationError):
        validate_input(inp)


def test_zero_current_and_distance_allowed():
    inp = CalculationInput(voltage=120.0, current=0.0, one_way_distance=0.0, max_drop_percent=0.0)
    assert validate_input(inp) is inp


def test_helpers_return_value():
    assert positive(1.5, "x") == 1.5
    assert non_negative(0.0, "x") == 0.0
    with pytest.raises(ValidationError, match="x must be greater than zero"):
        positive(0.0, "x")
