"""Validation helpers for input values."""
from __future__ import annotations

import logging
import math
from typing import Iterable

from ..models import CalculationInput
from .gauges import find_gauge, positive_gauge_ids

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when validation fails."""


class InvalidGaugeError(ValidationError):
    """Raised when a requested gauge is not in the gauge table."""

    def __init__(self, gauge: int, valid_gauges: list[int]):
        self.gauge = gauge
        self.valid_gauges = valid_gauges
        super().__init__(f"Invalid gauge number: {gauge}. Valid gauges are: {valid_gauges}")


def _finite(val: float, field: str) -> float:
    if not math.isfinite(val):
        raise ValidationError(f"{field} must be a finite number")
    return val


def positive(val: float, field: str) -> float:
    """Return value if strictly positive; raise otherwise."""
    if _finite(val, field) <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    return val


def non_negative(val: float, field: str) -> float:
    """Return value if zero or positive; raise otherwise."""
    if _finite(val, field) < 0:
        raise ValidationError(f"{field} must not be negative")
    return val


def validate_gauges(requested: Iterable[int]) -> None:
    """Raise :class:`InvalidGaugeError` for the first unknown gauge."""
    for gauge in requested:
        if find_gauge(gauge) is None:
            raise InvalidGaugeError(gauge, positive_gauge_ids())


def validate_input(inp: CalculationInput) -> CalculationInput:
    """Check every field of *inp* and return it unchanged."""
    if inp.gauges is not None:
        validate_gauges(inp.gauges)
    positive(inp.voltage, "Voltage")
    non_negative(inp.current, "Current")
    non_negative(inp.one_way_distance, "Distance")
    non_negative(inp.max_drop_percent, "Max drop")
    logger.debug("Validated input: %s", inp)
    return inp
