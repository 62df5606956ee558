"""Voltage drop over copper wire runs for the common AWG sizes.

``calculate_voltage_drop`` is the entry point; ``wire_drop.cli`` wraps it
for the command line.
"""
from importlib import metadata

from .calculators.voltage_drop import calculate_voltage_drop, gauge_drop
from .models import CalculationInput, GaugeResult, GaugeSpec
from .utils.gauges import WIRE_GAUGES
from .utils.validation import InvalidGaugeError, ValidationError

__all__ = [
    "WIRE_GAUGES",
    "CalculationInput",
    "GaugeResult",
    "GaugeSpec",
    "InvalidGaugeError",
    "ValidationError",
    "calculate_voltage_drop",
    "gauge_drop",
    "__version__",
]

try:
    __version__ = metadata.version("wire-util")
except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
    __version__ = "0.0.0"
