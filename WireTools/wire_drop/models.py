"""Data models for voltage drop calculations."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class GaugeSpec:
    """One row of the gauge table (copper, 75 °C)."""

    # Multi-zero gauges use negative identifiers: 00 -> -2, 000 -> -3, 0000 -> -4
    identifier: int
    label: str
    resistance_per_1000: float  # ohms per 1000 ft


@dataclass(slots=True)
class CalculationInput:
    """Parameters for a single voltage drop run."""

    voltage: float
    current: float
    one_way_distance: float  # feet
    max_drop_percent: float = 3.0
    # Gauges as requested by the user, in the order given
    gauges: Optional[list[int]] = None


@dataclass(frozen=True, slots=True)
class GaugeResult:
    """Computed drop figures for one gauge."""

    gauge: GaugeSpec
    total_resistance: float
    voltage_drop: float
    drop_percent: float
    passes: bool
