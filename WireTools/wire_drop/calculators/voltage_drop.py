"""Voltage drop calculator for copper wire runs."""
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ..models import CalculationInput, GaugeResult, GaugeSpec
from ..utils.gauges import select_gauges
from ..utils.validation import validate_input

logger = logging.getLogger(__name__)


def gauge_drop(gauge: GaugeSpec, inp: CalculationInput) -> GaugeResult:
    """Apply Ohm's law to the round-trip run through *gauge*."""
    total_distance = inp.one_way_distance * 2
    total_resistance = gauge.resistance_per_1000 * total_distance / 1000
    voltage_drop = inp.current * total_resistance
    drop_percent = voltage_drop / inp.voltage * 100
    return GaugeResult(
        gauge=gauge,
        total_resistance=total_resistance,
        voltage_drop=voltage_drop,
        drop_percent=drop_percent,
        passes=drop_percent <= inp.max_drop_percent,
    )


def calculate_voltage_drop(inp: CalculationInput) -> Dict[str, Any]:
    """Calculate the drop for each selected gauge and pick the thinnest passing one."""
    validate_input(inp)

    results: List[GaugeResult] = []
    recommended: Optional[GaugeResult] = None
    for gauge in select_gauges(inp.gauges):
        res = gauge_drop(gauge, inp)
        logger.debug(
            "%s: %.4f ohm, %.3f V, %.2f%%", gauge.label, res.total_resistance, res.voltage_drop, res.drop_percent
        )
        if res.passes and recommended is None:
            recommended = res
        results.append(res)

    if recommended is None:
        logger.info("No gauge keeps the drop within %s%%", inp.max_drop_percent)
    else:
        logger.info("Recommended %s at %.2f%%", recommended.gauge.label, recommended.drop_percent)

    return {
        "total_distance": inp.one_way_distance * 2,
        "results": results,
        "recommended": recommended,
        "inputs": asdict(inp),
    }
