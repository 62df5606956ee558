"""Copper wire gauge table and lookup utilities."""
from __future__ import annotations

from typing import Iterable, Optional

from ..models import GaugeSpec

# Ohms per 1000 ft, copper at 75 °C, thinnest to thickest
WIRE_GAUGES: tuple[GaugeSpec, ...] = (
    GaugeSpec(28, "28 AWG", 64.90),
    GaugeSpec(26, "26 AWG", 40.81),
    GaugeSpec(24, "24 AWG", 25.67),
    GaugeSpec(22, "22 AWG", 16.14),
    GaugeSpec(20, "20 AWG", 10.15),
    GaugeSpec(18, "18 AWG", 6.385),
    GaugeSpec(16, "16 AWG", 4.016),
    GaugeSpec(14, "14 AWG", 2.51),
    GaugeSpec(12, "12 AWG", 1.588),
    GaugeSpec(10, "10 AWG", 0.999),
    GaugeSpec(8, "8 AWG", 0.628),
    GaugeSpec(6, "6 AWG", 0.395),
    GaugeSpec(4, "4 AWG", 0.248),
    GaugeSpec(2, "2 AWG", 0.156),
    GaugeSpec(1, "1 AWG", 0.123),
    GaugeSpec(0, "0 AWG", 0.0983),
    GaugeSpec(-2, "00 AWG", 0.0780),
    GaugeSpec(-3, "000 AWG", 0.0619),
    GaugeSpec(-4, "0000 AWG", 0.0491),
)

_BY_ID = {g.identifier: g for g in WIRE_GAUGES}

# AWG spellings accepted on the command line for the multi-zero sizes
GAUGE_ALIASES = {
    "00": -2,
    "000": -3,
    "0000": -4,
    "1/0": 0,
    "2/0": -2,
    "3/0": -3,
    "4/0": -4,
}


def gauge_ids() -> list[int]:
    """Return every gauge identifier in table order."""
    return [g.identifier for g in WIRE_GAUGES]


def positive_gauge_ids() -> list[int]:
    """Return the single-number gauges (28 .. 1) in table order."""
    return [g.identifier for g in WIRE_GAUGES if g.identifier > 0]


def find_gauge(identifier: int) -> Optional[GaugeSpec]:
    """Return the table entry for *identifier* or ``None``."""
    return _BY_ID.get(identifier)


def parse_gauge_token(token: str) -> int:
    """Convert one ``--gauges`` token to a gauge identifier.

    Plain integers pass through unchanged so unknown sizes can be reported
    by the validator; ``00``/``2/0`` style names map to their negative ids.
    """
    text = token.strip()
    if text in GAUGE_ALIASES:
        return GAUGE_ALIASES[text]
    return int(text)


def select_gauges(requested: Optional[Iterable[int]] = None) -> list[GaugeSpec]:
    """Return table entries in canonical order, limited to *requested* if given."""
    if requested is None:
        return list(WIRE_GAUGES)
    wanted = set(requested)
    return [g for g in WIRE_GAUGES if g.identifier in wanted]
