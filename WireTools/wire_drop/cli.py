"""Command line voltage drop calculator."""
from __future__ import annotations

import argparse
import io
import logging
import sys
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from . import __version__
from .calculators.voltage_drop import calculate_voltage_drop
from .models import CalculationInput
from .utils.gauges import parse_gauge_token
from .utils.validation import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_DROP = 3.0
REPORT_WIDTH = 120
STATUS_OK = "✓ OK"
STATUS_FAIL = "✗ Too much drop"


def _gauge_list(text: str) -> list[int]:
    tokens = text.split(",")
    if any(not tok.strip() for tok in tokens):
        raise argparse.ArgumentTypeError(f"empty gauge in list: {text!r}")
    try:
        return [parse_gauge_token(tok) for tok in tokens]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid gauge list: {text!r}") from None


def _num(value: float) -> str:
    # 120.0 -> "120", 1e-07 -> "0.0000001"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def build_table(results) -> Table:
    """Return the per-gauge results as a rich table, rows in gauge table order."""
    table = Table(show_header=True)
    table.add_column("Wire Gauge", no_wrap=True)
    table.add_column("Resistance (Ω)", justify="right", no_wrap=True)
    table.add_column("Voltage Drop (V)", justify="right", no_wrap=True)
    table.add_column("Drop (%)", justify="right", no_wrap=True)
    table.add_column("Status", no_wrap=True)

    for res in results:
        table.add_row(
            res.gauge.label,
            f"{res.total_resistance:.4f}",
            f"{res.voltage_drop:.3f}",
            f"{res.drop_percent:.2f}",
            STATUS_OK if res.passes else STATUS_FAIL,
        )
    return table


def _render(table: Table) -> List[str]:
    buf = io.StringIO()
    Console(file=buf, width=REPORT_WIDTH, color_system=None, highlight=False).print(table)
    return buf.getvalue().rstrip("\n").splitlines()


def report_lines(result: Dict[str, Any]) -> List[str]:
    """Return the printable report for a :func:`calculate_voltage_drop` result."""
    inputs = result["inputs"]
    lines = ["", "=== Wire Gauge Voltage Drop Calculator ===", "", "Input Parameters:"]
    lines.append(f"  Voltage: {_num(inputs['voltage'])} V")
    lines.append(f"  Current: {_num(inputs['current'])} A")
    lines.append(f"  Distance: {_num(inputs['one_way_distance'])} ft (one way)")
    lines.append(f"  Max Acceptable Drop: {_num(inputs['max_drop_percent'])}%")
    if inputs["gauges"] is not None:
        lines.append(f"  Filtered Gauges: {inputs['gauges']}")
    lines.append("")

    lines.extend(_render(build_table(result["results"])))
    lines.append("")

    rec = result["recommended"]
    if rec is not None:
        lines.append(f"Recommended gauge: {rec.gauge.label}")
        lines.append(f"  Voltage drop: {rec.voltage_drop:.3f} V ({rec.drop_percent:.2f}%)")
    else:
        lines.append("WARNING: Even the largest gauge exceeds acceptable voltage drop!")
    return lines


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wire-util", description="Calculate voltage drop for common wire gauges"
    )
    p.add_argument("-v", "--voltage", type=float, required=True, help="Voltage in volts")
    p.add_argument("-c", "--current", type=float, required=True, help="Current in amps")
    p.add_argument("-d", "--distance", type=float, required=True, help="One-way distance in feet")
    p.add_argument(
        "-m",
        "--max-drop",
        type=float,
        default=DEFAULT_MAX_DROP,
        help="Maximum acceptable voltage drop percentage (default: 3%%)",
    )
    p.add_argument(
        "--gauges",
        type=_gauge_list,
        help="Wire gauges to show (comma-separated, e.g. 10,12,14 or 2/0,4/0)",
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Diagnostic logging level (written to stderr)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    inp = CalculationInput(
        voltage=args.voltage,
        current=args.current,
        one_way_distance=args.distance,
        max_drop_percent=args.max_drop,
        gauges=args.gauges,
    )
    try:
        result = calculate_voltage_drop(inp)
    except ValidationError as exc:
        logger.debug("Rejected input: %r", inp)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("\n".join(report_lines(result)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
