"""
Pytest configuration and shared fixtures for wire-util tests.
"""
import sys
from pathlib import Path

import pytest

# Add WireTools to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "WireTools"))

from wire_drop.models import CalculationInput  # noqa: E402


@pytest.fixture
def branch_circuit():
    """120 V, 20 A over a 50 ft run with the default 3% limit."""
    return CalculationInput(voltage=120.0, current=20.0, one_way_distance=50.0)


@pytest.fixture
def long_feeder():
    """A run so long that no gauge in the table keeps the drop under 3%."""
    return CalculationInput(voltage=12.0, current=100.0, one_way_distance=500.0)
