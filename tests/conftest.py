"""
Pytest configuration and shared fixtures for the lifegrid test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'lifegrid' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifegrid.core.simulation_engine import SimulationEngine  # noqa: E402


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_session_config_dict():
    """
    Fixture providing a complete valid session configuration dictionary.
    """
    return {
        "grid": {"width": 12, "height": 10, "boundary": "toroidal"},
        "simulation": {"tick_interval_seconds": 0.25},
        "seed": [
            {"pattern": "glider", "x": 1, "y": 1},
            {"pattern": "block", "x": 8, "y": 6},
        ],
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_session_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_session_config_dict, f)

    yield temp_yaml_file


@pytest.fixture
def engine():
    """Small stopped engine; any running loop is stopped on teardown."""
    eng = SimulationEngine(width=8, height=8, tick_interval_seconds=0)
    yield eng
    eng.stop()


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "threaded: marks tests that drive the background tick loop",
    )
