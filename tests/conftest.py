"""
Pytest configuration and shared fixtures for pathsampler tests.

Provides marker registration, command-file helpers and sampler settings used
across the test suite.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# Add the parent directory to Python path so we can import the package modules
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from pathsampler.motion.parser import MotionParser


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests with no file system access")
    config.addinivalue_line("markers", "integration: tests that read or write command files")


# ============================================================================
# COMMAND FILE FIXTURES
# ============================================================================

@pytest.fixture
def command_file(tmp_path: Path) -> Callable[..., Path]:
    """
    Write command lines to a temporary file and return its path.

    Usage: path = command_file("linear 0,0,0 3,4,0", "rotational ...")
    """
    def _write(*lines: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def motion_parser() -> MotionParser:
    """Parser with the default resolution and angular step."""
    return MotionParser(linear_resolution=1.0, angular_step=5.0)
