"""
pathsampler Python Package

Turns linear and rotational motion commands into discretized 3D toolpaths.

Key components:
- MotionParser: Parses command lines into motion descriptors and builds samplers
- LinearSampler / RotationalSampler: Restartable point sequences for each motion kind
- run_commands: Processes a command stream with a configurable error policy
- format_point / write_points: Fixed-precision point output
"""

from ._version import __version__
from .motion import (
    Circle,
    LinearMotion,
    LinearSampler,
    MotionParser,
    Point3D,
    RotationalMotion,
    RotationalSampler,
    RotationDirection,
    parse_linear_motion,
    parse_point,
    parse_rotational_motion,
)
from .output import format_point, write_points
from .runner import CommandResult, CommandStatus, ErrorPolicy, read_command_file, run_commands

__all__ = [
    "__version__",
    "Point3D",
    "Circle",
    "RotationDirection",
    "LinearMotion",
    "RotationalMotion",
    "LinearSampler",
    "RotationalSampler",
    "MotionParser",
    "parse_point",
    "parse_linear_motion",
    "parse_rotational_motion",
    "CommandResult",
    "CommandStatus",
    "ErrorPolicy",
    "run_commands",
    "read_command_file",
    "format_point",
    "write_points",
]
