"""
Motion parsing and sampling for pathsampler

Main components:
- types.py: Point3D, Circle, RotationDirection and the motion descriptors
- parser.py: Command-line parsing and keyword dispatch
- linear.py: Straight-segment sampler
- circle.py: Circular-arc sampler
"""

from .base import PathSampler
from .circle import RotationalSampler
from .linear import LinearSampler
from .parser import (
    MotionParser,
    parse_linear_motion,
    parse_number,
    parse_point,
    parse_rotational_motion,
)
from .types import Circle, LinearMotion, Point3D, RotationDirection, RotationalMotion

__all__ = [
    "Point3D",
    "Circle",
    "RotationDirection",
    "LinearMotion",
    "RotationalMotion",
    "PathSampler",
    "LinearSampler",
    "RotationalSampler",
    "MotionParser",
    "parse_number",
    "parse_point",
    "parse_linear_motion",
    "parse_rotational_motion",
]
