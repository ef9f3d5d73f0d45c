"""
Motion command parser

Turns one raw command line into a typed motion descriptor:

    linear <x1,y1,z1> <x2,y2,z2>
    rotational <cx,cy,cz> <radius> <clockwise|counterclockwise> <stopAngleDegrees>

Point literals are three comma-separated reals with no spaces inside the
token, since tokens are split on whitespace.
"""

import logging
import math

from pathsampler import config
from pathsampler.utils.errors import FormatError, NumericParseError

from .base import PathSampler
from .circle import RotationalSampler
from .linear import LinearSampler
from .types import Circle, LinearMotion, Point3D, RotationDirection, RotationalMotion

logger = logging.getLogger(__name__)

LINEAR_KEYWORD = "linear"
ROTATIONAL_KEYWORD = "rotational"

Motion = LinearMotion | RotationalMotion


def parse_number(text: str, field: str = "value") -> float:
    """
    Parse a single real-number literal.

    Raises:
        NumericParseError: text is not a finite real literal
    """
    stripped = text.strip()
    try:
        value = float(stripped)
    except ValueError:
        raise NumericParseError(f"invalid {field} {stripped!r}: not a real number") from None
    if not math.isfinite(value):
        raise NumericParseError(f"invalid {field} {stripped!r}: must be finite")
    return value


def parse_point(text: str) -> Point3D:
    """
    Parse a point literal of the form "x, y, z".

    Args:
        text: Comma-separated coordinates, whitespace around each field allowed

    Returns:
        Parsed Point3D

    Raises:
        FormatError: field count is not exactly 3
        NumericParseError: a field is not a real number
    """
    fields = text.split(",")
    if len(fields) != 3:
        raise FormatError(f"invalid point format {text!r}: expected 3 coordinates, got {len(fields)}")
    x, y, z = (parse_number(f, field=axis) for f, axis in zip(fields, ("x", "y", "z")))
    return Point3D(x, y, z)


def parse_linear_motion(line: str) -> LinearMotion:
    """
    Parse "linear <start> <end>".

    Raises:
        FormatError: token count is not 3, or a point is malformed
        NumericParseError: a coordinate is not a real number
    """
    parts = line.split()
    if len(parts) != 3:
        raise FormatError(
            f"invalid linear motion format: expected 3 tokens, got {len(parts)} in {line.strip()!r}"
        )
    return LinearMotion(start=parse_point(parts[1]), end=parse_point(parts[2]))


def parse_rotational_motion(line: str) -> RotationalMotion:
    """
    Parse "rotational <center> <radius> <direction> <stop angle>".

    Raises:
        FormatError: token count is not 5, or the center is malformed
        NumericParseError: radius, stop angle or a coordinate is not a real number
        InvalidDirectionError: direction token is not recognized
    """
    parts = line.split()
    if len(parts) != 5:
        raise FormatError(
            f"invalid rotational motion format: expected 5 tokens, got {len(parts)} in {line.strip()!r}"
        )
    center = parse_point(parts[1])
    radius = parse_number(parts[2], field="radius")
    direction = RotationDirection.from_token(parts[3])
    stop_angle = parse_number(parts[4], field="stop angle")
    return RotationalMotion(Circle(center, radius), stop_angle, direction)


class MotionParser:
    """Dispatches command lines by keyword and builds matching samplers"""

    KEYWORDS = {
        LINEAR_KEYWORD: parse_linear_motion,
        ROTATIONAL_KEYWORD: parse_rotational_motion,
    }

    def __init__(
        self,
        linear_resolution: float | None = None,
        angular_step: float | None = None,
        strict: bool = False,
        normalize_direction: bool = False,
    ):
        """
        Args:
            linear_resolution: Travel per linear sample (default config.LINEAR_RESOLUTION)
            angular_step: Degrees per arc sample (default config.ANGULAR_STEP_DEG)
            strict: Raise DegenerateMotionError instead of emitting a single point
            normalize_direction: Let direction alone decide the arc's sign
        """
        self.linear_resolution = (
            config.LINEAR_RESOLUTION if linear_resolution is None else float(linear_resolution)
        )
        self.angular_step = config.ANGULAR_STEP_DEG if angular_step is None else float(angular_step)
        self.strict = strict
        self.normalize_direction = normalize_direction

    def keyword_of(self, line: str) -> str | None:
        """Return the keyword the line starts with, or None if unrecognized."""
        stripped = line.lstrip()
        for keyword in self.KEYWORDS:
            if stripped.startswith(keyword):
                return keyword
        return None

    def parse(self, line: str) -> Motion | None:
        """
        Parse a command line into a motion descriptor.

        Returns:
            LinearMotion or RotationalMotion, or None for lines without a
            recognized keyword (blank lines, comments, unknown commands)
        """
        keyword = self.keyword_of(line)
        if keyword is None:
            logger.debug(f"Skipping unrecognized line: {line.strip()!r}")
            return None
        motion = self.KEYWORDS[keyword](line)
        logger.debug(f"Parsed {keyword} motion: {motion}")
        return motion

    def sampler_for(self, motion: Motion) -> PathSampler:
        """Build the sampler matching the descriptor's kind."""
        if isinstance(motion, LinearMotion):
            return LinearSampler(motion, resolution=self.linear_resolution, strict=self.strict)
        if isinstance(motion, RotationalMotion):
            return RotationalSampler(
                motion,
                angular_step=self.angular_step,
                strict=self.strict,
                normalize_direction=self.normalize_direction,
            )
        raise TypeError(f"Unsupported motion type: {type(motion).__name__}")
