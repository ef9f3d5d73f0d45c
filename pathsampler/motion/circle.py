"""
Circular arc sampler.

Traces an arc from 0 degrees toward the stop angle around a circle whose plane
is parallel to XY at the height of its center.
"""

import logging
import math
from collections.abc import Iterator

from pathsampler import config
from pathsampler.config import TRACE
from pathsampler.utils.errors import DegenerateMotionError

from .base import PathSampler
from .types import Point3D, RotationalMotion

logger = logging.getLogger(__name__)


class RotationalSampler(PathSampler):
    """Sample a circular arc at a fixed angular step"""

    def __init__(
        self,
        motion: RotationalMotion,
        angular_step: float | None = None,
        strict: bool = False,
        normalize_direction: bool = False,
        max_samples: int | None = None,
    ):
        """
        Initialize arc sampler

        Args:
            motion: Circle, stop angle and direction to sample
            angular_step: Maximum degrees between samples (default config.ANGULAR_STEP_DEG)
            strict: Raise DegenerateMotionError for a zero sweep or non-positive radius
            normalize_direction: Sweep |stop_angle| in the commanded direction instead
                of applying the direction as a sign on the signed stop angle
            max_samples: Most points one motion may produce (default config.MAX_SAMPLES)

        Raises:
            ValueError: angular_step is not positive
            SampleLimitError: sweep overflows or needs too many samples
            DegenerateMotionError: strict and the arc is degenerate
        """
        super().__init__(max_samples)
        self.motion = motion
        self.angular_step = config.ANGULAR_STEP_DEG if angular_step is None else float(angular_step)
        if not self.angular_step > 0:
            raise ValueError(f"angular_step must be positive, got {self.angular_step}")
        self.strict = strict
        self.normalize_direction = normalize_direction

        self._check_extent(abs(self.sweep) / self.angular_step, "rotational motion")

        radius = motion.circle.radius
        if strict:
            if self.is_degenerate:
                raise DegenerateMotionError(f"rotational motion sweeps {motion.stop_angle} degrees")
            if radius <= 0:
                raise DegenerateMotionError(f"circle radius must be positive, got {radius}")
        else:
            if self.is_degenerate:
                logger.warning("Zero-sweep rotational motion, emitting start point only")
            if radius <= 0:
                logger.warning(f"Rotational motion with non-positive radius {radius}")

    @property
    def sweep(self) -> float:
        """Signed sweep in degrees used to derive the per-step angle."""
        if self.normalize_direction:
            return self.motion.direction.sign * abs(self.motion.sweep)
        return self.motion.sweep

    @property
    def num_steps(self) -> int:
        return math.ceil(abs(self.sweep) / self.angular_step)

    @property
    def angle_increment(self) -> float:
        """Degrees added to the angle on each step (0.0 when degenerate)."""
        steps = self.num_steps
        if steps == 0:
            return 0.0
        step_angle = self.sweep / steps
        if self.normalize_direction:
            return step_angle
        # Direction is a sign on the step, independent of the stop angle's own sign
        return self.motion.direction.sign * step_angle

    def angles(self) -> Iterator[float]:
        """Yield the angle in degrees of each sample, starting at 0."""
        steps = self.num_steps
        increment = self.angle_increment
        angle = self.motion.START_ANGLE
        for _ in range(steps + 1):
            yield angle
            angle += increment

    def _generate(self) -> Iterator[Point3D]:
        center = self.motion.circle.center
        radius = self.motion.circle.radius
        for i, angle in enumerate(self.angles()):
            theta = math.radians(angle)
            point = Point3D(
                center.x + radius * math.cos(theta),
                center.y + radius * math.sin(theta),
                center.z,
            )
            logger.log(TRACE, "arc_sample %d angle=%.6f pos=%s", i, angle, point.as_tuple())
            yield point
