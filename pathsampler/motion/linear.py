"""
Linear path sampler.
"""

import logging
import math
from collections.abc import Iterator

from pathsampler import config
from pathsampler.config import TRACE
from pathsampler.utils.errors import DegenerateMotionError

from .base import PathSampler
from .types import LinearMotion, Point3D

logger = logging.getLogger(__name__)


class LinearSampler(PathSampler):
    """
    Sample a straight segment at one point per resolution unit of travel.

    The step count is the truncated number of whole resolution units in the
    segment. A segment shorter than one unit (including zero length) has no
    steps and yields only its start point; the end point is not emitted.
    """

    def __init__(
        self,
        motion: LinearMotion,
        resolution: float | None = None,
        strict: bool = False,
        max_samples: int | None = None,
    ):
        """
        Args:
            motion: Start/end pair to sample
            resolution: Travel between samples (default config.LINEAR_RESOLUTION)
            strict: Raise DegenerateMotionError when the step count is zero
            max_samples: Most points one motion may produce (default config.MAX_SAMPLES)

        Raises:
            ValueError: resolution is not positive
            SampleLimitError: segment length overflows or needs too many samples
            DegenerateMotionError: strict and the motion is shorter than one step
        """
        super().__init__(max_samples)
        self.motion = motion
        self.resolution = config.LINEAR_RESOLUTION if resolution is None else float(resolution)
        if not self.resolution > 0:
            raise ValueError(f"resolution must be positive, got {self.resolution}")
        self.strict = strict

        self._check_extent(motion.length / self.resolution, "linear motion")

        if self.is_degenerate:
            if strict:
                raise DegenerateMotionError(
                    f"linear motion from {motion.start.as_tuple()} to {motion.end.as_tuple()} "
                    f"is shorter than one step ({self.resolution})"
                )
            logger.warning(
                f"Linear motion from {motion.start.as_tuple()} to {motion.end.as_tuple()} "
                f"is shorter than one step ({self.resolution}), emitting start point only"
            )

    @property
    def num_steps(self) -> int:
        # Truncate, not round: 5.9 units of travel give 5 steps
        return math.floor(self.motion.length / self.resolution)

    def _generate(self) -> Iterator[Point3D]:
        steps = self.num_steps
        current = self.motion.start

        if steps == 0:
            yield current
            return

        delta = self.motion.delta
        increment = Point3D(delta.x / steps, delta.y / steps, delta.z / steps)
        for i in range(steps + 1):
            logger.log(TRACE, "linear_sample %d/%d pos=%s", i, steps, current.as_tuple())
            yield current
            current = current + increment
