"""
Base path sampler.

Provides restartable iteration, extent checks and array export for derived samplers.
"""

import math
from collections.abc import Iterator

import numpy as np

from pathsampler import config
from pathsampler.utils.errors import SampleLimitError

from .types import Point3D


class PathSampler:
    """Base class for samplers that turn a motion descriptor into points"""

    def __init__(self, max_samples: int | None = None):
        self.max_samples = config.MAX_SAMPLES if max_samples is None else int(max_samples)

    def __iter__(self) -> Iterator[Point3D]:
        # Every iter() call starts a fresh pass over the motion
        return self._generate()

    def __len__(self) -> int:
        return self.num_steps + 1

    @property
    def num_steps(self) -> int:
        raise NotImplementedError

    @property
    def is_degenerate(self) -> bool:
        return self.num_steps == 0

    def _check_extent(self, extent: float, what: str) -> None:
        """
        Reject an extent (in steps) that overflowed or exceeds max_samples.

        Raises:
            SampleLimitError: extent is not finite or too large
        """
        if not math.isfinite(extent):
            raise SampleLimitError(f"{what} overflows floating point range")
        if len(self) > self.max_samples:
            raise SampleLimitError(f"{what} needs {len(self)} samples, limit is {self.max_samples}")

    def _generate(self) -> Iterator[Point3D]:
        raise NotImplementedError

    def as_array(self) -> np.ndarray:
        """Return all samples as an array of shape (N, 3)"""
        return np.array([p.as_tuple() for p in self], dtype=float).reshape(-1, 3)
