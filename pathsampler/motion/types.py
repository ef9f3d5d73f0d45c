"""
Value types for motion commands.

Points, circles and the two motion descriptors are frozen dataclasses so a
sampler can never mutate the command it was built from.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from pathsampler.utils.errors import InvalidDirectionError


@dataclass(frozen=True)
class Point3D:
    """A point in 3D space."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Point3D") -> "Point3D":
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point3D") -> "Point3D":
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def norm(self) -> float:
        """Euclidean length when treated as a vector."""
        return math.hypot(self.x, self.y, self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Circle:
    """Circle in a plane parallel to XY, at the height of its center."""

    center: Point3D
    radius: float  # not validated; <= 0 is degenerate


class RotationDirection(Enum):
    """Sign of angular progression for rotational motion."""

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"

    @property
    def sign(self) -> int:
        return -1 if self is RotationDirection.CLOCKWISE else 1

    @classmethod
    def from_token(cls, token: str) -> "RotationDirection":
        """
        Map a command token to a direction.

        Raises:
            InvalidDirectionError: token is not one of the two literals
        """
        for member in cls:
            if member.value == token:
                return member
        raise InvalidDirectionError(
            f"invalid direction {token!r}, expected 'clockwise' or 'counterclockwise'"
        )


@dataclass(frozen=True)
class LinearMotion:
    """Straight travel from start to end."""

    start: Point3D
    end: Point3D

    @property
    def delta(self) -> Point3D:
        return self.end - self.start

    @property
    def length(self) -> float:
        return self.delta.norm()


@dataclass(frozen=True)
class RotationalMotion:
    """Arc around circle.center from 0 degrees toward stop_angle degrees."""

    START_ANGLE: ClassVar[float] = 0.0

    circle: Circle
    stop_angle: float  # degrees
    direction: RotationDirection

    @property
    def sweep(self) -> float:
        """Signed angular extent in degrees as written in the command."""
        return self.stop_angle - self.START_ANGLE
