"""
Copyright 2026 photon-room authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .errors import DegenerateVectorError


def _restricted_angle(x: float, y: float) -> float:
    """
    Single-quadrant arctangent of y/x, range [-pi/2, pi/2].

    This is atan(y / x), NOT atan2(y, x): a vector pointing into the left
    half-plane gets the same angle as its negation. A zero x is treated as
    dividing by a signed zero, so (0, 1) gives pi/2, (-0.0, 1) gives -pi/2,
    and (0, 0) gives nan.
    """
    if x == 0:
        if y == 0:
            return float('nan')
        return math.copysign(math.pi / 2, y * math.copysign(1.0, x))
    return math.atan(y / x)


@dataclass(frozen=True)
class Vector:
    """
    An immutable vector in 2D space.

    Every operation returns a new Vector; operands are never modified.

    Attributes:
        x (float): x component
        y (float): y component
        norm (float): Euclidean length, computed at construction
        angle (float): atan(y / x), computed at construction. Note that this is
            the restricted single-quadrant angle and loses the sign of x; use
            angle_between() or math.atan2 when the full direction is needed.
    """
    x: float
    y: float
    norm: float = field(init=False, repr=False, compare=False)
    angle: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'norm', math.hypot(self.x, self.y))
        object.__setattr__(self, 'angle', _restricted_angle(self.x, self.y))

    @classmethod
    def from_angle(cls, direction: float, magnitude: float = 1.0) -> 'Vector':
        """
        Create a vector pointing along direction (radians, counter-clockwise
        from the positive x axis) with the given magnitude.
        """
        return cls(magnitude * math.cos(direction), magnitude * math.sin(direction))

    @classmethod
    def from_array(cls, arr: Sequence[float]) -> 'Vector':
        """Create a Vector from a length-2 sequence or numpy array."""
        return cls(float(arr[0]), float(arr[1]))

    def to_array(self) -> np.ndarray:
        """Convert to a numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=float)

    def dot(self, other: 'Vector') -> float:
        """
        Calculate the dot product with another vector.

        Args:
            other: The other vector

        Returns:
            x * other.x + y * other.y
        """
        return self.x * other.x + self.y * other.y

    def proj_onto(self, other: 'Vector') -> 'Vector':
        """
        Project this vector onto another vector.

        Args:
            other: The vector to project onto. Its magnitude does not affect
                the result, only its direction.

        Returns:
            The component of this vector along other.

        Raises:
            DegenerateVectorError: If other has zero length.
        """
        norm_sq = other.norm * other.norm
        if norm_sq == 0:
            raise DegenerateVectorError(f"Cannot project {self} onto zero-length vector {other}")
        return other.mult(self.dot(other) / norm_sq)

    def angle_between(self, other: 'Vector') -> float:
        """
        Calculate the angle between this vector and another vector.

        Args:
            other: The other vector

        Returns:
            Angle in radians, in [0, pi].

        Raises:
            DegenerateVectorError: If either vector has zero length.
        """
        denominator = self.norm * other.norm
        if denominator == 0:
            raise DegenerateVectorError(
                f"Angle between {self} and {other} is undefined for a zero-length vector"
            )
        # Rounding can push the cosine of (anti)parallel vectors just past +-1
        cos_theta = max(-1.0, min(1.0, self.dot(other) / denominator))
        return math.acos(cos_theta)

    def negate(self) -> 'Vector':
        """Return the vector pointing the opposite way."""
        return Vector(-self.x, -self.y)

    def add(self, other: 'Vector') -> 'Vector':
        """Return the sum of this vector and other."""
        return Vector(self.x + other.x, self.y + other.y)

    def sub(self, other: 'Vector') -> 'Vector':
        """Return this vector minus other."""
        return Vector(self.x - other.x, self.y - other.y)

    def mult(self, scalar: float) -> 'Vector':
        """Return this vector scaled by scalar."""
        return Vector(self.x * scalar, self.y * scalar)
