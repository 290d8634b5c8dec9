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
from typing import Tuple

from shapely.geometry import Point as ShapelyPoint, LineString

from .errors import InvalidGeometryError
from .vector import Vector


class Point:
    """
    A point in 2D space.
    Can be converted to/from Shapely Point objects.
    """
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Point':
        """Create Point from Shapely Point."""
        return cls(sp.x, sp.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


class LineSegment:
    """
    A wall: a straight segment between two endpoints.

    Length and normal are computed once at construction; the segment is not
    meant to be modified afterwards.

    The normal is (-dy, dx) multiplied by its own norm, so it is perpendicular
    to the segment (rotated a quarter turn counter-clockwise from p1 -> p2)
    with magnitude length**2. Reflection only uses the normal through a vector
    projection, which does not depend on the magnitude, so nothing downstream
    may assume it is a unit vector.

    Attributes:
        x1, y1 (float): First endpoint
        x2, y2 (float): Second endpoint
        dx, dy (float): x2 - x1, y2 - y1
        length (float): Euclidean length of the segment
        normal (Vector): Perpendicular direction vector
    """

    def __init__(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """
        Initialize a wall segment.

        Args:
            x1, y1: First endpoint
            x2, y2: Second endpoint

        Raises:
            InvalidGeometryError: If both endpoints coincide. Collision tests
                divide by length**2.
        """
        self.x1: float = x1
        self.y1: float = y1
        self.x2: float = x2
        self.y2: float = y2
        self.dx: float = x2 - x1
        self.dy: float = y2 - y1
        self.length: float = math.hypot(self.dx, self.dy)
        if self.length == 0:
            raise InvalidGeometryError(
                f"Wall endpoints must differ, got ({x1}, {y1}) for both"
            )
        normal = Vector(-self.dy, self.dx)
        self.normal: Vector = normal.mult(normal.norm)

    @property
    def p1(self) -> Point:
        """First endpoint."""
        return Point(self.x1, self.y1)

    @property
    def p2(self) -> Point:
        """Second endpoint."""
        return Point(self.x2, self.y2)

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.x1, self.y1), (self.x2, self.y2)])

    @classmethod
    def from_shapely(cls, sl: LineString) -> 'LineSegment':
        """Create a LineSegment from the first two coordinates of a Shapely LineString."""
        coords = list(sl.coords)
        return cls(coords[0][0], coords[0][1], coords[1][0], coords[1][1])

    def __repr__(self) -> str:
        return f"LineSegment(({self.x1}, {self.y1}) -> ({self.x2}, {self.y2}))"
