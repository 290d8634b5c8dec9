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
from typing import Tuple, TYPE_CHECKING

from .constants import VERBOSE_DEBUG
from .errors import InvalidParameterError
from .vector import Vector

if TYPE_CHECKING:
    from .geometry import LineSegment


class Photon:
    """
    A light 'particle' that bounces around the room.

    The photon moves in a straight line by vec_dir every tick and mirrors its
    direction off any wall it comes within collision_radius of.

    Attributes:
        x (float): Current x-position
        y (float): Current y-position
        vec_dir (Vector): Displacement per tick; its norm is the speed
        speed (float): Distance travelled per tick
        collision_radius (float): Distance at which the centre of the photon
            must be from a wall for a collision to occur
    """

    def __init__(
        self,
        x: float,
        y: float,
        direction: float,
        speed: float,
        collision_radius: float
    ) -> None:
        """
        Initialize a photon.

        Args:
            x: Initial x-position
            y: Initial y-position
            direction: Initial direction of travel in radians
            speed: Distance travelled per tick (must be >= 0)
            collision_radius: Wall proximity at which a collision registers (must be >= 0)

        Raises:
            InvalidParameterError: If speed or collision_radius is negative or nan.
        """
        if not speed >= 0:
            raise InvalidParameterError(f"speed must be non-negative, got {speed}")
        if not collision_radius >= 0:
            raise InvalidParameterError(
                f"collision_radius must be non-negative, got {collision_radius}"
            )
        self.x: float = x
        self.y: float = y
        self.vec_dir: Vector = Vector.from_angle(direction, speed)
        self.speed: float = speed
        self.collision_radius: float = collision_radius

    @property
    def position(self) -> Tuple[float, float]:
        """Current position as an (x, y) tuple."""
        return (self.x, self.y)

    def update_position(self) -> None:
        """Advance one tick along vec_dir."""
        self.x += self.vec_dir.x
        self.y += self.vec_dir.y

    def check_point_collision(self, px: float, py: float) -> bool:
        """
        Check whether the photon collides with a point (a corner).

        Args:
            px, py: The point

        Returns:
            True if the point is within collision_radius (inclusive).
        """
        return math.hypot(self.x - px, self.y - py) <= self.collision_radius

    def check_line_collision(self, line: 'LineSegment') -> bool:
        """
        Check whether the photon collides with a wall.

        Corners are tested first with check_point_collision. Otherwise the
        photon is projected onto the wall's infinite line; if the projection
        falls outside the segment the photon is considered clear of it, even
        when it is close to the line's extension. The projection is not
        clamped to the nearest endpoint.

        Args:
            line: The wall to test

        Returns:
            True if the photon is touching the wall.
        """
        if self.check_point_collision(line.x1, line.y1) or \
                self.check_point_collision(line.x2, line.y2):
            return True

        vec_x = self.x - line.x1
        vec_y = self.y - line.y1
        t = (vec_x * line.dx + vec_y * line.dy) / (line.length * line.length)
        if t < 0 or t > 1:
            return False

        # On the segment
        closest_x = line.x1 + t * line.dx
        closest_y = line.y1 + t * line.dy
        return math.hypot(self.x - closest_x, self.y - closest_y) <= self.collision_radius

    def bounce_off_segment(self, line: 'LineSegment', verbose: int = 0) -> None:
        """
        Reflect the direction of travel off a wall.

        The component of vec_dir along the wall normal is flipped and the
        component parallel to the wall is kept, so the angle of incidence
        equals the angle of reflection and the speed is unchanged.

        Args:
            line: The wall being bounced off
            verbose: Verbosity level (2 prints both projections)
        """
        normal_proj = self.vec_dir.proj_onto(line.normal)
        parallel_proj = self.vec_dir.sub(normal_proj)
        if verbose >= VERBOSE_DEBUG:
            print(f"    normal_proj=({normal_proj.x:.6f}, {normal_proj.y:.6f}) "
                  f"parallel_proj=({parallel_proj.x:.6f}, {parallel_proj.y:.6f})")
        self.vec_dir = parallel_proj.sub(normal_proj)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(x={self.x:.4f}, y={self.y:.4f}, "
                f"vec_dir=({self.vec_dir.x:.4f}, {self.vec_dir.y:.4f}), "
                f"collision_radius={self.collision_radius})")
