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
from typing import Any, List, Optional, Tuple, TYPE_CHECKING

from .constants import MIN_CORNER_CATCH_RADIUS
from .errors import InvalidParameterError
from .photon import Photon

if TYPE_CHECKING:
    from .geometry import LineSegment


class MultiMagPhoton(Photon):
    """
    A photon that keeps track of its path for display through several magnifiers.

    On top of Photon it has a one-way active flag, the list of points where it
    bounced, and one tracking slot per magnifier. Once deactivated it is frozen
    in place and no longer collides with anything.

    Attributes:
        head_color: Display colour of the photon's head (not interpreted)
        tail_color: Display colour of the photon's tail (not interpreted)
        contact_points (list): (x, y) of every bounce, starting with the
            initial position
        active (bool): False once deactivate() has been called
        mag_entry (list): Per magnifier, the point where the photon first
            entered its capture region, or None
        last_mag_point (list): Per magnifier, the latest point seen inside its
            capture region, or None

    mag_entry and last_mag_point are plain storage: the photon never writes
    to them. A driver (see Simulator.track_magnifiers) fills them in using
    Magnifier.contains.
    """

    def __init__(
        self,
        x: float,
        y: float,
        direction: float,
        speed: float,
        collision_radius: float,
        head_color: Any = None,
        tail_color: Any = None,
        num_mags: int = 0
    ) -> None:
        """
        Initialize a multi-magnifier photon.

        Args:
            x, y: Initial position, also the first contact point
            direction: Initial direction of travel in radians
            speed: Distance travelled per tick (must be >= 0)
            collision_radius: Wall proximity at which a collision registers (must be >= 0)
            head_color: Opaque display attribute
            tail_color: Opaque display attribute
            num_mags: Number of magnifiers to keep tracking slots for

        Raises:
            InvalidParameterError: If speed, collision_radius or num_mags is negative.
        """
        super().__init__(x, y, direction, speed, collision_radius)
        if num_mags < 0:
            raise InvalidParameterError(f"num_mags must be non-negative, got {num_mags}")
        self.head_color: Any = head_color
        self.tail_color: Any = tail_color
        self.contact_points: List[Tuple[float, float]] = [(self.x, self.y)]
        self.mag_entry: List[Optional[Tuple[float, float]]] = [None] * num_mags
        self.last_mag_point: List[Optional[Tuple[float, float]]] = [None] * num_mags
        self.active: bool = True

    @property
    def num_mags(self) -> int:
        return len(self.mag_entry)

    def deactivate(self) -> None:
        """Stop the photon for good."""
        self.active = False

    def update_position(self) -> None:
        if self.active:
            super().update_position()

    def check_point_collision(self, px: float, py: float) -> bool:
        """
        Check whether the photon collides with a point (a corner).

        Uses at least MIN_CORNER_CATCH_RADIUS so corners are caught even for
        a very small collision_radius. Always False when inactive.
        """
        if not self.active:
            return False
        radius = max(MIN_CORNER_CATCH_RADIUS, self.collision_radius)
        return math.hypot(self.x - px, self.y - py) <= radius

    def check_line_collision(self, line: 'LineSegment') -> bool:
        """
        Check whether the photon collides with a wall.

        Corner hits use the widened corner radius; the wall body uses
        collision_radius. Always False when inactive.
        """
        if not self.active:
            return False
        return super().check_line_collision(line)

    def bounce_off_segment(self, line: 'LineSegment', verbose: int = 0) -> None:
        """
        Reflect off a wall and record the current position as a contact point.

        Does nothing when inactive.
        """
        if not self.active:
            return
        super().bounce_off_segment(line, verbose=verbose)
        self.contact_points.append((self.x, self.y))
