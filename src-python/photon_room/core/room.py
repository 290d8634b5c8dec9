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

import uuid as uuid_module
from typing import Iterable, List, Optional, Sequence

from shapely.geometry import GeometryCollection, MultiLineString, Point as ShapelyPoint
from shapely.ops import polygonize, unary_union

from .constants import DEFAULT_COLLISION_RADIUS, DEFAULT_PHOTON_SPEED
from .errors import InvalidParameterError
from .geometry import LineSegment
from .magnifier import Magnifier


class Room:
    """
    Container for the walls and magnifiers of a simulation and its settings.

    Walls are tested in the order they were added; when a photon touches
    several walls in the same tick the first one wins.

    Attributes:
        walls (list): LineSegment walls, in collision-test order
        magnifiers (list): Magnifier views, in index order
        photon_speed (float): Speed given to photons created by the simulator
        collision_radius (float): Collision radius given to photons created
            by the simulator
        deactivate_escaped (bool): Whether the simulator deactivates photons
            that end up outside every region enclosed by the walls
        name (str or None): Optional name for the room
    """

    def __init__(self, name: Optional[str] = None):
        """Initialize an empty room with default settings."""
        self.walls: List[LineSegment] = []
        self.magnifiers: List[Magnifier] = []
        self._photon_speed: float = DEFAULT_PHOTON_SPEED
        self._collision_radius: float = DEFAULT_COLLISION_RADIUS
        self.deactivate_escaped: bool = False
        self.name: Optional[str] = name
        self._uuid: str = str(uuid_module.uuid4())
        self._interior = None  # cached polygonized walls, reset when walls change

    @property
    def uuid(self) -> str:
        """Unique identifier of this room."""
        return self._uuid

    def get_display_name(self) -> str:
        """The room name, or a short uuid prefix when no name is set."""
        if self.name:
            return self.name
        return f"room_{self._uuid[:8]}"

    @property
    def photon_speed(self) -> float:
        return self._photon_speed

    @photon_speed.setter
    def photon_speed(self, value: float) -> None:
        """Set the default photon speed with validation."""
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not value >= 0:
            raise InvalidParameterError(
                f"photon_speed must be a non-negative number, got {value}"
            )
        self._photon_speed = value

    @property
    def collision_radius(self) -> float:
        return self._collision_radius

    @collision_radius.setter
    def collision_radius(self, value: float) -> None:
        """Set the default collision radius with validation."""
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not value >= 0:
            raise InvalidParameterError(
                f"collision_radius must be a non-negative number, got {value}"
            )
        self._collision_radius = value

    def add_wall(self, wall: LineSegment) -> LineSegment:
        """
        Add a wall to the room.

        Args:
            wall: The wall segment

        Returns:
            The wall, for chaining
        """
        self.walls.append(wall)
        self._interior = None
        return wall

    def add_walls(self, walls: Iterable[LineSegment]) -> None:
        for wall in walls:
            self.add_wall(wall)

    def add_polygon(self, points: Sequence[Sequence[float]], closed: bool = True) -> List[LineSegment]:
        """
        Add a chain of walls through the given vertices.

        Args:
            points: Sequence of (x, y) vertices
            closed: If True, also add a wall from the last vertex back to the first

        Returns:
            The walls created, in order

        Raises:
            InvalidGeometryError: If two consecutive vertices coincide.
        """
        vertices = [(p[0], p[1]) for p in points]
        if closed and len(vertices) > 2 and vertices[0] != vertices[-1]:
            vertices.append(vertices[0])
        # Build every segment first; a bad vertex leaves the room unchanged
        created = [LineSegment(x1, y1, x2, y2)
                   for (x1, y1), (x2, y2) in zip(vertices, vertices[1:])]
        self.add_walls(created)
        return created

    def add_magnifier(self, magnifier: Magnifier) -> Magnifier:
        """Add a magnifier; its index is its position in self.magnifiers."""
        self.magnifiers.append(magnifier)
        return magnifier

    def outline(self) -> MultiLineString:
        """All walls as a Shapely MultiLineString."""
        return MultiLineString([w.to_shapely() for w in self.walls])

    def contains(self, x: float, y: float) -> bool:
        """
        Check whether a point is inside the room.

        The interior is the union of every polygon the walls enclose. Points
        on a wall count as inside. A room whose walls do not close up
        contains nothing.
        """
        if not self.walls:
            return False
        if self._interior is None:
            # Noding with unary_union splits walls where they cross
            polygons = list(polygonize(unary_union(self.outline())))
            # An empty collection marks "encloses nothing" so it is cached too
            self._interior = unary_union(polygons) if polygons else GeometryCollection()
        if self._interior.is_empty:
            return False
        return self._interior.covers(ShapelyPoint(x, y))

    def __repr__(self) -> str:
        return (f"Room(name={self.get_display_name()!r}, walls={len(self.walls)}, "
                f"magnifiers={len(self.magnifiers)})")
