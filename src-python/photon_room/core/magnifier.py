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

from typing import List, Sequence, Tuple

from shapely.geometry import Point as ShapelyPoint, Polygon, box

from .errors import InvalidParameterError


class Square:
    """
    An axis-aligned square given by its lower-left corner and side length.

    Attributes:
        x (float): x of the lower-left corner
        y (float): y of the lower-left corner
        side (float): Side length
    """

    def __init__(self, x: float, y: float, side: float) -> None:
        self.x = x
        self.y = y
        self.side = side

    def to_shapely(self) -> Polygon:
        """Convert to a Shapely box polygon."""
        return box(self.x, self.y, self.x + self.side, self.y + self.side)

    def contains(self, px: float, py: float) -> bool:
        """True if (px, py) is inside the square or on its border."""
        return self.to_shapely().covers(ShapelyPoint(px, py))

    def __repr__(self) -> str:
        return f"Square(x={self.x}, y={self.y}, side={self.side})"


def _corner_box(center: Sequence[float], side: float) -> List[Tuple[float, float]]:
    # lower-left, upper-left, upper-right, lower-right
    half = side / 2
    return [
        (center[0] - half, center[1] - half),
        (center[0] - half, center[1] + half),
        (center[0] + half, center[1] + half),
        (center[0] + half, center[1] - half),
    ]


class Magnifier:
    """
    Maps a square region of the room onto a larger (or smaller) square view.

    The capture square is centred on mag with side mag_side; the view square
    is centred on mag_view with side mag_view_side. translate() is a pure
    affine map and does not check that the input lies in the capture square;
    use contains() for that.

    Attributes:
        mag (tuple): Centre of the capture square in the room
        mag_side (float): Side length of the capture square
        mag_view (tuple): Centre of the magnified view
        mag_view_side (float): Side length of the magnified view
        mag_square (Square): The capture square
        mag_box (list): Corners of the capture square
        mag_view_box (list): Corners of the view square
    """

    def __init__(
        self,
        mag: Sequence[float],
        mag_side: float,
        mag_view: Sequence[float],
        mag_view_side: float
    ) -> None:
        """
        Initialize a magnifier.

        Args:
            mag: (x, y) centre of the capture square
            mag_side: Side length of the capture square (must be > 0)
            mag_view: (x, y) centre of the view square
            mag_view_side: Side length of the view square (must be > 0)

        Raises:
            InvalidParameterError: If either side length is not positive (nan included).
        """
        if not mag_side > 0:
            raise InvalidParameterError(f"mag_side must be positive, got {mag_side}")
        if not mag_view_side > 0:
            raise InvalidParameterError(f"mag_view_side must be positive, got {mag_view_side}")
        self.mag: Tuple[float, float] = (mag[0], mag[1])
        self.mag_side: float = mag_side
        self.mag_view: Tuple[float, float] = (mag_view[0], mag_view[1])
        self.mag_view_side: float = mag_view_side
        self.mag_square: Square = Square(
            mag[0] - mag_side / 2,
            mag[1] - mag_side / 2,
            mag_side
        )
        self.mag_box: List[Tuple[float, float]] = _corner_box(self.mag, mag_side)
        self.mag_view_box: List[Tuple[float, float]] = _corner_box(self.mag_view, mag_view_side)
        self._view_square: Square = Square(
            mag_view[0] - mag_view_side / 2,
            mag_view[1] - mag_view_side / 2,
            mag_view_side
        )

    @property
    def zoom(self) -> float:
        """Scale factor from room distances to view distances."""
        return self.mag_view_side / self.mag_side

    def translate(self, x: float, y: float) -> Tuple[float, float]:
        """
        Convert room coordinates to view coordinates.

        Args:
            x, y: Point in the room

        Returns:
            The point in the magnified view. The capture centre maps exactly
            onto the view centre.
        """
        dx = x - self.mag[0]
        dy = y - self.mag[1]
        return (
            self.mag_view[0] + (self.mag_view_side / self.mag_side) * dx,
            self.mag_view[1] + (self.mag_view_side / self.mag_side) * dy,
        )

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) lies in the capture square (border included)."""
        return self.mag_square.contains(x, y)

    def view_contains(self, x: float, y: float) -> bool:
        """True if (x, y) lies in the view square (border included)."""
        return self._view_square.contains(x, y)

    def __repr__(self) -> str:
        return (f"Magnifier(mag={self.mag}, mag_side={self.mag_side}, "
                f"mag_view={self.mag_view}, mag_view_side={self.mag_view_side})")
