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
from typing import Any, Iterable, List, Optional, Tuple

from .constants import VERBOSE_INFO
from .errors import InvalidParameterError
from .multi_mag_photon import MultiMagPhoton
from .photon import Photon
from .room import Room


class Simulator:
    """
    Tick-based driver that moves photons around a room.

    Each call to step() processes every photon in turn, completely, before
    moving on to the next one:

    1. Advance the photon by its velocity
    2. Test it against the walls in room order and bounce off the first wall
       it touches (at most one bounce per photon per tick)
    3. Update its per-magnifier tracking slots
    4. Optionally deactivate it if it has left the room

    When a photon touches more than one wall in the same tick only the first
    wall in room.walls is honoured; no other priority is implied.

    Attributes:
        room (Room): The room being simulated
        photons (list): Photons, in processing order
        verbose (int): Verbosity level
        tick_count (int): Number of completed ticks
        bounce_count (int): Total number of bounces applied
    """

    def __init__(self, room: Room, photons: Optional[Iterable[Photon]] = None, verbose: int = 0) -> None:
        """
        Initialize the simulator.

        Args:
            room (Room): The room to simulate
            photons: Initial photons (default: none)
            verbose (int): Verbosity level (default: 0)
                0 = silent (no debug output)
                1 = verbose (show bounces and per-tick summaries)
                2 = very verbose/debug (show reflection vector math)
        """
        self.room: Room = room
        self.photons: List[Photon] = list(photons) if photons is not None else []
        self.verbose: int = verbose
        self.tick_count: int = 0
        self.bounce_count: int = 0

    def add_photon(self, photon: Photon) -> Photon:
        self.photons.append(photon)
        return photon

    def emit_fan(
        self,
        x: float,
        y: float,
        count: int,
        start_angle: float = 0.0,
        spread: float = 2 * math.pi,
        head_color: Any = None,
        tail_color: Any = None
    ) -> List[MultiMagPhoton]:
        """
        Emit photons from one point in evenly spaced directions.

        Photon i travels at start_angle + i * spread / count, with the room's
        photon_speed and collision_radius and one tracking slot per magnifier.

        Args:
            x, y: Emission point
            count: Number of photons
            start_angle: Direction of the first photon in radians
            spread: Angular range covered, in radians (default: full circle)
            head_color, tail_color: Display attributes passed to every photon

        Returns:
            The new photons, also appended to self.photons

        Raises:
            InvalidParameterError: If count is negative.
        """
        if count < 0:
            raise InvalidParameterError(f"count must be non-negative, got {count}")
        emitted = []
        for i in range(count):
            direction = start_angle + i * spread / count
            photon = MultiMagPhoton(
                x, y, direction,
                self.room.photon_speed,
                self.room.collision_radius,
                head_color, tail_color,
                len(self.room.magnifiers)
            )
            emitted.append(self.add_photon(photon))
        if self.verbose >= VERBOSE_INFO:
            print(f"Emitted {count} photons from ({x:.4f}, {y:.4f})")
        return emitted

    def step(self) -> int:
        """
        Run one tick.

        Returns:
            Number of bounces applied during this tick
        """
        bounces = 0
        for index, photon in enumerate(self.photons):
            photon.update_position()

            for wall in self.room.walls:
                if photon.check_line_collision(wall):
                    if self.verbose >= VERBOSE_INFO:
                        print(f"  tick {self.tick_count}: photon {index} hit {wall} "
                              f"at ({photon.x:.4f}, {photon.y:.4f})")
                    photon.bounce_off_segment(wall, verbose=self.verbose)
                    bounces += 1
                    break

            self.track_magnifiers(photon)

            if self.room.deactivate_escaped and isinstance(photon, MultiMagPhoton) \
                    and photon.active and not self.room.contains(photon.x, photon.y):
                photon.deactivate()
                if self.verbose >= VERBOSE_INFO:
                    print(f"  tick {self.tick_count}: photon {index} escaped, deactivated")

        self.tick_count += 1
        self.bounce_count += bounces
        if self.verbose >= VERBOSE_INFO:
            print(f"### SIMULATOR tick {self.tick_count}: {bounces} bounce(s)")
        return bounces

    def run(self, ticks: int) -> int:
        """
        Run several ticks.

        Args:
            ticks: Number of ticks to run

        Returns:
            Total number of bounces applied during these ticks
        """
        total = 0
        for _ in range(ticks):
            total += self.step()
        return total

    def track_magnifiers(self, photon: Photon) -> None:
        """
        Update a photon's per-magnifier tracking slots.

        For every magnifier whose capture square contains the photon,
        mag_entry is set the first time and last_mag_point is refreshed every
        time. Plain Photons have no slots and are left alone.
        """
        if not isinstance(photon, MultiMagPhoton):
            return
        point = (photon.x, photon.y)
        for i, magnifier in enumerate(self.room.magnifiers[:photon.num_mags]):
            if magnifier.contains(photon.x, photon.y):
                if photon.mag_entry[i] is None:
                    photon.mag_entry[i] = point
                photon.last_mag_point[i] = point

    def view_positions(self, photon: Photon) -> List[Optional[Tuple[float, float]]]:
        """
        Map a photon's position through every magnifier.

        Returns:
            One entry per magnifier: the position in that magnifier's view if
            the photon is inside its capture square, otherwise None
        """
        return [
            magnifier.translate(photon.x, photon.y) if magnifier.contains(photon.x, photon.y) else None
            for magnifier in self.room.magnifiers
        ]
