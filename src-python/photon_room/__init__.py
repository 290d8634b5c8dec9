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

Photon Room
===========

A 2D kernel for light particles bouncing off the walls of a polygonal room,
with magnifier views that remap room coordinates into a zoomed display space.

Main modules:
- core: Vectors, walls, photons, magnifiers, and the Room/Simulator driver
- analysis: Statistics over photon contact histories

Quick start:
    from photon_room import Room, Simulator
    room = Room()
    room.add_polygon([(0, 0), (100, 0), (100, 100), (0, 100)])
    sim = Simulator(room)
    sim.emit_fan(50, 50, count=12)
    sim.run(500)
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.vector import Vector
from .core.geometry import LineSegment
from .core.photon import Photon
from .core.multi_mag_photon import MultiMagPhoton
from .core.magnifier import Magnifier
from .core.room import Room
from .core.simulator import Simulator

__all__ = [
    'Vector',
    'LineSegment',
    'Photon',
    'MultiMagPhoton',
    'Magnifier',
    'Room',
    'Simulator',
    '__version__',
]
