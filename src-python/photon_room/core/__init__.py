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

from . import constants
from .errors import InvalidGeometryError, InvalidParameterError, DegenerateVectorError
from .vector import Vector
from .geometry import Point, LineSegment
from .photon import Photon
from .multi_mag_photon import MultiMagPhoton
from .magnifier import Square, Magnifier
from .room import Room
from .simulator import Simulator

__all__ = [
    'constants',
    'InvalidGeometryError', 'InvalidParameterError', 'DegenerateVectorError',
    'Vector',
    'Point', 'LineSegment',
    'Photon',
    'MultiMagPhoton',
    'Square', 'Magnifier',
    'Room',
    'Simulator',
]
