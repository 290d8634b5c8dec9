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

"""
Exceptions raised by the photon room kernel.

They derive from the built-in exception a caller would expect (ValueError for
bad input, ZeroDivisionError for a degenerate divisor), so ``except ValueError``
keeps working for code that does not care about the finer distinction.
"""


class InvalidGeometryError(ValueError):
    """A wall was constructed with coincident endpoints."""


class InvalidParameterError(ValueError):
    """A photon, magnifier or room setting is out of range."""


class DegenerateVectorError(ZeroDivisionError):
    """
    A vector operation divided by the norm of a zero-length vector.

    Raised by Vector.proj_onto and Vector.angle_between instead of letting
    nan propagate through the simulation.
    """
