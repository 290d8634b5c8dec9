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

===============================================================================
Contact History Analysis
===============================================================================
Read-only statistics over the contact points recorded by MultiMagPhotons:
how often they bounced, how far they travelled between bounces, and which
bounces happened inside a magnifier's capture square.
===============================================================================
"""

from typing import List, Sequence, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..core.magnifier import Magnifier
    from ..core.multi_mag_photon import MultiMagPhoton


def path_length(points: Sequence[Tuple[float, float]]) -> float:
    """
    Length of the polyline through the given points.

    Args:
        points: Sequence of (x, y) points

    Returns:
        Sum of the distances between consecutive points (0.0 for fewer than
        two points)
    """
    if len(points) < 2:
        return 0.0
    coords = np.asarray(points, dtype=float)
    steps = np.diff(coords, axis=0)
    return float(np.hypot(steps[:, 0], steps[:, 1]).sum())


def bounce_count(photon: 'MultiMagPhoton') -> int:
    """Number of bounces recorded (the first contact point is the start)."""
    return len(photon.contact_points) - 1


def contact_points_in_magnifier(
    photon: 'MultiMagPhoton',
    magnifier: 'Magnifier',
    translate: bool = False
) -> List[Tuple[float, float]]:
    """
    Contact points of a photon that lie in a magnifier's capture square.

    Args:
        photon: The photon whose contact points are examined
        magnifier: The magnifier
        translate: If True, return the points mapped into the magnified view

    Returns:
        The matching points, in contact order
    """
    inside = [p for p in photon.contact_points if magnifier.contains(p[0], p[1])]
    if translate:
        return [magnifier.translate(p[0], p[1]) for p in inside]
    return inside


def get_photon_statistics(photons: Sequence['MultiMagPhoton']) -> dict:
    """
    Compute statistics about a collection of photons.

    Args:
        photons: MultiMagPhoton objects to analyze.

    Returns:
        dict: Dictionary containing:
            - total_photons: Number of photons
            - active_photons: Number of photons still active
            - inactive_photons: Number of deactivated photons
            - total_bounces: Sum of bounces over all photons
            - max_bounces: Largest number of bounces of a single photon
            - mean_path_length: Average length of the contact-point path

    Example:
        >>> stats = get_photon_statistics(simulator.photons)
        >>> print(f"Bounces: {stats['total_bounces']}")
    """
    if not photons:
        return {
            'total_photons': 0,
            'active_photons': 0,
            'inactive_photons': 0,
            'total_bounces': 0,
            'max_bounces': 0,
            'mean_path_length': 0.0,
        }

    active = sum(1 for photon in photons if photon.active)
    bounces = [bounce_count(photon) for photon in photons]
    lengths = np.array([path_length(photon.contact_points) for photon in photons])

    return {
        'total_photons': len(photons),
        'active_photons': active,
        'inactive_photons': len(photons) - active,
        'total_bounces': sum(bounces),
        'max_bounces': max(bounces),
        'mean_path_length': float(lengths.mean()),
    }
