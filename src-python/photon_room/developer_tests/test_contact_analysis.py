"""
===============================================================================
CONTACT ANALYSIS TESTS
===============================================================================

Tests for analysis.contact_analysis:

1. path_length() over contact-point polylines
2. bounce_count() from the contact history
3. contact_points_in_magnifier(), raw and translated into the view
4. get_photon_statistics(), including after a real simulation

Run with:
    python developer_tests/test_contact_analysis.py

Or with pytest:
    pytest developer_tests/test_contact_analysis.py -v
===============================================================================
"""

import sys
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from photon_room.analysis import (
    path_length,
    bounce_count,
    contact_points_in_magnifier,
    get_photon_statistics,
)
from photon_room.core.magnifier import Magnifier
from photon_room.core.multi_mag_photon import MultiMagPhoton
from photon_room.core.room import Room
from photon_room.core.simulator import Simulator


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def photon_with_contacts(points, active=True):
    """A stationary photon with a hand-made contact history."""
    photon = MultiMagPhoton(points[0][0], points[0][1], 0, 0, 0.5, None, None, 0)
    photon.contact_points.extend(points[1:])
    if not active:
        photon.deactivate()
    return photon


# =============================================================================
# CONTACT HISTORY
# =============================================================================

def test_path_length():
    print("\n" + "=" * 60)
    print("TEST: path_length")
    print("=" * 60)

    assert path_length([]) == 0.0
    assert path_length([(1, 1)]) == 0.0
    assert_close(path_length([(0, 0), (3, 4)]), 5.0, msg="single step")
    assert_close(path_length([(0, 0), (3, 4), (3, 0)]), 9.0, msg="two steps")
    print("  Sum of consecutive distances - PASS")


def test_bounce_count():
    assert bounce_count(photon_with_contacts([(0, 0)])) == 0
    assert bounce_count(photon_with_contacts([(0, 0), (1, 0), (1, 1)])) == 2
    print("  Starting point is not a bounce - PASS")


def test_contact_points_in_magnifier():
    print("\n" + "=" * 60)
    print("TEST: contact_points_in_magnifier")
    print("=" * 60)

    magnifier = Magnifier((0, 0), 10, (100, 100), 20)
    photon = photon_with_contacts([(0, 0), (4, 4), (20, 0), (-5, 5)])

    assert contact_points_in_magnifier(photon, magnifier) == [(0, 0), (4, 4), (-5, 5)]
    print("  Points outside the capture square are dropped - PASS")

    assert contact_points_in_magnifier(photon, magnifier, translate=True) == [
        (100, 100), (108, 108), (90, 110)
    ]
    print("  translate=True maps the points into the view - PASS")


# =============================================================================
# STATISTICS
# =============================================================================

def test_photon_statistics():
    print("\n" + "=" * 60)
    print("TEST: get_photon_statistics")
    print("=" * 60)

    empty = get_photon_statistics([])
    assert empty['total_photons'] == 0
    assert empty['max_bounces'] == 0
    assert empty['mean_path_length'] == 0.0
    print("  Empty collection gives zeros - PASS")

    photons = [
        photon_with_contacts([(0, 0), (3, 4)]),
        photon_with_contacts([(0, 0), (0, 1), (0, 2), (0, 3)], active=False),
        photon_with_contacts([(5, 5)]),
    ]
    stats = get_photon_statistics(photons)
    assert stats['total_photons'] == 3
    assert stats['active_photons'] == 2
    assert stats['inactive_photons'] == 1
    assert stats['total_bounces'] == 4
    assert stats['max_bounces'] == 3
    assert_close(stats['mean_path_length'], 8.0 / 3, msg="mean path length")
    print(f"  {stats} - PASS")


def test_statistics_after_simulation():
    room = Room()
    room.add_polygon([(0, 0), (40, 0), (40, 40), (0, 40)])
    sim = Simulator(room)
    # Axis-aligned photons from the centre each reach a wall on tick 20
    photons = sim.emit_fan(20, 20, 4)
    sim.run(25)

    stats = get_photon_statistics(photons)
    assert stats['total_photons'] == 4
    assert stats['active_photons'] == 4
    assert stats['total_bounces'] == 4
    assert sim.bounce_count == 4
    assert_close(stats['mean_path_length'], 20.0, tol=1e-6, msg="mean path length")
    print("  Statistics agree with the simulator - PASS")


# =============================================================================
# MAIN
# =============================================================================

def run_all_tests():
    """Run all tests and report results."""
    tests = [
        ("path length", test_path_length),
        ("bounce count", test_bounce_count),
        ("contact points in magnifier", test_contact_points_in_magnifier),
        ("photon statistics", test_photon_statistics),
        ("statistics after simulation", test_statistics_after_simulation),
    ]

    passed = 0
    errors = []
    for name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            errors.append((name, str(e)))
            print(f"\n  FAILED: {name}")
            print(f"    Error: {e}")

    print("\n" + "=" * 78)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 78)
    return not errors


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
