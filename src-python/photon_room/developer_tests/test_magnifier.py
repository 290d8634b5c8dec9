"""
===============================================================================
MAGNIFIER TESTS
===============================================================================

Tests for core.magnifier.Magnifier and Square:

1. Derived geometry (capture square, corner boxes)
2. translate(): centre maps to centre, uniform scaling, no clipping
3. Containment of the capture and view squares (border inclusive)
4. Parameter validation

Run with:
    python developer_tests/test_magnifier.py

Or with pytest:
    pytest developer_tests/test_magnifier.py -v
===============================================================================
"""

import sys
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from photon_room.core.errors import InvalidParameterError
from photon_room.core.magnifier import Magnifier, Square


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def test_derived_geometry():
    print("\n" + "=" * 60)
    print("TEST: Magnifier geometry")
    print("=" * 60)

    magnifier = Magnifier([0, 0], 10, [100, 100], 20)
    assert magnifier.mag == (0, 0)
    assert magnifier.mag_view == (100, 100)
    assert magnifier.zoom == 2

    square = magnifier.mag_square
    assert (square.x, square.y, square.side) == (-5, -5, 10)
    print(f"  {square} - PASS")

    assert magnifier.mag_box == [(-5, -5), (-5, 5), (5, 5), (5, -5)]
    assert magnifier.mag_view_box == [(90, 90), (90, 110), (110, 110), (110, 90)]
    print("  Corner boxes: lower-left, upper-left, upper-right, lower-right - PASS")


def test_translate():
    print("\n" + "=" * 60)
    print("TEST: Magnifier.translate")
    print("=" * 60)

    magnifier = Magnifier([0, 0], 10, [100, 100], 20)
    assert magnifier.translate(5, 0) == (110, 100)
    print("  translate(5, 0) == (110, 100) - PASS")

    off_centre = Magnifier([37.5, -12.25], 7, [400, 300], 91)
    assert off_centre.translate(37.5, -12.25) == (400, 300)
    assert magnifier.translate(0, 0) == (100, 100)
    print("  Capture centre maps exactly onto view centre - PASS")

    for x, y in [(1, 2), (-3.5, 4), (36, -10)]:
        dx = 1.75
        x1, y1 = off_centre.translate(x + dx, y)
        x0, y0 = off_centre.translate(x, y)
        assert_close(x1 - x0, off_centre.zoom * dx, msg="x offset scales by zoom")
        assert_close(y1 - y0, 0.0, msg="y unchanged")
    print("  translate is affine with slope mag_view_side / mag_side - PASS")

    # No clipping: points outside the capture square map outside the view
    x, y = magnifier.translate(50, 0)
    assert (x, y) == (200, 100)
    assert not magnifier.view_contains(x, y)
    print("  Points outside the capture square are mapped without clipping - PASS")


def test_containment():
    magnifier = Magnifier([0, 0], 10, [100, 100], 20)
    assert magnifier.contains(0, 0)
    assert magnifier.contains(5, 5)
    assert magnifier.contains(-5, 0)
    assert not magnifier.contains(5.1, 0)
    assert not magnifier.contains(100, 100)
    print("  Capture square containment, border included - PASS")

    assert magnifier.view_contains(100, 100)
    assert magnifier.view_contains(110, 90)
    assert not magnifier.view_contains(0, 0)
    print("  View square containment - PASS")

    # Anything inside the capture square lands inside the view square
    for x, y in [(4.9, -4.9), (-5, 5), (1, 2)]:
        assert magnifier.view_contains(*magnifier.translate(x, y))

    square = Square(1, 1, 2)
    assert square.contains(3, 3) and not square.contains(0.9, 2)
    assert square.to_shapely().area == 4


def test_invalid_sides():
    for mag_side, view_side in [(0, 10), (-1, 10), (10, 0), (10, -3), (float("nan"), 10)]:
        try:
            Magnifier((0, 0), mag_side, (0, 0), view_side)
            raise AssertionError("Should have raised InvalidParameterError")
        except InvalidParameterError:
            pass
    print("  Non-positive or nan sides rejected - PASS")


# =============================================================================
# MAIN
# =============================================================================

def run_all_tests():
    """Run all tests and report results."""
    tests = [
        ("derived geometry", test_derived_geometry),
        ("translate", test_translate),
        ("containment", test_containment),
        ("invalid sides", test_invalid_sides),
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
