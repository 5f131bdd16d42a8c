"""Tilt-compensated compass giving the magnetic heading."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .algebra import Vector, radians_to_degrees
from .convention import Convention


def _as_vector(value: Vector | Iterable[object]) -> Vector:
    return value if isinstance(value, Vector) else Vector.from_sequence(value)


def calculate_heading(
    convention: Convention | int,
    accelerometer: Vector | Iterable[object],
    magnetometer: Vector | Iterable[object],
) -> float:
    """Return the magnetic heading in degrees.

    Measurements may be in any calibrated units. An unknown convention gives 0.
    """
    accel = _as_vector(accelerometer)
    mag = _as_vector(magnetometer)
    try:
        convention = Convention(convention)
    except ValueError:
        return 0.0

    if convention is Convention.NED:
        up = accel * -1.0
        west = up.cross(mag).normalise()
        north = west.cross(up).normalise()
        return radians_to_degrees(math.atan2(west.x, north.x))

    west = accel.cross(mag).normalise()
    north = west.cross(accel).normalise()
    if convention is Convention.ENU:
        east = west * -1.0
        return radians_to_degrees(math.atan2(north.x, east.x))
    return radians_to_degrees(math.atan2(west.x, north.x))