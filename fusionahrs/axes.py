"""Swapping of sensor axes for alignment with the body axes."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from .algebra import Vector


class AxesAlignment(IntEnum):
    """Sensor axes relative to the body axes.

    For example, if the body X axis is aligned with the sensor Y axis and the
    body Y axis is aligned with the sensor X axis but pointing the opposite
    direction, the alignment is +Y-X+Z (``PYNXPZ``).
    """

    PXPYPZ = 0
    PXNZPY = 1
    PXNYNZ = 2
    PXPZNY = 3
    NXPYNZ = 4
    NXPZPY = 5
    NXNYPZ = 6
    NXNZNY = 7
    PYNXPZ = 8
    PYNZNX = 9
    PYPXNZ = 10
    PYPZPX = 11
    NYPXPZ = 12
    NYNZPX = 13
    NYNXNZ = 14
    NYPZNX = 15
    PZPYNX = 16
    PZPXPY = 17
    PZNYPX = 18
    PZNXNY = 19
    NZPYPX = 20
    NZNXPY = 21
    NZNYNX = 22
    NZPXNY = 23


_AXIS_INDEX = {"X": 0, "Y": 1, "Z": 2}


def _selection(name: str) -> tuple[tuple[float, int], ...]:
    """Sign and source index of each body axis, read from an alignment name."""
    return tuple(
        (1.0 if name[i] == "P" else -1.0, _AXIS_INDEX[name[i + 1]])
        for i in (0, 2, 4)
    )


_SELECTIONS = {member: _selection(member.name) for member in AxesAlignment}


def _as_vector(value: Vector | Iterable[object]) -> Vector:
    return value if isinstance(value, Vector) else Vector.from_sequence(value)


def axes_swap(sensor: Vector | Iterable[object], alignment: AxesAlignment | int) -> Vector:
    """Return the sensor axes rearranged to align with the body axes.

    An alignment value outside the known set leaves the sensor axes unchanged.
    """
    vector = _as_vector(sensor)
    try:
        selection = _SELECTIONS[AxesAlignment(alignment)]
    except ValueError:
        return vector
    values = tuple(vector)
    return Vector(*(sign * values[index] for sign, index in selection))