"""Run-time calibration of the gyroscope offset."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .algebra import Vector

_CUTOFF_FREQUENCY = 0.02  # Hz
_TIMEOUT = 5  # seconds
_THRESHOLD = 3.0  # degrees per second


class Offset:
    """Gyroscope offset correction that adapts while the sensor is stationary."""

    def __init__(self, sample_rate: int) -> None:
        if isinstance(sample_rate, bool) or not isinstance(sample_rate, int):
            raise TypeError("Arguments are not (unsigned int)")
        if sample_rate <= 0:
            raise ValueError("sample_rate must be positive")
        self._filter_coefficient = 2.0 * math.pi * _CUTOFF_FREQUENCY * (1.0 / sample_rate)
        self._timeout = _TIMEOUT * sample_rate
        self._timer = 0
        self._gyroscope_offset = Vector()

    @property
    def gyroscope_offset(self) -> Vector:
        """Current estimate of the gyroscope offset in degrees per second."""
        return self._gyroscope_offset

    def update(self, gyroscope: Vector | Iterable[object]) -> Vector:
        """Return the corrected gyroscope measurement in degrees per second."""
        if not isinstance(gyroscope, Vector):
            gyroscope = Vector.from_sequence(gyroscope)
        corrected = gyroscope - self._gyroscope_offset

        if any(abs(value) > _THRESHOLD for value in corrected):
            self._timer = 0
            return corrected

        if self._timer < self._timeout:
            self._timer += 1
            return corrected

        self._gyroscope_offset = self._gyroscope_offset + corrected * self._filter_coefficient
        return corrected