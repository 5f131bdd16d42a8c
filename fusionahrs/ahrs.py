"""AHRS algorithm combining gyroscope, accelerometer and magnetometer measurements
into a single measurement of orientation relative to the Earth."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from dataclasses import dataclass, replace

from .algebra import (
    IDENTITY_QUATERNION,
    VECTOR_ZERO,
    Quaternion,
    Vector,
    clamped_asin,
    degrees_to_radians,
    radians_to_degrees,
)
from .frames import (
    earth_acceleration,
    gravity,
    half_gravity,
    half_magnetic,
    linear_acceleration,
)
from .states import Flags, InternalStates, Settings

_FLOAT32_MAX = 3.4028234663852886e38
_INITIAL_GAIN = 10.0
_INITIALISATION_PERIOD = 3.0  # seconds


def _as_vector(value: Vector | Iterable[object]) -> Vector:
    return value if isinstance(value, Vector) else Vector.from_sequence(value)


def _as_float(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number")
    return float(value)


def _rejection_threshold(angle: float) -> float:
    if angle == 0.0:
        return _FLOAT32_MAX
    return (0.5 * math.sin(degrees_to_radians(angle))) ** 2


def _feedback(sensor: Vector, reference: Vector) -> Vector:
    if sensor.dot(reference) < 0.0:  # error is more than 90 degrees
        return sensor.cross(reference).normalise()
    return sensor.cross(reference)


@dataclass
class _Channel:
    """Rejection and recovery state of one reference sensor."""

    feedback: Vector = VECTOR_ZERO
    ignored: bool = False
    trigger: int = 0
    timeout: int = 0

    def apply(self, feedback: Vector, initialising: bool, rejection: float, period: int) -> Vector:
        """Record the feedback and return the part of it to apply."""
        self.feedback = feedback
        if initialising or feedback.magnitude_squared() <= rejection:
            self.ignored = False
            self.trigger -= 9
        else:
            self.trigger += 1

        if self.trigger > self.timeout:
            self.timeout = 0
            self.ignored = False
        else:
            self.timeout = period
        self.trigger = min(max(self.trigger, 0), period)

        return VECTOR_ZERO if self.ignored else feedback

    @property
    def recovering(self) -> bool:
        return self.trigger > self.timeout

    def error(self) -> float:
        return radians_to_degrees(clamped_asin(2.0 * self.feedback.magnitude()))

    def trigger_fraction(self, period: int) -> float:
        return 0.0 if period == 0 else self.trigger / period


class Ahrs:
    """Orientation estimator for gyroscope, accelerometer and magnetometer data."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._initialising = True
        self._ramped_gain = _INITIAL_GAIN
        self._accelerometer_channel = _Channel()
        self._magnetic_channel = _Channel()
        self.settings = settings if settings is not None else Settings()
        self.reset()

    @property
    def settings(self) -> Settings:
        """A copy of the settings in use."""
        return replace(self._settings)

    @settings.setter
    def settings(self, settings: Settings) -> None:
        if not isinstance(settings, Settings):
            raise TypeError("Value type is not Settings")
        self._settings = replace(settings)
        self._convention = settings.convention
        self._gain = settings.gain
        self._gyroscope_range = (
            _FLOAT32_MAX if settings.gyroscope_range == 0.0 else 0.98 * settings.gyroscope_range
        )
        self._acceleration_rejection = _rejection_threshold(settings.acceleration_rejection)
        self._magnetic_rejection = _rejection_threshold(settings.magnetic_rejection)
        self._recovery_trigger_period = settings.recovery_trigger_period
        self._accelerometer_channel.timeout = self._recovery_trigger_period
        self._magnetic_channel.timeout = self._recovery_trigger_period
        if settings.gain == 0.0 or settings.recovery_trigger_period == 0:
            self._acceleration_rejection = _FLOAT32_MAX
            self._magnetic_rejection = _FLOAT32_MAX
        if not self._initialising:
            self._ramped_gain = self._gain
        self._ramped_gain_step = (_INITIAL_GAIN - self._gain) / _INITIALISATION_PERIOD

    def reset(self) -> None:
        """Restart the algorithm while keeping the current settings."""
        self._quaternion = IDENTITY_QUATERNION
        self._accelerometer = VECTOR_ZERO
        self._initialising = True
        self._ramped_gain = _INITIAL_GAIN
        self._angular_rate_recovery = False
        self._accelerometer_channel = _Channel(timeout=self._recovery_trigger_period)
        self._magnetic_channel = _Channel(timeout=self._recovery_trigger_period)

    def update(
        self,
        gyroscope: Vector | Iterable[object],
        accelerometer: Vector | Iterable[object],
        magnetometer: Vector | Iterable[object],
        delta_time: float,
    ) -> None:
        """Update with gyroscope (deg/s), accelerometer (g) and magnetometer data."""
        gyro = _as_vector(gyroscope)
        accel = _as_vector(accelerometer)
        mag = _as_vector(magnetometer)
        dt = _as_float("delta_time", delta_time)

        self._accelerometer = accel

        # Reinitialise if the gyroscope range is exceeded
        if any(abs(value) > self._gyroscope_range for value in gyro):
            quaternion = self._quaternion
            self.reset()
            self._quaternion = quaternion
            self._angular_rate_recovery = True

        # Ramp down the gain during initialisation
        if self._initialising:
            self._ramped_gain -= self._ramped_gain_step * dt
            if self._ramped_gain < self._gain or self._gain == 0.0:
                self._ramped_gain = self._gain
                self._initialising = False
                self._angular_rate_recovery = False

        half_grav = half_gravity(self._convention, self._quaternion)
        period = self._recovery_trigger_period

        accelerometer_feedback = VECTOR_ZERO
        self._accelerometer_channel.ignored = True
        if not accel.is_zero():
            accelerometer_feedback = self._accelerometer_channel.apply(
                _feedback(accel.normalise(), half_grav),
                self._initialising,
                self._acceleration_rejection,
                period,
            )

        magnetometer_feedback = VECTOR_ZERO
        self._magnetic_channel.ignored = True
        if not mag.is_zero():
            half_mag = half_magnetic(self._convention, self._quaternion)
            magnetometer_feedback = self._magnetic_channel.apply(
                _feedback(half_grav.cross(mag).normalise(), half_mag),
                self._initialising,
                self._magnetic_rejection,
                period,
            )

        half_gyroscope = gyro * degrees_to_radians(0.5)
        adjusted = half_gyroscope + (accelerometer_feedback + magnetometer_feedback) * self._ramped_gain
        q = self._quaternion
        self._quaternion = (q + q.multiply_vector(adjusted * dt)).normalise()

    def update_no_magnetometer(
        self,
        gyroscope: Vector | Iterable[object],
        accelerometer: Vector | Iterable[object],
        delta_time: float,
    ) -> None:
        """Update with gyroscope and accelerometer data only."""
        self.update(gyroscope, accelerometer, VECTOR_ZERO, delta_time)
        if self._initialising:
            self.set_heading(0.0)

    def update_external_heading(
        self,
        gyroscope: Vector | Iterable[object],
        accelerometer: Vector | Iterable[object],
        heading: float,
        delta_time: float,
    ) -> None:
        """Update with gyroscope, accelerometer and a heading in degrees."""
        heading = _as_float("heading", heading)
        w, x, y, z = self._quaternion.wxyz
        roll = math.atan2(w * x + y * z, 0.5 - y * y - x * x)
        heading_radians = degrees_to_radians(heading)
        sin_heading = math.sin(heading_radians)
        magnetometer = Vector(
            math.cos(heading_radians),
            -1.0 * math.cos(roll) * sin_heading,
            sin_heading * math.sin(roll),
        )
        self.update(gyroscope, accelerometer, magnetometer, delta_time)

    @property
    def quaternion(self) -> Quaternion:
        """Orientation of the sensor relative to the Earth."""
        return self._quaternion

    @quaternion.setter
    def quaternion(self, quaternion: Quaternion | Iterable[object]) -> None:
        if not isinstance(quaternion, Quaternion):
            quaternion = Quaternion.from_sequence(quaternion)
        self._quaternion = quaternion

    @property
    def gravity(self) -> Vector:
        """Direction of gravity in the sensor frame."""
        return gravity(self._quaternion)

    @property
    def linear_acceleration(self) -> Vector:
        """Accelerometer measurement with gravity removed, in g."""
        return linear_acceleration(self._convention, self._quaternion, self._accelerometer)

    @property
    def earth_acceleration(self) -> Vector:
        """Accelerometer measurement in the Earth frame with gravity removed, in g."""
        return earth_acceleration(self._convention, self._quaternion, self._accelerometer)

    @property
    def internal_states(self) -> InternalStates:
        """Snapshot of the algorithm's internal states."""
        period = self._recovery_trigger_period
        accel = self._accelerometer_channel
        mag = self._magnetic_channel
        return InternalStates(
            acceleration_error=accel.error(),
            accelerometer_ignored=accel.ignored,
            acceleration_recovery_trigger=accel.trigger_fraction(period),
            magnetic_error=mag.error(),
            magnetometer_ignored=mag.ignored,
            magnetic_recovery_trigger=mag.trigger_fraction(period),
        )

    @property
    def flags(self) -> Flags:
        """Snapshot of the algorithm's flags."""
        return Flags(
            initialising=self._initialising,
            angular_rate_recovery=self._angular_rate_recovery,
            acceleration_recovery=self._accelerometer_channel.recovering,
            magnetic_recovery=self._magnetic_channel.recovering,
        )

    def set_heading(self, heading: float) -> None:
        """Set the heading of the orientation, in degrees."""
        heading = _as_float("heading", heading)
        w, x, y, z = self._quaternion.wxyz
        yaw = math.atan2(w * z + x * y, 0.5 - y * y - z * z)
        half = 0.5 * (yaw - degrees_to_radians(heading))
        rotation = Quaternion(math.cos(half), 0.0, 0.0, -1.0 * math.sin(half))
        self._quaternion = rotation * self._quaternion