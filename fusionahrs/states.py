"""Settings, flags and internal states of the AHRS algorithm."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

from .convention import Convention

_FLOAT_FIELDS = frozenset(
    {"gain", "gyroscope_range", "acceleration_rejection", "magnetic_rejection"}
)


def _as_convention(value: Any) -> Convention:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("convention must be a Convention or an int")
    return Convention(value)


def _as_period(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("recovery_trigger_period must be an int")
    if value < 0:
        raise ValueError("recovery_trigger_period must not be negative")
    return value


def _as_real(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number")
    return float(value)


@dataclass
class Settings:
    """AHRS algorithm settings.

    Angles are in degrees, the gyroscope range in degrees per second and the
    recovery trigger period in samples. A rejection or range of zero disables
    the corresponding feature.
    """

    convention: Convention = Convention.NWU
    gain: float = 0.5
    gyroscope_range: float = 0.0
    acceleration_rejection: float = 90.0
    magnetic_rejection: float = 90.0
    recovery_trigger_period: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "convention":
            value = _as_convention(value)
        elif name == "recovery_trigger_period":
            value = _as_period(value)
        elif name in _FLOAT_FIELDS:
            value = _as_real(name, value)
        super().__setattr__(name, value)


@dataclass(frozen=True)
class Flags:
    """AHRS algorithm flags."""

    initialising: bool = False
    angular_rate_recovery: bool = False
    acceleration_recovery: bool = False
    magnetic_recovery: bool = False


@dataclass(frozen=True)
class InternalStates:
    """AHRS algorithm internal states.

    Errors are in degrees; recovery triggers are fractions of the trigger period.
    """

    acceleration_error: float = 0.0
    accelerometer_ignored: bool = False
    acceleration_recovery_trigger: float = 0.0
    magnetic_error: float = 0.0
    magnetometer_ignored: bool = False
    magnetic_recovery_trigger: float = 0.0