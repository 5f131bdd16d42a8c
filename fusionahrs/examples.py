"""Example pipelines that feed sensor samples through the AHRS algorithm."""

from __future__ import annotations

import argparse
import itertools
from collections.abc import Iterable, Iterator, Sequence

from .ahrs import Ahrs
from .algebra import IDENTITY_MATRIX, VECTOR_ONES, VECTOR_ZERO, Euler, Vector
from .calibration import calibrate_inertial, calibrate_magnetic
from .convention import Convention
from .offset import Offset
from .states import Settings

SimpleSample = tuple[object, object]
AdvancedSample = tuple[float, object, object, object]

_STATIONARY_GYROSCOPE = Vector(0.0, 0.0, 0.0)
_STATIONARY_ACCELEROMETER = Vector(0.0, 0.0, 1.0)
_STATIONARY_MAGNETOMETER = Vector(1.0, 0.0, 0.0)


def _as_vector(value: object) -> Vector:
    return value if isinstance(value, Vector) else Vector.from_sequence(value)  # type: ignore[arg-type]


def run_simple(samples: Iterable[SimpleSample], sample_period: float) -> Iterator[Euler]:
    """Yield the orientation after each (gyroscope, accelerometer) sample.

    Gyroscope data is in degrees per second, accelerometer data in g and the
    sample period in seconds. No magnetometer is used.
    """
    ahrs = Ahrs()
    for gyroscope, accelerometer in samples:
        ahrs.update_no_magnetometer(gyroscope, accelerometer, sample_period)
        yield ahrs.quaternion.to_euler()


def run_advanced(
    samples: Iterable[AdvancedSample], sample_rate: int
) -> Iterator[tuple[Euler, Vector]]:
    """Yield orientation and Earth acceleration for each sample.

    Each sample is (timestamp, gyroscope, accelerometer, magnetometer) with the
    timestamp in seconds. Calibration is applied, the gyroscope offset is
    corrected at run time, and the delta time is taken from the timestamps,
    starting from a previous timestamp of zero.
    """
    gyroscope_misalignment = IDENTITY_MATRIX
    gyroscope_sensitivity = VECTOR_ONES
    gyroscope_offset = VECTOR_ZERO
    accelerometer_misalignment = IDENTITY_MATRIX
    accelerometer_sensitivity = VECTOR_ONES
    accelerometer_offset = VECTOR_ZERO
    soft_iron_matrix = IDENTITY_MATRIX
    hard_iron_offset = VECTOR_ZERO

    offset = Offset(sample_rate)
    ahrs = Ahrs(
        Settings(
            convention=Convention.NWU,
            gain=0.5,
            gyroscope_range=2000.0,
            acceleration_rejection=10.0,
            magnetic_rejection=10.0,
            recovery_trigger_period=5 * sample_rate,
        )
    )

    previous_timestamp = 0.0
    for timestamp, gyroscope, accelerometer, magnetometer in samples:
        gyro = calibrate_inertial(
            _as_vector(gyroscope), gyroscope_misalignment, gyroscope_sensitivity, gyroscope_offset
        )
        accel = calibrate_inertial(
            _as_vector(accelerometer),
            accelerometer_misalignment,
            accelerometer_sensitivity,
            accelerometer_offset,
        )
        mag = calibrate_magnetic(_as_vector(magnetometer), soft_iron_matrix, hard_iron_offset)

        gyro = offset.update(gyro)

        delta_time = float(timestamp) - previous_timestamp
        previous_timestamp = float(timestamp)

        ahrs.update(gyro, accel, mag, delta_time)
        yield ahrs.quaternion.to_euler(), ahrs.earth_acceleration


def _format_euler(euler: Euler) -> str:
    return f"Roll {euler.roll:0.1f}, Pitch {euler.pitch:0.1f}, Yaw {euler.yaw:0.1f}"


def _format_advanced(euler: Euler, earth: Vector) -> str:
    return f"{_format_euler(euler)}, X {earth.x:0.1f}, Y {earth.y:0.1f}, Z {earth.z:0.1f}"


def _counter(samples: int | None) -> Iterable[int]:
    return itertools.count() if samples is None else range(samples)


def main(argv: Sequence[str] | None = None) -> int:
    """Run an example on stationary placeholder data and print each result."""
    parser = argparse.ArgumentParser(
        prog="fusionahrs-example",
        description="Run the AHRS algorithm on stationary placeholder sensor data.",
    )
    parser.add_argument("mode", nargs="?", choices=("simple", "advanced"), default="simple")
    parser.add_argument(
        "--samples", type=int, default=None, help="number of samples (default: run forever)"
    )
    parser.add_argument("--sample-period", type=float, default=0.01, help="seconds (simple)")
    parser.add_argument("--sample-rate", type=int, default=100, help="Hz (advanced)")
    args = parser.parse_args(argv)

    if args.samples is not None and args.samples < 0:
        parser.error("--samples must not be negative")

    if args.mode == "simple":
        simple_samples = (
            (_STATIONARY_GYROSCOPE, _STATIONARY_ACCELEROMETER) for _ in _counter(args.samples)
        )
        for euler in run_simple(simple_samples, args.sample_period):
            print(_format_euler(euler))
    else:
        if args.sample_rate <= 0:
            parser.error("--sample-rate must be positive")
        rate = args.sample_rate
        advanced_samples = (
            (
                (index + 1) / rate,
                _STATIONARY_GYROSCOPE,
                _STATIONARY_ACCELEROMETER,
                _STATIONARY_MAGNETOMETER,
            )
            for index in _counter(args.samples)
        )
        for euler, earth in run_advanced(advanced_samples, rate):
            print(_format_advanced(euler, earth))
    return 0