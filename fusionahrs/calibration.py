"""Gyroscope, accelerometer and magnetometer calibration models."""

from __future__ import annotations

from .algebra import Matrix, Vector


def calibrate_inertial(
    uncalibrated: Vector, misalignment: Matrix, sensitivity: Vector, offset: Vector
) -> Vector:
    """Apply the gyroscope and accelerometer calibration model."""
    return misalignment @ (uncalibrated - offset).hadamard(sensitivity)


def calibrate_magnetic(
    uncalibrated: Vector, soft_iron_matrix: Matrix, hard_iron_offset: Vector
) -> Vector:
    """Apply the magnetometer calibration model."""
    return soft_iron_matrix @ (uncalibrated - hard_iron_offset)