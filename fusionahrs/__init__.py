"""AHRS sensor fusion: gyroscope, accelerometer and magnetometer data into Earth-relative orientation."""

__version__ = "1.0.0"

__all__ = [
    "ahrs",
    "algebra",
    "axes",
    "calibration",
    "compass",
    "convention",
    "examples",
    "frames",
    "offset",
    "states",
]