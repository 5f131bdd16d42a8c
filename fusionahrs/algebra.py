"""Vectors, quaternions, matrices and Euler angles used by the AHRS algorithm."""

from __future__ import annotations

import math
import numbers
import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_FLOAT32_MAX = 3.4028234663852886e38


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * (math.pi / 180.0)


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180.0 / math.pi)


def clamped_asin(value: float) -> float:
    """Arc sine with the argument clamped to [-1, 1]."""
    if value <= -1.0:
        return math.pi / -2.0
    if value >= 1.0:
        return math.pi / 2.0
    return math.asin(value)


def _to_float32_bits(x: float) -> int:
    if math.isfinite(x) and abs(x) > _FLOAT32_MAX:
        x = math.copysign(math.inf, x)
    return struct.unpack("<i", struct.pack("<f", x))[0]


def fast_inverse_sqrt(x: float) -> float:
    """Approximate 1 / sqrt(x) using the single-precision bit-level trick."""
    bits = (0x5F1F1412 - (_to_float32_bits(x) >> 1)) & 0xFFFFFFFF
    y = struct.unpack("<f", struct.pack("<I", bits))[0]
    return y * (1.69000231 - 0.714158168 * x * y * y)


def _parse_floats(values: Iterable[object], size: int) -> list[float]:
    """Read a flat sequence of exactly ``size`` real numbers."""
    try:
        items = list(values)
    except TypeError:
        raise TypeError("Array dimensions is not 1") from None
    if isinstance(values, (str, bytes)):
        raise TypeError("Invalid array element type")
    if any(isinstance(item, Iterable) and not isinstance(item, (str, bytes)) for item in items):
        raise TypeError("Array dimensions is not 1")
    if len(items) != size:
        raise TypeError(f"Array size is not {size}")
    if not all(isinstance(item, numbers.Real) for item in items):
        raise TypeError("Invalid array element type")
    return [float(item) for item in items]


@dataclass(frozen=True)
class Vector:
    """Three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_sequence(cls, values: Iterable[object]) -> Vector:
        """Build a vector from a flat sequence of three numbers."""
        return cls(*_parse_floats(values, 3))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def is_zero(self) -> bool:
        """True if every element is zero."""
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def sum(self) -> float:
        """Sum of the elements."""
        return self.x + self.y + self.z

    def hadamard(self, other: Vector) -> Vector:
        """Element-wise product."""
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def cross(self, other: Vector) -> Vector:
        """Cross product."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector) -> float:
        """Dot product."""
        return self.hadamard(other).sum()

    def magnitude_squared(self) -> float:
        """Squared magnitude."""
        return self.hadamard(self).sum()

    def magnitude(self) -> float:
        """Magnitude."""
        return math.sqrt(self.magnitude_squared())

    def normalise(self) -> Vector:
        """Unit vector in the same direction, using the fast inverse square root."""
        return self * fast_inverse_sqrt(self.magnitude_squared())


@dataclass(frozen=True)
class Matrix:
    """3x3 matrix in row-major order."""

    xx: float = 1.0
    xy: float = 0.0
    xz: float = 0.0
    yx: float = 0.0
    yy: float = 1.0
    yz: float = 0.0
    zx: float = 0.0
    zy: float = 0.0
    zz: float = 1.0

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[object]]) -> Matrix:
        """Build a matrix from three rows of three numbers."""
        try:
            row_list = list(rows)
        except TypeError:
            raise TypeError("Array dimensions is not 2") from None
        if len(row_list) != 3:
            raise TypeError("Array size is not 3")
        elements = [value for row in row_list for value in _parse_floats(row, 3)]
        return cls(*elements)

    @property
    def rows(self) -> tuple[tuple[float, float, float], ...]:
        """The matrix as a tuple of three row tuples."""
        return (
            (self.xx, self.xy, self.xz),
            (self.yx, self.yy, self.yz),
            (self.zx, self.zy, self.zz),
        )

    def multiply_vector(self, vector: Vector) -> Vector:
        """Matrix times column vector."""
        return Vector(
            self.xx * vector.x + self.xy * vector.y + self.xz * vector.z,
            self.yx * vector.x + self.yy * vector.y + self.yz * vector.z,
            self.zx * vector.x + self.zy * vector.y + self.zz * vector.z,
        )

    def __matmul__(self, vector: Vector) -> Vector:
        if not isinstance(vector, Vector):
            return NotImplemented
        return self.multiply_vector(vector)


@dataclass(frozen=True)
class Euler:
    """ZYX Euler angles in degrees: rotations around X, Y and Z."""

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.roll
        yield self.pitch
        yield self.yaw


@dataclass(frozen=True)
class Quaternion:
    """Quaternion with scalar part ``w``."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_sequence(cls, values: Iterable[object]) -> Quaternion:
        """Build a quaternion from a flat sequence of four numbers (w, x, y, z)."""
        return cls(*_parse_floats(values, 4))

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    @property
    def wxyz(self) -> tuple[float, float, float, float]:
        """The elements as a (w, x, y, z) tuple."""
        return (self.w, self.x, self.y, self.z)

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        )

    def multiply_vector(self, vector: Vector) -> Quaternion:
        """Post-multiply by a vector treated as a quaternion with zero ``w``."""
        q, v = self, vector
        return Quaternion(
            -q.x * v.x - q.y * v.y - q.z * v.z,
            q.w * v.x + q.y * v.z - q.z * v.y,
            q.w * v.y - q.x * v.z + q.z * v.x,
            q.w * v.z + q.x * v.y - q.y * v.x,
        )

    def normalise(self) -> Quaternion:
        """Unit quaternion, using the fast inverse square root."""
        scale = fast_inverse_sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)
        return Quaternion(self.w * scale, self.x * scale, self.y * scale, self.z * scale)

    def to_matrix(self) -> Matrix:
        """Rotation matrix equivalent to this quaternion."""
        w, x, y, z = self.wxyz
        qwqw = w * w
        qwqx = w * x
        qwqy = w * y
        qwqz = w * z
        qxqy = x * y
        qxqz = x * z
        qyqz = y * z
        return Matrix(
            2.0 * (qwqw - 0.5 + x * x),
            2.0 * (qxqy - qwqz),
            2.0 * (qxqz + qwqy),
            2.0 * (qxqy + qwqz),
            2.0 * (qwqw - 0.5 + y * y),
            2.0 * (qyqz - qwqx),
            2.0 * (qxqz - qwqy),
            2.0 * (qyqz + qwqx),
            2.0 * (qwqw - 0.5 + z * z),
        )

    def to_euler(self) -> Euler:
        """ZYX Euler angles in degrees."""
        w, x, y, z = self.wxyz
        half_minus_qy_squared = 0.5 - y * y
        return Euler(
            roll=radians_to_degrees(math.atan2(w * x + y * z, half_minus_qy_squared - x * x)),
            pitch=radians_to_degrees(clamped_asin(2.0 * (w * y - z * x))),
            yaw=radians_to_degrees(math.atan2(w * z + x * y, half_minus_qy_squared - z * z)),
        )


VECTOR_ZERO = Vector(0.0, 0.0, 0.0)
VECTOR_ONES = Vector(1.0, 1.0, 1.0)
IDENTITY_QUATERNION = Quaternion(1.0, 0.0, 0.0, 0.0)
IDENTITY_MATRIX = Matrix()
EULER_ZERO = Euler(0.0, 0.0, 0.0)