"""Reference directions and accelerations derived from an orientation quaternion."""

from __future__ import annotations

from .algebra import VECTOR_ZERO, Quaternion, Vector
from .convention import Convention


def _convention(value: Convention | int) -> Convention | None:
    try:
        return Convention(value)
    except ValueError:
        return None


def half_gravity(convention: Convention | int, quaternion: Quaternion) -> Vector:
    """Direction of gravity indicated by the quaternion, scaled by 0.5.

    An unknown convention gives the zero vector.
    """
    w, x, y, z = quaternion.wxyz
    match _convention(convention):
        case Convention.NWU | Convention.ENU:
            return Vector(x * z - w * y, y * z + w * x, w * w - 0.5 + z * z)
        case Convention.NED:
            return Vector(w * y - x * z, -1.0 * (y * z + w * x), 0.5 - w * w - z * z)
    return VECTOR_ZERO


def half_magnetic(convention: Convention | int, quaternion: Quaternion) -> Vector:
    """Direction of the magnetic field indicated by the quaternion, scaled by 0.5.

    An unknown convention gives the zero vector.
    """
    w, x, y, z = quaternion.wxyz
    match _convention(convention):
        case Convention.NWU:
            return Vector(x * y + w * z, w * w - 0.5 + y * y, y * z - w * x)
        case Convention.ENU:
            return Vector(0.5 - w * w - x * x, w * z - x * y, -1.0 * (x * z + w * y))
        case Convention.NED:
            return Vector(-1.0 * (x * y + w * z), 0.5 - w * w - y * y, w * x - y * z)
    return VECTOR_ZERO


def gravity(quaternion: Quaternion) -> Vector:
    """Direction of gravity in the sensor coordinate frame."""
    w, x, y, z = quaternion.wxyz
    return Vector(
        2.0 * (x * z - w * y),
        2.0 * (y * z + w * x),
        2.0 * (w * w - 0.5 + z * z),
    )


def linear_acceleration(
    convention: Convention | int, quaternion: Quaternion, accelerometer: Vector
) -> Vector:
    """Accelerometer measurement with gravity removed, in the sensor frame.

    An unknown convention gives the zero vector.
    """
    match _convention(convention):
        case Convention.NWU | Convention.ENU:
            return accelerometer - gravity(quaternion)
        case Convention.NED:
            return accelerometer + gravity(quaternion)
    return VECTOR_ZERO


def earth_acceleration(
    convention: Convention | int, quaternion: Quaternion, accelerometer: Vector
) -> Vector:
    """Accelerometer measurement in the Earth frame with gravity removed.

    An unknown convention leaves gravity in the result.
    """
    w, x, y, z = quaternion.wxyz
    a = accelerometer
    qwqw = w * w
    qwqx = w * x
    qwqy = w * y
    qwqz = w * z
    qxqy = x * y
    qxqz = x * z
    qyqz = y * z
    ex = 2.0 * ((qwqw - 0.5 + x * x) * a.x + (qxqy - qwqz) * a.y + (qxqz + qwqy) * a.z)
    ey = 2.0 * ((qxqy + qwqz) * a.x + (qwqw - 0.5 + y * y) * a.y + (qyqz - qwqx) * a.z)
    ez = 2.0 * ((qxqz - qwqy) * a.x + (qyqz + qwqx) * a.y + (qwqw - 0.5 + z * z) * a.z)

    match _convention(convention):
        case Convention.NWU | Convention.ENU:
            ez -= 1.0
        case Convention.NED:
            ez += 1.0
    return Vector(ex, ey, ez)