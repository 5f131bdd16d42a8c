import math

import pytest

from fusionahrs.ahrs import Ahrs
from fusionahrs.algebra import Quaternion, Vector
from fusionahrs.compass import calculate_heading
from fusionahrs.convention import Convention
from fusionahrs.states import Settings

DT = 0.01
LEVEL = Vector(0.0, 0.0, 1.0)
STILL = Vector(0.0, 0.0, 0.0)


def _run(ahrs, count, gyroscope=STILL, accelerometer=LEVEL, magnetometer=STILL):
    for _ in range(count):
        ahrs.update(gyroscope, accelerometer, magnetometer, DT)


def test_initial_state_is_identity_and_initialising():
    ahrs = Ahrs()
    assert ahrs.quaternion == Quaternion(1.0, 0.0, 0.0, 0.0)
    assert ahrs.flags.initialising is True
    assert tuple(ahrs.gravity) == (0.0, 0.0, 1.0)


def test_level_and_still_stays_near_identity():
    ahrs = Ahrs()
    _run(ahrs, 200)
    euler = ahrs.quaternion.to_euler()
    assert euler.roll == pytest.approx(0.0, abs=1e-3)
    assert euler.pitch == pytest.approx(0.0, abs=1e-3)
    assert euler.yaw == pytest.approx(0.0, abs=1e-3)


def test_initialisation_lasts_about_three_seconds():
    ahrs = Ahrs()
    _run(ahrs, 100)
    assert ahrs.flags.initialising is True
    _run(ahrs, 300)
    assert ahrs.flags.initialising is False


def test_zero_gain_ends_initialisation_immediately():
    ahrs = Ahrs(Settings(gain=0.0))
    ahrs.update(STILL, LEVEL, STILL, DT)
    assert ahrs.flags.initialising is False


def test_gyroscope_integration_gives_yaw():
    ahrs = Ahrs(Settings(gain=0.0))
    _run(ahrs, 100, gyroscope=Vector(0.0, 0.0, 90.0), accelerometer=STILL)
    assert ahrs.quaternion.to_euler().yaw == pytest.approx(90.0, abs=0.5)


def test_tilt_converges_to_accelerometer():
    angle = math.radians(30.0)
    accel = Vector(0.0, math.sin(angle), math.cos(angle))
    ahrs = Ahrs()
    for _ in range(1000):
        ahrs.update_no_magnetometer(STILL, accel, DT)
    for got, expected in zip(ahrs.gravity, accel):
        assert got == pytest.approx(expected, abs=1e-2)
    assert ahrs.quaternion.to_euler().roll == pytest.approx(30.0, abs=0.5)
    assert all(value == pytest.approx(0.0, abs=2e-2) for value in ahrs.linear_acceleration)
    assert all(value == pytest.approx(0.0, abs=2e-2) for value in ahrs.earth_acceleration)


def test_no_magnetometer_zeroes_heading_during_initialisation():
    ahrs = Ahrs()
    for _ in range(50):
        ahrs.update_no_magnetometer(Vector(0.0, 0.0, 50.0), LEVEL, DT)
    assert ahrs.flags.initialising is True
    assert ahrs.quaternion.to_euler().yaw == pytest.approx(0.0, abs=1e-3)


def test_magnetometer_yaw_matches_compass_heading():
    mag = Vector(1.0, 1.0, 0.0)
    ahrs = Ahrs()
    _run(ahrs, 1000, magnetometer=mag)
    expected = calculate_heading(Convention.NWU, LEVEL, mag)
    assert ahrs.quaternion.to_euler().yaw == pytest.approx(expected, abs=1.0)


def test_external_heading_converges():
    ahrs = Ahrs()
    for _ in range(800):
        ahrs.update_external_heading(STILL, LEVEL, 30.0, DT)
    assert ahrs.quaternion.to_euler().yaw == pytest.approx(30.0, abs=1.0)


def test_set_heading():
    ahrs = Ahrs()
    ahrs.set_heading(45.0)
    assert ahrs.quaternion.to_euler().yaw == pytest.approx(45.0, abs=1e-6)


def test_quaternion_setter_round_trip():
    ahrs = Ahrs()
    q = Quaternion(0.5, 0.5, 0.5, 0.5)
    ahrs.quaternion = q
    assert ahrs.quaternion == q
    ahrs.quaternion = [1.0, 0.0, 0.0, 0.0]
    assert ahrs.quaternion == Quaternion()


def test_quaternion_setter_rejects_wrong_size():
    ahrs = Ahrs()
    with pytest.raises(TypeError, match="Array size is not 4"):
        ahrs.quaternion = [1.0, 0.0, 0.0]
    assert ahrs.quaternion == Quaternion(1.0, 0.0, 0.0, 0.0)


def test_settings_setter_rejects_other_types():
    settings = Settings(gain=0.25, recovery_trigger_period=10)
    ahrs = Ahrs(settings)
    with pytest.raises(TypeError, match="Value type is not Settings"):
        ahrs.settings = "settings"
    assert ahrs.settings == settings


def test_settings_are_copied():
    settings = Settings(gain=0.5, recovery_trigger_period=10)
    ahrs = Ahrs(settings)
    assert ahrs.settings == settings
    settings.gain = 2.0
    assert ahrs.settings.gain == 0.5


def test_reset_restores_initial_state():
    ahrs = Ahrs()
    _run(ahrs, 400, gyroscope=Vector(10.0, 0.0, 0.0))
    assert ahrs.flags.initialising is False
    ahrs.reset()
    assert ahrs.quaternion == Quaternion()
    assert ahrs.flags.initialising is True


def test_gyroscope_range_triggers_angular_rate_recovery():
    ahrs = Ahrs(Settings(gyroscope_range=100.0))
    _run(ahrs, 400)
    assert ahrs.flags.initialising is False
    ahrs.update(Vector(200.0, 0.0, 0.0), LEVEL, STILL, DT)
    assert ahrs.flags.angular_rate_recovery is True
    assert ahrs.flags.initialising is True
    _run(ahrs, 400)
    assert ahrs.flags.angular_rate_recovery is False


def test_zero_measurements_are_ignored():
    ahrs = Ahrs()
    ahrs.update(STILL, STILL, STILL, DT)
    states = ahrs.internal_states
    assert states.accelerometer_ignored is True
    assert states.magnetometer_ignored is True
    assert states.acceleration_recovery_trigger == 0.0


def test_accelerometer_not_ignored_during_initialisation():
    settings = Settings(acceleration_rejection=10.0, recovery_trigger_period=50)
    ahrs = Ahrs(settings)
    ahrs.update(STILL, Vector(1.0, 0.0, 0.0), STILL, DT)
    assert ahrs.internal_states.accelerometer_ignored is False


def test_acceleration_rejection_and_recovery():
    settings = Settings(
        acceleration_rejection=10.0, magnetic_rejection=10.0, recovery_trigger_period=50
    )
    ahrs = Ahrs(settings)
    _run(ahrs, 400)
    assert ahrs.flags.initialising is False

    sideways = Vector(1.0, 0.0, 0.0)
    ahrs.update(STILL, sideways, STILL, DT)
    states = ahrs.internal_states
    assert states.accelerometer_ignored is True
    assert states.acceleration_error > 10.0

    recovered = []
    for _ in range(100):
        ahrs.update(STILL, sideways, STILL, DT)
        recovered.append(ahrs.flags.acceleration_recovery)
        assert 0.0 <= ahrs.internal_states.acceleration_recovery_trigger <= 1.0
    assert any(recovered)


def test_zero_recovery_period_disables_rejection():
    ahrs = Ahrs(Settings(acceleration_rejection=10.0, recovery_trigger_period=0))
    _run(ahrs, 400)
    ahrs.update(STILL, Vector(1.0, 0.0, 0.0), STILL, DT)
    assert ahrs.internal_states.accelerometer_ignored is False
    assert ahrs.flags.acceleration_recovery is False


def test_update_rejects_bad_vector():
    ahrs = Ahrs()
    with pytest.raises(TypeError, match="Array size is not 3"):
        ahrs.update([0.0, 0.0], LEVEL, STILL, DT)


def test_update_rejects_bad_delta_time():
    ahrs = Ahrs()
    with pytest.raises(TypeError):
        ahrs.update(STILL, LEVEL, STILL, "0.01")


def test_sequences_accepted_as_vectors():
    from_vectors = Ahrs()
    from_lists = Ahrs()
    _run(from_vectors, 20, gyroscope=Vector(1.0, 2.0, 3.0))
    for _ in range(20):
        from_lists.update([1.0, 2.0, 3.0], [0.0, 0.0, 1.0], [0.0, 0.0, 0.0], DT)
    assert from_lists.quaternion == from_vectors.quaternion