import pytest

from fusionahrs.examples import main, run_advanced, run_simple


def _stationary_simple(count):
    return [((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))] * count


def _stationary_advanced(count, rate):
    return [
        ((index + 1) / rate, (0.0, 0.0, 0.0), (0.0, 0.0, 1.0), (1.0, 0.0, 0.0))
        for index in range(count)
    ]


def test_run_simple_yields_one_result_per_sample():
    results = list(run_simple(_stationary_simple(5), 0.01))
    assert len(results) == 5


def test_run_simple_stationary_stays_level():
    for euler in run_simple(_stationary_simple(50), 0.01):
        assert abs(euler.roll) < 1e-6
        assert abs(euler.pitch) < 1e-6
        assert abs(euler.yaw) < 1e-6


def test_run_simple_rotation_about_z_increases_yaw():
    samples = _stationary_simple(400) + [((0.0, 0.0, 10.0), (0.0, 0.0, 1.0))] * 100
    results = list(run_simple(samples, 0.01))
    assert results[399].yaw == pytest.approx(0.0, abs=1e-6)
    assert results[-1].yaw > results[450].yaw > 0.0
    assert results[-1].yaw == pytest.approx(10.0, abs=0.5)


def test_run_simple_rejects_bad_vector():
    with pytest.raises(TypeError, match="Array size is not 3"):
        list(run_simple([((0.0, 0.0), (0.0, 0.0, 1.0))], 0.01))


def test_run_advanced_stationary_outputs():
    results = list(run_advanced(_stationary_advanced(20, 100), 100))
    assert len(results) == 20
    for euler, earth in results:
        assert abs(euler.roll) < 1e-6
        assert abs(euler.pitch) < 1e-6
        assert abs(euler.yaw) < 1e-6
        assert abs(earth.x) < 1e-6
        assert abs(earth.y) < 1e-6
        assert abs(earth.z) < 0.05


def test_run_advanced_is_lazy_until_consumed():
    generator = run_advanced(_stationary_advanced(3, 100), 100)
    first = next(generator)
    assert abs(first[0].yaw) < 1e-6
    assert len(list(generator)) == 2


def test_run_advanced_rejects_zero_sample_rate():
    with pytest.raises(ValueError):
        list(run_advanced(_stationary_advanced(1, 1), 0))


def test_main_simple_prints_level_orientation(capsys):
    assert main(["simple", "--samples", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Roll 0.0, Pitch 0.0, Yaw 0.0"] * 3


def test_main_advanced_prints_orientation_and_acceleration(capsys):
    assert main(["advanced", "--samples", "4", "--sample-rate", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    for line in lines:
        assert line.startswith("Roll 0.0, Pitch 0.0, Yaw 0.0, X ")
        assert ", Y " in line and ", Z " in line


def test_main_rejects_negative_samples():
    with pytest.raises(SystemExit):
        main(["--samples", "-1"])


def test_main_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main(["sideways", "--samples", "1"])