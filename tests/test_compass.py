import pytest

from fusionahrs.algebra import Vector
from fusionahrs.compass import calculate_heading
from fusionahrs.convention import Convention


def test_nwu_level_facing_north():
    heading = calculate_heading(Convention.NWU, Vector(0, 0, 1), Vector(1, 0, 0))
    assert heading == pytest.approx(0.0, abs=0.1)


def test_nwu_level_facing_east():
    heading = calculate_heading(Convention.NWU, Vector(0, 0, 1), Vector(0, 1, 0))
    assert heading == pytest.approx(-90.0, abs=0.1)


def test_enu_level_facing_north():
    heading = calculate_heading(Convention.ENU, Vector(0, 0, 1), Vector(1, 0, 0))
    assert heading == pytest.approx(90.0, abs=0.1)


def test_ned_matches_nwu_with_gravity_inverted():
    mag = Vector(0.3, -0.7, 0.4)
    nwu = calculate_heading(Convention.NWU, Vector(0.1, 0.2, 1.0), mag)
    ned = calculate_heading(Convention.NED, Vector(-0.1, -0.2, -1.0), mag)
    assert ned == pytest.approx(nwu, abs=1e-6)


def test_heading_independent_of_scale():
    accel = Vector(0.1, -0.2, 0.9)
    mag = Vector(0.4, 0.5, -0.3)
    first = calculate_heading(Convention.NWU, accel, mag)
    second = calculate_heading(Convention.NWU, accel * 9.81, mag * 50.0)
    assert second == pytest.approx(first, abs=0.5)


@pytest.mark.parametrize("convention", list(Convention))
def test_heading_within_range(convention):
    heading = calculate_heading(convention, [0.2, 0.1, 1.0], [-0.5, 0.3, 0.2])
    assert -180.0 <= heading <= 180.0


def test_unknown_convention_gives_zero():
    assert calculate_heading(7, Vector(0, 0, 1), Vector(0, 1, 0)) == 0.0


def test_bad_input_raises():
    with pytest.raises(TypeError, match="Array size is not 3"):
        calculate_heading(Convention.NWU, [0, 0, 1, 0], [1, 0, 0])