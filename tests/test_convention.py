import pytest

from fusionahrs.convention import Convention


def test_convention_values_follow_declaration_order():
    members = [Convention(value) for value in (0, 1, 2)]
    assert members == [Convention.NWU, Convention.ENU, Convention.NED]
    assert [member.name for member in members] == ["NWU", "ENU", "NED"]


@pytest.mark.parametrize("member", list(Convention))
def test_convention_round_trip_from_int(member):
    assert Convention(int(member)) is member


def test_convention_unknown_value_raises():
    with pytest.raises(ValueError):
        Convention(3)


def test_convention_lookup_by_name():
    assert Convention(2).name == "NED"
    assert Convention(Convention.NED.value) is Convention.NED