import pytest

from roster import RosterConfigError, RotationPolicy
from roster.rotation import (
    ModularRotation,
    Role,
    SingleDutyRotation,
    is_lane_week,
    is_lane_weekend,
    strategy_for,
)


def test_modular_rotation_offsets_roles():
    rotation = ModularRotation(["A", "B", "C", "D"])

    assert rotation.resolve_roles(0) == {
        Role.HOSPITAL: "A",
        Role.ON_CALL: "B",
        Role.OFF: "C",
        Role.WEEKEND: "A",
    }
    roles = rotation.resolve_roles(3)
    assert (roles[Role.HOSPITAL], roles[Role.ON_CALL], roles[Role.OFF]) == ("D", "A", "B")


def test_modular_rotation_each_person_holds_each_role_once_per_cycle():
    people = ["A", "B", "C"]
    rotation = ModularRotation(people)

    for role in (Role.HOSPITAL, Role.ON_CALL, Role.OFF):
        holders = [rotation.resolve_roles(week)[role] for week in range(5, 5 + len(people))]
        assert sorted(holders) == people


@pytest.mark.parametrize("people", [3, 4, 7])
def test_modular_rotation_roles_never_collide(people):
    rotation = ModularRotation([f"P{i}" for i in range(people)])

    for week in range(3 * people):
        roles = rotation.resolve_roles(week)
        assert len({roles[Role.HOSPITAL], roles[Role.ON_CALL], roles[Role.OFF]}) == 3


def test_modular_rotation_requires_three_people():
    with pytest.raises(RosterConfigError):
        ModularRotation(["A", "B"])


def test_single_duty_rotation_gives_every_role_to_one_person():
    rotation = SingleDutyRotation(["A", "B", "C"], cycle_weeks=3)

    assert rotation.resolve_roles(4) == {
        Role.HOSPITAL: "B",
        Role.ON_CALL: "B",
        Role.WEEKEND: "B",
    }


def test_single_duty_rotation_uses_sub_cycle():
    rotation = SingleDutyRotation(["A", "B", "C"], cycle_weeks=2)

    assert [rotation.resolve_roles(w)[Role.HOSPITAL] for w in range(5)] == ["A", "B", "A", "B", "A"]


def test_single_duty_rotation_rejects_cycle_longer_than_order():
    with pytest.raises(RosterConfigError):
        SingleDutyRotation(["A", "B"], cycle_weeks=3)


@pytest.mark.parametrize("build", [
    lambda: ModularRotation([]),
    lambda: SingleDutyRotation([], cycle_weeks=1),
])
def test_rotations_reject_empty_order(build):
    with pytest.raises(RosterConfigError, match="empty"):
        build()


def test_strategy_for_follows_policy(make_params):
    assert isinstance(strategy_for(make_params()), ModularRotation)
    single = make_params(policy=RotationPolicy.SINGLE, rotation_order=["A"])
    assert isinstance(strategy_for(single), SingleDutyRotation)


def test_lane_cadence():
    assert [is_lane_week(w, 4) for w in range(6)] == [True, False, False, False, True, False]
    assert all(is_lane_week(w, 1) for w in range(5))
    assert [is_lane_weekend(w, 2) for w in range(4)] == [True, False, True, False]
