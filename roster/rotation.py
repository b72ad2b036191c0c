"""Week-to-person rotation strategies."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence

from .models import MODULAR_MIN_PEOPLE, RosterConfigError, RosterParameters, RotationPolicy


class Role(Enum):
    """Duty roles a person can hold in a given week."""

    HOSPITAL = "hospital"
    ON_CALL = "on_call"
    OFF = "off"
    WEEKEND = "weekend"


class RotationStrategy(ABC):
    """Maps a 0-based week index to the people holding each role that week."""

    def __init__(self, order: Sequence[str]) -> None:
        if not order:
            raise RosterConfigError("Rotation order must not be empty")
        self._order = tuple(order)

    @abstractmethod
    def resolve_roles(self, week: int) -> dict[Role, str]:
        """Return the person assigned to each role for the given week."""
        pass

    def _person_at(self, slot: int, modulo: int) -> str:
        return self._order[slot % modulo]


class ModularRotation(RotationStrategy):
    """Hospital, on-call and off roles advance one slot per week.

    With n people the three roles sit at offsets 0, 1 and 2 from the
    week index (mod n), so they never collide for n >= 3. The hospital
    person also covers the weekend.
    """

    def __init__(self, order: Sequence[str]) -> None:
        super().__init__(order)
        if len(self._order) < MODULAR_MIN_PEOPLE:
            raise RosterConfigError(
                f"Modular rotation needs at least {MODULAR_MIN_PEOPLE} people"
            )

    def resolve_roles(self, week: int) -> dict[Role, str]:
        n = len(self._order)
        hospital = self._person_at(week, n)
        return {
            Role.HOSPITAL: hospital,
            Role.ON_CALL: self._person_at(week + 1, n),
            Role.OFF: self._person_at(week + 2, n),
            Role.WEEKEND: hospital,
        }


class SingleDutyRotation(RotationStrategy):
    """One duty person per week holds hospital, on-call and weekend duty."""

    def __init__(self, order: Sequence[str], cycle_weeks: int) -> None:
        super().__init__(order)
        if not 1 <= cycle_weeks <= len(self._order):
            raise RosterConfigError(
                f"Cycle length must be between 1 and {len(self._order)}"
            )
        self._cycle_weeks = cycle_weeks

    def resolve_roles(self, week: int) -> dict[Role, str]:
        person = self._person_at(week, self._cycle_weeks)
        return {
            Role.HOSPITAL: person,
            Role.ON_CALL: person,
            Role.WEEKEND: person,
        }


def strategy_for(params: RosterParameters) -> RotationStrategy:
    """Build the rotation strategy selected by the parameters."""
    if params.policy is RotationPolicy.SINGLE:
        return SingleDutyRotation(params.rotation_order, params.rotation_weeks)
    return ModularRotation(params.rotation_order)


def is_lane_week(week: int, every: int) -> bool:
    """Return True when the week falls on the lane cadence."""
    return week % every == 0


def is_lane_weekend(week: int, every: int) -> bool:
    """Return True when the week's weekend is covered by the lane."""
    return week % every == 0
