from datetime import date

import pytest

from roster import RosterParameters, RotationPolicy, TimeWindow

MONDAY = date(2024, 1, 1)

# floor(years * 365.25) for these spans
ONE_WEEK_YEARS = 0.02    # 7 days
TWO_WEEK_YEARS = 0.04    # 14 days
THREE_DAY_YEARS = 0.01   # 3 days


@pytest.fixture
def make_params():
    """Build RosterParameters with sensible defaults, overridable per test."""

    def _make(**overrides) -> RosterParameters:
        values = dict(
            start_date=MONDAY,
            years=ONE_WEEK_YEARS,
            rotation_order=["A", "B", "C"],
            policy=RotationPolicy.MODULAR,
            hospital=TimeWindow("07:00", "17:00"),
            on_call=TimeWindow("17:00", "22:00"),
            lane=TimeWindow("08:00", "17:00"),
            weekend=TimeWindow("06:00", "23:59"),
            lane_every_weeks=4,
            lane_weekend_every=4,
        )
        values.update(overrides)
        return RosterParameters(**values)

    return _make
