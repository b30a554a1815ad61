from __future__ import annotations

from datetime import datetime

from foodie.restaurants.models import DayHours, OpeningHours
from foodie.restaurants.seed import sample_restaurants

# 2026-10-18 is a Sunday, 2026-10-19 a Monday, 2026-10-23 a Friday.
SUNDAY_EVENING = datetime(2026, 10, 18, 20, 0)
MONDAY = datetime(2026, 10, 19)


def _chez_laurent():
    return next(r for r in sample_restaurants() if r.name == "Chez Laurent")


def _night_owl():
    hours = OpeningHours(friday=DayHours(open="22:00", close="02:00"))
    return _chez_laurent().model_copy(update={"opening_hours": hours})


def test_closed_day():
    restaurant = _chez_laurent()
    assert restaurant.is_open_at(SUNDAY_EVENING) is False
    assert restaurant.opening_status(SUNDAY_EVENING) == (False, "Closed today")


def test_regular_hours():
    restaurant = _chez_laurent()
    assert restaurant.opening_status(MONDAY.replace(hour=17, minute=59)) == (False, "Opens at 18:00")
    assert restaurant.opening_status(MONDAY.replace(hour=18)) == (True, "Closes at 23:00")
    assert restaurant.opening_status(MONDAY.replace(hour=23)) == (True, "Closes at 23:00")
    assert restaurant.opening_status(MONDAY.replace(hour=23, minute=1)) == (False, "Opens at 18:00")


def test_overnight_hours_wrap_past_midnight():
    restaurant = _night_owl()
    friday = datetime(2026, 10, 23)
    assert restaurant.is_open_at(friday.replace(hour=23, minute=30))
    assert restaurant.is_open_at(friday.replace(hour=1, minute=15))
    assert restaurant.is_open_at(friday.replace(hour=2))
    assert not restaurant.is_open_at(friday.replace(hour=12))
    assert restaurant.opening_status(friday.replace(hour=12)) == (False, "Opens at 22:00")
    assert restaurant.opening_status(friday.replace(hour=23)) == (True, "Closes at 02:00")


def test_day_without_hours_counts_as_closed():
    restaurant = _night_owl()
    assert restaurant.opening_status(MONDAY.replace(hour=12)) == (False, "Closed today")


def test_closing_at_midnight_written_as_24():
    friday_late = datetime(2026, 10, 23, 23, 45)
    assert _chez_laurent().opening_status(friday_late) == (True, "Closes at 24:00")
