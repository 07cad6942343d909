import calendar as stdcalendar
from datetime import date

import pytest

from shadkit.calendar import Calendar
from shadkit.html import Element, MouseEvent


def _walk(node):
    if isinstance(node, Element):
        yield node
        for child in node.children:
            yield from _walk(child)


def test_title():
    assert Calendar(date(2024, 5, 17)).title() == "May 2024"


def test_next_month_wraps_year():
    cal = Calendar(date(2023, 12, 5))
    assert cal.next_month() == date(2024, 1, 1)
    assert cal.view_date.year == 2024


def test_prev_month_wraps_year():
    cal = Calendar(date(2024, 1, 20))
    cal.prev_month()
    assert (cal.view_date.year, cal.view_date.month, cal.view_date.day) == (2023, 12, 1)


def test_navigation_round_trip():
    cal = Calendar(date(2024, 7, 9))
    cal.next_month()
    cal.prev_month()
    assert cal.view_date == date(2024, 7, 1)
    assert cal.selected_date == date(2024, 7, 9)


@pytest.mark.parametrize("year,month", [(2024, 2), (2023, 2), (2024, 4), (2024, 12), (1900, 2)])
def test_days_in_month_matches_stdlib(year, month):
    cal = Calendar(date(year, month, 1))
    assert cal.days_in_month() == stdcalendar.monthrange(year, month)[1]


@pytest.mark.parametrize("year,month", [(2024, 9), (2025, 6), (2025, 3)])
def test_first_weekday_from_sunday(year, month):
    cal = Calendar(date(year, month, 10))
    first = date(year, month, 1)
    assert cal.first_weekday() == first.isoweekday() % 7
    assert 0 <= cal.first_weekday() <= 6


def test_select_sets_date_in_view_month():
    cal = Calendar(date(2024, 5, 17))
    cal.next_month()
    assert cal.select(3) == date(2024, 6, 3)
    assert "bg-primary" in cal.day_class(3)
    assert "bg-primary" not in cal.day_class(17)


def test_select_invalid_day_raises():
    cal = Calendar(date(2023, 2, 1))
    with pytest.raises(ValueError):
        cal.select(30)


def test_today_and_selected_classes():
    today = date(2024, 5, 17)
    cal = Calendar(date(2024, 5, 2), today=today)
    assert "bg-accent" in cal.day_class(17)
    assert "bg-primary" in cal.day_class(2)
    cal.select(17)
    merged = cal.day_class(17)
    assert "bg-primary" in merged
    assert "bg-accent" not in merged


def test_default_initial_date_is_today():
    today = date(2022, 8, 30)
    cal = Calendar(today=today)
    assert cal.selected_date == today
    assert cal.view_date == today


def test_render_grid():
    cal = Calendar(date(2024, 9, 12), class_="shadow")
    tree = cal.render()
    assert "shadow" in tree.attrs["class"].split()
    buttons = [e for e in _walk(tree) if e.tag == "button"]
    assert len(buttons) == cal.days_in_month() + 2
    grid = tree.children[1]
    blanks = [c for c in grid.children if c.tag == "div" and not c.children]
    assert len(blanks) == cal.first_weekday()
    assert cal.title() in tree.render()


def test_day_button_click_selects():
    cal = Calendar(date(2024, 9, 12))
    buttons = [e for e in _walk(cal.render()) if e.tag == "button"]
    buttons[2 + 4].dispatch("click", MouseEvent())
    assert cal.selected_date == date(2024, 9, 5)


def test_nav_button_click_moves_month():
    cal = Calendar(date(2024, 9, 12))
    buttons = [e for e in _walk(cal.render()) if e.tag == "button"]
    buttons[1].dispatch("click", MouseEvent())
    assert cal.view_date.month == 10
    buttons[0].dispatch("click", MouseEvent())
    assert cal.view_date.month == 9