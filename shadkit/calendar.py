"""Month-view calendar with navigation and day selection."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from shadkit.button import ButtonSize, ButtonVariant, button
from shadkit.html import Element
from shadkit.tailwind import tw_merge

MONTH_NAMES = ("January", "February", "March", "April", "May", "June", "July",
               "August", "September", "October", "November", "December")
WEEKDAYS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")
DAY_BASE_CLASS = "w-9 h-9 p-0 font-normal rounded-full"
TODAY_CLASS = "bg-accent text-accent-foreground"
SELECTED_CLASS = "bg-primary text-primary-foreground"


def _chevron(path: str, name: str) -> Element:
    return Element("svg", {
        "class": "h-4 w-4", "viewBox": "0 0 24 24", "fill": "none",
        "stroke": "currentColor", "stroke-width": "2", "data-icon": name,
    }, [Element("path", {"d": path})])


def _shift_month(day: date, step: int) -> date:
    index = day.year * 12 + (day.month - 1) + step
    return date(index // 12, index % 12 + 1, 1)


class Calendar:
    """Tracks the selected date and the month being shown."""

    def __init__(self, initial_date: Optional[date] = None, class_: Optional[str] = None,
                 today: Optional[date] = None) -> None:
        self._fixed_today = today
        start = initial_date if initial_date is not None else self.today
        self.selected_date = start
        self.view_date = start
        self.class_ = class_

    @property
    def today(self) -> date:
        return self._fixed_today if self._fixed_today is not None else date.today()

    def prev_month(self) -> date:
        self.view_date = _shift_month(self.view_date, -1)
        return self.view_date

    def next_month(self) -> date:
        self.view_date = _shift_month(self.view_date, 1)
        return self.view_date

    def select(self, day: int) -> date:
        """Select a day of the shown month; invalid days raise ValueError."""
        self.selected_date = date(self.view_date.year, self.view_date.month, day)
        return self.selected_date

    def days_in_month(self) -> int:
        first = self.view_date.replace(day=1)
        return (_shift_month(first, 1) - first).days

    def first_weekday(self) -> int:
        """Weekday of the month's first day, counted from Sunday as 0."""
        return self.view_date.replace(day=1).isoweekday() % 7

    def title(self) -> str:
        return f"{MONTH_NAMES[self.view_date.month - 1]} {self.view_date.year}"

    def day_class(self, day: int) -> str:
        current = date(self.view_date.year, self.view_date.month, day)
        return tw_merge(
            DAY_BASE_CLASS,
            TODAY_CLASS if current == self.today else None,
            SELECTED_CLASS if current == self.selected_date else None,
        )

    def _day_button(self, day: int) -> Element:
        def on_click(_event: Any, chosen: int = day) -> None:
            self.select(chosen)

        return button(day, variant=ButtonVariant.GHOST, size=ButtonSize.ICON,
                      class_=self.day_class(day), onclick=on_click)

    def render(self) -> Element:
        nav = Element("div", {"class": "flex items-center gap-2"}, [
            button(_chevron("m15 18-6-6 6-6", "chevron-left"), variant=ButtonVariant.OUTLINE,
                   size=ButtonSize.ICON, onclick=lambda _event: self.prev_month()),
            button(_chevron("m9 18 6-6-6-6", "chevron-right"), variant=ButtonVariant.OUTLINE,
                   size=ButtonSize.ICON, onclick=lambda _event: self.next_month()),
        ])
        header = Element("div", {"class": "flex items-center justify-between"}, [
            Element("h2", {"class": "text-lg font-semibold"}, [self.title()]),
            nav,
        ])
        cells: list = [Element("div", {"class": "text-muted-foreground"}, [name])
                       for name in WEEKDAYS]
        cells.extend(Element("div") for _ in range(self.first_weekday()))
        cells.extend(self._day_button(day) for day in range(1, self.days_in_month() + 1))
        grid = Element("div", {"class": "grid grid-cols-7 gap-2 mt-4 text-center text-sm"},
                       cells)
        return Element("div", {"class": tw_merge("rounded-lg border p-3", self.class_)},
                       [header, grid])