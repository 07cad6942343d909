"""A simple counter page with increment and decrement buttons."""

from __future__ import annotations

from shadkit.html import Element

BUTTON_CLASS = "rounded px-3 py-2 m-1 border-b-4 border-l-2 shadow-lg text-white"
ACTIVE_CLASS = f"{BUTTON_CLASS} bg-blue-700 border-blue-800"
DISPLAY_CLASS = f"{BUTTON_CLASS} bg-blue-800 border-blue-900"


class Counter:
    """An integer that the page's buttons move up and down."""

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def increment(self) -> int:
        self.value += 1
        return self.value

    def decrement(self) -> int:
        self.value -= 1
        return self.value

    def render(self) -> Element:
        plus = Element("button", {"class": ACTIVE_CLASS}, ["+"],
                       {"click": lambda _event: self.increment()})
        shown = Element("button", {"class": DISPLAY_CLASS}, [self.value])
        minus_class = ACTIVE_CLASS + (" invisible" if self.value < 1 else "")
        minus = Element("button", {"class": minus_class}, ["-"],
                        {"click": lambda _event: self.decrement()})
        controls = Element("div", {"class": "flex flex-row-reverse flex-wrap m-auto"},
                           [plus, shown, minus])
        note = Element("p", {"class": "text-center text-black-500"},
                       ["This is a simple counter app styled with Tailwind CSS."])
        page = Element("div", {"class": "bg-gradient-to-tl from-blue-800 to-blue-500 "
                                        "text-white font-mono flex flex-col min-h-screen"},
                       [controls, note])
        return Element("main", {}, [page])