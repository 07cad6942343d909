"""Accordion with single-item selection and optional collapsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from shadkit.html import Element
from shadkit.tailwind import tw_merge

ITEM_BASE_CLASS = "border-b last:border-b-0"
TRIGGER_BASE_CLASS = (
    "focus-visible:border-ring focus-visible:ring-ring/50 flex flex-1 items-start "
    "justify-between gap-4 rounded-md py-4 text-left text-sm font-medium transition-all "
    "outline-none hover:underline focus-visible:ring-[3px] disabled:pointer-events-none "
    "disabled:opacity-50 [&[data-state=open]>svg]:rotate-180"
)
CHEVRON_CLASS = (
    "text-muted-foreground pointer-events-none size-4 shrink-0 translate-y-0.5 "
    "transition-transform duration-200"
)
CONTENT_OUTER_CLASS = (
    "data-[state=closed]:animate-accordion-up data-[state=open]:animate-accordion-down "
    "overflow-hidden text-sm"
)
CONTENT_INNER_CLASS = "pt-0 pb-4"


def _chevron_down() -> Element:
    return Element("svg", {
        "viewBox": "0 0 24 24", "fill": "none", "stroke": "currentColor",
        "stroke-width": "2", "stroke-linecap": "round", "stroke-linejoin": "round",
        "data-icon": "chevron-down",
    }, [Element("path", {"d": "m6 9 6 6 6-6"})])


@dataclass
class AccordionItem:
    """One section of an accordion: a trigger line and its collapsible content."""

    value: str
    trigger: Any = None
    content: Any = None
    class_: Optional[str] = None
    trigger_class: Optional[str] = None
    content_class: Optional[str] = None


class Accordion:
    """Holds which item is open; only single selection is supported."""

    def __init__(self, class_: Optional[str] = None, type_: str = "single",
                 collapsible: bool = False, default_value: Optional[str] = None) -> None:
        self.class_ = class_
        self.type_ = type_
        self.collapsible = collapsible
        self.selected: Optional[str] = default_value

    def select(self, value: str) -> Optional[str]:
        """Open value; reselecting the open item closes it when collapsible."""
        if self.collapsible and self.selected == value:
            self.selected = None
        else:
            self.selected = value
        return self.selected

    def is_selected(self, value: str) -> bool:
        return self.selected is not None and self.selected == value

    def _render_item(self, item: AccordionItem) -> Element:
        state = "open" if self.is_selected(item.value) else "closed"

        def on_click(_event: Any, value: str = item.value) -> None:
            self.select(value)

        trigger = Element("button", {
            "class": tw_merge(TRIGGER_BASE_CLASS, item.trigger_class),
            "data-state": state,
        }, [item.trigger, Element("span", {"class": CHEVRON_CLASS}, [_chevron_down()])],
            {"click": on_click})
        heading = Element("h3", {"class": "flex"}, [trigger])
        content = Element("div", {"class": CONTENT_OUTER_CLASS, "data-state": state}, [
            Element("div", {"class": tw_merge(CONTENT_INNER_CLASS, item.content_class)},
                    [item.content]),
        ])
        return Element("div", {"class": tw_merge(ITEM_BASE_CLASS, item.class_)},
                       [heading, content])

    def render(self, *args: Any) -> Element:
        """Render the accordion; AccordionItem arguments become sections."""
        children = [self._render_item(arg) if isinstance(arg, AccordionItem) else arg
                    for arg in args]
        return Element("div", {"class": self.class_ or ""}, children)