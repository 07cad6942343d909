"""Breadcrumb navigation components."""

from __future__ import annotations

from typing import Any, Optional

from shadkit.html import Element
from shadkit.tailwind import tw_merge


def breadcrumb(*args: Any, class_: Optional[str] = None) -> Element:
    """A navigation trail holding breadcrumb items."""
    trail = Element("ol", {"class": "flex items-center gap-1.5 break-words text-sm "
                                    "text-muted-foreground sm:gap-2.5"}, list(args))
    return Element("nav", {"class": class_, "aria-label": "breadcrumb"}, [trail])


def breadcrumb_item(*args: Any, class_: Optional[str] = None) -> Element:
    return Element("li", {"class": tw_merge("inline-flex items-center gap-1.5", class_)},
                   list(args))


def breadcrumb_link(*args: Any, href: Optional[str] = None,
                    class_: Optional[str] = None) -> Element:
    return Element("a", {"href": href,
                         "class": tw_merge("transition-colors hover:text-foreground", class_)},
                   list(args))


def breadcrumb_page(*args: Any, class_: Optional[str] = None) -> Element:
    """The current page, shown as a disabled link."""
    return Element("span", {
        "class": tw_merge("font-normal text-foreground", class_),
        "role": "link",
        "aria-disabled": "true",
        "aria-current": "page",
    }, list(args))


def breadcrumb_separator(*args: Any, class_: Optional[str] = None) -> Element:
    return Element("li", {
        "role": "presentation",
        "aria-hidden": "true",
        "class": tw_merge("[&>svg]:size-3.5", class_),
    }, list(args))


def breadcrumb_ellipsis(class_: Optional[str] = None) -> Element:
    """Three dots standing for collapsed breadcrumb items."""
    dots = [Element("circle", {"cx": cx, "cy": "12", "r": "1"}) for cx in ("12", "19", "5")]
    icon = Element("svg", {
        "class": "h-4 w-4", "viewBox": "0 0 24 24", "fill": "none",
        "stroke": "currentColor", "stroke-width": "2",
        "stroke-linecap": "round", "stroke-linejoin": "round",
    }, dots)
    return Element("span", {
        "role": "presentation",
        "aria-hidden": "true",
        "class": tw_merge("flex h-9 w-9 items-center justify-center", class_),
    }, [icon, Element("span", {"class": "sr-only"}, ["More"])])