"""Alerts, badges, cards, avatars, banners and progress bars."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional

from shadkit.html import Element, NodeRef
from shadkit.tailwind import tw_merge

ALERT_BASE_CLASS = (
    "relative w-full rounded-lg border p-4 [&>svg~*]:pl-7 [&>svg+div]:translate-y-[-3px] "
    "[&>svg]:absolute [&>svg]:left-4 [&>svg]:top-4 [&>svg]:text-foreground"
)
BADGE_BASE_CLASS = (
    "inline-flex items-center rounded-full border px-2.5 py-0.5 text-xs font-semibold "
    "transition-colors focus:outline-none focus:ring-2 focus:ring-ring focus:ring-offset-2"
)


class AlertVariant(Enum):
    DEFAULT = "bg-background text-foreground"
    DESTRUCTIVE = ("border-destructive/50 text-destructive dark:border-destructive "
                   "[&>svg]:text-destructive")


class BadgeVariant(Enum):
    DEFAULT = "border-transparent bg-primary text-primary-foreground hover:bg-primary/80"
    SECONDARY = ("border-transparent bg-secondary text-secondary-foreground "
                 "hover:bg-secondary/80")
    DESTRUCTIVE = ("border-transparent bg-destructive text-destructive-foreground "
                   "hover:bg-destructive/80")
    OUTLINE = "text-foreground"


class BannerVariant(Enum):
    GREEN = "bg-green-100 border-t border-b border-green-500 text-green-700 px-4 py-3"
    BLUE = "bg-blue-100 border-t border-b border-blue-500 text-blue-700 px-4 py-3"
    AMBER = "bg-amber-100 border-t border-b border-amber-500 text-amber-700 px-4 py-3"
    RED = "bg-red-100 border-t border-b border-red-500 text-red-700 px-4 py-3"
    PURPLE = "bg-purple-100 border-t border-b border-purple-500 text-purple-700 px-4 py-3"
    GRAY = "bg-gray-100 border-t border-b border-gray-500 text-gray-700 px-4 py-3"


def _block(tag: str, class_value: str, args: tuple, *, id: Optional[str] = None,
           style: Any = None, node_ref: Optional[NodeRef] = None) -> Element:
    element = Element(tag, {"class": class_value, "id": id, "style": style}, list(args))
    if node_ref is not None:
        node_ref.load(element)
    return element


def alert(*args: Any, variant: AlertVariant = AlertVariant.DEFAULT,
          class_: Optional[str] = None, **kwargs: Any) -> Element:
    """An alert box; kwargs may be id, style and node_ref."""
    return _block("div", tw_merge(ALERT_BASE_CLASS, variant.value, class_), args, **kwargs)


def alert_title(*args: Any, class_: Optional[str] = None, **kwargs: Any) -> Element:
    return _block("h5", tw_merge("mb-1 font-medium leading-none tracking-tight", class_),
                  args, **kwargs)


def alert_description(*args: Any, class_: Optional[str] = None, **kwargs: Any) -> Element:
    return _block("div", tw_merge("text-sm [&_p]:leading-relaxed", class_), args, **kwargs)


def badge(*args: Any, variant: BadgeVariant = BadgeVariant.DEFAULT,
          class_: Optional[str] = None, **kwargs: Any) -> Element:
    """A small label; kwargs may be id, style and node_ref."""
    return _block("div", tw_merge(BADGE_BASE_CLASS, variant.value, class_), args, **kwargs)


def card(*args: Any, class_: Optional[str] = None, **kwargs: Any) -> Element:
    return _block("div", tw_merge("rounded-lg border bg-card text-card-foreground shadow-sm",
                                  class_), args, **kwargs)


def card_header(*args: Any, class_: Optional[str] = None, **kwargs: Any) -> Element:
    return _block("div", tw_merge("flex flex-col space-y-1.5 p-6", class_), args, **kwargs)


def card_title(*args: Any, class_: Optional[str] = None, **kwargs: Any) -> Element:
    return _block("div", tw_merge("text-2xl font-semibold leading-none tracking-tight",
                                  class_), args, **kwargs)


def card_description(*args: Any, class_: Optional[str] = None, **kwargs: Any) -> Element:
    return _block("div", tw_merge("text-sm text-muted-foreground", class_), args, **kwargs)


def card_content(*args: Any, class_: Optional[str] = None, **kwargs: Any) -> Element:
    return _block("div", tw_merge("p-6 pt-0", class_), args, **kwargs)


def card_footer(*args: Any, class_: Optional[str] = None, **kwargs: Any) -> Element:
    return _block("div", tw_merge("flex items-center p-6 pt-0", class_), args, **kwargs)


def avatar(*args: Any, class_: Optional[str] = None) -> Element:
    return Element("div", {"class": tw_merge(
        "relative flex size-8 shrink-0 overflow-hidden rounded-full", class_)}, list(args))


def avatar_image(src: Optional[str], class_: Optional[str] = None,
                 alt: Optional[str] = None) -> Element:
    return Element("img", {"class": tw_merge("aspect-square size-full", class_),
                           "src": src, "alt": alt}, void=True)


def avatar_fallback(*args: Any, class_: Optional[str] = None) -> Element:
    return Element("div", {"class": tw_merge(
        "bg-muted flex size-full items-center justify-center rounded-full", class_)},
        list(args))


def banner(variant: BannerVariant, title: str, message: str) -> Element:
    """A coloured notice with a bold title and a short message."""
    inner = Element("div", {"class": variant.value, "role": "alert"}, [
        Element("p", {"class": "font-bold"}, [title]),
        Element("p", {"class": "text-sm"}, [message]),
    ])
    return Element("div", {"class": "m-12 space-y-6"}, [inner])


def progress_percentage(value: float, max_value: float = 100.0) -> float:
    """Return value as a percentage of max_value, clamped to 0..100; 0 when max is 0."""
    if max_value == 0.0:
        return 0.0
    ratio = value / max_value * 100.0
    if math.isnan(ratio):
        return ratio
    return min(max(ratio, 0.0), 100.0)


def _format_number(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def progress(value: float, max_value: float = 100.0, class_: Optional[str] = None) -> Element:
    """A horizontal progress bar."""
    remaining = 100.0 - progress_percentage(value, max_value)
    indicator = Element("div", {
        "class": "bg-blue-500 h-full w-full flex-1 bg-primary transition-all",
        "style": {"transform": f"translateX(-{_format_number(remaining)}%)"},
    })
    return Element("div", {
        "role": "progressbar",
        "aria-valuemin": "0",
        "aria-valuemax": _format_number(max_value),
        "aria-valuenow": _format_number(value),
        "class": tw_merge("relative h-4 w-full overflow-hidden rounded-full bg-secondary",
                          class_),
    }, [indicator])