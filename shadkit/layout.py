"""Aspect-ratio container and label primitives."""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

from shadkit.html import Element, MouseEvent, NodeRef, primitive

_INTERACTIVE = "button, input, select, textarea"


def _format_number(value: float) -> str:
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == int(value):
        return str(int(value))
    return repr(value)


def aspect_ratio(*args: Any, ratio: float = 1.0, as_child: bool = False,
                 node_ref: Optional[NodeRef] = None, **kwargs: Any) -> Element:
    """Wrap children in a box that keeps the given width-to-height ratio."""
    padding = 100.0 / ratio if ratio else math.inf
    inner_style = {"position": "absolute", "top": "0px", "right": "0px",
                   "bottom": "0px", "left": "0px"}
    extra_style = kwargs.pop("style", None)
    if isinstance(extra_style, dict):
        inner_style.update(extra_style)
    inner = primitive("div", *args, as_child=as_child, node_ref=node_ref,
                      style=inner_style, **kwargs)
    return Element("div", {
        "style": {"position": "relative", "width": "100%",
                  "padding-bottom": f"{_format_number(padding)}%"},
        "data-radix-aspect-ratio-wrapper": "",
    }, [inner])


def label_mouse_down(event: MouseEvent, on_mouse_down: Optional[Callable[[MouseEvent], None]] = None) -> None:
    """Handle mousedown on a label, preventing text selection on double clicks."""
    target = event.target
    if target is not None and target.closest(_INTERACTIVE) is not None:
        return
    if on_mouse_down is not None:
        on_mouse_down(event)
    if not event.default_prevented and event.detail > 1:
        event.prevent_default()


def label(*args: Any, on_mouse_down: Optional[Callable[[MouseEvent], None]] = None,
          as_child: bool = False, node_ref: Optional[NodeRef] = None, **kwargs: Any) -> Element:
    """Build a label element with the selection-preventing mousedown handler."""
    return primitive("label", *args, as_child=as_child, node_ref=node_ref,
                     on_mousedown=lambda event: label_mouse_down(event, on_mouse_down),
                     **kwargs)