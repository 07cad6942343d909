"""Button component with variant and size styling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from shadkit.html import Element, MouseEvent, NodeRef
from shadkit.tailwind import tw_merge

BUTTON_BASE_CLASS = (
    "inline-flex items-center justify-center gap-2 whitespace-nowrap rounded-md text-sm "
    "font-medium ring-offset-background transition-colors focus-visible:outline-none "
    "focus-visible:ring-2 focus-visible:ring-ring focus-visible:ring-offset-2 "
    "disabled:pointer-events-none disabled:opacity-50 [&_svg]:pointer-events-none "
    "[&_svg]:size-4 [&_svg]:shrink-0"
)


class ButtonVariant(Enum):
    """Colour scheme of a button; the value is its class list."""

    DEFAULT = "bg-primary text-primary-foreground hover:bg-primary/90"
    DESTRUCTIVE = "bg-destructive text-destructive-foreground hover:bg-destructive/90"
    OUTLINE = "border border-input bg-background hover:bg-accent hover:text-accent-foreground"
    SECONDARY = "bg-secondary text-secondary-foreground hover:bg-secondary/80"
    GHOST = "hover:bg-accent hover:text-accent-foreground"
    LINK = "text-primary underline-offset-4 hover:underline"


class ButtonSize(Enum):
    """Dimensions of a button; the value is its class list."""

    DEFAULT = "h-10 px-4 py-2"
    SM = "h-9 rounded-md px-3"
    LG = "h-11 rounded-md px-8"
    ICON = "h-10 w-10"


def button_class(variant: ButtonVariant = ButtonVariant.DEFAULT,
                 size: ButtonSize = ButtonSize.DEFAULT,
                 class_: Optional[str] = None) -> str:
    """Return the merged class list for a button."""
    return tw_merge(BUTTON_BASE_CLASS, variant.value, size.value, class_)


@dataclass
class ButtonProps:
    """Everything needed to render a button element."""

    class_: str = ""
    node_ref: Optional[NodeRef] = None
    autofocus: bool = False
    id: Optional[str] = None
    style: Any = None
    disabled: bool = False
    form: Optional[str] = None
    formaction: Optional[str] = None
    formenctype: Optional[str] = None
    formmethod: Optional[str] = None
    formnovalidate: bool = False
    formtarget: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = None
    value: Optional[str] = None
    onclick: Optional[Callable[[MouseEvent], None]] = None

    def render(self, *args: Any) -> Element:
        """Build the button element with the given children."""
        attrs = {
            "autofocus": self.autofocus,
            "class": self.class_ or None,
            "id": self.id,
            "style": self.style,
            "disabled": self.disabled,
            "form": self.form,
            "formaction": self.formaction,
            "formenctype": self.formenctype,
            "formmethod": self.formmethod,
            "formnovalidate": self.formnovalidate,
            "formtarget": self.formtarget,
            "name": self.name,
            "type": self.type_,
            "value": self.value,
        }
        handlers = {"click": self.onclick} if self.onclick is not None else {}
        element = Element("button", attrs, list(args), handlers)
        if self.node_ref is not None:
            self.node_ref.load(element)
        return element


def button(*args: Any, variant: ButtonVariant = ButtonVariant.DEFAULT,
           size: ButtonSize = ButtonSize.DEFAULT, class_: Optional[str] = None,
           as_child: Optional[Callable[[ButtonProps], Any]] = None,
           onclick: Optional[Callable[[MouseEvent], None]] = None,
           **kwargs: Any) -> Any:
    """Render a button, or pass its props to as_child to render something else."""
    props = ButtonProps(class_=button_class(variant, size, class_), onclick=onclick, **kwargs)
    if as_child is not None:
        return as_child(props)
    return props.render(*args)