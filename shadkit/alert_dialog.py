"""Modal alert dialog with trigger, overlay, content and action buttons."""

from __future__ import annotations

from typing import Any, Callable, Optional

from shadkit.button import ButtonVariant, button
from shadkit.html import Element, MouseEvent
from shadkit.tailwind import tw_merge

OVERLAY_CLASS = (
    "data-[state=open]:animate-in data-[state=closed]:animate-out "
    "data-[state=closed]:fade-out-0 data-[state=open]:fade-in-0 fixed inset-0 z-50 bg-black/50"
)
CONTENT_CLASS = (
    "bg-background data-[state=open]:animate-in data-[state=closed]:animate-out "
    "data-[state=closed]:fade-out-0 data-[state=open]:fade-in-0 "
    "data-[state=closed]:zoom-out-95 data-[state=open]:zoom-in-95 fixed top-[50%] "
    "left-[50%] z-50 grid w-full max-w-[calc(100%-2rem)] translate-x-[-50%] "
    "translate-y-[-50%] gap-4 rounded-lg border p-6 shadow-lg duration-200 sm:max-w-lg"
)


class AlertDialog:
    """Holds the open state shared by the parts of one dialog."""

    def __init__(self, open: bool = False) -> None:
        self.open = open

    @property
    def state(self) -> str:
        return "open" if self.open else "closed"

    def show(self) -> None:
        self.open = True

    def close(self) -> None:
        self.open = False

    def trigger(self, *args: Any) -> Element:
        """A wrapper that opens the dialog when clicked."""
        return Element("div", {"data-slot": "alert-dialog-trigger"}, list(args),
                       {"click": lambda _event: self.show()})

    def overlay(self, class_: Optional[str] = None) -> Element:
        return Element("div", {
            "data-slot": "alert-dialog-overlay",
            "class": tw_merge(OVERLAY_CLASS, class_),
            "data-state": self.state,
        })

    def content(self, *args: Any, class_: Optional[str] = None) -> Element:
        """The dialog box with its overlay, wrapped in a portal container."""
        box = Element("div", {
            "data-slot": "alert-dialog-content",
            "class": tw_merge(CONTENT_CLASS, class_),
            "role": "alertdialog",
            "aria-modal": "true",
            "data-state": self.state,
        }, list(args))
        return Element("div", {"class": "alert-dialog-portal"}, [self.overlay(), box])

    def cancel(self, *args: Any, class_: Optional[str] = None) -> Element:
        """An outline button that closes the dialog."""
        return button(*args, variant=ButtonVariant.OUTLINE, class_=class_,
                      onclick=lambda _event: self.close())


def alert_dialog_header(*args: Any, class_: Optional[str] = None) -> Element:
    return Element("div", {
        "data-slot": "alert-dialog-header",
        "class": tw_merge("flex flex-col gap-2 text-center sm:text-left", class_),
    }, list(args))


def alert_dialog_footer(*args: Any, class_: Optional[str] = None) -> Element:
    return Element("div", {
        "data-slot": "alert-dialog-footer",
        "class": tw_merge("flex flex-col-reverse gap-2 sm:flex-row sm:justify-end", class_),
    }, list(args))


def alert_dialog_title(*args: Any, class_: Optional[str] = None) -> Element:
    return Element("h2", {
        "data-slot": "alert-dialog-title",
        "class": tw_merge("text-lg font-semibold", class_),
    }, list(args))


def alert_dialog_description(*args: Any, class_: Optional[str] = None) -> Element:
    return Element("div", {
        "data-slot": "alert-dialog-description",
        "class": tw_merge("text-muted-foreground text-sm", class_),
    }, list(args))


def alert_dialog_action(*args: Any, class_: Optional[str] = None,
                        onclick: Optional[Callable[[MouseEvent], None]] = None) -> Element:
    """A default button that runs onclick."""
    handler = onclick if onclick is not None else (lambda _event: None)
    return button(*args, class_=class_, onclick=handler)