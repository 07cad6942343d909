"""Example pages showing each component in use."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from shadkit.accordion import Accordion, AccordionItem
from shadkit.alert_dialog import (
    AlertDialog,
    alert_dialog_action,
    alert_dialog_description,
    alert_dialog_footer,
    alert_dialog_header,
    alert_dialog_title,
)
from shadkit.breadcrumb import (
    breadcrumb,
    breadcrumb_ellipsis,
    breadcrumb_item,
    breadcrumb_link,
    breadcrumb_page,
    breadcrumb_separator,
)
from shadkit.button import ButtonSize, ButtonVariant, button
from shadkit.calendar import Calendar
from shadkit.display import (
    AlertVariant,
    BadgeVariant,
    alert,
    alert_description,
    alert_title,
    avatar,
    avatar_fallback,
    avatar_image,
    badge,
    card,
    card_content,
    card_description,
    card_footer,
    card_header,
    card_title,
    progress,
)
from shadkit.html import Element
from shadkit.layout import aspect_ratio

_ICON_SHAPES = {
    "circle-alert": (
        ("circle", {"cx": "12", "cy": "12", "r": "10"}),
        ("line", {"x1": "12", "x2": "12", "y1": "8", "y2": "12"}),
        ("line", {"x1": "12", "x2": "12.01", "y1": "16", "y2": "16"}),
    ),
    "chevron-right": (("path", {"d": "m9 18 6-6-6-6"}),),
    "badge-check": (
        ("path", {"d": "M3.85 8.62a4 4 0 0 1 4.78-4.77 4 4 0 0 1 6.74 0 4 4 0 0 1 4.78 "
                       "4.78 4 4 0 0 1 0 6.74 4 4 0 0 1-4.77 4.78 4 4 0 0 1-6.75 0 4 4 "
                       "0 0 1-4.78-4.77 4 4 0 0 1 0-6.76Z"}),
        ("path", {"d": "m9 12 2 2 4-4"}),
    ),
}

_ACCORDION_SECTIONS = (
    ("item-1", "Product Information", (
        "Our flagship product combines cutting-edge technology with sleek design. Built "
        "with premium materials, it offers unparalleled performance and reliability.",
        "Key features include advanced processing capabilities, and an intuitive user "
        "interface designed for both beginners and experts.",
    )),
    ("item-2", "Shipping Details", (
        "We offer worldwide shipping through trusted courier partners. Standard delivery "
        "takes 3-5 business days, while express shipping ensures delivery within 1-2 "
        "business days.",
        "All orders are carefully packaged and fully insured. Track your shipment in "
        "real-time through our dedicated tracking portal.",
    )),
    ("item-3", "Return Policy", (
        "We stand behind our products with a comprehensive 30-day return policy. If "
        "you're not completely satisfied, simply return the item in its original "
        "condition.",
        "Our hassle-free return process includes free return shipping and full refunds "
        "processed within 48 hours of receiving the returned item.",
    )),
)

_COUNTER_BADGE_CLASS = "h-5 min-w-5 rounded-full px-1 font-mono tabular-nums"


def _icon(name: str, width: str = "1em", height: str = "1em",
          style: Optional[str] = None) -> Element:
    shapes = [Element(tag, dict(attrs)) for tag, attrs in _ICON_SHAPES[name]]
    return Element("svg", {
        "width": width, "height": height, "viewBox": "0 0 24 24", "fill": "none",
        "stroke": "currentColor", "stroke-width": "2", "stroke-linecap": "round",
        "stroke-linejoin": "round", "style": style, "data-icon": name,
    }, shapes)


def accordion_demo() -> Element:
    """A collapsible accordion with three sections, the first one open."""
    accordion = Accordion(class_="w-full", type_="single", collapsible=True,
                          default_value="item-1")
    items = [
        AccordionItem(value=value, trigger=title,
                      content=[Element("p", {}, [text]) for text in paragraphs],
                      content_class="flex flex-col gap-4 text-balance")
        for value, title, paragraphs in _ACCORDION_SECTIONS
    ]
    return accordion.render(*items)


def alert_demo() -> Element:
    """Two default alerts and a destructive one."""
    return Element("div", {"class": "grid w-full max-w-xl items-start gap-4"}, [
        alert(
            _icon("circle-alert"),
            alert_title("Success! Your changes have been saved"),
            alert_description("This is an alert with icon, title and description."),
        ),
        alert(
            _icon("circle-alert"),
            alert_title("This Alert has a title and an icon. No description."),
        ),
        alert(
            _icon("circle-alert"),
            alert_title("Unable to process your payment."),
            alert_description(
                Element("p", {}, ["Please verify your billing information and try again."]),
                Element("ul", {"class": "list-inside list-disc text-sm"}, [
                    Element("li", {}, ["Check your card details"]),
                    Element("li", {}, ["Ensure sufficient funds"]),
                    Element("li", {}, ["Verify billing address"]),
                ]),
            ),
            variant=AlertVariant.DESTRUCTIVE,
        ),
    ])


def alert_dialog_demo() -> list:
    """A trigger button and the confirmation dialog it opens."""
    dialog = AlertDialog()
    trigger = dialog.trigger(button("Show Dialog", variant=ButtonVariant.OUTLINE))
    content = dialog.content(
        alert_dialog_header(
            alert_dialog_title("Are you absolutely sure?"),
            alert_dialog_description(
                "This action cannot be undone. This will permanently delete your account "
                "and remove your data from our servers."
            ),
        ),
        alert_dialog_footer(
            dialog.cancel("Cancel"),
            alert_dialog_action("Continue"),
        ),
    )
    return [trigger, content]


def aspect_ratio_demo() -> Element:
    """An image held at a 16:9 ratio."""
    image = Element("img", {
        "src": "/images/landscape.jpg",
        "alt": "Landscape photo",
        "class": "rounded-md object-cover w-full h-full",
    }, void=True)
    return Element("div", {"class": "w-[450px]"}, [aspect_ratio(image, ratio=16.0 / 9.0)])


def avatar_demo() -> Element:
    """An avatar image with initials as fallback."""
    return avatar(
        avatar_image("/images/avatar.png", alt="@user"),
        avatar_fallback("CN"),
    )


def badge_demo() -> Element:
    """Badges in every variant, plus a few customised ones."""
    return Element("div", {"class": "flex flex-col items-center gap-2"}, [
        Element("div", {"class": "flex w-full flex-wrap gap-2"}, [
            badge("Badge"),
            badge("Secondary", variant=BadgeVariant.SECONDARY),
            badge("Destructive", variant=BadgeVariant.DESTRUCTIVE),
            badge("Outline", variant=BadgeVariant.OUTLINE),
        ]),
        Element("div", {"class": "flex w-full flex-wrap gap-2"}, [
            badge(
                _icon("badge-check", width="2em", height="2em", style="color: green"),
                "Verified",
                variant=BadgeVariant.SECONDARY,
                class_="bg-blue-500 text-white dark:bg-blue-600",
            ),
            badge("8", class_=_COUNTER_BADGE_CLASS),
            badge("99", variant=BadgeVariant.DESTRUCTIVE, class_=_COUNTER_BADGE_CLASS),
            badge("20+", variant=BadgeVariant.OUTLINE, class_=_COUNTER_BADGE_CLASS),
        ]),
    ])


def breadcrumb_demo() -> Element:
    """A breadcrumb trail with a collapsed middle section."""
    return breadcrumb(
        breadcrumb_item(breadcrumb_link("Home", href="/")),
        breadcrumb_separator(_icon("chevron-right")),
        breadcrumb_item(breadcrumb_ellipsis()),
        breadcrumb_separator(_icon("chevron-right")),
        breadcrumb_item(breadcrumb_link("Components", href="/components/breadcrumb")),
        breadcrumb_separator(_icon("chevron-right")),
        breadcrumb_item(breadcrumb_page("Breadcrumb")),
    )


def button_demo() -> Element:
    """A single large default button."""
    return Element("div", {"class": "flex flex-wrap items-center gap-2 md:flex-row"}, [
        button("Button", variant=ButtonVariant.DEFAULT, size=ButtonSize.LG),
    ])


def calendar_demo(today: Optional[date] = None) -> Element:
    """A calendar opened on today's month; today defaults to the current date."""
    return Element("div", {"class": "flex justify-center p-6"},
                   [Calendar(today=today).render()])


def card_demo() -> Element:
    """A card with header, content and footer."""
    return card(
        card_header(
            card_title("Card Title"),
            card_description("Card Description"),
        ),
        card_content(Element("p", {}, ["Card Content"])),
        card_footer(Element("p", {}, ["Card Footer"])),
    )


def progress_demo() -> Element:
    """A full progress bar."""
    value: Any = 100.0
    return Element("div", {"class": "w-[60%]"}, [progress(value)])