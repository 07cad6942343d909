from datetime import date

import pytest

from shadkit.button import ButtonSize, ButtonVariant
from shadkit.calendar import SELECTED_CLASS, Calendar
from shadkit.demo import (
    accordion_demo,
    alert_demo,
    alert_dialog_demo,
    aspect_ratio_demo,
    avatar_demo,
    badge_demo,
    breadcrumb_demo,
    button_demo,
    calendar_demo,
    card_demo,
    progress_demo,
)
from shadkit.display import AlertVariant, progress
from shadkit.html import Element, render


def _walk(node):
    if isinstance(node, (list, tuple)):
        for item in node:
            yield from _walk(item)
    elif isinstance(node, Element):
        yield node
        yield from _walk(node.children)


def _find(node, predicate):
    return [element for element in _walk(node) if predicate(element)]


def test_accordion_demo_first_item_open():
    tree = accordion_demo()
    triggers = _find(tree, lambda e: e.tag == "button")
    assert [t.attrs["data-state"] for t in triggers] == ["open", "closed", "closed"]


def test_accordion_demo_titles():
    html = render(accordion_demo())
    for title in ("Product Information", "Shipping Details", "Return Policy"):
        assert title in html


def test_alert_demo_last_alert_is_destructive():
    alerts = alert_demo().children
    last_class = alerts[-1].attrs["class"].split()
    assert "text-destructive" in last_class
    assert "bg-background" in alerts[0].attrs["class"].split()
    assert "Unable to process your payment." in render(alerts[-1])


def test_alert_demo_list_items():
    items = _find(alert_demo(), lambda e: e.tag == "li")
    texts = [item.children[0] for item in items]
    assert texts == ["Check your card details", "Ensure sufficient funds",
                     "Verify billing address"]


def test_alert_dialog_demo_structure():
    trigger, content = alert_dialog_demo()
    assert trigger.attrs["data-slot"] == "alert-dialog-trigger"
    boxes = _find(content, lambda e: e.attrs.get("role") == "alertdialog")
    assert boxes[0].attrs["data-state"] == "closed"
    html = render(content)
    assert "Cancel" in html and "Continue" in html


def test_alert_dialog_cancel_is_outline():
    _, content = alert_dialog_demo()
    buttons = _find(content, lambda e: e.tag == "button")
    cancel = next(b for b in buttons if b.children == ["Cancel"])
    assert "border-input" in cancel.attrs["class"].split()


def test_aspect_ratio_demo_padding():
    wrapper = aspect_ratio_demo().children[0]
    padding = wrapper.attrs["style"]["padding-bottom"]
    assert padding.endswith("%")
    assert float(padding.rstrip("%")) == pytest.approx(56.25)


def test_avatar_demo_parts():
    tree = avatar_demo()
    image = _find(tree, lambda e: e.tag == "img")[0]
    assert image.attrs["alt"] == "@user"
    assert "CN" in render(tree)


def test_badge_demo_texts():
    html = render(badge_demo())
    for text in ("Badge", "Secondary", "Destructive", "Outline", "Verified", "99", "20+"):
        assert text in html


def test_badge_demo_counter_classes():
    badges = _find(badge_demo(), lambda e: e.children and e.children[-1] == "20+")
    assert "font-mono" in badges[0].attrs["class"].split()


def test_breadcrumb_demo_links():
    tree = breadcrumb_demo()
    hrefs = [e.attrs["href"] for e in _find(tree, lambda e: e.tag == "a")]
    assert hrefs == ["/", "/components/breadcrumb"]
    page = _find(tree, lambda e: e.attrs.get("aria-current") == "page")[0]
    assert page.children == ["Breadcrumb"]


def test_button_demo_large_size():
    btn = _find(button_demo(), lambda e: e.tag == "button")[0]
    classes = set(btn.attrs["class"].split())
    assert set(ButtonSize.LG.value.split()) <= classes
    assert set(ButtonVariant.DEFAULT.value.split()) <= classes
    assert "h-10" not in classes


def test_calendar_demo_days_and_selection():
    today = date(2024, 2, 10)
    tree = calendar_demo(today)
    day_buttons = _find(tree, lambda e: e.tag == "button" and e.children
                        and isinstance(e.children[0], int))
    assert len(day_buttons) == Calendar(today=today).days_in_month()
    selected = next(b for b in day_buttons if b.children == [10])
    assert set(SELECTED_CLASS.split()) <= set(selected.attrs["class"].split())
    assert Calendar(today=today).title() in render(tree)


def test_card_demo_texts():
    html = render(card_demo())
    for text in ("Card Title", "Card Description", "Card Content", "Card Footer"):
        assert text in html


def test_progress_demo_full():
    tree = progress_demo()
    assert tree.attrs["class"] == "w-[60%]"
    assert render(tree.children[0]) == render(progress(100.0))


def test_alert_variant_used():
    alerts = alert_demo().children
    destructive_tokens = set(AlertVariant.DESTRUCTIVE.value.split())
    assert destructive_tokens <= set(alerts[-1].attrs["class"].split())