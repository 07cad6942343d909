from shadkit.alert_dialog import (
    AlertDialog,
    alert_dialog_action,
    alert_dialog_description,
    alert_dialog_footer,
    alert_dialog_header,
    alert_dialog_title,
)
from shadkit.html import MouseEvent


def test_starts_closed_by_default():
    dialog = AlertDialog()
    assert dialog.open is False
    assert dialog.overlay().attrs["data-state"] == "closed"


def test_show_and_close():
    dialog = AlertDialog()
    dialog.show()
    assert dialog.open is True
    dialog.close()
    assert dialog.open is False


def test_trigger_click_opens():
    dialog = AlertDialog()
    trigger = dialog.trigger("Show Dialog")
    assert trigger.attrs["data-slot"] == "alert-dialog-trigger"
    trigger.dispatch("click", MouseEvent())
    assert dialog.open is True


def test_content_structure_follows_state():
    dialog = AlertDialog(open=True)
    portal = dialog.content("body", class_="p-4")
    assert portal.attrs["class"] == "alert-dialog-portal"
    overlay, box = portal.children
    assert overlay.attrs["data-slot"] == "alert-dialog-overlay"
    assert "bg-black/50" in overlay.attrs["class"]
    assert box.attrs["role"] == "alertdialog"
    assert box.attrs["aria-modal"] == "true"
    assert box.attrs["data-state"] == "open"
    assert "p-4" in box.attrs["class"].split()
    assert "p-6" not in box.attrs["class"].split()


def test_cancel_click_closes():
    dialog = AlertDialog(open=True)
    cancel = dialog.cancel("Cancel")
    assert cancel.tag == "button"
    assert "border-input" in cancel.attrs["class"]
    cancel.dispatch("click", MouseEvent())
    assert dialog.open is False


def test_action_runs_onclick():
    clicks = []
    action = alert_dialog_action("Continue", onclick=clicks.append)
    event = MouseEvent()
    action.dispatch("click", event)
    assert clicks == [event]
    assert "bg-primary" in action.attrs["class"]


def test_action_without_onclick_is_harmless():
    action = alert_dialog_action("Continue")
    action.dispatch("click", MouseEvent())
    assert action.render().endswith("Continue</button>")


def test_text_parts_slots_and_classes():
    assert alert_dialog_header("h").attrs["data-slot"] == "alert-dialog-header"
    assert alert_dialog_footer("f").attrs["data-slot"] == "alert-dialog-footer"
    title = alert_dialog_title("Are you absolutely sure?")
    assert title.tag == "h2"
    assert title.attrs["class"] == "text-lg font-semibold"
    description = alert_dialog_description("d", class_="text-lg")
    assert description.attrs["class"] == "text-muted-foreground text-lg"