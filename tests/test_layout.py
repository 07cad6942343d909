from shadkit.html import Element, MouseEvent, NodeRef
from shadkit.layout import aspect_ratio, label, label_mouse_down


def test_aspect_ratio_default_padding():
    el = aspect_ratio("x")
    assert el.attrs["style"]["padding-bottom"] == "100%"
    assert el.attrs["data-radix-aspect-ratio-wrapper"] == ""


def test_aspect_ratio_wide():
    el = aspect_ratio("x", ratio=16.0 / 9.0)
    assert el.attrs["style"]["padding-bottom"] == "56.25%"
    inner = el.children[0]
    assert inner.attrs["style"]["position"] == "absolute"
    assert inner.children == ["x"]


def test_aspect_ratio_as_child_and_ref():
    ref = NodeRef()
    img = Element("img", void=True)
    el = aspect_ratio(img, ratio=2, as_child=True, node_ref=ref, class_="c")
    assert el.children[0] is img and ref.node is img
    assert img.attrs["class"] == "c"


def test_label_prevents_double_click_selection():
    calls = []
    el = label("Name", on_mouse_down=calls.append)
    event = MouseEvent(target=el, detail=2)
    el.dispatch("mousedown", event)
    assert calls == [event]
    assert event.default_prevented


def test_single_click_not_prevented():
    event = MouseEvent(target=Element("label"), detail=1)
    label_mouse_down(event)
    assert not event.default_prevented


def test_ignores_interactive_targets():
    calls = []
    field = Element("input")
    Element("label", children=[field])
    event = MouseEvent(target=field, detail=3)
    label_mouse_down(event, calls.append)
    assert calls == [] and not event.default_prevented