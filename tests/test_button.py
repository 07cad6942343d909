import pytest

from shadkit.button import (
    BUTTON_BASE_CLASS,
    ButtonProps,
    ButtonSize,
    ButtonVariant,
    button,
    button_class,
)
from shadkit.html import Element, MouseEvent, NodeRef


def test_default_class_has_default_variant_and_size():
    tokens = button_class().split()
    assert "bg-primary" in tokens
    assert "h-10" in tokens
    assert "px-4" in tokens
    assert "inline-flex" in tokens


@pytest.mark.parametrize("variant", list(ButtonVariant))
def test_variant_tokens_survive_merge(variant):
    tokens = set(button_class(variant).split())
    assert set(variant.value.split()) <= tokens


@pytest.mark.parametrize("size", list(ButtonSize))
def test_size_tokens_survive_merge(size):
    tokens = set(button_class(size=size).split())
    assert set(size.value.split()) <= tokens


def test_user_class_overrides_conflicting_size():
    tokens = button_class(class_="h-12").split()
    assert "h-12" in tokens
    assert "h-10" not in tokens
    assert "py-2" in tokens


def test_button_renders_children():
    element = button("Click me")
    assert element.tag == "button"
    html = element.render()
    assert html.startswith("<button")
    assert "Click me" in html
    assert html.endswith("</button>")


def test_onclick_is_dispatched():
    clicks = []
    element = button("Go", onclick=clicks.append)
    event = MouseEvent()
    element.dispatch("click", event)
    assert clicks == [event]


def test_disabled_and_type_attributes():
    element = button("Send", disabled=True, type_="submit", name="send")
    assert element.attrs["disabled"] is True
    assert element.attrs["type"] == "submit"
    html = element.render()
    assert " disabled" in html
    assert 'type="submit"' in html
    assert 'name="send"' in html


def test_false_booleans_are_omitted():
    html = button("x").render()
    assert "disabled" not in html.split(">")[0].replace("disabled:", "")
    assert "autofocus" not in html


def test_as_child_receives_props():
    received = []

    def as_child(props):
        received.append(props)
        return Element("a", {"class": props.class_})

    result = button(variant=ButtonVariant.LINK, as_child=as_child)
    assert result.tag == "a"
    assert isinstance(received[0], ButtonProps)
    assert "underline-offset-4" in received[0].class_.split()


def test_node_ref_is_loaded():
    ref = NodeRef()
    element = button("x", node_ref=ref)
    assert ref.node is element


def test_unknown_keyword_raises():
    with pytest.raises(TypeError):
        button("x", colour="red")


def test_props_render_directly():
    props = ButtonProps(class_="a b", id="btn")
    element = props.render("hi")
    assert element.attrs["class"] == "a b"
    assert element.attrs["id"] == "btn"
    assert element.children == ["hi"]