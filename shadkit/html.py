"""A small element tree with HTML rendering, primitives and ref helpers."""

from __future__ import annotations

import html as _html
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

Handler = Callable[[Any], None]


@dataclass(eq=False)
class Element:
    """An HTML element with attributes, children and event handlers."""

    tag: str
    attrs: dict = field(default_factory=dict)
    children: list = field(default_factory=list)
    handlers: dict = field(default_factory=dict)
    void: bool = False
    parent: Optional["Element"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in _flatten(self.children):
            if isinstance(child, Element):
                child.parent = self

    def render(self) -> str:
        """Render this element and its children as HTML."""
        parts = [self.tag]
        for name, value in self.attrs.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(name)
                continue
            if isinstance(value, dict):
                value = ";".join(f"{k}:{v}" for k, v in value.items())
            parts.append(f'{name}="{_html.escape(str(value), quote=True)}"')
        opening = "<" + " ".join(parts) + ">"
        if self.void:
            return opening
        inner = "".join(render(child) for child in self.children)
        return f"{opening}{inner}</{self.tag}>"

    def closest(self, selector: str) -> Optional["Element"]:
        """Return the nearest element, self included, whose tag is listed in selector."""
        tags = {part.strip() for part in selector.split(",") if part.strip()}
        node: Optional[Element] = self
        while node is not None:
            if node.tag in tags:
                return node
            node = node.parent
        return None

    def dispatch(self, event_name: str, event: Any) -> None:
        """Invoke the handler bound to event_name, if any."""
        handler = self.handlers.get(event_name)
        if handler is not None:
            handler(event)


@dataclass
class MouseEvent:
    """A mouse event with a target, a click count and a default-prevented flag."""

    target: Optional[Element] = None
    detail: int = 0
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class NodeRef:
    """A reference to a rendered element, optionally forwarding to other refs."""

    def __init__(self, linked: Iterable["NodeRef"] = ()) -> None:
        self.node: Optional[Element] = None
        self._linked = list(linked)

    def load(self, node: Element) -> None:
        self.node = node
        for ref in self._linked:
            ref.load(node)


def _flatten(items: Iterable[Any]) -> Iterable[Any]:
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


def render(node: Any) -> str:
    """Render an element, text, or nested list of them as HTML."""
    if node is None or node is False:
        return ""
    if isinstance(node, Element):
        return node.render()
    if isinstance(node, (list, tuple)):
        return "".join(render(item) for item in node)
    return _html.escape(str(node), quote=False)


def split_attributes(kwargs: dict) -> tuple[dict, dict]:
    """Split keyword arguments into HTML attributes and event handlers."""
    attrs: dict = {}
    handlers: dict = {}
    for key, value in kwargs.items():
        if key.startswith("on_") and callable(value):
            handlers[key[3:]] = value
            continue
        name = key.rstrip("_").replace("_", "-")
        attrs[name] = value
    return attrs, handlers


def _apply(element: Element, attrs: dict, handlers: dict) -> None:
    for name, value in attrs.items():
        current = element.attrs.get(name)
        if name == "class" and current and value:
            element.attrs[name] = f"{current} {value}"
        elif name == "style" and isinstance(current, dict) and isinstance(value, dict):
            element.attrs[name] = {**current, **value}
        else:
            element.attrs[name] = value
    element.handlers.update(handlers)


def primitive(tag: str, *args: Any, as_child: bool = False,
              node_ref: Optional[NodeRef] = None, **kwargs: Any) -> Element:
    """Build a tag element, or hand its attributes to the single child when as_child."""
    attrs, handlers = split_attributes(kwargs)
    if as_child:
        if len(args) != 1 or not isinstance(args[0], Element):
            raise TypeError("as_child requires exactly one element child")
        element = args[0]
        _apply(element, attrs, handlers)
    else:
        element = Element(tag, attrs, list(args), handlers)
    if node_ref is not None:
        node_ref.load(element)
    return element


def void_primitive(tag: str, child: Optional[Element] = None, as_child: bool = False,
                   node_ref: Optional[NodeRef] = None, **kwargs: Any) -> Element:
    """Like primitive, but the fallback element never has children."""
    attrs, handlers = split_attributes(kwargs)
    if as_child:
        if not isinstance(child, Element):
            raise TypeError("as_child requires an element child")
        element = child
        _apply(element, attrs, handlers)
    else:
        element = Element(tag, attrs, [], handlers, void=True)
    if node_ref is not None:
        node_ref.load(element)
    return element


def compose_callbacks(original_handler: Optional[Handler], our_handler: Optional[Handler],
                      check_default_prevented: Optional[bool] = None) -> Handler:
    """Chain two handlers; the second is skipped if the first prevented the default."""
    check = True if check_default_prevented is None else check_default_prevented

    def handler(event: Any) -> None:
        if original_handler is not None:
            original_handler(event)
        prevented = getattr(event, "default_prevented", False)
        if (not check or not prevented) and our_handler is not None:
            our_handler(event)

    return handler


def compose_refs(refs: Iterable[NodeRef]) -> NodeRef:
    """Return a ref that loads every given ref with the same node."""
    return NodeRef(refs)