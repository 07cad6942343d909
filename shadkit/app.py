"""The demo site: a home page of links and one page per component."""

from __future__ import annotations

import argparse
import html as _html
import sys
from typing import Callable, Optional

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
from shadkit.html import Element, render

NOT_FOUND = "Page not found."

_HOME_LINKS = ("button", "alert", "card", "badge", "avatar", "accordion", "alert-dialog",
               "aspect-ratio", "breadcrumb", "calendar", "progress")

_DOCUMENT = (
    '<!DOCTYPE html><html><head><meta charset="utf-8">{title}'
    '<link id="stylesheet" rel="stylesheet" href="assets/main.css">'
    '<link rel="shortcut icon" type="image/ico" href="/favicon.ico">'
    "</head><body>{body}</body></html>"
)


def home() -> Element:
    """The index page listing every demo."""
    links = [Element("a", {"href": f"/{name}"}, [name]) for name in _HOME_LINKS]
    column = Element("div", {"class": "flex flex-col items-center justify-center "
                                      "min-h-screen bg-gray-100"}, links)
    return Element("main", {}, [column])


ROUTES: dict[str, Callable[[], object]] = {
    "/": home,
    "/alert": alert_demo,
    "/button": button_demo,
    "/card": card_demo,
    "/badge": badge_demo,
    "/avatar": avatar_demo,
    "/accordion": accordion_demo,
    "/alert-dialog": alert_dialog_demo,
    "/aspect-ratio": aspect_ratio_demo,
    "/breadcrumb": breadcrumb_demo,
    "/calendar": calendar_demo,
    "/progress": progress_demo,
}

_TITLES = {"/": "Home"}


def _normalise(path: str) -> str:
    path = path.split("?", 1)[0].split("#", 1)[0]
    return "/" + path.strip("/")


def render_route(path: str) -> str:
    """Render the full HTML document for path, or the not-found page."""
    key = _normalise(path)
    view = ROUTES.get(key)
    body = render(view()) if view is not None else _html.escape(NOT_FOUND)
    title = _TITLES.get(key)
    title_tag = f"<title>{_html.escape(title)}</title>" if title else ""
    return _DOCUMENT.format(title=title_tag, body=body)


def main(argv: Optional[list] = None) -> int:
    """Render one page of the demo site to standard output or a file."""
    parser = argparse.ArgumentParser(prog="shadkit",
                                     description="Render a page of the component demo site.")
    parser.add_argument("path", nargs="?", default="/", help="route to render")
    parser.add_argument("-o", "--output", help="file to write the page to")
    parser.add_argument("--list", action="store_true", help="list the available routes")
    args = parser.parse_args(argv)

    if args.list:
        for route in ROUTES:
            print(route)
        return 0

    document = render_route(args.path)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(document)
    else:
        sys.stdout.write(document + "\n")
    return 0 if _normalise(args.path) in ROUTES else 1