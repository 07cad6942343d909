"""Merging of Tailwind class lists where later utilities override conflicting earlier ones."""

from __future__ import annotations

import re
from typing import Any

_DISPLAY = {"block", "inline-block", "inline", "flex", "inline-flex", "grid",
            "inline-grid", "hidden", "contents", "table", "flow-root"}
_POSITION = {"static", "fixed", "absolute", "relative", "sticky"}
_VISIBILITY = {"visible", "invisible", "collapse"}
_TEXT_SIZES = {"xs", "sm", "base", "lg", "xl"} | {f"{n}xl" for n in range(2, 10)}
_TEXT_ALIGN = {"left", "center", "right", "justify", "start", "end"}
_FONT_WEIGHTS = {"thin", "extralight", "light", "normal", "medium", "semibold",
                 "bold", "extrabold", "black"}
_SIZES = {"none", "sm", "md", "lg", "xl", "full"} | {f"{n}xl" for n in range(2, 4)}
_SIMPLE_PREFIXES = [
    "min-w", "max-w", "min-h", "max-h", "gap-x", "gap-y", "space-x", "space-y",
    "translate-x", "translate-y", "inset-x", "inset-y",
    "px", "py", "pt", "pr", "pb", "pl", "ps", "pe", "p",
    "mx", "my", "mt", "mr", "mb", "ml", "ms", "me", "m",
    "size", "w", "h", "gap", "top", "right", "bottom", "left", "inset", "z",
    "opacity", "leading", "tracking", "items", "justify", "self", "content",
    "overflow", "duration", "ease", "delay", "transition", "cursor", "whitespace",
    "underline-offset", "outline", "object", "aspect", "shrink", "grow", "basis",
    "order", "col", "row", "grid-cols", "grid-rows", "animate", "list",
]
_CONFLICTS = {
    "p": ["px", "py", "pt", "pr", "pb", "pl", "ps", "pe"],
    "px": ["pr", "pl"],
    "py": ["pt", "pb"],
    "m": ["mx", "my", "mt", "mr", "mb", "ml", "ms", "me"],
    "mx": ["mr", "ml"],
    "my": ["mt", "mb"],
    "size": ["w", "h"],
    "inset": ["inset-x", "inset-y", "top", "right", "bottom", "left"],
    "inset-x": ["right", "left"],
    "inset-y": ["top", "bottom"],
    "gap": ["gap-x", "gap-y"],
}
_NUMERIC = re.compile(r"^\d+(\.\d+)?$|^\[.*\]$|^px$")


def _group(base: str) -> str:
    if base.startswith("[") or not base:
        return "token:" + base
    if base in _DISPLAY:
        return "display"
    if base in _POSITION:
        return "position"
    if base in _VISIBILITY:
        return "visibility"
    if base in {"flex-row", "flex-col", "flex-row-reverse", "flex-col-reverse"}:
        return "flex-direction"
    if base in {"flex-wrap", "flex-nowrap", "flex-wrap-reverse"}:
        return "flex-wrap"
    if base.startswith("flex-"):
        return "flex"
    if base.startswith("text-"):
        value = base[5:]
        if value in _TEXT_SIZES:
            return "text-size"
        if value in _TEXT_ALIGN:
            return "text-align"
        return "text-color"
    if base.startswith("font-"):
        return "font-weight" if base[5:] in _FONT_WEIGHTS else "font-family"
    for name in ("border", "ring", "shadow", "rounded"):
        if base == name:
            return name
        if base.startswith(name + "-"):
            value = base[len(name) + 1:]
            if name == "rounded":
                head = value.split("-")[0]
                if value in _SIZES or head not in {"t", "r", "b", "l", "tl", "tr", "bl", "br", "s", "e"}:
                    return "rounded"
                return "rounded-" + head
            if name == "border":
                head, _, rest = value.partition("-")
                if head in {"t", "r", "b", "l", "x", "y", "s", "e"}:
                    if not rest or _NUMERIC.match(rest):
                        return "border-w-" + head
                    return "border-color-" + head
            if _NUMERIC.match(value) or value in _SIZES:
                return name
            return name + "-color"
    if base.startswith("bg-"):
        return "bg"
    for prefix in _SIMPLE_PREFIXES:
        if base == prefix or base.startswith(prefix + "-"):
            return prefix
    return "token:" + base


def _split(token: str) -> tuple[str, str]:
    depth = 0
    cut = 0
    for pos, char in enumerate(token):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == ":" and depth == 0:
            cut = pos + 1
    return token[:cut], token[cut:]


def tw_merge(*args: Any) -> str:
    """Join class strings, dropping utilities that later ones override."""
    tokens = [t for arg in args if arg for t in str(arg).split()]
    seen: set[tuple[str, str]] = set()
    kept: list[str] = []
    for token in reversed(tokens):
        variants, base = _split(token)
        important = base.startswith("!")
        base = base.lstrip("!").lstrip("-")
        modifier = ":".join(sorted(variants.rstrip(":").split(":"))) + ("!" if important else "")
        group = _group(base)
        key = (modifier, group)
        if key in seen:
            continue
        seen.add(key)
        for other in _CONFLICTS.get(group, ()):
            seen.add((modifier, other))
        kept.append(token)
    return " ".join(reversed(kept))