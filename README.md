# shadkit

Tailwind-styled UI components that build a small element tree and render it
to HTML, plus state helpers for building interactive widgets.

## Modules

- `shadkit.html`: the element tree. `Element` (with `render()`, `closest()`
  and `dispatch()`), `MouseEvent`, `NodeRef`, the `render()` function for
  elements, text and nested lists, `primitive()` and `void_primitive()` (which
  can hand their attributes to a single child with `as_child=True`),
  `compose_callbacks()` and `compose_refs()`.
- `shadkit.tailwind`: `tw_merge()`, which joins class lists so that later
  utilities override earlier conflicting ones.
- `shadkit.button`: `button()` with `ButtonVariant` and `ButtonSize`,
  `button_class()` for the merged class string alone, and `ButtonProps`, which
  `button()` passes to an `as_child` callable instead of rendering.
- `shadkit.display`: `alert()`, `alert_title()`, `alert_description()`,
  `badge()`, the `card*()` family, `avatar()`, `avatar_image()`,
  `avatar_fallback()`, `banner()`, `progress()` and `progress_percentage()`,
  with `AlertVariant`, `BadgeVariant` and `BannerVariant`.
- `shadkit.breadcrumb`: `breadcrumb()`, `breadcrumb_item()`,
  `breadcrumb_link()`, `breadcrumb_page()`, `breadcrumb_separator()` and
  `breadcrumb_ellipsis()`.
- `shadkit.accordion`: an `Accordion` of `AccordionItem`s with single
  selection and optional collapsing.
- `shadkit.alert_dialog`: an `AlertDialog` with `show()`, `close()`,
  `trigger()`, `overlay()`, `content()` and `cancel()`, and the
  `alert_dialog_header/footer/title/description/action()` helpers.
- `shadkit.calendar`: a month `Calendar` with month navigation, day
  selection and today/selected highlighting.
- `shadkit.counter`: a `Counter` page with increment and decrement buttons.
- `shadkit.layout`: `aspect_ratio()`, `label()` and `label_mouse_down()`,
  which stops text selection on double clicks unless the click landed on a
  button, input, select or textarea.
- `shadkit.hooks`: `ControllableState`, `Previous`, `StateMachine`, `Size`
  and `SizeObserver`.
- `shadkit.demo`: one example page per component (`button_demo()`,
  `calendar_demo()` and so on).
- `shadkit.app`: `home()`, `render_route()` and the command-line `main()`.

## Examples

```python
from shadkit.button import ButtonSize, ButtonVariant, button
from shadkit.html import render

print(render(button("Save", variant=ButtonVariant.OUTLINE, size=ButtonSize.SM)))
```

```python
from shadkit.tailwind import tw_merge

tw_merge("px-2 py-1", "p-3")           # "p-3"
tw_merge("text-sm font-medium", "text-lg")  # "font-medium text-lg"
```

```python
from shadkit.hooks import StateMachine

machine = StateMachine("idle", {"idle": {"start": "running"}, "running": {"stop": "idle"}})
machine.send("start")
print(machine.state)  # running
```

```python
from datetime import date
from shadkit.calendar import Calendar

cal = Calendar(initial_date=date(2024, 2, 10), today=date(2024, 2, 10))
cal.title()          # "February 2024"
cal.days_in_month()  # 29
cal.next_month()     # date(2024, 3, 1)
```

Event handlers are kept on each `Element`; `element.dispatch("click", MouseEvent())`
runs the one bound to that event. Components such as `Accordion`, `AlertDialog`,
`Calendar` and `Counter` change their state in those handlers, and calling their
`render()` again produces the updated markup.

## Command line

Installing the package provides a `shadkit` command that prints the full HTML
document of a page from the demo gallery:

```
shadkit                    # the index page
shadkit /button            # the button demo
shadkit /calendar -o cal.html   # write the page to a file
shadkit --list             # list the available routes
```

An unknown path renders a document whose body is `Page not found.` and the
command exits with status 1.

## What it does not do

The output is static HTML. There is no browser runtime, no HTTP server and no
stylesheet: handlers run only when called through `Element.dispatch()` in
Python, and the Tailwind classes need a Tailwind build of your own to take
effect. `SizeObserver` does not measure anything itself; it records the sizes
it is given.

## Tests

```
pip install -e ".[test]"
pytest
```