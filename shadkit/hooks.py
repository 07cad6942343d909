"""Stateful helpers: controllable state, previous values, state machines and size tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, Mapping, Optional, TypeVar

T = TypeVar("T")
S = TypeVar("S", bound=Hashable)
E = TypeVar("E", bound=Hashable)


class ControllableState(Generic[T]):
    """A value that is either controlled by a prop or held internally."""

    def __init__(self, prop: Optional[T] = None, default_prop: Optional[T] = None,
                 on_change: Optional[Callable[[Optional[T]], None]] = None) -> None:
        self.prop = prop
        self._uncontrolled = default_prop
        self._previous = default_prop
        self._on_change = on_change

    @property
    def is_controlled(self) -> bool:
        return self.prop is not None

    @property
    def value(self) -> Optional[T]:
        return self.prop if self.is_controlled else self._uncontrolled

    def set(self, next_value: Optional[T]) -> None:
        """Request a new value; controlled state only reports it through on_change."""
        if self.is_controlled:
            if next_value != self.prop and self._on_change is not None:
                self._on_change(next_value)
            return
        self._uncontrolled = next_value
        if self._previous != next_value and self._on_change is not None:
            self._on_change(next_value)
            self._previous = next_value

    def set_prop(self, prop: Optional[T]) -> None:
        self.prop = prop


class Previous(Generic[T]):
    """Tracks the value seen before the current one."""

    def __init__(self, value: T) -> None:
        self._current = value
        self._previous = value

    @property
    def value(self) -> T:
        return self._previous

    def update(self, value: T) -> T:
        """Record value and return the previous distinct value."""
        if self._current != value:
            self._previous = self._current
            self._current = value
        return self._previous


class StateMachine(Generic[S, E]):
    """A finite state machine driven by a transition table."""

    def __init__(self, initial_state: S, machine: Mapping[S, Mapping[E, S]]) -> None:
        self.state = initial_state
        self._machine = machine

    def send(self, event: E) -> S:
        """Apply event; unknown transitions leave the state unchanged."""
        next_state = self._machine.get(self.state, {}).get(event)
        if next_state is not None:
            self.state = next_state
        return self.state


@dataclass
class Size:
    width: float
    height: float


class SizeObserver:
    """Follows the border-box size of an attached element."""

    def __init__(self) -> None:
        self.size: Optional[Size] = None
        self.observing = False

    def attach(self, width: float, height: float) -> None:
        """Attach to an element with the given offset size."""
        self.size = Size(float(width), float(height))
        self.observing = True

    def on_resize(self, entries: Iterable[Any]) -> None:
        """Take the size of the first resize entry, given as a Size or (inline, block)."""
        if not self.observing:
            return
        for entry in entries:
            if isinstance(entry, Size):
                self.size = Size(entry.width, entry.height)
            else:
                inline, block = entry
                self.size = Size(float(inline), float(block))
            break

    def detach(self) -> None:
        self.observing = False
        self.size = None