"""Reversible method interception on a host object (UNO: single class)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

_MISSING = object()


class Interceptor:
    """Wraps one method of one host *instance*, never its class.

    install() shadows the bound method with ``wrap(original)`` as an instance
    attribute; remove() restores whatever the instance held before, so other
    instances of the host class are never affected.
    """

    def __init__(self, target: object, name: str, wrap: Callable[[Callable[..., Any]], Callable[..., Any]]):
        self.target = target
        self.name = name
        self.wrap = wrap
        self.original: Callable[..., Any] | None = None
        self._previous: Any = _MISSING

    @property
    def installed(self) -> bool:
        return self.original is not None

    def install(self) -> None:
        if self.installed:
            return
        original = getattr(self.target, self.name)
        if not callable(original):
            raise TypeError(f"{type(self.target).__name__}.{self.name} is not callable")
        self._previous = getattr(self.target, "__dict__", {}).get(self.name, _MISSING)
        self.original = original
        setattr(self.target, self.name, self.wrap(original))

    def remove(self) -> None:
        if not self.installed:
            return
        if self._previous is _MISSING:
            delattr(self.target, self.name)
        else:
            setattr(self.target, self.name, self._previous)
        self.original = None
        self._previous = _MISSING
