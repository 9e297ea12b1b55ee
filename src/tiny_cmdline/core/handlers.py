"""Normalization of option callbacks.

Callers register either a *value handler* (``f(value)``) or a *trigger*
(``f()``).  Both are wrapped once, at registration time, into an
:class:`OptionHandler` that is always invoked with the optional raw
value; triggers simply drop it.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from tiny_cmdline.exceptions import OptionDefinitionError


@dataclass(frozen=True, slots=True)
class OptionHandler:
    """Uniform ``handler(value)`` wrapper around a caller callback."""

    func: Callable[..., Any]
    takes_value: bool

    def __call__(self, value: str | None) -> None:
        if self.takes_value:
            self.func(value)
        else:
            self.func()


def _accepts(signature: inspect.Signature, *args: object) -> bool:
    try:
        signature.bind(*args)
    except TypeError:
        return False
    return True


def normalize_handler(func: Callable[..., Any]) -> OptionHandler:
    """Wrap *func* into an :class:`OptionHandler`.

    A callable that can be called with one positional argument is a
    value handler, even when that argument has a default.  One that can
    only be called without arguments is a trigger.  Callables without an
    inspectable signature (some builtins) are assumed to take the value.

    Raises
    ------
    OptionDefinitionError
        When *func* is not callable or needs more than one argument.
    """
    if isinstance(func, OptionHandler):
        return func
    if not callable(func):
        raise OptionDefinitionError(
            f"Option handler must be callable, got {type(func).__name__}.",
        )

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return OptionHandler(func=func, takes_value=True)

    if _accepts(signature, None):
        return OptionHandler(func=func, takes_value=True)
    if _accepts(signature):
        return OptionHandler(func=func, takes_value=False)

    raise OptionDefinitionError(
        f"Option handler {getattr(func, '__name__', func)!r} must accept "
        "zero arguments or exactly one (the raw value).",
    )
