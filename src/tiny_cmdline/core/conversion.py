"""Raw-text to typed-value conversion.

Conversion is an open, per-type strategy: :func:`register_converter`
installs a converter for a destination type and :func:`convert` picks
the most specific one by walking the type's MRO.  Types without a
converter get :func:`integer_conversion` — parse a signed 64-bit
integer, then cast it with ``value_type(number)``.

``str`` ships registered as a pass-through.
"""

from __future__ import annotations

import logging
import types
import typing
from collections.abc import Callable
from typing import Any, TypeVar, Union, overload

from tiny_cmdline.exceptions import OptionDefinitionError, ValueConversionError
from tiny_cmdline.utils.constants import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

T = TypeVar("T")

Converter = Callable[[str], Any]

_converters: dict[type, Converter] = {}


# ---------------------------------------------------------------------------
# Default strategy
# ---------------------------------------------------------------------------

def parse_int64(text: str, value_type: type = int) -> int:
    """Parse *text* as a base-10 signed 64-bit integer."""
    try:
        number = int(text, 10)
    except (TypeError, ValueError) as exc:
        raise ValueConversionError(
            f"Invalid integer value {text!r}.",
            text=text,
            value_type=value_type,
        ) from exc
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueConversionError(
            f"Integer value {text!r} is out of the 64-bit range.",
            text=text,
            value_type=value_type,
        )
    return number


def integer_conversion(value_type: type[T], text: str) -> T:
    """Parse *text* as a 64-bit integer and cast it to *value_type*."""
    number = parse_int64(text, value_type)
    try:
        return value_type(number)  # type: ignore[call-arg]
    except (TypeError, ValueError) as exc:
        raise ValueConversionError(
            f"Cannot convert {text!r} to {value_type.__name__}.",
            text=text,
            value_type=value_type,
            hint=(
                f"Register a converter for {value_type.__name__} with "
                "tiny_cmdline.register_converter()."
            ),
        ) from exc


# ---------------------------------------------------------------------------
# Registry of per-type converters
# ---------------------------------------------------------------------------

@overload
def register_converter(value_type: type[T], func: Callable[[str], T]) -> Callable[[str], T]: ...


@overload
def register_converter(
    value_type: type[T], func: None = None,
) -> Callable[[Callable[[str], T]], Callable[[str], T]]: ...


def register_converter(value_type: type, func: Converter | None = None) -> Any:
    """Install *func* as the converter for *value_type*.

    Usable directly or as a decorator::

        @register_converter(Path)
        def _to_path(text: str) -> Path:
            return Path(text).expanduser()

    A later registration for the same type replaces the earlier one.
    """
    def decorator(converter: Converter) -> Converter:
        _converters[value_type] = converter
        logger.debug("Registered converter for %s", value_type.__name__)
        return converter

    if func is None:
        return decorator
    return decorator(func)


def unregister_converter(value_type: type) -> None:
    """Remove the converter for *value_type*, if any."""
    _converters.pop(value_type, None)


def get_converter(value_type: type) -> Converter | None:
    """Return the most specific registered converter for *value_type*."""
    for klass in getattr(value_type, "__mro__", (value_type,)):
        converter = _converters.get(klass)
        if converter is not None:
            return converter
    return None


def convert(value_type: type[T], text: str, *, converter: Converter | None = None) -> T:
    """Convert raw option text to *value_type*.

    *converter*, when given, is used instead of the registered one.

    Raises
    ------
    ValueConversionError
        When the text is not acceptable for the type.  Converters that
        raise ``ValueError`` or ``TypeError`` are wrapped into this
        error; a ``ValueConversionError`` they raise passes through.
    """
    if converter is None:
        converter = get_converter(value_type)
    if converter is None:
        return integer_conversion(value_type, text)
    try:
        return converter(text)
    except ValueConversionError:
        raise
    except (TypeError, ValueError) as exc:
        raise ValueConversionError(
            f"Invalid {value_type.__name__} value {text!r}: {exc}",
            text=text,
            value_type=value_type,
        ) from exc


register_converter(str, str)


# ---------------------------------------------------------------------------
# Destination type inference
# ---------------------------------------------------------------------------

def _plain_type(hint: Any) -> type | None:
    """Reduce an annotation to a concrete class; ``Optional[T]`` becomes ``T``."""
    origin = typing.get_origin(hint)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return _plain_type(members[0])
        return None
    if origin is not None or hint is Any:
        return None
    if isinstance(hint, type):
        return hint
    return None


def resolve_value_type(target: object, attribute: str) -> type:
    """Infer the destination type of ``target.attribute``.

    Class annotations win; otherwise the type of the current value is
    used.  Unannotated attributes holding ``None`` cannot be inferred.
    """
    try:
        hints = typing.get_type_hints(type(target))
    except (NameError, TypeError):
        hints = {}

    if attribute in hints:
        resolved = _plain_type(hints[attribute])
        if resolved is not None:
            return resolved

    current = getattr(target, attribute, None)
    if current is not None:
        return type(current)

    raise OptionDefinitionError(
        f"Cannot determine the value type of {type(target).__name__}.{attribute}.",
        hint="Annotate the attribute or pass value_type= explicitly.",
    )
