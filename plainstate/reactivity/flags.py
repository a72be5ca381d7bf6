# plainstate/reactivity/flags.py

"""
Type predicates and unwrap helpers for reactive values.

Wrappers are recognized by class-level marker attributes rather than
isinstance checks, so proxies and refs from this package can be told apart
from mocks and look-alike objects (the marker must be exactly ``True``).
"""

from typing import Any


def _flag(value: Any, name: str) -> bool:
    return getattr(type(value), name, False) is True


def is_ref(value: Any) -> bool:
    """True for single-slot reference cells."""
    return _flag(value, "_is_ref")


def is_reactive(value: Any) -> bool:
    """True for tracked mutable proxies."""
    return _flag(value, "_is_reactive")


def is_readonly(value: Any) -> bool:
    """True for read-only interception proxies."""
    return _flag(value, "_is_readonly")


def is_proxy(value: Any) -> bool:
    return is_reactive(value) or is_readonly(value)


def is_wrapped(value: Any) -> bool:
    """True for any value that carries reactive identity on top of its content."""
    return is_ref(value) or is_proxy(value)


def unwrap_once(value: Any) -> Any:
    """
    Strip exactly one layer of wrapping. A ref yields its current value, a proxy
    yields the object it intercepts. Anything else is returned unchanged.
    """
    if is_ref(value):
        return value.value
    if is_proxy(value):
        return value._target
    return value


def to_raw(value: Any) -> Any:
    """Strip every proxy layer. Refs are left alone."""
    while is_proxy(value):
        value = value._target
    return value


def unref(value: Any) -> Any:
    return value.value if is_ref(value) else value
