# plainstate/reactivity/ref.py

from typing import Any

from plainstate.reactivity.dep import Dep
from plainstate.reactivity.flags import is_ref, to_raw
from plainstate.reactivity.proxy import reactive

_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


def _has_changed(new: Any, old: Any) -> bool:
    if new is old:
        return False
    if isinstance(new, _PRIMITIVES) and type(new) is type(old):
        return new != old
    return True


class Ref:
    """
    Single-slot reference cell. Assigning ``value`` notifies watchers with
    ``(new, old)`` when the value actually changes.

    Deep refs store dicts and lists as reactive proxies; shallow refs store
    whatever they are given.
    """
    _is_ref = True

    def __init__(self, value: Any = None, shallow: bool = False):
        self._shallow = shallow
        self._dep = Dep()
        self._value = self._convert(value)

    def _convert(self, value: Any) -> Any:
        if self._shallow or not isinstance(value, (dict, list)):
            return value
        return reactive(value)

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any):
        new_value = self._convert(new_value)
        if not _has_changed(to_raw(new_value), to_raw(self._value)):
            return
        old_value = self._value
        self._value = new_value
        self._dep.notify(new_value, old_value)

    @property
    def shallow(self) -> bool:
        return self._shallow

    def __repr__(self) -> str:
        prefix = "ShallowRef" if self._shallow else "Ref"
        return f"{prefix}({self._value!r})"


def ref(value: Any = None) -> Ref:
    if is_ref(value):
        return value
    return Ref(value)


def shallow_ref(value: Any = None) -> Ref:
    if is_ref(value):
        return value
    return Ref(value, shallow=True)
