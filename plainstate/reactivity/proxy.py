# plainstate/reactivity/proxy.py

import weakref
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Callable, Dict, Iterator, List, Union

from config.config import config
from plainstate.reactivity.dep import Dep
from plainstate.reactivity.flags import is_proxy, is_reactive, is_readonly, is_ref, to_raw
from plainstate.utils.logging import Logger

logger = Logger.get_logger("ReactivityLogger", config.paths.log_dir / config.logging.reactivity_log)

_MISSING = object()

# id(target) -> proxy. A live proxy keeps its target alive, so ids cannot be reused under it.
_reactive_cache: "weakref.WeakValueDictionary[int, Any]" = weakref.WeakValueDictionary()
_readonly_cache: "weakref.WeakValueDictionary[int, Any]" = weakref.WeakValueDictionary()


class ReadonlyError(TypeError):
    """Raised when a readonly proxy is asked to change its target."""


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list)) or is_proxy(value)


def _wrap_child(value: Any, factory: Callable[[Any], Any]) -> Any:
    return factory(value) if _is_container(value) else value


class ReactiveDict(MutableMapping):
    """
    Tracked mutable view over a dict. Writes go to the underlying dict and are
    reported to watchers as ``(key, new, old)``.
    """
    _is_reactive = True

    def __init__(self, target: Dict[Any, Any]):
        self._target = target
        self._dep = Dep()

    def __getitem__(self, key):
        value = self._target[key]
        if is_ref(value):
            return value.value
        return _wrap_child(value, reactive)

    def __setitem__(self, key, value):
        old = self._target.get(key, _MISSING)
        value = to_raw(value)
        if is_ref(old) and not is_ref(value):
            old.value = value
            return
        if old is value:
            return
        self._target[key] = value
        self._dep.notify(key, value, None if old is _MISSING else old)

    def __delitem__(self, key):
        old = self._target.pop(key)
        self._dep.notify(key, None, old)

    def __iter__(self) -> Iterator:
        return iter(self._target)

    def __len__(self) -> int:
        return len(self._target)

    def __repr__(self) -> str:
        return f"ReactiveDict({self._target!r})"


class ReactiveList(MutableSequence):
    """Tracked mutable view over a list. Refs stored in the list are not auto-unwrapped."""
    _is_reactive = True

    def __init__(self, target: List[Any]):
        self._target = target
        self._dep = Dep()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [_wrap_child(v, reactive) for v in self._target[index]]
        return _wrap_child(self._target[index], reactive)

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            old = self._target[index]
            value = [to_raw(v) for v in value]
        else:
            old = self._target[index]
            value = to_raw(value)
            if old is value:
                return
        self._target[index] = value
        self._dep.notify(index, value, old)

    def __delitem__(self, index):
        old = self._target[index]
        del self._target[index]
        self._dep.notify(index, None, old)

    def __len__(self) -> int:
        return len(self._target)

    def insert(self, index, value):
        value = to_raw(value)
        self._target.insert(index, value)
        self._dep.notify(index, value, None)

    def __eq__(self, other):
        if isinstance(other, (list, ReactiveList, ReadonlyList)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ReactiveList({self._target!r})"


class ReadonlyDict(Mapping):
    _is_readonly = True

    def __init__(self, target: Union[Dict[Any, Any], ReactiveDict]):
        self._target = target

    def __getitem__(self, key):
        value = self._target[key]
        if is_ref(value):
            value = value.value
        return _wrap_child(value, readonly)

    def __setitem__(self, key, value):
        raise ReadonlyError(f"Cannot set key {key!r}: target is readonly")

    def __delitem__(self, key):
        raise ReadonlyError(f"Cannot delete key {key!r}: target is readonly")

    def __iter__(self) -> Iterator:
        return iter(self._target)

    def __len__(self) -> int:
        return len(self._target)

    def __repr__(self) -> str:
        return f"ReadonlyDict({self._target!r})"


class ReadonlyList(Sequence):
    _is_readonly = True

    def __init__(self, target: Union[List[Any], ReactiveList]):
        self._target = target

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [_wrap_child(v, readonly) for v in self._target[index]]
        return _wrap_child(self._target[index], readonly)

    def __setitem__(self, index, value):
        raise ReadonlyError(f"Cannot set index {index!r}: target is readonly")

    def __delitem__(self, index):
        raise ReadonlyError(f"Cannot delete index {index!r}: target is readonly")

    def __len__(self) -> int:
        return len(self._target)

    def append(self, value):
        raise ReadonlyError("Cannot append: target is readonly")

    def __eq__(self, other):
        if isinstance(other, (list, ReactiveList, ReadonlyList)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ReadonlyList({self._target!r})"


def reactive(target: Any) -> Any:
    """
    Return the tracked proxy for a dict or list, creating it on first use.
    Proxies and unsupported values are returned unchanged.
    """
    if is_proxy(target):
        return target
    if isinstance(target, dict):
        proxy_cls = ReactiveDict
    elif isinstance(target, list):
        proxy_cls = ReactiveList
    else:
        logger.debug(f"reactive() cannot track {type(target).__name__}; returning it unchanged.")
        return target

    proxy = _reactive_cache.get(id(target))
    if proxy is None:
        proxy = proxy_cls(target)
        _reactive_cache[id(target)] = proxy
    return proxy


def readonly(target: Any) -> Any:
    """
    Return a read-only proxy over a dict, list or reactive proxy.
    """
    if is_readonly(target):
        return target
    if isinstance(target, (dict, ReactiveDict)):
        proxy_cls = ReadonlyDict
    elif isinstance(target, (list, ReactiveList)):
        proxy_cls = ReadonlyList
    else:
        logger.debug(f"readonly() cannot wrap {type(target).__name__}; returning it unchanged.")
        return target

    proxy = _readonly_cache.get(id(target))
    if proxy is None:
        proxy = proxy_cls(target)
        _readonly_cache[id(target)] = proxy
    return proxy


def dep_of(source: Any) -> Dep:
    """Return the subscriber list behind a ref or reactive proxy."""
    if is_ref(source) or is_reactive(source):
        return source._dep
    raise TypeError(f"Cannot watch {type(source).__name__}: expected a ref or reactive proxy")
