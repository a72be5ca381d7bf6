# plainstate/reactivity/__init__.py

"""
Reactivity Package

Reference cells, tracked proxies and readonly proxies, plus the predicates
used to recognize and strip them.
"""

from .flags import is_ref, is_reactive, is_readonly, is_proxy, is_wrapped, unwrap_once, to_raw, unref
from .proxy import ReactiveDict, ReactiveList, ReadonlyDict, ReadonlyList, ReadonlyError, reactive, readonly
from .ref import Ref, ref, shallow_ref
from .watch import watch

__all__ = [
    "Ref", "ref", "shallow_ref",
    "ReactiveDict", "ReactiveList", "reactive",
    "ReadonlyDict", "ReadonlyList", "ReadonlyError", "readonly",
    "is_ref", "is_reactive", "is_readonly", "is_proxy", "is_wrapped",
    "unwrap_once", "to_raw", "unref", "watch",
]
