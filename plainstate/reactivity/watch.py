# plainstate/reactivity/watch.py

from typing import Any, Callable

from plainstate.reactivity.proxy import dep_of


def watch(source: Any, callback: Callable[..., None]) -> Callable[[], None]:
    """
    Subscribe ``callback`` to changes of a ref or reactive proxy.

    Refs call back with ``(new, old)``; reactive proxies with ``(key, new, old)``.
    Only direct writes to ``source`` are reported, not writes to nested proxies.
    Returns a function that removes the subscription.
    """
    return dep_of(source).subscribe(callback)
