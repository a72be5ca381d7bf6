# plainstate/processing/traversal.py

"""
Deep unwrap traversal.

Walks a value depth-first and rebuilds it without any wrapper: wrapped values
are unwrapped one layer at a time until something plain is left, lists and
tuples are rebuilt element by element, mappings are rebuilt as dicts, and
everything else is returned as is. Class instances that are none of the above
are not copied.

The traversal keeps no visited set. Cyclic input recurses until the
interpreter raises ``RecursionError``; shared acyclic references are copied
once per occurrence.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from config.config import config
from plainstate import reactivity
from plainstate.utils.logging import Logger

logger = Logger.get_logger('TraversalLogger', config.paths.log_dir / config.logging.unwrap_log)


class ShapeMismatchError(TypeError):
    """The top-level state did not reduce to a plain keyed mapping."""


@dataclass(frozen=True)
class UnwrapStrategy:
    """
    Predicate/unwrap pair that tells the traversal what counts as a wrapper
    and how to peel one layer off it.
    """
    is_wrapped: Callable[[Any], bool]
    unwrap_once: Callable[[Any], Any]


DEFAULT_STRATEGY = UnwrapStrategy(
    is_wrapped=reactivity.is_wrapped,
    unwrap_once=reactivity.unwrap_once,
)


def compose_strategies(*strategies: UnwrapStrategy) -> UnwrapStrategy:
    """Combine strategies. The first strategy that claims a value unwraps it."""
    if not strategies:
        raise ValueError("compose_strategies() needs at least one strategy")

    def is_wrapped(value: Any) -> bool:
        return any(s.is_wrapped(value) for s in strategies)

    def unwrap_once(value: Any) -> Any:
        for s in strategies:
            if s.is_wrapped(value):
                return s.unwrap_once(value)
        return value

    return UnwrapStrategy(is_wrapped=is_wrapped, unwrap_once=unwrap_once)


def deep_unwrap(value: Any, strategy: Optional[UnwrapStrategy] = None) -> Any:
    """Return a wrapper-free structural copy of ``value``."""
    strategy = strategy or DEFAULT_STRATEGY

    # Wrapper check must come first: proxies are Mapping/Sequence subclasses.
    if strategy.is_wrapped(value):
        return deep_unwrap(strategy.unwrap_once(value), strategy)
    if isinstance(value, list):
        return [deep_unwrap(item, strategy) for item in value]
    if isinstance(value, tuple):
        return tuple(deep_unwrap(item, strategy) for item in value)
    if isinstance(value, Mapping):
        return {key: deep_unwrap(item, strategy) for key, item in value.items()}
    return value


def to_plain_record(state: Mapping, strategy: Optional[UnwrapStrategy] = None) -> Dict[Any, Any]:
    """
    Unwrap a top-level state mapping into a plain dict.

    Raises:
        ShapeMismatchError: if the unwrapped result is not a dict.
    """
    result = deep_unwrap(state, strategy)
    if not isinstance(result, dict):
        logger.error(f"Unwrapped state is {type(result).__name__}, expected a keyed mapping.")
        raise ShapeMismatchError(
            f"result is not a plain keyed mapping (got {type(result).__name__})"
        )
    logger.debug(f"Unwrapped state with {len(result)} top-level keys.")
    return result


def is_plain(value: Any, strategy: Optional[UnwrapStrategy] = None) -> bool:
    """True when no wrapper occurs anywhere inside ``value``."""
    strategy = strategy or DEFAULT_STRATEGY

    if strategy.is_wrapped(value):
        return False
    if isinstance(value, (list, tuple)):
        return all(is_plain(item, strategy) for item in value)
    if isinstance(value, Mapping):
        return all(
            is_plain(key, strategy) and is_plain(item, strategy) for key, item in value.items()
        )
    return True
