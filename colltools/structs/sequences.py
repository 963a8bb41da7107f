"""
Helpful operations on generic sequences (lists, tuples, etc).

Unlike with the mappings, the order is always promised here:
the callbacks are invoked from left to right, and the resulting lists
keep the original relative order of the elements.

All operations return new containers and leave their inputs untouched.
"""
import logging
from typing import Dict, List, Optional, Sequence, overload

from colltools.helpers.typedefs import K, R, T, T2
from colltools.structs import callbacks, configuration, outcomes

logger = logging.getLogger(__name__)


@overload
def to_singleton(sl: Sequence[T]) -> Optional[T]: ...


@overload
def to_singleton(sl: Sequence[T], default: T) -> T: ...


def to_singleton(sl: Sequence[T], default: Optional[T] = None) -> Optional[T]:
    """ The first element of the sequence, or the default if it is empty. """
    return sl[0] if len(sl) else default


first = to_singleton


def filter(
        sl: Sequence[T],
        predicate: callbacks.SeqPredicateFn[T],
) -> List[T]:
    return [elem for elem in sl if predicate(elem)]


def map(
        sl: Sequence[T],
        fn: callbacks.SeqProjectionFn[T, T2],
) -> List[T2]:
    return [fn(elem) for elem in sl]


def fold(
        sl: Sequence[T],
        initial: R,
        fn: callbacks.SeqFoldFn[R, T],
) -> outcomes.Outcome[R]:
    """
    Accumulate a result over the sequence from left to right.

    The same as `maps.fold`, but the steps get only the result so far
    and an element. The first `Failed` step stops the folding
    and is returned as the outcome of the whole folding.
    """
    outcome: outcomes.Outcome[R] = outcomes.Succeeded(initial)
    for step, elem in enumerate(sl, start=1):
        outcome = outcomes.ensure_outcome(fn(outcome.result, elem), step=step)
        if isinstance(outcome, outcomes.Failed):
            logger.debug(f"Folding is stopped at step #{step} of {len(sl)}: {outcome.error!r}")
            break
    return outcome


def to_dict(
        sl: Sequence[T],
        key_fn: callbacks.SeqKeyFn[T, K],
) -> Dict[K, T]:
    """
    Index the sequence into a dict by the keys generated with ``key_fn``.

    If several elements have the same key, the last one wins.
    Since the sequences are ordered, this is deterministic::

        >>> to_dict([('x', 1), ('y', 2), ('x', 3)], key_fn=lambda pair: pair[0])
        {'x': ('x', 3), 'y': ('y', 2)}
    """
    log_collisions = configuration.get_settings().logging.collisions
    indexed: Dict[K, T] = {}
    for index, elem in enumerate(sl):
        key = key_fn(elem)
        if log_collisions and key in indexed:
            logger.debug(f"Key {key!r} is overwritten by the element #{index}.")
        indexed[key] = elem
    return indexed


to_mapping = to_dict
