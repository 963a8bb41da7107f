"""
Helpful iteration operations on generic mappings.

None of the operations promise any specific order of iteration over a mapping,
neither for the callbacks' invocations, nor for the resulting lists & dicts.
By default, the order is intentionally randomised to catch the accidental
dependencies on the dicts' insertion order (see `OrderingSettings`).

All operations return new containers and leave their inputs untouched --
except for `union_inplace`, which mutates & returns its first argument.

The names ``filter`` & ``map`` mirror the built-ins, so the module is meant
to be used via its namespace: e.g. ``maps.filter(m, fn)``.
"""
import itertools
import logging
from typing import Dict, Iterator, List, Mapping, MutableMapping, Optional, Tuple, overload

from colltools.helpers.typedefs import K, K2, R, V, V2
from colltools.structs import callbacks, configuration, outcomes

logger = logging.getLogger(__name__)


def _iterate(m: Mapping[K, V]) -> Iterator[Tuple[K, V]]:
    settings = configuration.get_settings()
    if not settings.ordering.shuffle or len(m) < 2:
        return iter(m.items())
    items = list(m.items())
    settings.ordering.make_random().shuffle(items)
    return iter(items)


@overload
def to_singleton(m: Mapping[K, V]) -> Tuple[Optional[K], Optional[V]]: ...


@overload
def to_singleton(m: Mapping[K, V], default: Tuple[K, V]) -> Tuple[K, V]: ...


def to_singleton(
        m: Mapping[K, V],
        default: Tuple[Optional[K], Optional[V]] = (None, None),
) -> Tuple[Optional[K], Optional[V]]:
    """
    Choose an arbitrary key & value of the mapping.

    Which item is chosen, is not promised. It is not even "the first" one.
    If the mapping is empty, the default is returned: ``(None, None)`` by default.
    """
    if not m:
        return default
    ordering = configuration.get_settings().ordering
    index = ordering.make_random().randrange(len(m)) if ordering.shuffle else 0
    for key, value in itertools.islice(m.items(), index, None):
        return key, value
    return default


pick = to_singleton


def filter(
        m: Mapping[K, V],
        predicate: callbacks.MapPredicateFn[K, V],
) -> Dict[K, V]:
    """ Reduce the mapping to a new dict of items for which the predicate is true. """
    return {key: value for key, value in _iterate(m) if predicate(key, value)}


def map(
        m: Mapping[K, V],
        fn: callbacks.MapProjectionFn[K, V, K2, V2],
) -> Dict[K2, V2]:
    """
    Project the mapping into a new dict, with the new keys & values from ``fn``.

    If ``fn`` produces the same key for several items, the later-iterated item
    overwrites the earlier ones. Since the iteration order is not promised,
    the surviving item is arbitrary: make ``fn`` injective on keys if it matters.
    """
    log_collisions = configuration.get_settings().logging.collisions
    projected: Dict[K2, V2] = {}
    for key, value in _iterate(m):
        new_key, new_value = fn(key, value)
        if log_collisions and new_key in projected:
            logger.debug(f"Projected key {new_key!r} is overwritten by the item of {key!r}.")
        projected[new_key] = new_value
    return projected


def fold(
        m: Mapping[K, V],
        initial: R,
        fn: callbacks.MapFoldFn[R, K, V],
) -> outcomes.Outcome[R]:
    """
    Accumulate a result over all items of the mapping, starting with ``initial``.

    The step function gets the result so far, a key, and a value, and returns
    either `Succeeded` with the new result, or `Failed` with the result
    and an error. On the first failure, the folding stops, and that failure
    is returned as is -- with the result as of the failed step.

    For an empty mapping, the initial result is returned as succeeded.
    """
    outcome: outcomes.Outcome[R] = outcomes.Succeeded(initial)
    for step, (key, value) in enumerate(_iterate(m), start=1):
        outcome = outcomes.ensure_outcome(fn(outcome.result, key, value), step=step)
        if isinstance(outcome, outcomes.Failed):
            logger.debug(f"Folding is stopped at step #{step} of {len(m)}: {outcome.error!r}")
            break
    return outcome


def to_list(m: Mapping[K, V]) -> List[V]:
    """ All values of the mapping, in no particular order. """
    return [value for _, value in _iterate(m)]


values = to_list


def keys(m: Mapping[K, V]) -> List[K]:
    """ All keys of the mapping, in no particular order. """
    return [key for key, _ in _iterate(m)]


def union_inplace(m1: MutableMapping[K, V], m2: Mapping[K, V]) -> MutableMapping[K, V]:
    """
    Add all items of ``m2`` into ``m1``, and return ``m1`` itself (not a copy!).

    On key collisions, the values of ``m2`` overwrite the values of ``m1``.
    The caller should treat ``m1`` as consumed: the result is the same object.
    ``m2`` is not modified.
    """
    for key, value in _iterate(m2):
        m1[key] = value
    return m1


def intersect(m1: Mapping[K, V], m2: Mapping[K, V]) -> Dict[K, V]:
    """
    A new dict with the items of ``m2`` whose keys are also present in ``m1``.

    Note the asymmetry: the keys are checked against ``m1``,
    but the values are always taken from ``m2``::

        >>> intersect({'a': 1, 'b': 2}, {'b': 99, 'c': 3})
        {'b': 99}
    """
    return {key: value for key, value in _iterate(m2) if key in m1}
