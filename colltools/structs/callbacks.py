"""
Callback signatures for typing.

All callbacks are invoked with positional arguments only, in the order
as documented for every protocol. The callbacks should have no side-effects
that depend on the iteration order, since the order of mappings is not promised.
"""
from typing import Tuple

from typing_extensions import Protocol

from colltools.helpers.typedefs import K_co, K_contra, R, T_co, T_contra, V_co, V_contra
from colltools.structs import outcomes


class MapPredicateFn(Protocol[K_contra, V_contra]):
    def __call__(self, __key: K_contra, __value: V_contra) -> bool: ...


class MapProjectionFn(Protocol[K_contra, V_contra, K_co, V_co]):
    def __call__(self, __key: K_contra, __value: V_contra) -> Tuple[K_co, V_co]: ...


class MapFoldFn(Protocol[R, K_contra, V_contra]):
    def __call__(self, __result: R, __key: K_contra, __value: V_contra) -> outcomes.Outcome[R]: ...


class SeqPredicateFn(Protocol[T_contra]):
    def __call__(self, __elem: T_contra) -> bool: ...


class SeqProjectionFn(Protocol[T_contra, T_co]):
    def __call__(self, __elem: T_contra) -> T_co: ...


class SeqFoldFn(Protocol[R, T_contra]):
    def __call__(self, __result: R, __elem: T_contra) -> outcomes.Outcome[R]: ...


class SeqKeyFn(Protocol[T_contra, K_co]):
    def __call__(self, __elem: T_contra) -> K_co: ...
