"""
Outcomes of the folding steps and of the folds as a whole.

A folding step either succeeds with a new accumulated result,
or fails with an error -- while still reporting the result as it was
at the moment of failure (maybe partially advanced by the failed step).

The failures are *returned*, not raised: this is the only channel
to stop a fold early and keep the result accumulated so far.
Exceptions raised from the steps are not intercepted and escape as usual.

.. code-block:: python

    def step(total: int, price: int) -> Outcome[int]:
        if price < 0:
            return Failed(total, ValueError(f"Negative price: {price!r}"))
        return Succeeded(total + price)

    outcome = sequences.fold([10, 20, -5, 30], 0, step)
    outcome.result  # 30
    outcome.error   # ValueError('Negative price: -5')
    outcome.unwrap()  # raises that ValueError
"""
import dataclasses
from typing import Any, Generic, Optional, Union

from colltools.helpers.typedefs import R


@dataclasses.dataclass(frozen=True)
class Succeeded(Generic[R]):
    """ A successful step or fold, with the accumulated result. """
    result: R

    @property
    def error(self) -> None:
        return None

    @property
    def failed(self) -> bool:
        return False

    def unwrap(self) -> R:
        return self.result


@dataclasses.dataclass(frozen=True)
class Failed(Generic[R]):
    """
    A failed step or fold, with the result as of the failure, and the error.

    The error is the caller's own exception object. It is carried as is:
    neither wrapped, nor translated, nor raised until `unwrap` is called.
    """
    result: R
    error: Exception

    @property
    def failed(self) -> bool:
        return True

    def unwrap(self) -> R:
        raise self.error


Outcome = Union[Succeeded[R], Failed[R]]


def ensure_outcome(value: object, *, step: Optional[int] = None) -> Outcome[Any]:
    """
    Verify that a folding step has returned an outcome, not a bare value.

    Bare values are not accepted as successes.
    """
    if isinstance(value, (Succeeded, Failed)):
        return value
    where = f" at step #{step}" if step is not None else ""
    raise TypeError(f"A folding step must return Succeeded or Failed{where}, got {value!r}")
