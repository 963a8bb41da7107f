"""
All configuration flags and settings to fine-tune the utilities' behaviour.

The settings are grouped semantically just for convenience
(instead of a flat mega-object with all the values in it).

The settings are not global: they are stored in a context variable,
so every thread or asyncio task can have its own settings if needed.
If nothing is set, fresh defaults are used, so the settings can only be
changed for a block of code::

    with colltools.configured(colltools.Settings(ordering=colltools.OrderingSettings(seed=42))):
        key, value = colltools.maps.pick({'a': 1, 'b': 2})  # reproducible
"""
import contextlib
import dataclasses
import random
from contextvars import ContextVar
from typing import Iterator, Optional


@dataclasses.dataclass
class OrderingSettings:

    shuffle: bool = True
    """
    Should the mappings be iterated in a random order?

    The iteration order of a mapping is not promised by any of the operations.
    Python's dicts are ordered by insertion, and it is easy to depend on it
    accidentally (e.g. by picking "the first" item of a mapping).
    With shuffling, such dependencies break early, e.g. in tests.

    Set to ``False`` to iterate in the mapping's native order
    (which is still not promised and must not be relied upon).
    """

    seed: Optional[int] = None
    """
    A seed for the shuffling. If set, every operation shuffles the same way
    for the same input, which makes the failures reproducible.
    If ``None`` (the default), the shuffling is truly random.
    """

    def make_random(self) -> random.Random:
        return random.Random(self.seed)


@dataclasses.dataclass
class LoggingSettings:

    collisions: bool = True
    """
    Should the key collisions in projections be logged (at the DEBUG level)?

    Overwriting a key by a later item is legitimate and silent by contract;
    the log message only helps to find non-injective key functions.
    """


@dataclasses.dataclass
class Settings:
    ordering: OrderingSettings = dataclasses.field(default_factory=OrderingSettings)
    logging: LoggingSettings = dataclasses.field(default_factory=LoggingSettings)


settings_var: ContextVar[Settings] = ContextVar('settings_var')


def get_settings() -> Settings:
    """
    Get the current settings, or fresh defaults if none are set.

    The defaults are not stored anywhere: modifying them has no effect.
    To change the settings, set them for a block with `configured`.
    """
    try:
        return settings_var.get()
    except LookupError:
        return Settings()


@contextlib.contextmanager
def configured(settings: Settings) -> Iterator[Settings]:
    """ Use the settings within the block, restore the previous ones after it. """
    token = settings_var.set(settings)
    try:
        yield settings
    finally:
        settings_var.reset(token)
