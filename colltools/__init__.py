"""
The main module for all the exported functions & classes.

The maps' and sequences' utilities are exported as modules, not as functions,
since their names (``filter``, ``map``, ``fold``, etc) coincide::

    import colltools

    colltools.maps.filter({'a': 1, 'b': 2}, lambda k, v: v > 1)
    colltools.sequences.filter([1, 2, 3], lambda x: x > 1)
"""
# isort: skip_file

from colltools.structs import (
    maps,
    sequences,
)
from colltools.structs.outcomes import (
    Outcome,
    Succeeded,
    Failed,
)
from colltools.structs.configuration import (
    Settings,
    OrderingSettings,
    LoggingSettings,
    get_settings,
    configured,
)
from colltools.helpers.loggers import (
    LogFormat,
    configure,
)

__all__ = [
    'maps',
    'sequences',
    'Outcome',
    'Succeeded',
    'Failed',
    'Settings',
    'OrderingSettings',
    'LoggingSettings',
    'get_settings',
    'configured',
    'LogFormat',
    'configure',
]
