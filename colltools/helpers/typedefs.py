"""
Rudimentary type definitions shared across the codebase.

The type variables are declared once here, so that the signatures of the maps'
and sequences' utilities read the same way: ``K`` is for keys, ``V`` for values,
``T`` for sequence elements, ``R`` for the results of folding.
"""
from typing import Hashable, TypeVar

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')
T = TypeVar('T')
R = TypeVar('R')

# Same, but for the projections' outputs.
K2 = TypeVar('K2', bound=Hashable)
V2 = TypeVar('V2')
T2 = TypeVar('T2')

# Only for the callback protocols: positional arguments are contra-, results are co-variant.
K_contra = TypeVar('K_contra', bound=Hashable, contravariant=True)
V_contra = TypeVar('V_contra', contravariant=True)
T_contra = TypeVar('T_contra', contravariant=True)
K_co = TypeVar('K_co', bound=Hashable, covariant=True)
V_co = TypeVar('V_co', covariant=True)
T_co = TypeVar('T_co', covariant=True)
