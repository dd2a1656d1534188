"""
Membership testing in permutation groups with word recovery.

Build a `Group` from generators given as `SLPPermutation`s, sift a candidate
through it with `Group.strip` and, if it is a member, map the residue's
straight-line program to a word with a `Morphism`.
"""

from .chain import Config, Group, Level, SiftResult, Stats
from .element import GroupElement, SLPPermutation
from .errors import (
    GroupError, MalformedPermutation, NotInOrbit, OutOfDomain,
    UnmappedGenerator,
)
from .free import Morphism, Word
from .permutation import Permutation
from .slp import (
    IDENTITY, SLP, Generator, Identity, Inverse, Product, evaluate, invert,
    product,
)

__all__ = [
    'Config', 'Group', 'Level', 'SiftResult', 'Stats',
    'GroupElement', 'SLPPermutation',
    'GroupError', 'MalformedPermutation', 'NotInOrbit', 'OutOfDomain',
    'UnmappedGenerator',
    'Morphism', 'Word',
    'Permutation',
    'IDENTITY', 'SLP', 'Generator', 'Identity', 'Inverse', 'Product',
    'evaluate', 'invert', 'product',
]
