"""
Group elements.

Anything with `compose`, `inverse`, `identity`, `is_identity` and `apply` can
be used as the element type of a `Group`. A bare `Permutation` is enough to
test membership. To also recover a word in the generators, use
`SLPPermutation`, which pairs a permutation with the straight-line program
that produced it.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .permutation import Permutation
from .slp import IDENTITY, SLP, Generator, Inverse, Product


@runtime_checkable
class GroupElement(Protocol):
    def compose(self, other: Any) -> Any: ...

    def inverse(self) -> Any: ...

    def identity(self) -> Any: ...

    def is_identity(self) -> bool: ...

    def apply(self, point: Any) -> Any: ...


@dataclass(frozen=True, eq=False)
class SLPPermutation:
    """A permutation together with a straight-line program for it.

    Every operation is performed on both halves, so as long as the program of
    each generator evaluates to its permutation, the same holds for every
    element derived from them. This is not checked.

    Two elements are equal when their permutations are, whatever their
    programs.
    """
    slp: SLP
    permutation: Permutation

    @classmethod
    def generator(cls, index, permutation):
        """Return the element for the generator with the given index.
        """
        return cls(Generator(index), permutation)

    def compose(self, other):
        return SLPPermutation(
            Product(self.slp, other.slp),
            self.permutation.compose(other.permutation))

    def inverse(self):
        return SLPPermutation(
            Inverse(self.slp), self.permutation.inverse())

    def identity(self):
        return SLPPermutation(IDENTITY, self.permutation.identity())

    def is_identity(self):
        """Return whether the permutation is the identity.

        The program is not looked at, different programs can evaluate to the
        same permutation.
        """
        return self.permutation.is_identity()

    def apply(self, point):
        return self.permutation.apply(point)

    def __eq__(self, other):
        if not isinstance(other, SLPPermutation):
            return NotImplemented
        return self.permutation == other.permutation

    def __hash__(self):
        return hash(self.permutation)

    def transform(self, morphism):
        """Map the program of this element to a word using a morphism.
        """
        return morphism.evaluate(self.slp)

    def __str__(self):
        return f'{self.permutation} = {self.slp}'
