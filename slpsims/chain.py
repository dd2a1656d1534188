"""
Stabilizer chains of permutation groups.

This implements a simple deterministic variant of the Schreier-Sims algorithm.
Each level of the chain fixes one more base point. For a level we compute the
orbit of its base point under the generators of that level together with a
transversal, i.e. for every orbit point an element mapping the base point to
it. The Schreier generators built from the transversal generate the
stabilizer of the base point and are used as generators of the next level.

Sifting an element through the chain then decides membership. When the
elements track how they were computed (see `SLPPermutation`), the sifting
residue also tells us how to write the element as a word in the generators.

Elements act from the left: `g.compose(h)` first applies h, then g. So the
transversal element for a point b = g.apply(a) is `g.compose(t_a)`.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Optional
import logging

from .element import SLPPermutation
from .errors import NotInOrbit, OutOfDomain
from .slp import IDENTITY

_logger = logging.getLogger(__name__)


@dataclass
class Stats:
    products: int = 0
    schreier_gens: int = 0
    sifts: int = 0


@dataclass
class Config:
    # Drop Schreier generators that are the identity.
    drop_trivial_schreier_gens: bool = True

    # Drop Schreier generators whose permutation was already produced by an
    # earlier one of the same level.
    dedupe_schreier_gens: bool = True

    stats: Stats = field(default_factory=lambda: Stats())


def action(element):
    """Return the part of an element that determines how it acts.

    Two elements with the same action are the same group element, even when
    they were computed differently.
    """
    if isinstance(element, SLPPermutation):
        return element.permutation
    return element


class Level:
    """One level of a stabilizer chain.

    `orbit` maps every point of the base point's orbit to an index into
    `transversal`, which holds an element mapping the base point to that
    point. Points are indexed in the order they were discovered, the base
    point has index 0 and the identity as transversal element.
    """
    def __init__(self, basepoint, gens, cfg=None):
        if not gens:
            raise ValueError('a level needs at least one generator')
        self.cfg = cfg or Config()
        self.basepoint = basepoint
        self.gens = tuple(gens)
        self.orbit = {basepoint: 0}
        self.transversal = [self.gens[0].identity()]
        self.build_orbit()

    def build_orbit(self):
        """Breadth first search for the orbit of the base point.
        """
        queue = deque([self.basepoint])

        while queue:
            a = queue.popleft()
            t_a = self.transversal[self.orbit[a]]
            for gen in self.gens:
                b = gen.apply(a)
                if b in self.orbit:
                    continue
                self.orbit[b] = len(self.transversal)
                self.transversal.append(gen.compose(t_a))
                self.cfg.stats.products += 1
                queue.append(b)

    def __len__(self):
        return len(self.orbit)

    def __contains__(self, point):
        return point in self.orbit

    def transversal_for(self, point):
        """Return the element mapping the base point to point.
        """
        try:
            return self.transversal[self.orbit[point]]
        except KeyError:
            raise NotInOrbit(
                f'{point!r} not in the orbit of {self.basepoint!r}') from None

    def move_to_basepoint(self, element):
        """Multiply element by a transversal element so it fixes the base point.

        Raises NotInOrbit if the base point's image is not in the orbit.
        """
        t = self.transversal_for(element.apply(self.basepoint))
        self.cfg.stats.products += 1
        return t.inverse().compose(element)

    def schreier_gens(self):
        """Return generators for the stabilizer of the base point.

        For every orbit point a and generator g this is t_b^-1 g t_a with
        b = g a. The result fixes the base point.
        """
        out = []
        seen = set()
        for a, i in self.orbit.items():
            t_a = self.transversal[i]
            for gen in self.gens:
                t_b = self.transversal_for(gen.apply(a))
                schreier_gen = t_b.inverse().compose(gen).compose(t_a)
                self.cfg.stats.products += 2

                if self.cfg.drop_trivial_schreier_gens:
                    if schreier_gen.is_identity():
                        continue
                if self.cfg.dedupe_schreier_gens:
                    key = action(schreier_gen)
                    if key in seen:
                        continue
                    seen.add(key)

                out.append(schreier_gen)

        self.cfg.stats.schreier_gens += len(out)
        return out

    def __str__(self):
        orbit = ' '.join(map(str, self.orbit))
        gens = ' '.join(str(action(gen)) for gen in self.gens)
        return f'[{self.basepoint}; < {gens} >; {orbit}]'


@dataclass(frozen=True)
class SiftResult:
    """Outcome of sifting an element through a stabilizer chain.

    `level` is None for members. Otherwise it is the index of the level whose
    orbit did not contain the image of its base point, or the depth of the
    chain if every level succeeded but the residue is not the identity.
    """
    residue: Any
    level: Optional[int] = None

    @property
    def is_member(self):
        return self.level is None


class Group:
    """A permutation group given by generators acting on a domain.

    The stabilizer chain is built when the group is created and not changed
    afterwards.

    The base parameter specifies a prefix of the base. Points of the prefix
    that are fixed by the generators of their level are skipped. The base is
    extended by the first point of the domain moved by some generator until
    all generators of the last level fix every point.
    """
    def __init__(self, domain, generators, cfg=None, base=()):
        self.cfg = cfg or Config()
        self.domain = tuple(dict.fromkeys(domain))
        self.generators = tuple(generators)

        for i, gen in enumerate(self.generators):
            if not self.acts_on_domain(gen):
                raise OutOfDomain(
                    f'generator {i} ({action(gen)}) does not act on the '
                    f'domain {list(self.domain)!r}')

        for point in base:
            if point not in self.domain:
                raise OutOfDomain(
                    f'base point {point!r} is not in the domain', point=point)

        levels = []
        prefix = deque(base)
        gens = list(self.generators)

        while gens:
            basepoint = self.find_basepoint(gens, prefix)
            if basepoint is None:
                break
            level = Level(basepoint, gens, self.cfg)
            gens = level.schreier_gens()
            _logger.debug(
                'level %d: base point %r, orbit size %d, %d Schreier generators',
                len(levels), basepoint, len(level), len(gens))
            levels.append(level)

        self.levels = tuple(levels)
        _logger.debug(
            'built stabilizer chain with base %r, group order %d',
            self.base(), self.order())

    def acts_on_domain(self, element):
        """Return whether element permutes exactly the points of the domain.

        Elements that don't expose their domain are assumed to.
        """
        domain = getattr(action(element), 'domain', None)
        if domain is None:
            return True
        return set(domain) == set(self.domain)

    def find_basepoint(self, gens, prefix=()):
        """Return the next base point for a level with the given generators.

        Consumes points of prefix until one is moved. Returns None if every
        point is fixed.
        """
        while prefix:
            a = prefix.popleft()
            if any(gen.apply(a) != a for gen in gens):
                return a
        for a in self.domain:
            for gen in gens:
                if gen.apply(a) != a:
                    return a
        return None

    def base(self):
        """Return the base points of the stabilizer chain.
        """
        return [level.basepoint for level in self.levels]

    def order(self):
        """Compute the order of the group.
        """
        order = 1
        for level in self.levels:
            order *= len(level)
        return order

    def strip(self, element):
        """Sift element through the stabilizer chain.

        Returns a SiftResult holding the residue. The element is a member iff
        the residue is the identity. For a member, the residue's program is
        the inverse of a program for element, relative to element's own
        program.

        An element acting on other points than the group is not a member, it
        fails at level 0.
        """
        self.cfg.stats.sifts += 1
        if not self.acts_on_domain(element):
            _logger.debug('sifting stopped, %s acts on other points',
                          action(element))
            return SiftResult(element, 0)

        for depth, level in enumerate(self.levels):
            try:
                element = level.move_to_basepoint(element)
            except NotInOrbit:
                _logger.debug('sifting stopped outside the orbit at level %d',
                              depth)
                return SiftResult(element, depth)

        if element.is_identity():
            return SiftResult(element)

        _logger.debug('sifting left a nontrivial residue %s', action(element))
        return SiftResult(element, len(self.levels))

    def is_member(self, element):
        return self.strip(element).is_member

    def solve(self, permutation):
        """Write a permutation as a program in the generators.

        The generators need to be SLPPermutations. Returns None if the
        permutation is not a member of the group.
        """
        if not all(isinstance(g, SLPPermutation) for g in self.generators):
            raise TypeError('solving needs SLPPermutation generators')
        result = self.strip(SLPPermutation(IDENTITY, permutation))
        if not result.is_member:
            return None
        return result.residue.slp.invert()

    def __str__(self):
        return '<\n%s>\n' % ''.join(f'{level}\n' for level in self.levels)
