"""
Permutations of a finite domain.

A permutation is stored as a pair of dictionaries, the forward images and the
backward images, so both `apply` and `inverse` are cheap. Points can be any
hashable value. The domain keeps the order in which the points were given,
which is also the order used when searching for base points.

Products act from right to left: `p.compose(q)` first applies q, then p.
"""

from .errors import MalformedPermutation, OutOfDomain


class Permutation:
    """A bijection of a finite domain onto itself.
    """
    __slots__ = ('_images', '_preimages', '_hash')

    def __init__(self, pairs):
        if hasattr(pairs, 'items'):
            pairs = pairs.items()

        images = {}
        preimages = {}
        for source, image in pairs:
            if source in images:
                raise MalformedPermutation(
                    f'point {source!r} is given more than one image')
            if image in preimages:
                raise MalformedPermutation(
                    f'image {image!r} is used more than once')
            images[source] = image
            preimages[image] = source

        for image in preimages:
            if image not in images:
                raise MalformedPermutation(
                    f'image {image!r} is missing an image of its own')

        self._images = images
        self._preimages = preimages
        self._hash = None

    @classmethod
    def _from_dicts(cls, images, preimages):
        p = cls.__new__(cls)
        p._images = images
        p._preimages = preimages
        p._hash = None
        return p

    @classmethod
    def identity_on(cls, domain):
        """Return the identity permutation on the given points.
        """
        images = {a: a for a in domain}
        return cls._from_dicts(images, dict(images))

    @property
    def domain(self):
        return tuple(self._images)

    def identity(self):
        """Return the identity permutation on the domain of this permutation.
        """
        return Permutation.identity_on(self._images)

    def apply(self, point):
        try:
            return self._images[point]
        except (KeyError, TypeError):
            raise OutOfDomain(
                f'point {point!r} is not in the domain', point=point) from None

    def compose(self, other):
        """Return the permutation mapping a to self.apply(other.apply(a)).
        """
        if self._images.keys() != other._images.keys():
            foreign = next(iter(
                self._images.keys() ^ other._images.keys()))
            raise OutOfDomain(
                'cannot compose permutations of different domains',
                point=foreign)
        images = {a: self._images[b] for a, b in other._images.items()}
        preimages = {b: a for a, b in images.items()}
        return Permutation._from_dicts(images, preimages)

    def inverse(self):
        return Permutation._from_dicts(self._preimages, self._images)

    def is_identity(self):
        return all(a == b for a, b in self._images.items())

    def support(self):
        """Return the points moved by this permutation, in domain order.
        """
        return [a for a, b in self._images.items() if a != b]

    def cycles(self):
        """Return the nontrivial cycles of this permutation.
        """
        seen = set()
        out = []
        for a in self._images:
            if a in seen:
                continue
            seen.add(a)
            b = self._images[a]
            if b == a:
                continue
            cycle = [a]
            while b != a:
                seen.add(b)
                cycle.append(b)
                b = self._images[b]
            out.append(tuple(cycle))
        return out

    def __eq__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._images == other._images

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(frozenset(self._images.items()))
        return self._hash

    def __len__(self):
        return len(self._images)

    def __str__(self):
        cycles = self.cycles()
        if not cycles:
            return 'Id'
        return ''.join(
            '(%s)' % ' '.join(map(str, cycle)) for cycle in cycles)

    def __repr__(self):
        return f'Permutation({list(self._images.items())!r})'
