"""
Straight-line programs.

Forming products of words directly makes them grow exponentially when
elements are repeatedly multiplied, as happens while building a stabilizer
chain. Instead we only record the structure of the calculation as a tree of
immutable nodes. Sub-trees are shared between the trees built from them,
never copied. When the actual result is needed, `evaluate` folds the tree into
any group given images for the generators.
"""

from dataclasses import dataclass

from .errors import UnmappedGenerator


class SLP:
    """Base class of the straight-line program nodes.
    """

    def product(self, other):
        return Product(self, other)

    def invert(self):
        return Inverse(self)


@dataclass(frozen=True)
class Identity(SLP):
    def __str__(self):
        return 'Id'


@dataclass(frozen=True)
class Generator(SLP):
    index: int

    def __str__(self):
        return f'G_{self.index}'


@dataclass(frozen=True)
class Product(SLP):
    left: SLP
    right: SLP

    def __str__(self):
        return f'({self.left}) * ({self.right})'


@dataclass(frozen=True)
class Inverse(SLP):
    operand: SLP

    def __str__(self):
        return f'({self.operand})^-1'


IDENTITY = Identity()


def product(a, b):
    """Return the SLP for the product of a and b.
    """
    return Product(a, b)


def invert(a):
    """Return the SLP for the inverse of a.
    """
    return Inverse(a)


def evaluate(slp, images, identity):
    """Evaluate an SLP in some group.

    `images[i]` is the image of generator i and `identity` the identity
    element of the target group. Elements of the target group need `compose`
    and `inverse`.

    Every node is evaluated once, even when it is shared by several parents.
    The tree is walked with an explicit stack, deep programs are common.
    """
    done = {}
    stack = [slp]

    while stack:
        node = stack[-1]
        key = id(node)
        if key in done:
            stack.pop()
            continue

        if isinstance(node, Identity):
            done[key] = identity
        elif isinstance(node, Generator):
            try:
                done[key] = images[node.index]
            except (KeyError, IndexError):
                raise UnmappedGenerator(
                    f'generator {node.index!r} has no image',
                    generator=node.index) from None
        elif isinstance(node, Product):
            missing = [c for c in (node.right, node.left) if id(c) not in done]
            if missing:
                stack.extend(missing)
                continue
            done[key] = done[id(node.left)].compose(done[id(node.right)])
        elif isinstance(node, Inverse):
            if id(node.operand) not in done:
                stack.append(node.operand)
                continue
            done[key] = done[id(node.operand)].inverse()
        else:
            raise TypeError(f'not a straight-line program: {node!r}')

        stack.pop()

    return done[id(slp)]
