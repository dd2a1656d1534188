"""
Free groups.

An element of a free group is a word of symbols and their inverses where no
symbol occurs next to its inverse. We store words as (symbol, exponent) pairs
where neighbouring pairs always have different symbols.

A `Morphism` assigns a symbol to every generator index, which maps a
straight-line program to the word it stands for.
"""

from .errors import UnmappedGenerator
from .slp import evaluate


def normalize(terms):
    """Reduce a sequence of (symbol, exponent) pairs.

    Neighbouring pairs of the same symbol are merged. Pairs with exponent 0
    are dropped, which can make the pairs around them neighbours.
    """
    out = []
    for symbol, exponent in terms:
        if out and out[-1][0] == symbol:
            exponent += out.pop()[1]
        if exponent:
            out.append((symbol, exponent))
    return tuple(out)


def power(x, n):
    """Take a group element to the nth power.
    """
    if n < 0:
        return power(x.inverse(), -n)

    out = None
    while n:
        if n & 1:
            out = x if out is None else out.compose(x)
        n >>= 1
        if n:
            x = x.compose(x)

    if out is None:
        return x.identity()
    return out


class Word:
    """An element of a free group.
    """
    __slots__ = ('terms',)

    def __init__(self, terms=()):
        self.terms = normalize(terms)

    @classmethod
    def generator(cls, symbol):
        return cls([(symbol, 1)])

    @classmethod
    def identity(cls):
        return cls()

    def compose(self, other):
        """Concatenate two words.

        Both words are reduced already, so only the pairs where they meet can
        cancel or merge.
        """
        left = list(self.terms)
        right = other.terms
        i = 0
        while left and i < len(right) and left[-1][0] == right[i][0]:
            symbol, exponent = left.pop()
            exponent += right[i][1]
            i += 1
            if exponent:
                left.append((symbol, exponent))
                break
        word = Word()
        word.terms = tuple(left) + right[i:]
        return word

    def inverse(self):
        word = Word()
        word.terms = tuple(
            (symbol, -exponent) for symbol, exponent in reversed(self.terms))
        return word

    def is_identity(self):
        return not self.terms

    def replay(self, images, identity=None):
        """Evaluate the word in some group.

        `images[symbol]` is the image of each symbol. The product is formed in
        the order of the word. The empty word evaluates to `identity`, which
        has to be given in that case.
        """
        out = identity
        for symbol, exponent in self.terms:
            try:
                image = images[symbol]
            except KeyError:
                raise UnmappedGenerator(
                    f'symbol {symbol!r} has no image',
                    generator=symbol) from None
            image = power(image, exponent)
            out = image if out is None else out.compose(image)
        if out is None:
            raise ValueError('the identity is needed to replay an empty word')
        return out

    def __iter__(self):
        return iter(self.terms)

    def __len__(self):
        return len(self.terms)

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self):
        return hash(self.terms)

    def __str__(self):
        if not self.terms:
            return 'Id'
        return ''.join(
            f'{symbol}^{exponent}' for symbol, exponent in self.terms)

    def __repr__(self):
        return f'Word({list(self.terms)!r})'


def check_symbol(symbol):
    """Raise an exception if symbol can't be rendered as a single token.
    """
    if not isinstance(symbol, str) or not symbol:
        raise ValueError(f'expected a non-empty string symbol, got {symbol!r}')
    if any(c.isspace() or c in '^()' for c in symbol):
        raise ValueError(f'symbol {symbol!r} is not a single token')


class Morphism:
    """Assignment of symbols to generator indices.
    """
    def __init__(self, symbols):
        if hasattr(symbols, 'items'):
            symbols = symbols.items()
        self.symbols = {}
        for index, symbol in symbols:
            check_symbol(symbol)
            self.symbols[index] = symbol
        self.images = {
            index: Word.generator(symbol)
            for index, symbol in self.symbols.items()}

    def evaluate(self, slp):
        """Map a straight-line program to a word.
        """
        return evaluate(slp, self.images, Word())

    def __getitem__(self, index):
        try:
            return self.symbols[index]
        except KeyError:
            raise UnmappedGenerator(
                f'generator {index!r} has no symbol', generator=index) from None

    def __contains__(self, index):
        return index in self.symbols

    def __len__(self):
        return len(self.symbols)

    def __repr__(self):
        return f'Morphism({self.symbols!r})'
