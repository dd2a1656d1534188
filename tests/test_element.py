from slpsims import (
    IDENTITY, Generator, GroupElement, Inverse, Morphism, Permutation,
    Product, SLPPermutation, Word,
)


def test_is_identity_ignores_program(perm):
    not_identity = SLPPermutation(Generator(1), perm(2, (0, 1)))
    assert not not_identity.is_identity()

    identity = SLPPermutation(IDENTITY, perm(2))
    assert identity.is_identity()

    # a nontrivial program for the identity is still the identity
    g = SLPPermutation.generator(0, perm(2, (0, 1)))
    assert g.compose(g).is_identity()


def test_compose_both_halves(perm):
    first = SLPPermutation(Generator(1), perm(3, (0, 1)))
    second = SLPPermutation(Generator(2), perm(3, (1, 2)))

    product = first.compose(second)

    assert product.slp == Product(Generator(1), Generator(2))
    assert product.permutation == perm(3, (0, 1, 2))


def test_inverse_both_halves(perm):
    first = SLPPermutation(Generator(1), perm(3, (0, 1, 2)))
    inverse = first.inverse()

    assert inverse.slp == Inverse(Generator(1))
    assert inverse.permutation == perm(3, (2, 1, 0))
    assert first.compose(inverse).is_identity()


def test_identity(perm):
    g = SLPPermutation.generator(0, perm(4, (0, 3)))
    e = g.identity()
    assert e.slp == IDENTITY
    assert e.permutation == perm(4)


def test_apply(perm):
    p = SLPPermutation(Generator(1), perm(3, (0, 1, 2)))
    assert p.apply(0) == 1
    assert p.apply(1) == 2
    assert p.apply(2) == 0


def test_programs_are_shared(perm):
    g = SLPPermutation.generator(0, perm(3, (0, 1)))
    h = g.compose(g)
    assert h.slp.left is g.slp
    assert h.inverse().slp.operand is h.slp


def test_group_element_protocol(perm):
    assert isinstance(perm(2), GroupElement)
    assert isinstance(SLPPermutation(IDENTITY, perm(2)), GroupElement)
    assert not isinstance(Word(), GroupElement)


def test_transform(perm):
    t = SLPPermutation.generator(0, perm(3, (0, 1)))
    r = SLPPermutation.generator(1, perm(3, (0, 1, 2)))
    morphism = Morphism({0: 't', 1: 'r'})

    word = t.compose(r).compose(r.inverse()).compose(r).transform(morphism)

    assert word == Word([('t', 1), ('r', 1)])


def test_program_evaluates_to_permutation(perm):
    t = SLPPermutation.generator(0, perm(5, (0, 1)))
    r = SLPPermutation.generator(1, perm(5, (0, 1, 2, 3, 4)))
    x = r.compose(t).inverse().compose(r).compose(r).compose(t.inverse())

    word = x.transform(Morphism({0: 't', 1: 'r'}))

    assert word.replay({'t': t.permutation, 'r': r.permutation}) == x.permutation


def test_str(perm):
    g = SLPPermutation.generator(0, perm(3, (0, 1)))
    assert str(g) == '(0 1) = G_0'
    assert isinstance(g.permutation, Permutation)


def test_equality_ignores_program(perm):
    g = SLPPermutation.generator(0, perm(2, (0, 1)))
    e = SLPPermutation(IDENTITY, perm(2))

    assert g.compose(g) == e
    assert hash(g.compose(g)) == hash(e)
    assert len({g.compose(g), e, g.identity()}) == 1
    assert g != e
