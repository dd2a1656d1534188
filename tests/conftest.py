import pytest

from slpsims import Permutation


def cycle_perm(n, *cycles):
    """Return the product of disjoint cycles acting on 0..n-1.
    """
    images = {i: i for i in range(n)}
    for cycle in cycles:
        for i, j in zip(cycle, cycle[1:] + cycle[:1]):
            images[i] = j
    return Permutation(images)


@pytest.fixture(scope="session")
def perm():
    return cycle_perm
