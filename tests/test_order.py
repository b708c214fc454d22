from hypothesis import given, strategies as st
import pytest

from ordered_tree import AVLTree, Ordering


def test_predicates_must_be_callable():
    with pytest.raises(TypeError):
        Ordering(None, lambda a, b: a > b)


@given(st.integers(), st.integers())
def test_natural(a, b):
    order = Ordering.natural()
    assert order.is_lesser(a, b) == (a < b)
    assert order.is_greater(a, b) == (a > b)
    assert order.equal(a, b) == (a == b)


@given(st.integers(), st.integers())
def test_from_comparator(a, b):
    order = Ordering.from_comparator(lambda x, y: (x > y) - (x < y))
    assert order.is_lesser(a, b) == (a < b)
    assert order.is_greater(a, b) == (a > b)


@given(st.integers(), st.integers())
def test_reversed(a, b):
    order = Ordering.natural().reversed()
    assert order.is_lesser(a, b) == (a > b)
    assert order.is_greater(a, b) == (a < b)


@given(st.lists(st.text()))
def test_from_key_orders_tree(words):
    tree = AVLTree(ordering=Ordering.from_key(len))
    for w in words:
        tree.insert(w)

    assert [len(w) for w in tree] == sorted(len(w) for w in words)
    assert tree.is_balanced()
