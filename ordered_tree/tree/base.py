from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Generic, Iterator, MutableSequence, Optional, Tuple, TypeVar

import numpy as np

from ..order import Ordering, Predicate
from .iter import TreeIter

T = TypeVar("T")

logger = logging.getLogger(__name__)


def node_height(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return node.height


class TreeNode(Generic[T]):
    def __init__(self, value: T):
        self.value: T = value
        self.left: Optional[TreeNode[T]] = None
        self.right: Optional[TreeNode[T]] = None
        self.height: int = 1

    def update_height(self):
        self.height = 1 + max(node_height(self.left), node_height(self.right))

    def balance(self) -> int:
        """Height of the lesser subtree minus height of the greater subtree."""
        return node_height(self.left) - node_height(self.right)

    def __repr__(self) -> str:
        return "TreeNode({!r})".format(self.value)


class Tree(Generic[T], Collection):
    """A binary search tree ordered by a pair of caller-supplied predicates.

    Values for which `is_lesser` holds against a node go to its lesser
    (left) side; every other value, including one equal to the node's value,
    goes to the greater (right) side. Duplicates are therefore kept.

    This class performs no rebalancing. Subclasses restore their shape
    invariants by overriding `_rebalance`, which is called on every node of a
    modified path, bottom-up, and returns the node that should take its place.
    """

    def __init__(
        self,
        is_lesser: Optional[Predicate] = None,
        is_greater: Optional[Predicate] = None,
        *,
        ordering: Optional[Ordering[T]] = None
    ):
        if ordering is None:
            if is_lesser is None and is_greater is None:
                ordering = Ordering.natural()
            elif is_lesser is None or is_greater is None:
                raise TypeError("is_lesser and is_greater must be given together")
            else:
                ordering = Ordering(is_lesser, is_greater)

        self._ordering: Ordering[T] = ordering
        self._root: Optional[TreeNode[T]] = None

    @property
    def ordering(self) -> Ordering[T]:
        return self._ordering

    def _rebalance(self, node: TreeNode[T]) -> TreeNode[T]:
        node.update_height()
        return node

    def _empty_like(self) -> Tree[T]:
        return self.__class__(ordering=self._ordering)

    def _insert(self, node: Optional[TreeNode[T]], value: T) -> TreeNode[T]:
        if node is None:
            return TreeNode(value)

        if self._ordering.is_lesser(value, node.value):
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)

        return self._rebalance(node)

    def insert(self, value: T):
        """Insert a value. Values equal to an existing one are kept as well."""
        self._root = self._insert(self._root, value)

    def _remove_min(
        self, node: TreeNode[T]
    ) -> Tuple[TreeNode[T], Optional[TreeNode[T]]]:
        """Unlink the leftmost node of a subtree.

        Returns the unlinked node and the new root of the subtree.
        """
        if node.left is None:
            return (node, node.right)

        min_node, node.left = self._remove_min(node.left)
        return (min_node, self._rebalance(node))

    def _remove(
        self, node: Optional[TreeNode[T]], value: T
    ) -> Tuple[Optional[TreeNode[T]], bool]:
        if node is None:
            return (None, False)

        if self._ordering.is_lesser(value, node.value):
            node.left, removed = self._remove(node.left, value)
        elif self._ordering.is_greater(value, node.value):
            node.right, removed = self._remove(node.right, value)
        elif node.left is None:
            return (node.right, True)
        elif node.right is None:
            return (node.left, True)
        else:
            min_node, node.right = self._remove_min(node.right)
            node.value = min_node.value
            removed = True

        if not removed:
            return (node, False)
        return (self._rebalance(node), True)

    def remove(self, value: T) -> bool:
        """Remove one occurrence of a value.

        Returns whether a matching value was found and removed.
        """
        self._root, removed = self._remove(self._root, value)
        return removed

    def find(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if self._ordering.is_lesser(value, node.value):
                node = node.left
            elif self._ordering.is_greater(value, node.value):
                node = node.right
            else:
                return True
        return False

    def clear(self):
        if self._root is not None:
            logger.debug("clearing %s", self.__class__.__name__)
        self._root = None

    def _count(self, node: Optional[TreeNode[T]]) -> int:
        if node is None:
            return 0
        return self._count(node.left) + self._count(node.right) + 1

    def size(self) -> int:
        return self._count(self._root)

    def height(self) -> int:
        return node_height(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def inorder(self) -> Iterator[T]:
        return TreeIter(TreeIter.INORDER, self._root)

    def preorder(self) -> Iterator[T]:
        return TreeIter(TreeIter.PREORDER, self._root)

    def postorder(self) -> Iterator[T]:
        return TreeIter(TreeIter.POSTORDER, self._root)

    def reverse_order(self) -> Iterator[T]:
        return TreeIter(TreeIter.REVERSE, self._root)

    def _to_array(
        self, mode: int, out: Optional[MutableSequence], dtype
    ) -> MutableSequence:
        n = self.size()
        if out is None:
            out = np.empty(n, dtype=dtype)

        assert len(out) >= n, "output buffer too small (holds {}, need {})".format(
            len(out), n
        )

        for i, value in enumerate(TreeIter(mode, self._root)):
            out[i] = value
        return out

    def to_array_inorder(
        self, out: Optional[MutableSequence] = None, dtype=object
    ) -> MutableSequence:
        """Copy every value into `out` in ascending order.

        `out` must hold at least `size()` items; only the first `size()` slots
        are written. If `out` is omitted, a numpy array of exactly `size()`
        items is allocated with the given dtype. Returns the buffer.
        """
        return self._to_array(TreeIter.INORDER, out, dtype)

    def to_array_preorder(
        self, out: Optional[MutableSequence] = None, dtype=object
    ) -> MutableSequence:
        return self._to_array(TreeIter.PREORDER, out, dtype)

    def to_array_postorder(
        self, out: Optional[MutableSequence] = None, dtype=object
    ) -> MutableSequence:
        return self._to_array(TreeIter.POSTORDER, out, dtype)

    def to_array_in_reverse_order(
        self, out: Optional[MutableSequence] = None, dtype=object
    ) -> MutableSequence:
        return self._to_array(TreeIter.REVERSE, out, dtype)

    def copy(self) -> Tree[T]:
        """Deep-copy this tree by reinserting its values in postorder.

        The copy derives its own shape; no nodes are shared with this tree.
        """
        clone = self._empty_like()
        for value in self.postorder():
            clone.insert(value)
        return clone

    def assign(self, other: Tree[T]) -> Tree[T]:
        """Replace this tree's contents with a deep copy of `other`'s values.

        This tree keeps its own ordering; values are reinserted in `other`'s
        postorder.
        """
        if not isinstance(other, Tree):
            raise TypeError("can only assign from a Tree, not " + type(other).__name__)
        if other is self:
            return self

        self.clear()
        for value in other.postorder():
            self.insert(value)

        logger.debug("assigned %d values to %s", self.size(), self.__class__.__name__)
        return self

    def _print_node(self, node: TreeNode[T]) -> str:
        return str(node.value)

    def _print_recursive(self, node: TreeNode[T], level: int) -> str:
        ret = ""
        if node.left is not None:
            ret = self._print_recursive(node.left, level + 1)

        ret += ("    " * level) + self._print_node(node) + "\n"

        if node.right is not None:
            ret += self._print_recursive(node.right, level + 1)

        return ret

    def print(self) -> str:
        if self._root is not None:
            return self._print_recursive(self._root, 0)
        else:
            return "<empty tree>"

    def __contains__(self, value: T) -> bool:
        return self.find(value)

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def __reversed__(self) -> Iterator[T]:
        return self.reverse_order()

    def __len__(self) -> int:
        return self.size()

    def __copy__(self) -> Tree[T]:
        return self.copy()

    def __repr__(self) -> str:
        return "{}({})".format(self.__class__.__name__, list(self.inorder()))
