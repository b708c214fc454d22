from __future__ import annotations

import logging
from typing import Optional, TypeVar

from ..order import Ordering, Predicate
from .base import Tree, TreeNode

T = TypeVar("T")

logger = logging.getLogger(__name__)


class AVLTree(Tree):
    """Height-balanced binary search tree.

    After every structural change each node on the modified path is checked
    bottom-up; a node whose subtree heights differ by more than one is fixed
    with a single or double rotation.

    By default a double rotation is used when the taller child leans towards
    the inside of the tree, which keeps every node balanced. With
    `inner_child_rotation=True` a double rotation is used whenever the taller
    child has any inner subtree at all. That rule looks only at the shape of
    the taller child, so nodes moved by a needless double rotation can be
    left unbalanced.
    """

    def __init__(
        self,
        is_lesser: Optional[Predicate] = None,
        is_greater: Optional[Predicate] = None,
        *,
        ordering: Optional[Ordering] = None,
        inner_child_rotation: bool = False
    ):
        super().__init__(is_lesser, is_greater, ordering=ordering)
        self._inner_child_rotation: bool = inner_child_rotation

    @property
    def inner_child_rotation(self) -> bool:
        return self._inner_child_rotation

    def _empty_like(self) -> AVLTree[T]:
        return self.__class__(
            ordering=self._ordering, inner_child_rotation=self._inner_child_rotation
        )

    def _rotate_left(self, node: TreeNode[T]) -> TreeNode[T]:
        #  a            c
        #   \          / \
        #    c   ->   a   d
        #   / \        \
        #  b   d        b
        pivot = node.right
        assert pivot is not None, "left rotation at {!r} without a greater child".format(
            node.value
        )

        node.right = pivot.left
        pivot.left = node

        node.update_height()
        pivot.update_height()
        return pivot

    def _rotate_right(self, node: TreeNode[T]) -> TreeNode[T]:
        #      z        x
        #     /        / \
        #    x   ->   w   z
        #   / \          /
        #  w   y        y
        pivot = node.left
        assert pivot is not None, "right rotation at {!r} without a lesser child".format(
            node.value
        )

        node.left = pivot.right
        pivot.right = node

        node.update_height()
        pivot.update_height()
        return pivot

    def _double_rotation_needed(
        self, inner: Optional[TreeNode[T]], leans_inward: bool
    ) -> bool:
        if self._inner_child_rotation:
            return inner is not None
        return leans_inward

    def _rebalance(self, node: TreeNode[T]) -> TreeNode[T]:
        node.update_height()
        balance = node.balance()

        if balance < -1:
            child = node.right
            if self._double_rotation_needed(child.left, child.balance() > 0):
                logger.debug("right-left rotation at %r", node.value)
                node.right = self._rotate_right(child)
            else:
                logger.debug("right-right rotation at %r", node.value)
            return self._rotate_left(node)

        if balance > 1:
            child = node.left
            if self._double_rotation_needed(child.right, child.balance() < 0):
                logger.debug("left-right rotation at %r", node.value)
                node.left = self._rotate_left(child)
            else:
                logger.debug("left-left rotation at %r", node.value)
            return self._rotate_right(node)

        return node

    def is_balanced(self) -> bool:
        """Check the height balance of every node, walking the whole tree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if abs(node.balance()) > 1:
                return False
            stack.extend(c for c in (node.left, node.right) if c is not None)
        return True

    def _print_node(self, node: TreeNode[T]) -> str:
        return "{}: {:2d}".format(node.value, node.balance())
