from __future__ import annotations

from typing import List, Optional

from . import base


class TreeIter(object):
    """Lazy traversal over a subtree, driven by an explicit node stack.

    The tree must not be mutated while an iterator over it is in use.
    """

    INORDER = 0
    PREORDER = 1
    POSTORDER = 2
    REVERSE = 3

    def __init__(self, mode: int, root: Optional[base.TreeNode]):
        self._mode: int = mode
        self._stack: List[base.TreeNode] = []

        if mode == TreeIter.PREORDER:
            if root is not None:
                self._stack.append(root)
        elif mode == TreeIter.POSTORDER:
            self._descend_postorder(root)
        elif mode in (TreeIter.INORDER, TreeIter.REVERSE):
            self._descend(root)
        else:
            raise ValueError("Unknown traversal mode: {}".format(mode))

    def _descend(self, node: Optional[base.TreeNode]):
        # push the spine leading to the next node in (reverse) inorder
        while node is not None:
            self._stack.append(node)
            if self._mode == TreeIter.INORDER:
                node = node.left
            else:
                node = node.right

    def _descend_postorder(self, node: Optional[base.TreeNode]):
        while node is not None:
            self._stack.append(node)
            if node.left is not None:
                node = node.left
            else:
                node = node.right

    def __iter__(self) -> TreeIter:
        return self

    def __next__(self):
        if not self._stack:
            raise StopIteration()

        node = self._stack.pop()

        if self._mode == TreeIter.INORDER:
            self._descend(node.right)
        elif self._mode == TreeIter.REVERSE:
            self._descend(node.left)
        elif self._mode == TreeIter.PREORDER:
            if node.right is not None:
                self._stack.append(node.right)
            if node.left is not None:
                self._stack.append(node.left)
        else:
            # the greater sibling is visited once the lesser subtree is done
            if self._stack and self._stack[-1].left is node:
                self._descend_postorder(self._stack[-1].right)

        return node.value
