from . import order
from . import tree

from .order import Ordering
from .tree import Tree, TreeNode, AVLTree, TreeIter

__all__ = [
    "Ordering",
    "Tree",
    "TreeNode",
    "AVLTree",
    "TreeIter",
]
