from .base import Tree, TreeNode
from .avl import AVLTree
from .iter import TreeIter
