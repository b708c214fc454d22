import logging
import os
import sys

import numpy as np

from ordered_tree import AVLTree

DEFAULT_VALUES = [8, 6, 7, 5, 3, 0, 9, 4, 2, 1]


def display_tree(tree: AVLTree):
    print("size={} height={}".format(len(tree), tree.height()))
    print(tree.print())

    buf = np.zeros(len(tree), dtype=int)
    for name, export in (
        ("inorder", tree.to_array_inorder),
        ("preorder", tree.to_array_preorder),
        ("postorder", tree.to_array_postorder),
        ("reverse", tree.to_array_in_reverse_order),
    ):
        export(buf)
        print("{:<10s} {}".format(name + ":", " ".join(map(str, buf))))


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    values = [int(arg) for arg in sys.argv[1:]] or DEFAULT_VALUES

    for inner_child_rotation in (False, True):
        tree = AVLTree(inner_child_rotation=inner_child_rotation)
        heights = []
        for v in values:
            tree.insert(v)
            heights.append(tree.height())

        print(
            "AVLTree (inner_child_rotation={}), heights after each insert: {}".format(
                inner_child_rotation, heights
            )
        )
        display_tree(tree)
        print("\n")
