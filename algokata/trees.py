"""Binary trees and traversals over them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def largest_values(root: Optional[TreeNode]) -> list[int]:
    """Return the largest value on each level, top to bottom."""
    result: list[int] = []
    if root is None:
        return result
    level = deque([root])
    while level:
        result.append(max(node.val for node in level))
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return result


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _leaves(root: Optional[TreeNode]) -> Iterator[int]:
    if root is None:
        return
    if root.left is None and root.right is None:
        yield root.val
    yield from _leaves(root.left)
    yield from _leaves(root.right)


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Tell whether both trees have the same leaf values from left to right."""
    return list(_leaves(root1)) == list(_leaves(root2))


def good_nodes(root: TreeNode) -> int:
    """Count nodes with no larger value on the path from the root to them."""
    if root is None:
        raise ValueError("good_nodes needs a non-empty tree")

    def count(node: Optional[TreeNode], highest: int) -> int:
        if node is None:
            return 0
        good = 1 if node.val >= highest else 0
        highest = max(highest, node.val)
        return good + count(node.left, highest) + count(node.right, highest)

    return count(root, root.val)