"""Binary tree problems solved by depth-first and breadth-first traversal."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path, recursively."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_depth_bfs(root: Optional[TreeNode]) -> int:
    """Return the depth of the tree by counting its levels breadth first."""
    if root is None:
        return 0
    level: list[TreeNode] = [root]
    depth = 0
    while level:
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        depth += 1
    return depth


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place, depth first, and return its root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    invert_tree(root.left)
    invert_tree(root.right)
    return root


def invert_tree_bfs(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place, breadth first, and return its root."""
    if root is None:
        return None
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        node.left, node.right = node.right, node.left
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root