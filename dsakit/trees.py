"""Binary tree node type and classic queries and traversals over it.

Every function walks the tree without recursion, so very deep trees
(long chains) do not hit the interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _postorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield the nodes of the tree in post-order."""
    if root is None:
        return
    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def _child_heights(root: Optional[TreeNode]) -> Iterator[tuple[int, int]]:
    """Yield, for each node in post-order, the heights of its two subtrees."""
    heights: dict[int, int] = {}
    for node in _postorder(root):
        left = heights.pop(id(node.left), 0) if node.left is not None else 0
        right = heights.pop(id(node.right), 0) if node.right is not None else 0
        heights[id(node)] = 1 + max(left, right)
        yield left, right


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    depth = 0
    for left, right in _child_heights(root):
        depth = 1 + max(left, right)
    return depth


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if at every node the subtree heights differ by at most one."""
    return all(abs(left - right) <= 1 for left, right in _child_heights(root))


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    return max((left + right for left, right in _child_heights(root)), default=0)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and the same values."""
    pairs: list[tuple[Optional[TreeNode], Optional[TreeNode]]] = [(p, q)]
    while pairs:
        a, b = pairs.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pairs.append((a.right, b.right))
        pairs.append((a.left, b.left))
    return True


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in in-order (left, node, right)."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in pre-order (node, left, right)."""
    if root is None:
        return []
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values level by level, alternating left-to-right and right-to-left."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue: deque[TreeNode] = deque([root])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        if len(levels) % 2:
            level.reverse()
        levels.append(level)
    return levels