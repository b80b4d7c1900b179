"""Binary tree nodes and traversals."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return node values in preorder, using an explicit stack."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def preorder_recursive(root: TreeNode | None) -> list[Any]:
    """Return node values in preorder, by recursion."""
    return list(_preorder(root))


def inorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return node values in inorder, using an explicit stack."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def inorder_recursive(root: TreeNode | None) -> list[Any]:
    """Return node values in inorder, by recursion."""
    return list(_inorder(root))


def vertical_order(root: TreeNode | None) -> dict[int, list[Any]]:
    """Group values by horizontal distance from the root, in preorder.

    The root is at distance 0, a left child one less than its parent and a
    right child one more. Keys come in ascending order.
    """
    columns: dict[int, list[Any]] = defaultdict(list)

    def _visit(node: TreeNode | None, distance: int) -> None:
        if node is None:
            return
        columns[distance].append(node.value)
        _visit(node.left, distance - 1)
        _visit(node.right, distance + 1)

    _visit(root, 0)
    return {distance: columns[distance] for distance in sorted(columns)}


def vertical_order_levels(root: TreeNode | None) -> list[list[Any]]:
    """Return the vertical columns from leftmost to rightmost.

    Within a column, values appear in level order, left to right.
    """
    if root is None:
        return []
    columns: dict[int, list[Any]] = defaultdict(list)
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    lowest = highest = 0
    while queue:
        node, distance = queue.popleft()
        columns[distance].append(node.value)
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))
        lowest = min(lowest, distance)
        highest = max(highest, distance)
    return [columns[distance] for distance in range(lowest, highest + 1)]