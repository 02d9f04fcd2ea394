"""Binary search trees and their traversals."""

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A tree node with links to its children and its parent."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    parent: Optional["Node"] = field(default=None, repr=False)


def insert(root: Optional[Node], value: Any) -> Node:
    """Insert ``value`` into the search tree at ``root`` and return the root.

    A value already present is ignored.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value, parent=node)
                return root
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value, parent=node)
                return root
            node = node.right
        else:
            return root


def _inorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: Optional[Node]) -> list:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: Optional[Node]) -> list:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[Node]) -> list:
    """Return the values in left, right, node order."""
    return list(_postorder(root))


def level_order(root: Optional[Node]) -> list:
    """Return the values level by level, each level from left to right."""
    values = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return values


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))