"""A binary tree filled level by level."""

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinaryTree:
    """Binary tree whose insertions fill the first free slot in level order."""

    def __init__(self, values=()):
        self._root = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value):
        """Add ``value`` at the first empty position in level order."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        queue = deque([self._root])
        while queue:
            current = queue.popleft()
            if current.left is None:
                current.left = node
                return
            queue.append(current.left)
            if current.right is None:
                current.right = node
                return
            queue.append(current.right)

    def _walk(self, node, order):
        if node is None:
            return
        if order == "pre":
            yield node.value
        yield from self._walk(node.left, order)
        if order == "in":
            yield node.value
        yield from self._walk(node.right, order)
        if order == "post":
            yield node.value

    def inorder(self):
        """Return values in left, node, right order."""
        return list(self._walk(self._root, "in"))

    def preorder(self):
        """Return values in node, left, right order."""
        return list(self._walk(self._root, "pre"))

    def postorder(self):
        """Return values in left, right, node order."""
        return list(self._walk(self._root, "post"))

    def level_order(self):
        """Return values level by level, left to right."""
        if self._root is None:
            return []
        values = []
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            values.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return values

    def height(self):
        """Return the number of nodes on the longest root-to-leaf path."""

        def depth(node):
            if node is None:
                return 0
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self._root)

    def clear(self):
        """Remove every node."""
        self._root = None
        self._size = 0

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return value in self._walk(self._root, "pre")