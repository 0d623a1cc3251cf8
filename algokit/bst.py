"""An unbalanced binary search tree with iterative traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

__all__ = ["BinarySearchTree"]

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinarySearchTree(Generic[T]):
    """A binary search tree; values equal to a node go into its right subtree."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> None:
        """Add ``value`` as a new leaf."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if current.value > value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _find(self, value: T) -> tuple[Optional[_Node[T]], Optional[_Node[T]]]:
        """Return the first node holding ``value`` and its parent."""
        parent: Optional[_Node[T]] = None
        current = self._root
        while current is not None:
            if current.value == value:
                return current, parent
            parent = current
            current = current.left if current.value > value else current.right
        return None, None

    def search(self, value: T) -> bool:
        """Tell whether ``value`` is stored in the tree."""
        node, _ = self._find(value)
        return node is not None

    def _replace_child(
        self, parent: Optional[_Node[T]], child: _Node[T], new: Optional[_Node[T]]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is child:
            parent.left = new
        else:
            parent.right = new

    def delete(self, value: T) -> None:
        """Remove one node holding ``value``.

        A node with two children takes the value of its in-order successor,
        which is then removed in its place.
        """
        if self._root is None:
            raise ValueError("delete from an empty tree")
        node, parent = self._find(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the tree")
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            node, parent = successor, successor_parent
        child = node.left if node.left is not None else node.right
        self._replace_child(parent, node, child)
        self._size -= 1

    def preorder(self) -> Iterator[T]:
        """Yield values node first, then left subtree, then right subtree."""
        stack: list[_Node[T]] = [self._root] if self._root is not None else []
        while stack:
            node: Optional[_Node[T]] = stack.pop()
            while node is not None:
                yield node.value
                if node.right is not None:
                    stack.append(node.right)
                node = node.left

    def inorder(self) -> Iterator[T]:
        """Yield values in ascending order."""
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[T]:
        """Yield values left subtree first, then right subtree, then node."""
        if self._root is None:
            return
        stack: list[tuple[_Node[T], bool]] = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def __contains__(self, value: object) -> bool:
        return self.search(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self.inorder())!r})"