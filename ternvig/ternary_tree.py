"""Ternary tree with a shared empty sentinel and prefix-order traversal."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Iterator, List, TypeVar

T = TypeVar("T")

_LEFT, _MIDDLE, _RIGHT = range(3)


class TreeDomainError(ValueError):
    """Raised when an operation is not defined for the tree it is applied to."""


class TernaryTree(Generic[T]):
    """A node holding a key and three subtrees; empty subtrees are ``NIL``."""

    NIL: ClassVar[TernaryTree[Any]]

    __slots__ = ("_key", "_subtrees")

    def __init__(self, key: T) -> None:
        self._key = key
        self._subtrees: List[TernaryTree[T]] = [TernaryTree.NIL] * 3

    def __repr__(self) -> str:
        if self.is_empty():
            return "TernaryTree.NIL"
        return f"TernaryTree({self._key!r})"

    @property
    def key(self) -> T:
        """The payload of this node; the empty tree has none."""
        if self.is_empty():
            raise TreeDomainError("Tree is empty")
        return self._key

    @property
    def left(self) -> TernaryTree[T]:
        return self._subtrees[_LEFT]

    @property
    def middle(self) -> TernaryTree[T]:
        return self._subtrees[_MIDDLE]

    @property
    def right(self) -> TernaryTree[T]:
        return self._subtrees[_RIGHT]

    def add_left(self, subtree: TernaryTree[T]) -> None:
        self._add_subtree(_LEFT, subtree)

    def add_middle(self, subtree: TernaryTree[T]) -> None:
        self._add_subtree(_MIDDLE, subtree)

    def add_right(self, subtree: TernaryTree[T]) -> None:
        self._add_subtree(_RIGHT, subtree)

    def remove_left(self) -> TernaryTree[T]:
        return self._remove_subtree(_LEFT)

    def remove_middle(self) -> TernaryTree[T]:
        return self._remove_subtree(_MIDDLE)

    def remove_right(self) -> TernaryTree[T]:
        return self._remove_subtree(_RIGHT)

    def _add_subtree(self, index: int, subtree: TernaryTree[T]) -> None:
        if self.is_empty():
            raise TreeDomainError("Operation not supported")
        if not self._subtrees[index].is_empty():
            raise TreeDomainError("Subtree is not NIL")
        self._subtrees[index] = subtree

    def _remove_subtree(self, index: int) -> TernaryTree[T]:
        removed = self._subtrees[index]
        if removed.is_empty():
            raise TreeDomainError("Subtree is NIL")
        self._subtrees[index] = TernaryTree.NIL
        return removed

    def is_empty(self) -> bool:
        """True only for the ``NIL`` sentinel."""
        return self is TernaryTree.NIL

    def is_leaf(self) -> bool:
        """True when all three subtrees are empty."""
        return all(subtree.is_empty() for subtree in self._subtrees)

    def height(self) -> int:
        """Number of edges on the longest path down from this node."""
        if self.is_empty():
            raise TreeDomainError("Operation not supported")
        if self.is_leaf():
            return 0
        return 1 + max(
            0 if subtree.is_empty() else subtree.height()
            for subtree in self._subtrees
        )

    def clone(self) -> TernaryTree[T]:
        """Return a deep copy; empty subtrees stay the shared ``NIL``."""
        if self.is_empty():
            raise TreeDomainError("NIL as source not permitted.")
        copy: TernaryTree[T] = TernaryTree(self._key)
        copy._subtrees = [
            subtree if subtree.is_empty() else subtree.clone()
            for subtree in self._subtrees
        ]
        return copy

    def assign(self, other: TernaryTree[T]) -> TernaryTree[T]:
        """Replace this tree's contents with a deep copy of ``other``."""
        if other.is_empty():
            raise TreeDomainError("NIL as source not permitted.")
        if self.is_empty():
            raise TreeDomainError("Operation not supported")
        if other is self:
            return self
        self._key = other._key
        self._subtrees = [
            subtree if subtree.is_empty() else subtree.clone()
            for subtree in other._subtrees
        ]
        return self

    def take(self) -> TernaryTree[T]:
        """Move key and subtrees into a new tree, leaving this one a leaf."""
        if self.is_empty():
            raise TreeDomainError("NIL as source not permitted.")
        moved: TernaryTree[T] = TernaryTree(self._key)
        moved._subtrees = self._subtrees
        self._subtrees = [TernaryTree.NIL] * 3
        return moved

    def __iter__(self) -> Iterator[T]:
        return PrefixIterator(self)


def _make_nil() -> TernaryTree[Any]:
    nil: TernaryTree[Any] = object.__new__(TernaryTree)
    nil._key = None
    nil._subtrees = [nil, nil, nil]
    return nil


TernaryTree.NIL = _make_nil()


class PrefixIterator(Generic[T]):
    """Yields keys in prefix order: node, then left, middle and right subtrees."""

    __slots__ = ("_tree", "_stack")

    def __init__(self, tree: TernaryTree[T]) -> None:
        self._tree = tree
        self._stack: List[TernaryTree[T]] = [] if tree.is_empty() else [tree]

    def __iter__(self) -> PrefixIterator[T]:
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        for subtree in (node.right, node.middle, node.left):
            if not subtree.is_empty():
                self._stack.append(subtree)
        return node.key