"""Generic immutable multiway tree.

A ``Tree`` holds one value and an ordered tuple of child trees. It owns its
subtree exclusively: the decoder never shares a child between two parents.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
A = TypeVar("A")


@dataclass(frozen=True)
class Tree(Generic[T]):
    node: T
    children: tuple["Tree[T]", ...] = ()


def singleton(value: T) -> Tree[T]:
    """Build a tree with no children."""
    return Tree(value)


def tree(value: T, subtrees: Iterable[Tree[T]]) -> Tree[T]:
    """Build a tree from a value and its ordered child trees."""
    return Tree(value, tuple(subtrees))


def node(t: Tree[T]) -> T:
    return t.node


def children(t: Tree[T]) -> tuple[Tree[T], ...]:
    return t.children


def foldl(combine: Callable[[T, A], A], initial: A, t: Tree[T]) -> A:
    """Fold over every value in depth-first pre-order, left to right.

    A node is visited before its children, and each child's subtree is
    visited completely before its next sibling. ``combine`` receives the
    node value and the accumulator and returns the new accumulator.
    """
    acc = initial
    stack: list[Tree[T]] = [t]
    while stack:
        current = stack.pop()
        acc = combine(current.node, acc)
        # Reversed so the leftmost child is popped first.
        stack.extend(reversed(current.children))
    return acc
