"""Derived traversals over decoded trees, built on ``foldl``."""

from collections.abc import Callable, Iterator
from typing import TypeVar

from figma_api.models.node import Node
from figma_api.models.tree import Tree, foldl

T = TypeVar("T")


def flatten(t: Tree[T]) -> list[T]:
    """All values in depth-first pre-order."""

    def collect(value: T, acc: list[T]) -> list[T]:
        acc.append(value)
        return acc

    return foldl(collect, [], t)


def count_nodes(t: Tree[T]) -> int:
    return foldl(lambda _value, acc: acc + 1, 0, t)


def node_ids(t: Tree[Node]) -> list[str]:
    return [n.id for n in flatten(t)]


def filter_nodes(t: Tree[T], predicate: Callable[[T], bool]) -> list[T]:
    return [value for value in flatten(t) if predicate(value)]


def iter_subtrees(t: Tree[T]) -> Iterator[Tree[T]]:
    """Yield every subtree (including ``t``) in pre-order."""
    stack = [t]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def find_subtree(t: Tree[Node], node_id: str) -> Tree[Node] | None:
    """Return the subtree rooted at ``node_id``, or None."""
    for sub in iter_subtrees(t):
        if sub.node.id == node_id:
            return sub
    return None


def find_node(t: Tree[Node], node_id: str) -> Node | None:
    sub = find_subtree(t, node_id)
    return sub.node if sub is not None else None
