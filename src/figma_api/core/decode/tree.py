"""Decode a nested node JSON object into a ``Tree[Node]``."""

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from figma_api.core.decode.nodes import decode_node_fields
from figma_api.core.decode.primitives import expect_array, expect_object, required, string
from figma_api.errors import DecodeError, UnsupportedNodeTypeError
from figma_api.models.enums import NodeType
from figma_api.models.node import CONTAINER_TYPES, Node
from figma_api.models.tree import Tree


@dataclass
class _Pending:
    """A decoded node whose children are still being decoded."""

    node: Node
    raw_children: list[Any]
    path: tuple[str | int, ...]
    done: list[Tree[Node]] = field(default_factory=list)


def _node_type(obj: dict[str, Any]) -> NodeType:
    literal = required(obj, "type", string)
    try:
        return NodeType(literal)
    except ValueError:
        raise UnsupportedNodeTypeError(literal).within("type") from None


def _decode_one(value: Any) -> tuple[Node, list[Any]]:
    """Decode one node's own fields and return its raw children.

    Leaf variants never look at ``children``. A container without a
    ``children`` key (the server drops it below a ``depth`` limit) has none.
    """
    obj = expect_object(value)
    node_type = _node_type(obj)
    decoded = decode_node_fields(node_type, obj)
    if node_type not in CONTAINER_TYPES or obj.get("children") is None:
        return decoded, []
    try:
        return decoded, expect_array(obj["children"])
    except DecodeError as e:
        raise e.within("children") from None


def decode_node(value: Any) -> Node:
    """Decode a single node object, ignoring its subtree."""
    return _decode_one(value)[0]


def decode_tree(value: Any) -> Tree[Node]:
    """Decode a node object and all its descendants.

    Children keep their array order. Any failure anywhere in the subtree
    aborts the whole decode; the raised ``DecodeError`` carries the path to
    the offending value, e.g. ``children[1].children[0].strokes``.

    The walk uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit.
    """
    root, raw_children = _decode_one(value)
    stack = [_Pending(root, raw_children, ())]
    node_count = 1

    while True:
        top = stack[-1]
        index = len(top.done)
        if index < len(top.raw_children):
            path = (*top.path, "children", index)
            try:
                child, grandchildren = _decode_one(top.raw_children[index])
            except DecodeError as e:
                raise e.within(*path) from None
            node_count += 1
            if grandchildren:
                stack.append(_Pending(child, grandchildren, path))
            else:
                top.done.append(Tree(child))
            continue

        stack.pop()
        finished = Tree(top.node, tuple(top.done))
        if not stack:
            logger.debug("Decoded tree {!r}: {} nodes", root.name, node_count)
            return finished
        stack[-1].done.append(finished)
