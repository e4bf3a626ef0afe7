"""Render decoded trees as indented text outlines."""

import io

from figma_api.models.node import Node
from figma_api.models.tree import Tree


def render_outline(
    t: Tree[Node],
    *,
    max_depth: int | None = None,
    include_ids: bool = True,
    include_hidden: bool = True,
) -> str:
    """Render a tree as a bullet list, one node per line.

    Args:
        t: The tree to render.
        max_depth: Max levels below the root to include (None = unlimited).
        include_ids: Whether to append each node id.
        include_hidden: Whether to include invisible nodes and their subtrees.

    Returns:
        Outline text; a node at the depth limit with children gets a
        truncation line naming how many were cut off.
    """
    out = io.StringIO()
    stack: list[tuple[Tree[Node], int]] = [(t, 0)]
    while stack:
        current, depth = stack.pop()
        value = current.node
        if not include_hidden and not value.is_visible:
            continue

        indent = "    " * depth
        line = f"{indent}- {value.type.value} {value.name!r}"
        if include_ids:
            line += f" ({value.id})"
        if not value.is_visible:
            line += " [hidden]"
        out.write(line + "\n")

        if max_depth is not None and depth == max_depth:
            count = len(current.children)
            if count:
                noun = "child" if count == 1 else "children"
                out.write(f"{indent}    - ... ({count} more {noun}, id={value.id})\n")
            continue

        stack.extend((child, depth + 1) for child in reversed(current.children))

    return out.getvalue()
