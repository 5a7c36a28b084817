"""Shape tree traversal and bulk styling.

Traversal uses an explicit stack rather than recursion, so arbitrarily
deep input cannot exhaust the interpreter stack; trees nested beyond
``max_depth`` are rejected with NestingDepthError.
"""

from collections.abc import Iterator
from dataclasses import replace

from pathgeom.domain import GroupShape, Shape, ShapeStyle
from pathgeom.exceptions import NestingDepthError

DEFAULT_MAX_DEPTH = 64


def iter_shapes(shape: Shape, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[Shape]:
    """Walk a shape tree depth-first in pre-order.

    The root and every group node are yielded along with the leaves.

    Args:
        shape: Root of the tree
        max_depth: Deepest allowed nesting level (the root is level 0)

    Yields:
        Each node of the tree, parents before their children

    Raises:
        NestingDepthError: If a node sits deeper than ``max_depth``
    """
    stack: list[tuple[Shape, int]] = [(shape, 0)]
    while stack:
        node, depth = stack.pop()
        yield node
        if isinstance(node, GroupShape) and node.children:
            if depth + 1 > max_depth:
                raise NestingDepthError(max_depth)
            stack.extend((child, depth + 1) for child in reversed(node.children))


def flatten_leaves(shape: Shape, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Shape]:
    """Collect every non-group node of a tree in pre-order.

    Args:
        shape: Root of the tree
        max_depth: Deepest allowed nesting level

    Returns:
        Path and primitive nodes, in drawing order
    """
    return [node for node in iter_shapes(shape, max_depth) if not isinstance(node, GroupShape)]


def _restyle(shape: Shape, max_depth: int, **changes: object) -> None:
    for node in iter_shapes(shape, max_depth):
        node.style = replace(node.style or ShapeStyle(), **changes)


def set_all_fill_color(shape: Shape, color: int, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
    """Fill every node of the tree with ``color`` and disable stroke."""
    _restyle(shape, max_depth, fill=True, fill_color=color, stroke=False)


def set_all_stroke_color(
    shape: Shape, color: int, stroke_weight: float, max_depth: int = DEFAULT_MAX_DEPTH
) -> None:
    """Stroke every node of the tree with ``color`` at ``stroke_weight``."""
    _restyle(shape, max_depth, stroke=True, stroke_color=color, stroke_weight=stroke_weight)


def disable_all_fill(shape: Shape, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
    """Turn fill off on every node of the tree."""
    _restyle(shape, max_depth, fill=False)
