"""
Traversals over proposition trees.

Every walk dispatches over the five concrete node shapes (Identifier,
Nested, Leaf, Unary, Binary). Anything else found in a tree is an
invariant violation and raises ``InvalidNodeError``.

Walks are iterative, so they are not bounded by the recursion limit the
way parsing is.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, FrozenSet, Iterator, List, NoReturn, Optional, TextIO, Tuple

from propparse.parser.ast_nodes import (
    Binary,
    BinaryOp,
    Identifier,
    Leaf,
    Nested,
    Node,
    Unary,
)


class InvalidNodeError(TypeError):
    """Raised when a traversal meets an object that is not a known node shape."""

    pass


_BINARY_LABELS: Dict[BinaryOp, str] = {
    BinaryOp.AND: "P: S_left ∧ S_right",
    BinaryOp.OR: "P: S_left ∨ S_right",
    BinaryOp.IMPLIES: "P: S_left → S_right",
}


def _invalid(node: object) -> NoReturn:
    raise InvalidNodeError(f"Invalid node in tree: {node!r}")


def _children(node: Node) -> Tuple[Node, ...]:
    if isinstance(node, Identifier):
        return ()
    if isinstance(node, Nested):
        return (node.child,)
    if isinstance(node, Leaf):
        return (node.term,)
    if isinstance(node, Unary):
        return (node.operand,)
    if isinstance(node, Binary):
        return (node.left, node.right)
    _invalid(node)


def _label(node: Node) -> str:
    if isinstance(node, Identifier):
        return f"S: ID {node.name}"
    if isinstance(node, Nested):
        return "S: ( P )"
    if isinstance(node, Leaf):
        return "P: S"
    if isinstance(node, Unary):
        return "P: ¬S"
    if isinstance(node, Binary):
        return _BINARY_LABELS[node.op]
    _invalid(node)


def walk(root: Node) -> Iterator[Tuple[Node, int]]:
    """
    Yield every node of the tree in pre-order with its depth.

    The root has depth 0; each child is one level deeper than its parent.

    Raises:
        InvalidNodeError: If the tree contains an unknown node shape.
    """
    stack: List[Tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        children = _children(node)
        yield node, depth
        for child in reversed(children):
            stack.append((child, depth + 1))


def post_order(root: Node) -> Iterator[Node]:
    """
    Yield every node of the tree, children before their parent.

    Raises:
        InvalidNodeError: If the tree contains an unknown node shape.
    """
    stack: List[Tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        for child in reversed(_children(node)):
            stack.append((child, False))


def teardown(root: Node, release: Optional[Callable[[Node], None]] = None) -> int:
    """
    Release a tree bottom-up.

    Each node is visited exactly once, after all of its children. The tree
    itself is reclaimed when the caller drops its last reference to the
    root; ``release`` lets the owner attach per-node cleanup.

    Args:
        root: The root of the tree to release.
        release: Optional callback invoked on each node in post order.

    Returns:
        The number of nodes released.
    """
    count = 0
    for node in post_order(root):
        if release is not None:
            release(node)
        count += 1
    return count


def format_tree(root: Node) -> str:
    """
    Render the tree as indented text, one node per line.

    Nodes appear in pre-order, indented with one tab per depth level.
    """
    lines = ["\t" * depth + _label(node) for node, depth in walk(root)]
    return "\n".join(lines) + "\n"


def print_tree(root: Node, stream: Optional[TextIO] = None) -> None:
    """Write ``format_tree(root)`` to ``stream`` (default: stdout)."""
    (stream if stream is not None else sys.stdout).write(format_tree(root))


def node_count(root: Node) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in walk(root))


def tree_depth(root: Node) -> int:
    """Return the depth of the deepest node (a lone node has depth 0)."""
    return max(depth for _, depth in walk(root))


def identifiers(root: Node) -> FrozenSet[str]:
    """Return all identifier names appearing in the tree."""
    return frozenset(
        node.name for node, _ in walk(root) if isinstance(node, Identifier)
    )


def to_string(root: Node) -> str:
    """
    Return the canonical source text of the tree.

    Rendering is driven by ``post_order``: each node replaces its children's
    text on the stack with its own, so the depth of the tree is not limited
    by the recursion limit.
    """
    rendered: List[str] = []
    for node in post_order(root):
        if isinstance(node, Identifier):
            rendered.append(node.name)
        elif isinstance(node, Nested):
            rendered.append(f"({rendered.pop()})")
        elif isinstance(node, Leaf):
            # A bare term renders as the term itself
            pass
        elif isinstance(node, Unary):
            rendered.append(f"!{rendered.pop()}")
        elif isinstance(node, Binary):
            right = rendered.pop()
            left = rendered.pop()
            rendered.append(f"{left}{node.op.symbol}{right}")
        else:
            _invalid(node)
    return rendered.pop()
