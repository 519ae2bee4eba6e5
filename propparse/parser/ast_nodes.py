"""
Abstract syntax tree node definitions for propositions.

The tree has two mutually recursive node kinds:

    Simple      - an identifier, or a parenthesized proposition (Nested)
    Proposition - a negated simple term (Unary), a bare simple term (Leaf),
                  or two simple terms joined by one connective (Binary)

Nodes are immutable, compare structurally and hash consistently. Each node
owns its children outright; a tree never shares a node between parents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Tuple


class BinaryOp(Enum):
    """The binary connectives, valued by their source symbol."""

    AND = "&"
    OR = "|"
    IMPLIES = ">"

    @property
    def symbol(self) -> str:
        return self.value


def _require(value: Any, kind: type, role: str) -> None:
    if not isinstance(value, kind):
        raise TypeError(
            f"{role} must be a {kind.__name__} node, got {type(value).__name__}"
        )


class Node(ABC):
    """
    Base class for all AST nodes.

    All nodes are immutable: attributes are set once in ``__init__`` and
    any later assignment raises ``AttributeError``.
    """

    @abstractmethod
    def children(self) -> Tuple[Node, ...]:
        """Return the direct children of this node, left to right."""

    def __str__(self) -> str:
        """Return the canonical source text of this node."""
        from propparse.parser.traversal import to_string

        return to_string(self)

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Check structural equality with another node."""

    @abstractmethod
    def __hash__(self) -> int:
        """Return hash for use in sets and dicts."""

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} nodes are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} nodes are immutable")

    def _init(self, **fields: Any) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)


# === Simple terms ===


class Simple(Node):
    """A simple term: an identifier or a parenthesized proposition."""


class Identifier(Simple):
    """
    An atomic proposition name.

    Attributes:
        name: Non-empty run of ASCII letters and digits (e.g. "a", "p1").
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Identifier name must be str, got {type(name).__name__}")
        if not (name.isascii() and name.isalnum()):
            raise ValueError(f"Invalid identifier name: {name!r}")
        self._init(name=name)

    def children(self) -> Tuple[Node, ...]:
        return ()

    def __repr__(self) -> str:
        return f"Identifier({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(("Identifier", self.name))


class Nested(Simple):
    """
    A parenthesized proposition used as a simple term: ( P ).

    Attributes:
        child: The enclosed proposition.
    """

    __slots__ = ("child",)

    def __init__(self, child: Proposition) -> None:
        _require(child, Proposition, "Nested child")
        self._init(child=child)

    def children(self) -> Tuple[Node, ...]:
        return (self.child,)

    def __repr__(self) -> str:
        return f"Nested({self.child!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nested):
            return NotImplemented
        return self.child == other.child

    def __hash__(self) -> int:
        return hash(("Nested", self.child))


# === Propositions ===


class Proposition(Node):
    """A proposition: negation, binary connective, or bare simple term."""


class Leaf(Proposition):
    """
    A bare simple term promoted to proposition level.

    Attributes:
        term: The simple term.
    """

    __slots__ = ("term",)

    def __init__(self, term: Simple) -> None:
        _require(term, Simple, "Leaf term")
        self._init(term=term)

    def children(self) -> Tuple[Node, ...]:
        return (self.term,)

    def __repr__(self) -> str:
        return f"Leaf({self.term!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Leaf):
            return NotImplemented
        return self.term == other.term

    def __hash__(self) -> int:
        return hash(("Leaf", self.term))


class Unary(Proposition):
    """
    Represents !S (negation).

    Attributes:
        operand: The simple term being negated.
    """

    __slots__ = ("operand",)

    def __init__(self, operand: Simple) -> None:
        _require(operand, Simple, "Unary operand")
        self._init(operand=operand)

    def children(self) -> Tuple[Node, ...]:
        return (self.operand,)

    def __repr__(self) -> str:
        return f"Unary({self.operand!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unary):
            return NotImplemented
        return self.operand == other.operand

    def __hash__(self) -> int:
        return hash(("Unary", self.operand))


class Binary(Proposition):
    """
    Represents S op S for one of the binary connectives.

    Attributes:
        op: The connective.
        left: Left operand.
        right: Right operand.
    """

    __slots__ = ("op", "left", "right")

    def __init__(self, op: BinaryOp, left: Simple, right: Simple) -> None:
        if not isinstance(op, BinaryOp):
            raise TypeError(f"Binary op must be a BinaryOp, got {type(op).__name__}")
        _require(left, Simple, "Binary left operand")
        _require(right, Simple, "Binary right operand")
        self._init(op=op, left=left, right=right)

    def children(self) -> Tuple[Node, ...]:
        return (self.left, self.right)

    def __repr__(self) -> str:
        return f"Binary({self.op}, {self.left!r}, {self.right!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Binary):
            return NotImplemented
        return (
            self.op is other.op
            and self.left == other.left
            and self.right == other.right
        )

    def __hash__(self) -> int:
        return hash(("Binary", self.op, self.left, self.right))
