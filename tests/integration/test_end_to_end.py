"""
End-to-end tests for propparse.

Tests run the full pipeline (lexer, parser, traversal) on realistic
propositions and check tree ownership: every node belongs to exactly
one parent, teardown visits each node once, and dropping the root
releases the whole tree.
"""

import gc
import weakref

import pytest

from propparse.parser import parse_proposition
from propparse.parser.ast_nodes import Nested, Proposition
from propparse.parser.grammar import ParseError, PropParser
from propparse.parser.lexer import LexerError
from propparse.parser.traversal import (
    format_tree,
    node_count,
    post_order,
    teardown,
    tree_depth,
    walk,
)


VALID = [
    "a",
    "!a",
    "(a&b)",
    "a|b",
    "p1>q2",
    "!(x)",
    "(a)&(b)",
    "((!(a&b))|(c>(!d)))",
    "(((a>b)&(b>c))>(a>c))",
    "!((p|q)&(!r))",
    "(a|(b|(c|(d|e))))",
]

INVALID = [
    "",
    "(",
    "(a&b",
    "a&b|c",
    "!!a",
    "a&&b",
    "(a)(b)",
    "a b",
    ")a(",
    "!a|b",
]


class TestRoundTrip:
    """Canonical text reparses to an equal tree."""

    @pytest.mark.parametrize("text", VALID)
    def test_canonical_text_is_input(self, parser: PropParser, text: str) -> None:
        assert str(parser.parse(text)) == text

    @pytest.mark.parametrize("text", VALID)
    def test_reparse_is_equal(self, parser: PropParser, text: str) -> None:
        tree = parser.parse(text)
        assert parser.parse(str(tree)) == tree

    def test_whitespace_insensitive(self, parser: PropParser) -> None:
        spaced = " ( ( ! ( a & b ) ) |\n ( c > ( ! d ) ) ) "
        assert parser.parse(spaced) == parse_proposition("((!(a&b))|(c>(!d)))")


class TestRejection:
    """Malformed input is rejected, never partially accepted."""

    @pytest.mark.parametrize("text", INVALID)
    def test_rejected(self, parser: PropParser, text: str) -> None:
        with pytest.raises(ParseError):
            parser.parse(text)

    @pytest.mark.parametrize("text", ["a@b", "a∧b", "a=b", "(a&b);"])
    def test_lexically_invalid(self, parser: PropParser, text: str) -> None:
        with pytest.raises(LexerError):
            parser.parse(text)


class TestOwnership:
    """Trees are strictly tree shaped and fully reclaimable."""

    @pytest.mark.parametrize("text", VALID)
    def test_no_shared_nodes(self, parser: PropParser, text: str) -> None:
        tree = parser.parse(text)
        parents = {}
        for node, _ in walk(tree):
            for child in node.children():
                assert id(child) not in parents
                parents[id(child)] = node

    @pytest.mark.parametrize("text", VALID)
    def test_teardown_matches_walk(self, parser: PropParser, text: str) -> None:
        tree = parser.parse(text)
        released = []
        assert teardown(tree, released.append) == node_count(tree)
        assert {id(n) for n in released} == {id(n) for n, _ in walk(tree)}

    def test_dropping_root_releases_every_node(
        self, parser: PropParser, canonical_text: str
    ) -> None:
        tree = parser.parse(canonical_text)
        refs = [weakref.ref(node) for node, _ in walk(tree)]
        assert len(refs) == 15
        del tree
        gc.collect()
        assert all(ref() is None for ref in refs)

    def test_failed_parse_leaves_nothing_behind(self, parser: PropParser) -> None:
        # A parse that fails after building subtrees must not retain them
        gc.collect()
        before = sum(1 for obj in gc.get_objects() if isinstance(obj, Proposition))
        for _ in range(20):
            with pytest.raises(ParseError):
                parser.parse("((a&b)|(c>(!d))")
        gc.collect()
        after = sum(1 for obj in gc.get_objects() if isinstance(obj, Proposition))
        assert after == before


class TestCanonicalPipeline:
    """The canonical acceptance input through every stage."""

    def test_full_pipeline(self, canonical_text: str) -> None:
        tree = parse_proposition(canonical_text)
        assert node_count(tree) == 15
        assert tree_depth(tree) == 7
        assert format_tree(tree).count("\n") == 15
        assert isinstance(tree.term, Nested)

    def test_post_order_ends_at_root(self, canonical_text: str) -> None:
        tree = parse_proposition(canonical_text)
        order = list(post_order(tree))
        assert order[-1] is tree
        assert order[0].name == "a"
