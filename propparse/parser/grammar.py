"""
Parser for propositions.

Implements a recursive-descent parser over the grammar

    Proposition := '!' Simple
                 | Simple ('&' | '|' | '>') Simple
                 | Simple
    Simple      := Identifier
                 | '(' Proposition ')'

Each proposition holds at most one binary connective; there is no
precedence or associativity, so combining connectives requires explicit
parentheses. The grammar is LL(1): one token of lookahead after the left
simple term decides between a binary proposition and a bare term.
"""

from __future__ import annotations

from typing import Optional

import sly

from propparse.parser.ast_nodes import (
    Binary,
    BinaryOp,
    Identifier,
    Leaf,
    Nested,
    Proposition,
    Simple,
    Unary,
)
from propparse.parser.lexer import PropLexer
from propparse.parser.traversal import node_count
from propparse.utils.logger import LogLevel, ParserLogger


DEFAULT_MAX_DEPTH = 200

_CONNECTIVES = frozenset({"AND", "OR", "IMPLIES"})


class ParseError(Exception):
    """Exception raised for parsing errors."""

    pass


class UnexpectedToken(ParseError):
    """
    The parser expected one kind of token and found another.

    Attributes:
        expected: Description of what was expected.
        token: The token found, or None at end of input.
    """

    def __init__(self, expected: str, token: Optional[sly.lex.Token]) -> None:
        self.expected = expected
        self.token = token
        if token is None:
            message = f"Syntax error: expected {expected}, got end of input"
        else:
            message = (
                f"Syntax error: expected {expected}, got '{token.value}' "
                f"(type: {token.type}, index: {token.index})"
            )
        super().__init__(message)


class IncompleteExpression(UnexpectedToken):
    """The input ended where a token was still required."""

    def __init__(self, expected: str) -> None:
        super().__init__(expected, None)


class NestingTooDeep(ParseError):
    """Parenthesis nesting exceeded the parser's depth limit."""

    pass


class _ParseState:
    """Per-call parser context: source text, cursor and current token."""

    __slots__ = ("text", "cursor", "current", "depth")

    def __init__(self, text: str) -> None:
        self.text = text
        self.cursor = 0
        self.current: Optional[sly.lex.Token] = None
        self.depth = 0


class PropParser:
    """
    Recursive-descent parser for propositions.

    The instance only holds configuration; all parsing state lives in a
    ``_ParseState`` created per ``parse`` call, so an instance can be
    reused for any number of inputs.

    Attributes:
        logger: Receives the token trace and parse results.
        max_depth: Maximum parenthesis nesting, or None for no explicit
            limit (the interpreter recursion limit still applies).
    """

    def __init__(
        self,
        logger: Optional[ParserLogger] = None,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._lexer = PropLexer()
        self.logger = logger if logger is not None else ParserLogger(LogLevel.SILENT)
        self.max_depth = max_depth

    def parse(self, text: str) -> Proposition:
        """
        Parse a proposition string into an AST.

        Args:
            text: The proposition string to parse.

        Returns:
            The root Proposition node of the AST.

        Raises:
            ParseError: If the proposition is syntactically invalid or
                nested too deeply.
            LexerError: If the text contains an invalid character.
        """
        state = _ParseState(text)
        self._advance(state)
        try:
            result = self._parse_proposition(state)
        except RecursionError:
            raise NestingTooDeep(
                "Nesting exceeds the interpreter recursion limit"
            ) from None
        if state.current is not None:
            raise UnexpectedToken("end of input", state.current)

        if self.logger.enabled(LogLevel.VERBOSE):
            self.logger.parsed(text, node_count(result))
        return result

    # --- Token stream ---

    def _advance(self, state: _ParseState) -> None:
        tok, cursor = self._lexer.next_token(state.text, state.cursor)
        self.logger.token(tok, cursor if tok is None else tok.index)
        state.current = tok
        state.cursor = cursor

    def _expect(self, state: _ParseState, token_type: str, expected: str) -> None:
        """Consume a token of ``token_type`` or fail."""
        tok = state.current
        if tok is None:
            raise IncompleteExpression(expected)
        if tok.type != token_type:
            raise UnexpectedToken(expected, tok)
        self._advance(state)

    # --- Grammar ---

    def _parse_proposition(self, state: _ParseState) -> Proposition:
        tok = state.current
        if tok is not None and tok.type == "NOT":
            self._advance(state)
            return Unary(self._parse_simple(state))

        left = self._parse_simple(state)
        tok = state.current
        if tok is None or tok.type not in _CONNECTIVES:
            return Leaf(left)
        self._advance(state)
        return Binary(BinaryOp[tok.type], left, self._parse_simple(state))

    def _parse_simple(self, state: _ParseState) -> Simple:
        tok = state.current
        if tok is None:
            raise IncompleteExpression("identifier or '('")

        if tok.type == "ID":
            self._advance(state)
            return Identifier(tok.value)

        if tok.type == "LPAREN":
            state.depth += 1
            self.logger.debug("Entering group", depth=state.depth, index=tok.index)
            if self.max_depth is not None and state.depth > self.max_depth:
                raise NestingTooDeep(
                    f"Nesting exceeds maximum depth of {self.max_depth}"
                )
            self._advance(state)
            child = self._parse_proposition(state)
            self._expect(state, "RPAREN", "')'")
            self.logger.debug("Leaving group", depth=state.depth)
            state.depth -= 1
            return Nested(child)

        raise UnexpectedToken("identifier or '('", tok)
