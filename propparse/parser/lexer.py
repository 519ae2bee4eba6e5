"""
Lexical analyzer for propositions.

Tokenizes proposition strings into identifiers, connectives and
parentheses. Besides the usual whole-stream ``tokenize`` it offers a
pull-based ``next_token`` that yields one token per call from a cursor,
which is what the recursive-descent parser consumes.
"""

from __future__ import annotations

from typing import Optional, Tuple

import sly


class LexerError(Exception):
    """
    Exception raised for lexical analysis errors.

    Attributes:
        char: The offending character.
        index: Its position in the input text.
    """

    def __init__(self, char: str, index: int) -> None:
        super().__init__(f"Invalid character '{char}' at index {index}")
        self.char = char
        self.index = index


class PropLexer(sly.Lexer):
    """
    Lexical analyzer for propositions.

    Token Types:
        ID              - Identifiers (maximal run of ASCII letters/digits)
        NOT             - Negation '!'
        AND, OR, IMPLIES - Binary connectives '&', '|', '>'
        LPAREN, RPAREN  - Delimiters
    """

    tokens = {
        ID,
        NOT,
        AND, OR, IMPLIES,
        LPAREN, RPAREN,
    }

    # Ignored characters
    ignore = " \t\n\r\f\v"

    ID = r"[a-zA-Z0-9]+"

    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    IMPLIES = r">"
    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Handle invalid characters."""
        raise LexerError(t.value[0], self.index)

    def next_token(
        self, text: str, cursor: int = 0,
    ) -> Tuple[Optional[sly.lex.Token], int]:
        """
        Return the first token at or after ``cursor``.

        Args:
            text: The source text. It is only read, never modified.
            cursor: Index to resume lexing from.

        Returns:
            A ``(token, cursor)`` pair where the new cursor points just past
            the token. At end of input the token is ``None`` and the cursor
            is ``len(text)``.

        Raises:
            LexerError: If the next non-whitespace character starts no token.
        """
        stream = self.tokenize(text, index=cursor)
        try:
            tok = next(stream, None)
        finally:
            stream.close()
        if tok is None:
            return None, len(text)
        return tok, tok.index + len(tok.value)
