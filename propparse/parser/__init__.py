"""
Proposition parser for propparse.

Provides lexical analysis, recursive-descent parsing, AST construction
and tree traversal for the propositional grammar.
"""

from propparse.parser.ast_nodes import Proposition
from propparse.parser.grammar import PropParser


_parser = PropParser()


def parse_proposition(text: str) -> Proposition:
    """
    Parse a proposition string with a shared default parser.

    Args:
        text: The proposition string.

    Returns:
        The root Proposition node of the AST.

    Raises:
        ParseError: If the text is not a valid proposition.
        LexerError: If the text contains an invalid character.
    """
    return _parser.parse(text)
