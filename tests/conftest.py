"""
Shared pytest fixtures for the propparse test suite.

Provides fresh lexer and parser instances, the canonical acceptance
input, and paths to the proposition fixture files.
"""

from pathlib import Path

import pytest

from propparse.parser.grammar import PropParser
from propparse.parser.lexer import PropLexer


CANONICAL = "((!(a&b))|(c>(!d)))"


@pytest.fixture
def lexer() -> PropLexer:
    """Return a fresh lexer instance."""
    return PropLexer()


@pytest.fixture
def parser() -> PropParser:
    """Return a fresh parser instance."""
    return PropParser()


@pytest.fixture
def canonical_text() -> str:
    """The canonical acceptance-test proposition."""
    return CANONICAL


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def propositions_dir(fixtures_dir: Path) -> Path:
    """Path to the proposition file fixtures."""
    return fixtures_dir / "propositions"
