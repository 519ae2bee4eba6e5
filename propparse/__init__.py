"""
propparse: a recursive-descent parser for propositional logic.

Parses propositions built from identifiers, parentheses, negation (!),
conjunction (&), disjunction (|) and implication (>) into a two-level
abstract syntax tree of simple terms and propositions.
"""

__version__ = "0.1.0"
