"""Utilities for propparse: structured logging."""
