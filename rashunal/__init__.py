"""Exact rational numbers in lowest terms, integer helpers and a demo command."""

__version__ = "0.0.1"
__all__ = ["cli", "rational", "util"]