"""Subset font batches to named Unicode ranges and emit web fonts."""

__version__ = "0.1.0"
