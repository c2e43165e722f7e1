"""Forthy: an interactive evaluator for a small Forth subset"""

__version__ = "0.1.0"
