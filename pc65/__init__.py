"""Symbol table, type records and code-generation helpers for a Pascal compiler."""

__version__ = "0.1.0"
__all__ = ["code", "definitions", "symtab"]