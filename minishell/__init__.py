"""Tokenizer, parser, variable expansion and export/unset built-ins for a small shell."""

__version__ = "0.1.0"
__all__ = ["__version__"]