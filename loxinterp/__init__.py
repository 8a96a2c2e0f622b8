"""A tree-walking interpreter for a small Lox scripting language: scanner, parser, interpreter and command."""

__version__ = "1.0.0"