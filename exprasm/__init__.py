"""Compile arithmetic assignments to three-address code and x86 assembly."""

__version__ = "0.1.0"
__all__ = ["cli", "codegen", "icg", "lexer", "parser", "semantic"]