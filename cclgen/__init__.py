"""Parser, lexer and GDScript code generator for CCL model definitions."""

__version__ = "1.0.0"