"""Functional Bus Description Language front-end pieces: lexer, values, register access layouts and functionality models."""

__version__ = "0.1.0"