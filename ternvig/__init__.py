"""Ternary trees with prefix traversal, and an autokey Vigenere cipher with a file reader."""

__version__ = "0.1.0"