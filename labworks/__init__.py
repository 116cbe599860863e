"""Small exercises: AES-128 rounds in a feedback block mode, bit-count splits, matrix puzzles, linear solvers."""

__version__ = "0.1.0"
__all__ = ["aes", "banana", "matrix", "slau"]