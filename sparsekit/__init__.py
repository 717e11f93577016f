"""Sparse matrices in two storage strategies, and a two-sum solver."""

__version__ = "0.1.0"
__all__ = ["array_matrix", "linked_matrix", "two_sum"]