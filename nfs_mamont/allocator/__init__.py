"""Bounded pool of byte buffers and the slices that borrow them."""

__all__ = ["pool", "slice"]