"""Shaped float arrays, gradient-carrying tensors, NLL loss and feature normalizers."""

__version__ = "0.1.0"
__all__ = ["array", "tensor", "criterions", "normalizers"]