"""Numerical helpers for boundary element computations and a text progress bar."""

__version__ = "1.0.0"
__all__ = ["utilities", "progressbar"]