"""Analysis modules for the WAVE client."""

from .reporter import Reporter, describe_contrast

__all__ = ["Reporter", "describe_contrast"]
