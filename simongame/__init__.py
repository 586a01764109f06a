"""A Simon memory game with an LFSR-driven sequence, serial-style controls and a high-score table."""

__version__ = "0.1.0"
__all__ = ["__version__"]