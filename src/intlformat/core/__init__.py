"""Core utilities shared by the constants, runtime and facade layers.

Exports:
    OptionTable: Immutable bidirectional name <-> code mapping

Python 3.13+.
"""

from .options import OptionTable

__all__ = ["OptionTable"]
