"""Template engine integrations.

Python 3.13+.
"""

__all__: list[str] = []
