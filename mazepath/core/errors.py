# mazepath/core/errors.py
#!/usr/bin/env python3
"""
Errors raised at the boundary of the maze core.

An unreachable goal is not an error: searches return an empty path instead.
"""


class MazeConfigError(ValueError):
    """Bad dimensions, a non-rectangular grid, or start/end out of bounds."""


class UnknownAlgorithmError(ValueError):
    """Algorithm selector is not one of the known strategies."""
