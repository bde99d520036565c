"""Stateless integer arithmetic used by the demo entry point."""

from __future__ import annotations


class Calculator:
    """Namespace of pure integer operations. Never instantiated."""

    @staticmethod
    def add(lhs: int, rhs: int) -> int:
        """Add two integers."""
        return lhs + rhs

    @staticmethod
    def mult(lhs: int, rhs: int) -> int:
        """Multiply two integers."""
        return lhs * rhs

    @staticmethod
    def sub(lhs: int, rhs: int) -> int:
        """Subtract `rhs` from `lhs`."""
        return lhs - rhs

