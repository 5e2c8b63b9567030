"""
Integer arithmetic helpers.
"""


class Calculator:
    """Stateless integer calculator."""

    def add(self, a: int, b: int) -> int:
        return a + b

    def multiply(self, a: int, b: int) -> int:
        return a * b
