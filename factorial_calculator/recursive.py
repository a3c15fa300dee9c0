"""
Recursive Factorial Calculator

Computes n! as n * (n - 1)! with base case n < 2.
"""

import logging

from .config import MAX_N, RECURSION_MAX_N
from .interfaces import IFactorialCalculator
from .validation import validate_input

logger = logging.getLogger(__name__)


class RecursiveFactorialCalculator(IFactorialCalculator):
    """
    Concrete implementation of IFactorialCalculator using recursion.

    Input is validated once before the first call, so every recursive step
    works on a value that decrements into the base case.

    Attributes:
        max_n (int): Largest accepted input. Bounds the recursion depth.
    """

    def __init__(self, max_n: int = MAX_N):
        if max_n > RECURSION_MAX_N:
            raise ValueError(f"max_n must not exceed {RECURSION_MAX_N}, got {max_n}")
        self.max_n = max_n

    def compute_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer.

        Args:
            n (int): A non-negative integer, at most ``max_n``.

        Returns:
            int: The factorial of n (n!).

        Raises:
            ValueError: If n is negative or greater than ``max_n``.
            TypeError: If n is not an integer.
        """
        validate_input(n, self.max_n)
        result = self._factorial(n)
        logger.debug(f"Recursive factorial of {n} computed")
        return result

    def _factorial(self, n: int) -> int:
        if n < 2:
            return 1
        return n * self._factorial(n - 1)
