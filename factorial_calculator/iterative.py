"""
Iterative Factorial Calculator

Computes n! with an accumulating loop.
"""

import logging

from .config import MAX_N
from .interfaces import IFactorialCalculator
from .validation import validate_input

logger = logging.getLogger(__name__)


class IterativeFactorialCalculator(IFactorialCalculator):
    """
    Concrete implementation of IFactorialCalculator using an iterative method.

    The accumulator starts at 1 and is multiplied by every integer from 2
    to n inclusive, so inputs below 2 return 1 without entering the loop.

    Attributes:
        max_n (int): Largest accepted input.
    """

    def __init__(self, max_n: int = MAX_N):
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

        Examples:
            >>> calculator = IterativeFactorialCalculator()
            >>> calculator.compute_factorial(0)
            1
            >>> calculator.compute_factorial(5)
            120
        """
        validate_input(n, self.max_n)
        result = 1
        for i in range(2, n + 1):
            result *= i
        logger.debug(f"Iterative factorial of {n} computed")
        return result
