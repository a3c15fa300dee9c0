"""
Factorial Calculator Interface

This module defines the abstract interface for computing factorials.
It provides a contract that concrete implementations must follow.
"""

from abc import ABC, abstractmethod


class IFactorialCalculator(ABC):
    """
    Abstract interface for factorial computation.

    Implementations compute n! for a non-negative integer n and reject
    anything outside the supported domain before computing.
    """

    @abstractmethod
    def compute_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer.

        Args:
            n (int): A non-negative integer (>= 0) for which to compute the factorial.

        Returns:
            int: The factorial of n (n!).

        Raises:
            ValueError: If n is negative or above the supported ceiling.
            TypeError: If n is not an integer.
        """
        pass
