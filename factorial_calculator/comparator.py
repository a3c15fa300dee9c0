"""Runs both factorial calculators on one input and compares the results."""

import logging

from .interfaces import IFactorialCalculator
from .models import ComparisonResult

logger = logging.getLogger(__name__)


class FactorialComparator:
    """Compares an iterative and a recursive calculator.

    Args:
        iterative: Calculator for the iterative path.
        recursive: Calculator for the recursive path.
    """

    def __init__(self, iterative: IFactorialCalculator, recursive: IFactorialCalculator):
        self.iterative = iterative
        self.recursive = recursive

    def compare(self, n: int) -> ComparisonResult:
        """Compute n! with both calculators and check that they agree.

        Errors raised by either calculator are not caught.

        Args:
            n: Input passed unchanged to both calculators.

        Returns:
            ComparisonResult: Both results and whether they are equal.
        """
        iterative_result = self.iterative.compute_factorial(n)
        recursive_result = self.recursive.compute_factorial(n)
        same = iterative_result == recursive_result
        if not same:
            logger.warning(f"Factorial mismatch for n={n}")
        return ComparisonResult(
            n=n,
            iterative=iterative_result,
            recursive=recursive_result,
            same=same,
        )
