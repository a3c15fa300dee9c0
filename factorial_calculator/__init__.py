"""
Factorial Calculator Module

This module computes the factorial of a non-negative integer in two
independent ways, iteratively and recursively, and compares the results.
"""

from .comparator import FactorialComparator
from .interfaces import IFactorialCalculator
from .iterative import IterativeFactorialCalculator
from .models import ComparisonResult, FactorialMethod
from .recursive import RecursiveFactorialCalculator

__all__ = [
    "IFactorialCalculator",
    "IterativeFactorialCalculator",
    "RecursiveFactorialCalculator",
    "FactorialComparator",
    "ComparisonResult",
    "FactorialMethod",
]
