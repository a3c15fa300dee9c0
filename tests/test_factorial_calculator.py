import math
import unittest

from factorial_calculator import (
    IFactorialCalculator,
    IterativeFactorialCalculator,
    RecursiveFactorialCalculator,
)
from factorial_calculator.config import RECURSION_MAX_N


class FactorialCalculatorContract:
    """
    Shared checks for every IFactorialCalculator implementation.

    Subclasses set ``calculator_class`` and mix in unittest.TestCase.
    """

    calculator_class = None

    def setUp(self):
        """
        Set up the test fixture.

        Initializes a new calculator instance for each test.
        """
        self.calculator = self.calculator_class()

    def test_implements_interface(self):
        self.assertIsInstance(self.calculator, IFactorialCalculator)

    def test_factorial_of_zero(self):
        """
        Test factorial of 0.

        The factorial of 0 is defined as 1.
        """
        self.assertEqual(self.calculator.compute_factorial(0), 1)

    def test_factorial_of_one(self):
        self.assertEqual(self.calculator.compute_factorial(1), 1)

    def test_factorial_of_small_positive_integer(self):
        """
        Test factorial of a small positive integer.

        For example, 5! = 120.
        """
        self.assertEqual(self.calculator.compute_factorial(5), 120)

    def test_factorial_matches_math_factorial(self):
        for n in range(0, 13):
            with self.subTest(n=n):
                self.assertEqual(self.calculator.compute_factorial(n), math.factorial(n))

    def test_factorial_of_larger_integer(self):
        self.assertEqual(self.calculator.compute_factorial(10), 3628800)

    def test_repeated_calls_return_same_result(self):
        first = self.calculator.compute_factorial(7)
        second = self.calculator.compute_factorial(7)
        self.assertEqual(first, second)
        self.assertEqual(first, 5040)

    def test_factorial_of_negative_integer(self):
        """
        Test factorial of a negative integer.

        Negative input is rejected before any computation starts.
        """
        for n in (-1, -5, -1000):
            with self.subTest(n=n):
                with self.assertRaises(ValueError):
                    self.calculator.compute_factorial(n)

    def test_factorial_of_non_integer(self):
        for value in (5.5, "5", None, True):
            with self.subTest(value=value):
                with self.assertRaises(TypeError):
                    self.calculator.compute_factorial(value)

    def test_factorial_at_ceiling(self):
        calculator = self.calculator_class(max_n=400)
        self.assertEqual(calculator.compute_factorial(400), math.factorial(400))

    def test_factorial_above_ceiling(self):
        calculator = self.calculator_class(max_n=10)
        with self.assertRaises(ValueError):
            calculator.compute_factorial(11)


class TestIterativeFactorialCalculator(FactorialCalculatorContract, unittest.TestCase):
    """Unit tests for the IterativeFactorialCalculator class."""

    calculator_class = IterativeFactorialCalculator


class TestRecursiveFactorialCalculator(FactorialCalculatorContract, unittest.TestCase):
    """Unit tests for the RecursiveFactorialCalculator class."""

    calculator_class = RecursiveFactorialCalculator

    def test_default_ceiling_does_not_exhaust_stack(self):
        """The default ceiling stays inside the interpreter's recursion limit."""
        n = self.calculator.max_n
        self.assertEqual(self.calculator.compute_factorial(n), math.factorial(n))

    def test_largest_allowed_ceiling_does_not_exhaust_stack(self):
        calculator = RecursiveFactorialCalculator(max_n=RECURSION_MAX_N)
        self.assertEqual(
            calculator.compute_factorial(RECURSION_MAX_N),
            math.factorial(RECURSION_MAX_N),
        )

    def test_ceiling_above_recursion_bound_is_rejected(self):
        """
        A ceiling the recursion cannot reach is refused at construction.
        """
        for max_n in (RECURSION_MAX_N + 1, 1500):
            with self.subTest(max_n=max_n):
                with self.assertRaises(ValueError):
                    RecursiveFactorialCalculator(max_n=max_n)


if __name__ == '__main__':
    unittest.main()
