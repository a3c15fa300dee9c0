"""Domain guard shared by the factorial calculators."""


def validate_input(n: int, max_n: int) -> None:
    """
    Check that n lies in the supported domain [0, max_n].

    Args:
        n (int): Value to check.
        max_n (int): Largest accepted value.

    Raises:
        TypeError: If n is not an integer. ``bool`` is rejected as well.
        ValueError: If n is negative or greater than max_n.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError("Factorial is not defined for negative numbers")
    if n > max_n:
        raise ValueError(f"n must not exceed {max_n}, got {n}")
