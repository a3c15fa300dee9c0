from dependency_injector import containers, providers

from .comparator import FactorialComparator
from .config import MAX_N
from .iterative import IterativeFactorialCalculator
from .recursive import RecursiveFactorialCalculator


class Container(containers.DeclarativeContainer):
    """DI Container for managing dependencies."""

    max_n = providers.Object(MAX_N)

    iterative_calculator = providers.Singleton(IterativeFactorialCalculator, max_n=max_n)
    recursive_calculator = providers.Singleton(RecursiveFactorialCalculator, max_n=max_n)

    comparator = providers.Factory(
        FactorialComparator,
        iterative=iterative_calculator,
        recursive=recursive_calculator,
    )
