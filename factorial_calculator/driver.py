from dependency_injector import providers

from .config import DEFAULT_N, LOG_DIR, LOG_LEVEL
from .container import Container
from .logging_config import setup_logging


def run(n: int = DEFAULT_N) -> str:
    """Compare both factorial methods on n and return the report line.

    The calculators accept exactly up to n, independent of FACTORIAL_MAX_N.
    """
    container = Container()
    container.max_n.override(providers.Object(n))
    comparator = container.comparator()
    return comparator.compare(n).to_line()


def main() -> None:
    """Print whether the iterative and recursive factorials of 5 agree."""
    logger = setup_logging("factorial_calculator", level=LOG_LEVEL, log_dir=LOG_DIR)
    logger.debug(f"Comparing factorial methods for n={DEFAULT_N}")
    print(run())


if __name__ == "__main__":
    main()
