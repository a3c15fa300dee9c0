"""
Runtime configuration for the factorial calculator.

Values are read once from the environment at import time. Invalid values
fall back to their defaults.
"""

import logging
import os
import sys

# Fixed input used by the comparison driver.
DEFAULT_N = 5

# Largest input the recursive calculator can accept without exhausting the
# stack. Leaves room for the frames of the caller (test runner, web server).
RECURSION_MAX_N = sys.getrecursionlimit() - 200


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _log_level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


# Largest accepted input, kept within [DEFAULT_N, RECURSION_MAX_N].
MAX_N = min(max(_int_env("FACTORIAL_MAX_N", 500), DEFAULT_N), RECURSION_MAX_N)

LOG_LEVEL = _log_level_env("FACTORIAL_LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("FACTORIAL_LOG_DIR")

SERVER_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT = _int_env("SERVER_PORT", 8000)
