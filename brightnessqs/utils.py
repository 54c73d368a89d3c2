"""
Utility functions for the brightnessqs library
"""
import sys
from typing import Callable


def run_with_keyboard_interrupt(main_func: Callable[[], int]) -> None:
    """
    Run a main function with graceful KeyboardInterrupt handling.

    The return value of `main_func` becomes the process exit code. Ctrl+C
    exits with 130.

    Args:
        main_func: The main function to run
    """
    try:
        exit_code = main_func()
    except KeyboardInterrupt:
        print("\n🛑 Interrupted by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    sys.exit(exit_code)
