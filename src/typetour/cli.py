"""
Command-line interface for the typetour package
"""

import argparse
import asyncio
import logging
import platform
import sys

import psutil

from .config import TourConfig
from .runner import run_examples
from . import __version__


def format_bytes(bytes_value):
    """Format bytes to human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_value < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} PB"


def print_system_info():
    """Print interpreter and host information relevant to the tour."""
    print(f"typetour v{__version__} - System Information")
    print("=" * 50)

    print("\nPython Information:")
    print(f"  Version: {platform.python_version()} ({platform.python_implementation()})")
    print(f"  Executable: {sys.executable}")
    print(f"  Platform: {platform.platform()}")

    print("\nCPU Information:")
    print(f"  Physical cores: {psutil.cpu_count(logical=False)}")
    print(f"  Logical cores: {psutil.cpu_count(logical=True)}")

    vm = psutil.virtual_memory()
    print("\nSystem Memory:")
    print(f"  Total: {format_bytes(vm.total)}")
    print(f"  Available: {format_bytes(vm.available)} ({vm.percent:.1f}% used)")


def positive_int(value):
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_config(args):
    """Turn parsed arguments into a ``TourConfig``."""
    config = TourConfig(verbose=args.verbose)
    if args.fast:
        config.fetch_delay = 0.0
        config.retry_delay = 0.0
        config.api_delay = 0.0
    if args.retries is not None:
        config.demo_retries = args.retries
    return config


def build_parser():
    parser = argparse.ArgumentParser(
        description="typetour: a tour of static typing and async patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  typetour                   # Run the tour with realistic delays
  typetour --fast            # Run the tour without waiting
  typetour --retries 5       # Give the retry demo five attempts
  typetour --info            # Show system information
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'typetour v{__version__}'
    )

    parser.add_argument(
        '--fast',
        action='store_true',
        help='Skip all simulated latency'
    )

    parser.add_argument(
        '--retries',
        type=positive_int,
        metavar='N',
        help='Attempt budget for the retry demo'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log each fetch and retry attempt'
    )

    parser.add_argument(
        '--info',
        action='store_true',
        help='Print system information and exit'
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.info:
        print_system_info()
        return

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    asyncio.run(run_examples(build_config(args)))


if __name__ == "__main__":
    main()
