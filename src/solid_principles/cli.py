# src/solid_principles/cli.py
"""
Command-line interface for the SOLID principles demonstrations.
"""

import argparse
import logging
import sys

from .config import DemoConfig
from .errors import UnsupportedOperationError
from .registry import get_demo, list_demos
from . import __version__

logger = logging.getLogger(__name__)


def print_demo_list():
    """Print the available demonstrations."""
    print(f"SOLID Principles v{__version__} - Demonstrations")
    print("=" * 50)
    for demo in list_demos():
        print(f"  {demo.name:<6} {demo.title}")


def resolve_demos(names):
    """Turn demonstration names into ``Demo`` records.

    Every name is looked up before anything runs, so an unknown name is
    reported even when ``all`` is also given.
    """
    names = [name.strip().lower() for name in names or []]
    selected = [get_demo(name) for name in names if name != "all"]
    if not names or "all" in names:
        return list_demos()
    return selected


def run_demos(names, config=None):
    """Run the named demonstrations in order.

    Returns the number of demonstrations that failed. Failures only get
    counted when ``config.keep_going`` is set; otherwise the error
    propagates to the caller.
    """
    config = config or DemoConfig()
    config.apply_logging()

    demos = resolve_demos(names)

    failures = 0
    for index, demo in enumerate(demos):
        if index:
            print()
        print(config.banner())
        logger.info(f"Running {demo.name}: {demo.title}")
        try:
            demo.entry()
        except UnsupportedOperationError as e:
            if not config.keep_going:
                raise
            failures += 1
            logger.error(f"{demo.name} stopped on a violated contract: {e}")
    return failures


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="SOLID principles: side-by-side violating and compliant designs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  solid-demo                       # Run every demonstration
  solid-demo ocp dip               # Run selected demonstrations
  solid-demo --keep-going          # Continue past the LSP failure
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'SOLID Principles v{__version__}'
    )

    parser.add_argument(
        'demos',
        nargs='*',
        metavar='NAME',
        help='Demonstrations to run: all, ' + ', '.join(d.name for d in list_demos())
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List available demonstrations and exit'
    )

    parser.add_argument(
        '--keep-going',
        action='store_true',
        help='Report a failing demonstration and continue with the next one'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable diagnostic logging'
    )

    args = parser.parse_args(argv)

    if args.list:
        print_demo_list()
        return 0

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    config = DemoConfig(verbose=args.verbose, keep_going=args.keep_going)

    try:
        resolve_demos(args.demos)
    except KeyError as e:
        parser.error(e.args[0])

    failures = run_demos(args.demos, config)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
