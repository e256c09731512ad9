#!/usr/bin/env python
# tests/run_tests.py
"""
Run the SOLID principles test suite by category.
Usage: python tests/run_tests.py [category] [-- extra pytest args]
"""

import argparse
import os
import sys

import pytest

from solid_principles import list_demos

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))


def build_categories():
    """Map category names to pytest arguments."""
    categories = {
        "all": [TESTS_DIR],
        "unit": [TESTS_DIR, "-m", "not integration"],
        "integration": [TESTS_DIR, "-m", "integration"],
        "coverage": [TESTS_DIR, "--cov=solid_principles", "--cov-report=term-missing"],
        "config": [os.path.join(TESTS_DIR, "test_demo_config.py")],
    }
    # One category per demonstration module
    for demo in list_demos():
        module = "introduction" if demo.name == "intro" else demo.name
        categories[demo.name] = [os.path.join(TESTS_DIR, f"test_{module}.py")]
    return categories


def main(argv=None):
    categories = build_categories()

    parser = argparse.ArgumentParser(description="Run SOLID principles tests by category")
    parser.add_argument("category", nargs="?", default="all", choices=sorted(categories))
    parser.add_argument("-x", "--exitfirst", action="store_true", help="Exit on first failure")
    parser.add_argument("pytest_args", nargs=argparse.REMAINDER,
                        help="Extra arguments handed to pytest after '--'")

    args = parser.parse_args(argv)

    pytest_args = list(categories[args.category])
    if args.exitfirst:
        pytest_args.append("-x")
    pytest_args.extend(a for a in args.pytest_args if a != "--")

    print(f"Category: {args.category} -> pytest {' '.join(pytest_args)}")
    return int(pytest.main(pytest_args))


if __name__ == "__main__":
    sys.exit(main())
