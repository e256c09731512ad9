# examples/basic_example.py
"""
Basic example of running the SOLID principles demonstrations
"""

from solid_principles import DemoConfig, get_demo
from solid_principles.cli import run_demos


def run_single_demo():
    """Run one demonstration by name."""
    print("=== Single Demonstration ===")
    get_demo("dip").entry()


def run_all_demos():
    """Run every demonstration, reporting the ones that fail on purpose."""
    print("\n=== All Demonstrations ===")
    failures = run_demos(["all"], DemoConfig(keep_going=True))

    if failures:
        print(f"\n✗ {failures} demonstration(s) stopped on a violated contract")
    else:
        print("\n✓ All demonstrations completed")


def main():
    run_single_demo()
    run_all_demos()


if __name__ == "__main__":
    main()
