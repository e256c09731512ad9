# examples/__init__.py
"""
SOLID Principles examples package.

This package contains scripts showing how the demonstrations are used and
extended. These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: Running the demonstrations
- extension_example.py: Extending the compliant designs without modifying them
"""
