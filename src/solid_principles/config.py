# src/solid_principles/config.py
"""
Configuration for running the demonstrations.
"""

import logging
from dataclasses import dataclass


@dataclass
class DemoConfig:
    """Demonstration run configuration."""
    verbose: bool = False  # Enable INFO-level diagnostic logging
    keep_going: bool = False  # Continue after a demonstration raises
    separator: str = "="
    separator_width: int = 50

    def banner(self) -> str:
        """Line drawn between demonstrations."""
        return self.separator * self.separator_width

    def apply_logging(self) -> None:
        """Set the package logger level from the verbose flag."""
        logger = logging.getLogger("solid_principles")
        if self.verbose:
            logger.setLevel(logging.INFO)
        else:
            logger.setLevel(logging.WARNING)
