# src/solid_principles/__init__.py
"""
SOLID Principles: side-by-side violating (V1) and compliant (V2) designs
for SRP, OCP, LSP, ISP and DIP, plus DRY, KISS and YAGNI.
"""

__version__ = "0.1.0"

from .enums import Principle
from .config import DemoConfig
from .errors import UnsupportedOperationError
from .registry import Demo, get_demo, list_demos

__all__ = [
    "Principle",
    "DemoConfig",
    "UnsupportedOperationError",
    "Demo",
    "get_demo",
    "list_demos",
]
