# src/solid_principles/enums.py
"""
Enumeration types for the SOLID principles demonstrations.
"""

from enum import Enum


class Principle(Enum):
    """Design principles covered by the demonstrations."""
    INTRODUCTION = "intro"
    SINGLE_RESPONSIBILITY = "srp"
    OPEN_CLOSED = "ocp"
    LISKOV_SUBSTITUTION = "lsp"
    INTERFACE_SEGREGATION = "isp"
    DEPENDENCY_INVERSION = "dip"
