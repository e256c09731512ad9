# src/solid_principles/registry.py
"""
Lookup table of the available demonstrations.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, List, Union

from .enums import Principle
from . import introduction, srp, ocp, lsp, isp, dip


@dataclass(frozen=True)
class Demo:
    """A runnable demonstration."""
    principle: Principle
    title: str
    entry: Callable[[], None]

    @property
    def name(self) -> str:
        return self.principle.value


DEMOS = OrderedDict(
    (demo.principle, demo)
    for demo in [
        Demo(Principle.INTRODUCTION, "DRY, KISS and YAGNI", introduction.main),
        Demo(Principle.SINGLE_RESPONSIBILITY, "Single Responsibility Principle", srp.main),
        Demo(Principle.OPEN_CLOSED, "Open/Closed Principle", ocp.main),
        Demo(Principle.LISKOV_SUBSTITUTION, "Liskov Substitution Principle", lsp.main),
        Demo(Principle.INTERFACE_SEGREGATION, "Interface Segregation Principle", isp.main),
        Demo(Principle.DEPENDENCY_INVERSION, "Dependency Inversion Principle", dip.main),
    ]
)


def list_demos() -> List[Demo]:
    """All demonstrations in run order."""
    return list(DEMOS.values())


def get_demo(name: Union[str, Principle]) -> Demo:
    """Find a demonstration by ``Principle`` or its short name."""
    if isinstance(name, Principle):
        return DEMOS[name]
    try:
        principle = Principle(name.strip().lower())
    except ValueError:
        known = ", ".join(p.value for p in DEMOS)
        raise KeyError(f"Unknown demonstration '{name}' (expected one of: {known})") from None
    return DEMOS[principle]
