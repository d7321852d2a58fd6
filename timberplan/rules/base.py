"""Abstract base class for all framing rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each produces the parts of one assembly (walls, roof, ...)
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current building
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from timberplan.models import Part, PlanContext


class FramingRule(ABC):
    """
    Base class for all framing rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'carport.gable_frame')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Carport Gable Frame')."""
        ...

    @abstractmethod
    def applies(self, context: PlanContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: PlanContext) -> list[Part]:
        """
        Generate parts for the given context.

        The context provides the parameters, the layouts computed by the
        analyzer and the parts emitted by earlier rules.
        """
        ...


def describe(name: str, width: float, height: float, length: float | None = None) -> str:
    """Parts-list line, e.g. ``Pfosten 12.0x12.0cm, Länge: 288.0cm``."""
    text = f"{name} {width * 100:.1f}x{height * 100:.1f}cm"
    if length is not None:
        text += f", Länge: {length * 100:.1f}cm"
    return text
