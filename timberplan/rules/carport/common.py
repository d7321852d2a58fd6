"""Members shared by the carport frames."""

from __future__ import annotations

from timberplan.annotation.parts import annotate_mitered_brace
from timberplan.geometry.braces import mitered_brace
from timberplan.models import PartRegistry
from timberplan.rules.base import describe


def add_head_brace(parts: PartRegistry, prefix: str, name: str, leg: float, size: float, quantity: int) -> None:
    """45-degree head brace keyed by its rounded length in cm."""
    brace = mitered_brace(leg, size)
    parts.add(
        f"{prefix}_{round(brace.outer_length * 100)}",
        describe(name, size, size, brace.outer_length), quantity,
        width=size, height=size, length=brace.outer_length,
        drawing=annotate_mitered_brace(brace),
    )
