"""Stock-cutting optimizer for linear battens."""

from __future__ import annotations
import logging

from timberplan.models import CuttingBin, CuttingPlan

logger = logging.getLogger(__name__)

EPSILON = 1e-6


def optimize_cuts(cuts: list[float], stock_length: float, kerf: float) -> CuttingPlan:
    """Best-fit decreasing assignment of ``cuts`` to stock bars.

    Every placed cut consumes its length plus one ``kerf``. A cut goes to
    the open bar with the least remaining length that still fits it, or
    opens a new bar. Cuts longer than the stock are rejected. Bars with
    identical cut patterns are merged into one bin with a count.
    """
    bars: list[list[float]] = []
    remaining: list[float] = []
    rejected: list[float] = []

    for cut in sorted(cuts, reverse=True):
        if cut > stock_length + EPSILON:
            logger.warning("Cut of %.3fm is longer than stock of %.2fm, skipping", cut, stock_length)
            rejected.append(cut)
            continue

        best = -1
        for i, left in enumerate(remaining):
            if left >= cut + kerf and (best < 0 or left < remaining[best]):
                best = i

        if best >= 0:
            bars[best].append(cut)
            remaining[best] -= cut + kerf
        else:
            bars.append([cut])
            remaining.append(stock_length - cut - kerf)

    patterns: dict[tuple[float, ...], CuttingBin] = {}
    for bar in bars:
        ordered = sorted(bar, reverse=True)
        key = tuple(ordered)
        if key in patterns:
            patterns[key].count += 1
        else:
            patterns[key] = CuttingBin(cuts=ordered, count=1)

    plan = CuttingPlan(stock_length=stock_length, kerf=kerf, bins=list(patterns.values()), rejected=rejected)
    logger.debug(
        "Cutting plan: %d cuts on %d bars of %.2fm (%d patterns, %d rejected)",
        len(cuts), plan.stock_count, stock_length, len(plan.bins), len(rejected),
    )
    return plan


def row_cuts(row_length: float, stock_length: float, joints: list[float]) -> list[float]:
    """Split one batten row into pieces that join over supports.

    ``joints`` are support centrelines measured from the row midpoint. Each
    piece runs to the furthest joint within one stock length; the last piece
    takes the remainder. Without a usable joint the piece is the whole rest.
    """
    pieces: list[float] = []
    covered = 0.0
    while covered < row_length - EPSILON:
        rest = row_length - covered
        start = -row_length / 2 + covered
        reach = start + min(rest, stock_length)
        candidates = [z for z in joints if start + EPSILON < z < reach + EPSILON]

        if rest <= stock_length + EPSILON:
            piece = min(rest, stock_length)
        elif not candidates:
            piece = rest
        else:
            piece = min(max(candidates) - start, stock_length)

        if piece <= EPSILON:
            break
        pieces.append(piece)
        covered += piece
    return pieces


def describe_plan(plan: CuttingPlan) -> str:
    """Human-readable cutting instructions, one line per pattern."""
    if not plan.bins:
        return ""
    stock = f"{plan.stock_length:g}m"
    lines = [
        f"{b.count}x {stock} Stange: schneiden zu " + " + ".join(f"{c * 100:.1f}cm" for c in b.cuts)
        for b in plan.bins
    ]
    header = f"Zuschnittplan (optimiert für {stock} Stangen, inkl. {plan.kerf * 1000:g}mm Sägeschnitt):"
    return "\n".join([header, *lines])
