"""Main plan generator — orchestrates analysis and rule execution."""

from __future__ import annotations

from timberplan.core.analyzer import FrameAnalyzer
from timberplan.core.registry import RuleRegistry
from timberplan.models import FrameParameters, Part, PlanContext


class PlanGenerator:
    """
    Stateless plan generator.

    Takes frame parameters, runs analysis, executes applicable rules,
    and returns the bill of parts.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.analyzer = FrameAnalyzer()

    def generate(self, params: FrameParameters) -> list[Part]:
        # Build context
        context = PlanContext(params=params)

        # Analysis phase: layouts and span checks
        self.analyzer.analyze(context)

        # Generation phase: run applicable rules
        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            parts = rule.generate(context)
            context.add_parts(parts)

        return context.parts.to_list()
