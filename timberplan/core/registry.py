"""Rule registry — stores and orders framing rules."""

from __future__ import annotations

from timberplan.models import PlanContext
from timberplan.rules.base import FramingRule


class RuleRegistry:
    """
    Central registry for all framing rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, FramingRule] = {}

    def register(self, rule: FramingRule) -> None:
        """Register a framing rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> FramingRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[FramingRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: PlanContext) -> list[FramingRule]:
        """Return rules that apply to the given context, sorted by priority."""
        applicable = [r for r in self._rules.values() if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[FramingRule]) -> list[FramingRule]:
        """Topological sort respecting dependencies."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[FramingRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard framing rules."""
    from timberplan.rules.carport.gable import CarportGableFrameRule
    from timberplan.rules.carport.shed import CarportShedFrameRule
    from timberplan.rules.garden_house.walls import GardenHouseWallsRule
    from timberplan.rules.garden_house.roof import GardenHouseGableRoofRule
    from timberplan.rules.roof.battens import BattenRule

    registry = RuleRegistry()
    registry.register(CarportGableFrameRule())
    registry.register(CarportShedFrameRule())
    registry.register(GardenHouseWallsRule())
    registry.register(GardenHouseGableRoofRule())
    registry.register(BattenRule())
    return registry
