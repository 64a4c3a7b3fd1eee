"""
Rule Evaluator

Runs every rule in the rule table against the resources of its type and
returns the per-rule violation totals.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from app.features.seo.schemas.resources import StoreResources
from app.features.seo.services.analysis.rules import RESOURCE_TYPES, rules_for


@dataclass(frozen=True)
class ViolationCounts:
    """Violations per rule id, plus how many resources of each type were checked."""
    by_rule: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    resources_by_type: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def __getitem__(self, rule_id: str) -> int:
        return self.by_rule.get(rule_id, 0)

    def resources_checked(self, resource_type: str) -> int:
        return self.resources_by_type.get(resource_type, 0)


def evaluate_rules(resources: StoreResources) -> ViolationCounts:
    """
    One pass over each resource list, checking every rule for that type.

    Rules are not short-circuited: a product with no meta title still
    gets its description and images checked.
    """
    by_rule = {}
    resources_by_type = {}

    for resource_type in RESOURCE_TYPES:
        rules = rules_for(resource_type)
        totals = {rule.id: 0 for rule in rules}
        items = resources.for_type(resource_type)

        for resource in items:
            for rule in rules:
                totals[rule.id] += rule.violations(resource)

        by_rule.update(totals)
        resources_by_type[resource_type] = len(items)

    return ViolationCounts(
        by_rule=MappingProxyType(by_rule),
        resources_by_type=MappingProxyType(resources_by_type),
    )
