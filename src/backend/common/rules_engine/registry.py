from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type

from .config import EvidenceWindow
from .models import RuleCatalog
from .rule import Rule


class RuleRegistry:
    """Maps catalog rule ids to the heuristic class that evaluates them."""

    def __init__(self):
        self._heuristics: Dict[str, Type[Rule]] = {}

    def register(self, rule_cls: Type[Rule]) -> None:
        rule_id = getattr(rule_cls, "rule_id", None)
        if not rule_id:
            raise ValueError(f"{rule_cls.__name__} does not declare a rule_id")
        if rule_id in self._heuristics:
            existing = self._heuristics[rule_id].__name__
            raise ValueError(f"Rule id {rule_id!r} already handled by {existing}")
        self._heuristics[rule_id] = rule_cls

    def heuristic_for(self, rule_id: str) -> Optional[Type[Rule]]:
        return self._heuristics.get(rule_id)

    def instantiate(self, window: Optional[EvidenceWindow] = None) -> Dict[str, Rule]:
        """One heuristic instance per rule id, sharing the same evidence window."""
        return {rule_id: cls(window) for rule_id, cls in self._heuristics.items()}

    def uncovered(self, catalog: RuleCatalog) -> List[str]:
        # Catalog rules without a heuristic are never evaluated.
        return [rule_id for rule_id in catalog.rule_ids() if rule_id not in self._heuristics]

    def ids(self) -> Iterable[str]:
        return self._heuristics.keys()

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._heuristics


registry = RuleRegistry()


def register_rule(rule_cls: Type[Rule]) -> Type[Rule]:
    registry.register(rule_cls)
    return rule_cls
