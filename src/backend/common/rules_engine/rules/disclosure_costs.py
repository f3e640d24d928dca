from __future__ import annotations

from ..context import RunContext
from ..models import Verdict
from ..registry import register_rule
from ..rule import Rule, tiered_status
from ..text import contains, pattern

COST_KEYWORDS = pattern(r"ocf|ongoing|adviser|advice fee|platform|fee|fees|charge|charges|cost|costs")
NUMERIC = pattern(r"%|£|\d+\.\d{2}|\d+")


@register_rule
class DISCLOSURE_COSTS(Rule):
    rule_id = "disclosure-costs"
    evidence_pattern = pattern(r"(ocf|adviser|platform|fee|charge|cost).{0,40}(%|£|\d)")

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        has_costs = contains(text, COST_KEYWORDS)
        has_figures = contains(text, NUMERIC)
        return self.verdict(tiered_status(has_costs and has_figures, has_costs), text)
