from __future__ import annotations

from ..context import RunContext
from ..models import Verdict
from ..registry import register_rule
from ..rule import Rule, tiered_status
from ..text import contains, pattern

# "Risk: balanced", "risk low", "risk profile: high" or "balanced risk".
RISK_LEVEL = pattern(
    r"risk(?: profile| tolerance| level| appetite)?\s*[:\- ]\s*(low|medium|balanced|high)"
    r"|(low|medium|balanced|high)[\- ]risk"
)
CAPACITY_FOR_LOSS = pattern(r"capacity for loss")


@register_rule
class RISK_DECLARED(Rule):
    rule_id = "risk-declared"
    evidence_pattern = pattern(r"risk|capacity for loss")

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        has_level = contains(text, RISK_LEVEL)
        has_capacity = contains(text, CAPACITY_FOR_LOSS)
        return self.verdict(tiered_status(has_level and has_capacity, has_level or has_capacity), text)
