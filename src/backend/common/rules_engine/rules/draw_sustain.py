from __future__ import annotations

from ..context import RunContext
from ..models import Verdict
from ..registry import register_rule
from ..rule import Rule, tiered_status
from ..text import contains, pattern

DRAWDOWN = pattern(r"drawdown|withdrawal|income")
SUSTAINABILITY = pattern(r"sustain|stress|sequence|contingen|buffer|bucketing|rate")


@register_rule
class DRAW_SUSTAIN(Rule):
    """Withdrawal sustainability; the catalog activates it for drawdown outside the under-55 band."""

    rule_id = "draw-sustain"
    evidence_pattern = DRAWDOWN

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        drawdown = contains(text, DRAWDOWN)
        return self.verdict(tiered_status(drawdown and contains(text, SUSTAINABILITY), drawdown), text)
