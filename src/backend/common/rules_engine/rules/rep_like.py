from __future__ import annotations

from ..context import RunContext
from ..models import Verdict
from ..registry import register_rule
from ..rule import Rule, tiered_status
from ..text import contains, pattern

SWITCHING = pattern(r"switch|replace|transfer")
COMPARISON = pattern(r"charge|fee|cost|benefit|feature|exit")


@register_rule
class REP_LIKE(Rule):
    """Like-for-like comparison; the catalog activates it for replacement business only."""

    rule_id = "rep-like"
    evidence_pattern = SWITCHING

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        switching = contains(text, SWITCHING)
        return self.verdict(tiered_status(switching and contains(text, COMPARISON), switching), text)
