from __future__ import annotations

from ..context import RunContext
from ..models import Verdict
from ..registry import register_rule
from ..rule import Rule, tiered_status
from ..text import contains, pattern

OBJECTIVE = pattern(r"objective|goal|aim")
HORIZON = pattern(r"retire|retirement|growth|income|time horizon|years?")


@register_rule
class OBJ_STATED(Rule):
    rule_id = "obj-stated"
    evidence_pattern = OBJECTIVE

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        has_objective = contains(text, OBJECTIVE)
        return self.verdict(tiered_status(has_objective and contains(text, HORIZON), has_objective), text)
