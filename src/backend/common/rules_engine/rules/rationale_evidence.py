from __future__ import annotations

from ..context import RunContext
from ..models import Verdict
from ..registry import register_rule
from ..rule import Rule, tiered_status
from ..text import contains, pattern

CONNECTOR = pattern(r"aligns|rationale|because|therefore|suitable|meets needs")
REFERENCE = pattern(r"risk|capacity for loss|time horizon|objective")


@register_rule
class RATIONALE_EVIDENCE(Rule):
    rule_id = "rationale-evidence"
    evidence_pattern = pattern(r"rationale|because|suitable")

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        has_connector = contains(text, CONNECTOR)
        return self.verdict(tiered_status(has_connector and contains(text, REFERENCE), has_connector), text)
