from __future__ import annotations

from ..context import RunContext
from ..models import Verdict
from ..registry import register_rule
from ..rule import Rule, tiered_status
from ..text import contains, pattern

SERVICE_AND_CADENCE = pattern(
    r"ongoing advice|ongoing service|review(?:ed)? (annually|yearly|quarterly)|periodic statement"
    r"|(annual|yearly|quarterly) reviews?"
)
ONGOING = pattern(r"ongoing")


@register_rule
class ONGOING_SERVICE(Rule):
    rule_id = "ongoing-service"
    evidence_pattern = pattern(r"ongoing|review|statement")

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        return self.verdict(tiered_status(contains(text, SERVICE_AND_CADENCE), contains(text, ONGOING)), text)
