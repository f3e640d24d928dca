from __future__ import annotations

from ..context import RunContext
from ..models import RuleStatus, Verdict
from ..registry import register_rule
from ..rule import Rule
from ..text import contains, pattern

KNOWLEDGE_AND_EXPERIENCE = pattern(r"appropriate|appropriateness|knowledge|experience")


@register_rule
class APP_CHECK(Rule):
    rule_id = "app-check"
    evidence_pattern = KNOWLEDGE_AND_EXPERIENCE
    # Advised runs still report the exempt pass; scoring skips it because the catalog keeps it inactive.
    reports_when_inactive = True

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        if ctx.channel != "nonadvised":
            return Verdict(status=RuleStatus.PASS, snippet=None)
        if contains(text, KNOWLEDGE_AND_EXPERIENCE):
            return self.verdict(RuleStatus.PASS, text)
        return self.verdict(RuleStatus.FAIL, text)
