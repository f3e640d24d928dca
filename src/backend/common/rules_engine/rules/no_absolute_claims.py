from __future__ import annotations

from ..context import RunContext
from ..models import RuleStatus, Verdict
from ..registry import register_rule
from ..rule import Rule
from ..text import contains_any, pattern

# A negated guarantee is a risk warning, not a promise.
NEGATIONS = (
    "not guaranteed",
    "are not guaranteed",
    "is not guaranteed",
    "no guarantee that",
    "cannot be guaranteed",
    "not a guarantee",
)

# Expected terminology when the advice is a defined benefit transfer.
DB_TRANSFER_TERMS = (
    "guaranteed income",
    "guaranteed benefits",
)

RED_FLAGS = (
    "guaranteed returns",
    "guaranteed growth",
    "guaranteed performance",
    "guaranteed to make money",
    "cannot lose",
    "no risk",
)


def triggers_absolute_claim(text: str, ctx: RunContext) -> bool:
    if contains_any(text, NEGATIONS):
        return False
    if ctx.advice_type == "db_transfer" and contains_any(text, DB_TRANSFER_TERMS):
        return False
    return contains_any(text, RED_FLAGS)


@register_rule
class NO_ABSOLUTE_CLAIMS(Rule):
    rule_id = "no-absolute-claims"
    evidence_pattern = pattern(r"guaranteed|cannot lose|no risk")

    def evaluate(self, text: str, ctx: RunContext) -> Verdict:
        if triggers_absolute_claim(text, ctx):
            return self.verdict(RuleStatus.FAIL, text)
        return self.verdict(RuleStatus.PASS, text, with_evidence=False)
