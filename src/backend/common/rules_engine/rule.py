from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Pattern

from .config import EvidenceWindow
from .context import RunContext
from .models import RuleStatus, Verdict
from .text import evidence


class Rule(ABC):
    rule_id: str
    evidence_pattern: Optional[Pattern[str]] = None
    # Report a verdict even when the catalog deactivates the rule for the run context.
    reports_when_inactive: bool = False

    def __init__(self, window: Optional[EvidenceWindow] = None):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")
        self.window = window or EvidenceWindow()

    @abstractmethod
    def evaluate(self, text: str, ctx: RunContext) -> Verdict:  # pragma: no cover
        raise NotImplementedError

    def evidence(self, text: str, rex: Optional[Pattern[str]] = None) -> Optional[str]:
        rex = rex or self.evidence_pattern
        if rex is None:
            return None
        return evidence(text, rex, self.window)

    def verdict(self, status: RuleStatus, text: str, *, with_evidence: bool = True) -> Verdict:
        return Verdict(status=status, snippet=self.evidence(text) if with_evidence else None)


def tiered_status(full: bool, partial: bool) -> RuleStatus:
    if full:
        return RuleStatus.PASS
    if partial:
        return RuleStatus.FLAG
    return RuleStatus.FAIL
