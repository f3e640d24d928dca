"""Roll verdicts up into subsection, section and overall scores.

Scores are fractions in [0, 1]. A scope with nothing active and evaluated
scores None, and None never enters the mean of the enclosing scope.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .config import ScoringConfig
from .context import RunContext, is_rule_active
from .models import OutcomeSet, RuleCatalog, ScoreSummary, Section, Subsection

_DEFAULT_SCORING = ScoringConfig()


def _mean(values: Iterable[Optional[float]]) -> Optional[float]:
    used = [v for v in values if v is not None]
    if not used:
        return None
    return sum(used) / len(used)


def score_subsection(
    subsection: Subsection,
    outcomes: OutcomeSet,
    ctx: RunContext,
    scoring: ScoringConfig = _DEFAULT_SCORING,
) -> Optional[float]:
    weights = []
    for rule in subsection.rules:
        if not is_rule_active(rule, ctx):
            continue
        verdict = outcomes.get(rule.id)
        if verdict is None:
            continue
        weights.append(scoring.weight_for(verdict.status))
    return _mean(weights)


def score_section(
    section: Section,
    outcomes: OutcomeSet,
    ctx: RunContext,
    scoring: ScoringConfig = _DEFAULT_SCORING,
) -> Optional[float]:
    return _mean(score_subsection(ss, outcomes, ctx, scoring) for ss in section.subsections)


def score_overall(
    catalog: RuleCatalog,
    outcomes: OutcomeSet,
    ctx: RunContext,
    scoring: ScoringConfig = _DEFAULT_SCORING,
) -> Optional[float]:
    return _mean(score_section(s, outcomes, ctx, scoring) for s in catalog.sections)


def summarize_scores(
    catalog: RuleCatalog,
    outcomes: OutcomeSet,
    ctx: RunContext,
    scoring: ScoringConfig = _DEFAULT_SCORING,
) -> ScoreSummary:
    subsections: dict[str, Optional[float]] = {}
    sections: dict[str, Optional[float]] = {}
    for section in catalog.sections:
        sub_scores = []
        for subsection in section.subsections:
            value = score_subsection(subsection, outcomes, ctx, scoring)
            subsections[subsection.id] = value
            sub_scores.append(value)
        sections[section.id] = _mean(sub_scores)
    return ScoreSummary(
        overall=_mean(sections.values()),
        sections=sections,
        subsections=subsections,
    )
