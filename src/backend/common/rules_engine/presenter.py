from __future__ import annotations

import math
from typing import List, Optional

from pydantic import BaseModel, Field

from .context import RunContext, context_notes, is_rule_active
from .models import OutcomeSet, RuleCatalog, RuleStatus, Severity
from .scoring import score_overall, score_section, score_subsection

SCORE_PLACEHOLDER = "—"


def pct(score: Optional[float]) -> str:
    if score is None:
        return SCORE_PLACEHOLDER
    # Round half up to one decimal place.
    return f"{math.floor(score * 1000 + 0.5) / 10:.1f}%"


class RuleView(BaseModel):
    id: str
    title: str
    requirement: str
    severity: Severity
    references: List[str] = Field(default_factory=list)
    active: bool
    status: RuleStatus
    explanation: str
    evidence: Optional[str] = None


class SubsectionView(BaseModel):
    id: str
    title: str
    score: Optional[float] = None
    score_label: str = SCORE_PLACEHOLDER
    rules: List[RuleView] = Field(default_factory=list)


class SectionView(BaseModel):
    id: str
    title: str
    score: Optional[float] = None
    score_label: str = SCORE_PLACEHOLDER
    subsections: List[SubsectionView] = Field(default_factory=list)


class ReportView(BaseModel):
    title: str
    context_note: str
    overall: Optional[float] = None
    overall_label: str = SCORE_PLACEHOLDER
    sections: List[SectionView] = Field(default_factory=list)


def present(catalog: RuleCatalog, outcomes: OutcomeSet, ctx: RunContext) -> ReportView:
    sections = []
    for section in catalog.sections:
        subsections = []
        for subsection in section.subsections:
            rules = []
            for rule in subsection.rules:
                verdict = outcomes.get(rule.id)
                status = verdict.status if verdict else RuleStatus.NOT_EVALUATED
                rules.append(
                    RuleView(
                        id=rule.id,
                        title=rule.title,
                        requirement=rule.requirement,
                        severity=rule.severity,
                        references=list(rule.handbook_refs),
                        active=is_rule_active(rule, ctx),
                        status=status,
                        explanation=rule.explanation_for(status),
                        evidence=verdict.snippet if verdict else None,
                    )
                )
            ss_score = score_subsection(subsection, outcomes, ctx)
            subsections.append(
                SubsectionView(
                    id=subsection.id,
                    title=subsection.title,
                    score=ss_score,
                    score_label=pct(ss_score),
                    rules=rules,
                )
            )
        s_score = score_section(section, outcomes, ctx)
        sections.append(
            SectionView(
                id=section.id,
                title=section.title,
                score=s_score,
                score_label=pct(s_score),
                subsections=subsections,
            )
        )

    overall = score_overall(catalog, outcomes, ctx)
    return ReportView(
        title=catalog.title,
        context_note=context_notes(ctx),
        overall=overall,
        overall_label=pct(overall),
        sections=sections,
    )
