from __future__ import annotations

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class RuleStatus(str, Enum):
    PASS = "pass"
    FLAG = "flag"
    FAIL = "fail"
    NOT_EVALUATED = "not evaluated"


class Severity(str, Enum):
    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"


NOT_EVALUATED_EXPLANATION = "Not evaluated"


class ApplicabilityContext(BaseModel):
    """Allowed values per context dimension. A missing dimension allows every value."""

    model_config = ConfigDict(frozen=True)

    advice_type: Optional[tuple[str, ...]] = None
    channel: Optional[tuple[str, ...]] = None
    age_band: Optional[tuple[str, ...]] = None

    def dimensions(self) -> Dict[str, tuple[str, ...]]:
        return {
            name: allowed
            for name, allowed in (
                ("advice_type", self.advice_type),
                ("channel", self.channel),
                ("age_band", self.age_band),
            )
            if allowed is not None
        }


class RuleDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    requirement: str = ""
    pass_criteria: str = ""
    flag_criteria: str = ""
    fail_criteria: str = ""
    severity: Severity = Severity.MAJOR
    handbook_refs: tuple[str, ...] = ()
    context: Optional[ApplicabilityContext] = None

    def explanation_for(self, status: RuleStatus) -> str:
        return {
            RuleStatus.PASS: self.pass_criteria,
            RuleStatus.FLAG: self.flag_criteria,
            RuleStatus.FAIL: self.fail_criteria,
        }.get(status, NOT_EVALUATED_EXPLANATION)


class Subsection(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    rules: tuple[RuleDefinition, ...] = ()


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    subsections: tuple[Subsection, ...] = ()

    def iter_rules(self) -> Iterator[RuleDefinition]:
        for subsection in self.subsections:
            yield from subsection.rules


class RuleCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    sections: tuple[Section, ...] = ()

    @model_validator(mode="after")
    def _rule_ids_unique(self) -> "RuleCatalog":
        seen: set[str] = set()
        for rule in self.iter_rules():
            if rule.id in seen:
                raise ValueError(f"Duplicate rule id in catalog: {rule.id}")
            seen.add(rule.id)
        return self

    def iter_rules(self) -> Iterator[RuleDefinition]:
        for section in self.sections:
            yield from section.iter_rules()

    def rule_ids(self) -> List[str]:
        return [rule.id for rule in self.iter_rules()]

    def get_rule(self, rule_id: str) -> Optional[RuleDefinition]:
        for rule in self.iter_rules():
            if rule.id == rule_id:
                return rule
        return None


class Verdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: RuleStatus
    snippet: Optional[str] = None


class OutcomeSet(BaseModel):
    """Rule id -> verdict for one run, in catalog order."""

    model_config = ConfigDict(frozen=True)

    outcomes: Mapping[str, Verdict] = Field(default_factory=dict, validate_default=True)

    @field_validator("outcomes", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Verdict]) -> Mapping[str, Verdict]:
        return MappingProxyType(dict(value))

    @field_serializer("outcomes")
    def _serialize_outcomes(self, value: Mapping[str, Verdict]) -> Dict[str, Any]:
        return {rule_id: verdict.model_dump() for rule_id, verdict in value.items()}

    def get(self, rule_id: str) -> Optional[Verdict]:
        return self.outcomes.get(rule_id)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self.outcomes

    def __getitem__(self, rule_id: str) -> Verdict:
        return self.outcomes[rule_id]

    def __len__(self) -> int:
        return len(self.outcomes)

    def ids(self) -> List[str]:
        return list(self.outcomes.keys())

    def to_mapping(self) -> Dict[str, Dict[str, Optional[str]]]:
        return {
            rule_id: {"status": verdict.status.value, "snippet": verdict.snippet}
            for rule_id, verdict in self.outcomes.items()
        }


class ScoreSummary(BaseModel):
    overall: Optional[float] = None
    sections: Dict[str, Optional[float]] = Field(default_factory=dict)
    subsections: Dict[str, Optional[float]] = Field(default_factory=dict)


class AnalysisReport(BaseModel):
    run_id: str
    generated_at: datetime
    source: str = "local"

    filters: Dict[str, object] = Field(default_factory=dict)
    outcomes: OutcomeSet = Field(default_factory=OutcomeSet)
    scores: ScoreSummary = Field(default_factory=ScoreSummary)
