"""Rule evaluation and scoring engine for suitability reports.

This package intentionally contains only domain logic:
- Inputs are report text + a run context (advice type, channel, age band, vulnerability).
- No HTTP, file import, or remote analyzer calls live here.
"""

from .context import RunContext, is_rule_active
from .models import (
    AnalysisReport,
    OutcomeSet,
    RuleCatalog,
    RuleDefinition,
    RuleStatus,
    ScoreSummary,
    Section,
    Severity,
    Subsection,
    Verdict,
)
from .ruleset import DEFAULT_CATALOG
from .runner import RulesRunner, evaluate
from .scoring import score_overall, score_section, score_subsection, summarize_scores

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
