from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Protocol

from adapters.analyzer.outcomes import outcomes_from_payload
from common.rules_engine.context import RunContext
from common.rules_engine.models import AnalysisReport, OutcomeSet, RuleCatalog
from common.rules_engine.ruleset import DEFAULT_CATALOG
from common.rules_engine.runner import RulesRunner
from common.rules_engine.scoring import summarize_scores
from connectors.analyzer.client import AnalyzerHttpError, analyze_remote
from connectors.analyzer.config import AnalyzerConfig, get_analyzer_config

logger = logging.getLogger(__name__)


class InvalidReportText(ValueError):
    pass


class OutcomeSource(Protocol):
    name: str

    def outcomes(self, text: str, ctx: RunContext, catalog: RuleCatalog) -> Optional[OutcomeSet]:
        """Return an outcome set, or None when this source has nothing usable."""
        ...


class LocalOutcomeSource:
    name = "local"

    def outcomes(self, text: str, ctx: RunContext, catalog: RuleCatalog) -> Optional[OutcomeSet]:
        return RulesRunner(catalog).run(text, ctx)


class RemoteOutcomeSource:
    name = "remote"

    def __init__(self, config: AnalyzerConfig) -> None:
        self._config = config

    def outcomes(self, text: str, ctx: RunContext, catalog: RuleCatalog) -> Optional[OutcomeSet]:
        if not self._config.enabled:
            logger.info("event=remote_analyzer_skipped reason=not_configured")
            return None
        try:
            payload = analyze_remote(self._config, text, ctx)
        except AnalyzerHttpError as exc:
            logger.warning("event=remote_analyzer_failed status=%s error=%s", exc.status, exc)
            return None
        try:
            outcomes = outcomes_from_payload(payload, catalog, ctx)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.warning("event=remote_analyzer_unusable reason=malformed_payload error=%s", exc)
            return None
        if outcomes is None:
            logger.info("event=remote_analyzer_unusable reason=no_outcomes")
        return outcomes


def get_outcome_source(name: str, config: Optional[AnalyzerConfig] = None) -> OutcomeSource:
    """Resolve an outcome source by name (local|remote)."""
    source = (name or "").strip().lower()
    if source in ("local", ""):
        return LocalOutcomeSource()
    if source == "remote":
        return RemoteOutcomeSource(config or get_analyzer_config())
    raise ValueError(f"Unknown analysis source '{name}' (expected 'local' or 'remote').")


def validate_report_text(text: Any) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InvalidReportText("Missing or invalid `text` field")
    return text.strip()


def analyze_report(
    text: Any,
    ctx: RunContext,
    *,
    catalog: Optional[RuleCatalog] = None,
    source: str = "local",
    config: Optional[AnalyzerConfig] = None,
) -> AnalysisReport:
    """Evaluate one report; a remote source that fails or returns nothing falls back to local rules."""
    text = validate_report_text(text)
    catalog = catalog or DEFAULT_CATALOG

    chosen = get_outcome_source(source, config)
    outcomes = chosen.outcomes(text, ctx, catalog)
    used = chosen.name
    if not outcomes:
        if chosen.name != LocalOutcomeSource.name:
            logger.info("event=analysis_fallback source=%s", chosen.name)
        local = LocalOutcomeSource()
        outcomes = local.outcomes(text, ctx, catalog)
        used = local.name

    return AnalysisReport(
        run_id=str(uuid.uuid4()),
        generated_at=datetime.now(timezone.utc),
        source=used,
        filters=ctx.as_filters(),
        outcomes=outcomes,
        scores=summarize_scores(catalog, outcomes, ctx),
    )
