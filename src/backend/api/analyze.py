from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from common.rules_engine.catalog import build_catalog
from common.rules_engine.context import RunContext
from common.rules_engine.presenter import present
from common.rules_engine.ruleset import DEFAULT_CATALOG
from connectors.analyzer.config import AnalyzerConfigError, get_analyzer_config
from pipelines.analysis import InvalidReportText, analyze_report

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


class AnalyzeRequest(BaseModel):
    # Left untyped so a non-string text is reported as a 400, not a schema error.
    text: Any = None
    filters: Optional[Dict[str, Any]] = None
    context: Optional[Dict[str, Any]] = None
    source: Optional[str] = None


@router.post("/analyze")
def analyze(body: AnalyzeRequest):
    ctx = RunContext.from_filters(body.filters or body.context)
    try:
        config = get_analyzer_config()
    except AnalyzerConfigError as exc:
        logger.error("event=analyzer_config_invalid error=%s", exc)
        raise HTTPException(status_code=500, detail="Analyzer configuration is invalid.") from exc

    source = body.source or config.source
    try:
        report = analyze_report(body.text, ctx, catalog=DEFAULT_CATALOG, source=source, config=config)
    except InvalidReportText as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        # Unknown analysis source.
        raise HTTPException(status_code=400, detail=f"Invalid analysis request: {exc}") from exc

    return {
        "run_id": report.run_id,
        "generated_at": report.generated_at.isoformat(),
        "source": report.source,
        "filters": report.filters,
        "outcomes": report.outcomes.to_mapping(),
        "scores": report.scores.model_dump(mode="json"),
        "report": present(DEFAULT_CATALOG, report.outcomes, ctx).model_dump(mode="json"),
    }


@router.get("/rules")
def list_rules():
    return {
        "title": DEFAULT_CATALOG.title,
        "rules": [entry.model_dump() for entry in build_catalog(DEFAULT_CATALOG)],
    }


@router.get("/health")
def health():
    return {"status": "ok"}
