from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from common.rules_engine.models import AnalysisReport

EXPORT_FILENAME = "suitability_review.json"


def build_export(report: AnalysisReport) -> dict[str, Any]:
    return {
        "generated_at": report.generated_at.isoformat(),
        "filters": dict(report.filters),
        "outcomes": report.outcomes.to_mapping(),
    }


def write_export(report: AnalysisReport, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(build_export(report), indent=2, ensure_ascii=False), encoding="utf-8")
    return path
