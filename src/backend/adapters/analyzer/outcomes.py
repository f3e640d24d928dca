from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from common.rules_engine.context import RunContext, is_rule_active
from common.rules_engine.models import OutcomeSet, RuleCatalog, RuleDefinition, RuleStatus, Verdict
from common.rules_engine.registry import registry

logger = logging.getLogger(__name__)

_STATUS_ALIASES = {
    "pass": RuleStatus.PASS,
    "passed": RuleStatus.PASS,
    "ok": RuleStatus.PASS,
    "flag": RuleStatus.FLAG,
    "flagged": RuleStatus.FLAG,
    "warn": RuleStatus.FLAG,
    "warning": RuleStatus.FLAG,
    "fail": RuleStatus.FAIL,
    "failed": RuleStatus.FAIL,
}

_ID_KEYS = ("rule_id", "id", "ruleId")
_SNIPPET_KEYS = ("snippet", "evidence", "excerpt")


def outcomes_from_payload(payload: Any, catalog: RuleCatalog, ctx: RunContext) -> Optional[OutcomeSet]:
    """
    Build an OutcomeSet from a remote analyzer response, or None when nothing is usable.

    Accepted shapes:
      {"outcomes": {"<rule_id>": {"status": "pass", "snippet": "..."}}}
      {"outcomes": [{"rule_id": "...", "status": "...", "evidence": "..."}]}
      {"results": [...same entries...]}
      {"sections": [{"subsections": [{"rules": [...same entries...]}]}]}

    Notes:
    - rule ids not in the catalog are dropped
    - rules inactive under `ctx` are dropped unless their heuristic reports when inactive
    - statuses are matched case-insensitively; "warn" counts as flag
    - the result is ordered by the catalog, not by the payload
    """
    if not isinstance(payload, dict):
        return None

    raw = _select_entries(payload)
    if raw is None:
        logger.warning("event=analyzer_payload_unrecognized keys=%s", sorted(payload.keys()))
        return None

    known = {rule.id: rule for rule in catalog.iter_rules()}
    verdicts: dict[str, Verdict] = {}
    for rule_id, entry in raw:
        if rule_id not in known:
            logger.warning("event=analyzer_entry_dropped rule_id=%s reason=unknown_rule", rule_id)
            continue
        if not _reportable(known[rule_id], ctx):
            logger.warning("event=analyzer_entry_dropped rule_id=%s reason=inactive_rule", rule_id)
            continue
        verdict = _verdict_from_entry(entry)
        if verdict is None:
            logger.warning("event=analyzer_entry_dropped rule_id=%s reason=invalid_status", rule_id)
            continue
        verdicts[rule_id] = verdict

    if not verdicts:
        return None
    ordered = {rule_id: verdicts[rule_id] for rule_id in catalog.rule_ids() if rule_id in verdicts}
    return OutcomeSet(outcomes=ordered)


def _select_entries(payload: dict[str, Any]) -> Optional[list[tuple[str, Any]]]:
    outcomes = payload.get("outcomes")
    if isinstance(outcomes, dict):
        return [(str(k), v) for k, v in outcomes.items()]
    if isinstance(outcomes, list):
        return list(_keyed(outcomes))

    results = payload.get("results")
    if isinstance(results, list):
        return list(_keyed(results))

    sections = payload.get("sections")
    if isinstance(sections, list):
        return list(_keyed(_walk_sections(sections)))
    return None


def _walk_sections(sections: Iterable[Any]) -> Iterable[Any]:
    for section in sections:
        if not isinstance(section, dict):
            continue
        yield from _list_of(section, "rules")
        for subsection in _list_of(section, "subsections"):
            if isinstance(subsection, dict):
                yield from _list_of(subsection, "rules")


def _list_of(node: dict[str, Any], key: str) -> list[Any]:
    value = node.get(key)
    return value if isinstance(value, list) else []


def _reportable(rule: RuleDefinition, ctx: RunContext) -> bool:
    if is_rule_active(rule, ctx):
        return True
    heuristic = registry.heuristic_for(rule.id)
    return bool(heuristic and heuristic.reports_when_inactive)


def _keyed(entries: Iterable[Any]) -> Iterable[tuple[str, Any]]:
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        rule_id = next((entry[k] for k in _ID_KEYS if entry.get(k)), None)
        if rule_id is None:
            continue
        yield str(rule_id), entry


def _verdict_from_entry(entry: Any) -> Optional[Verdict]:
    if isinstance(entry, str):
        status_raw, snippet = entry, None
    elif isinstance(entry, dict):
        status_raw = entry.get("status")
        snippet = next((entry[k] for k in _SNIPPET_KEYS if entry.get(k) is not None), None)
    else:
        return None

    status = _STATUS_ALIASES.get(str(status_raw or "").strip().lower())
    if status is None:
        return None
    if not isinstance(snippet, str) or not snippet.strip():
        snippet = None
    return Verdict(status=status, snippet=snippet)
