from __future__ import annotations

import logging
from typing import Mapping, Optional

from .config import EvidenceWindow
from .context import RunContext, is_rule_active
from .models import OutcomeSet, RuleCatalog, Verdict
from .registry import registry
from .rule import Rule
from .ruleset import DEFAULT_CATALOG

logger = logging.getLogger(__name__)


class RulesRunner:
    def __init__(
        self,
        catalog: Optional[RuleCatalog] = None,
        rules: Optional[Mapping[str, Rule]] = None,
        *,
        window: Optional[EvidenceWindow] = None,
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        self._rules = dict(rules) if rules is not None else registry.instantiate(window)

    def run(self, text: str, ctx: RunContext, *, rule_ids: Optional[set[str]] = None) -> OutcomeSet:
        text = text or ""
        outcomes: dict[str, Verdict] = {}
        for definition in self.catalog.iter_rules():
            if rule_ids is not None and definition.id not in rule_ids:
                continue
            rule = self._rules.get(definition.id)
            if rule is None:
                logger.debug("event=rule_not_registered rule_id=%s", definition.id)
                continue
            if not is_rule_active(definition, ctx) and not rule.reports_when_inactive:
                continue
            outcomes[definition.id] = rule.evaluate(text, ctx)
        return OutcomeSet(outcomes=outcomes)


def evaluate(text: str, ctx: RunContext, catalog: Optional[RuleCatalog] = None) -> OutcomeSet:
    return RulesRunner(catalog).run(text, ctx)
