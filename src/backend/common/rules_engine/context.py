from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from .models import RuleDefinition

ADVICE_TYPES = ("standard", "replacement", "drawdown", "db_transfer")
CHANNELS = ("advised", "nonadvised")
AGE_BANDS = ("under55", "55plus", "75plus")

# Accepted spellings for incoming filter keys (the browser client sends camelCase).
_FILTER_ALIASES = {
    "advice_type": ("advice_type", "adviceType"),
    "channel": ("channel",),
    "age_band": ("age_band", "ageBand"),
    "vulnerable": ("vulnerable",),
}


@dataclass(frozen=True)
class RunContext:
    advice_type: str = "standard"
    channel: str = "advised"
    age_band: str = "55plus"
    vulnerable: bool = False

    @classmethod
    def from_filters(cls, filters: Optional[Mapping[str, Any]]) -> "RunContext":
        if not filters:
            return cls()
        values: dict[str, Any] = {}
        for name, aliases in _FILTER_ALIASES.items():
            for alias in aliases:
                raw = filters.get(alias)
                if raw is None or raw == "":
                    continue
                values[name] = _as_bool(raw) if name == "vulnerable" else str(raw).strip()
                break
        return cls(**values)

    def value_for(self, dimension: str) -> Any:
        return getattr(self, dimension, None)

    def as_filters(self) -> dict[str, Any]:
        return asdict(self)


def _as_bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    return bool(raw)


def is_rule_active(rule: RuleDefinition, ctx: RunContext) -> bool:
    if rule.context is None:
        return True
    for dimension, allowed in rule.context.dimensions().items():
        if ctx.value_for(dimension) not in allowed:
            return False
    return True


def context_notes(ctx: RunContext) -> str:
    notes = []
    if ctx.advice_type != "standard":
        notes.append(ctx.advice_type.replace("_", " ", 1))
    if ctx.channel == "nonadvised":
        notes.append("non-advised")
    if ctx.age_band != "under55":
        notes.append(ctx.age_band)
    if ctx.vulnerable:
        notes.append("vulnerability flagged")
    if not notes:
        return "Standard checks only."
    return "Additional checks: " + ", ".join(notes)
