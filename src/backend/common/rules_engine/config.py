from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from .models import RuleStatus


class EvidenceWindow(BaseModel):
    # Characters kept before and after the start of the first match.
    before: int = Field(default=60, ge=0)
    after: int = Field(default=120, ge=0)


class ScoringConfig(BaseModel):
    """Numeric weight per verdict status; statuses without a weight are never scored."""

    weights: Dict[RuleStatus, float] = Field(
        default_factory=lambda: {
            RuleStatus.PASS: 1.0,
            RuleStatus.FLAG: 0.5,
            RuleStatus.FAIL: 0.0,
        }
    )

    def weight_for(self, status: RuleStatus) -> Optional[float]:
        return self.weights.get(status)
