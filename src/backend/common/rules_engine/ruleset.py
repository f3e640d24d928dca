"""Built-in FCA (COBS) demo ruleset.

Each rule carries its matching intent as prose; the heuristics that decide a
verdict live in `rules/`, keyed by the same rule id.
"""

from __future__ import annotations

from .models import RuleCatalog

FCA_COBS_RULESET = {
    "title": "FCA (COBS) Demo Ruleset",
    "sections": [
        {
            "id": "comms",
            "title": "COBS 4–6: Communications & Disclosures",
            "subsections": [
                {
                    "id": "clarity",
                    "title": "Fair, clear & not misleading",
                    "rules": [
                        {
                            "id": "no-absolute-claims",
                            "title": "No absolutes / guarantees",
                            "requirement": "Avoid claims that could mislead (e.g., “guaranteed”, “no risk”).",
                            "pass_criteria": "No absolutes; risks balanced.",
                            "flag_criteria": "Promotional tone, weak balance.",
                            "fail_criteria": "Contains absolutes.",
                            "handbook_refs": ["COBS 4.2"],
                            "severity": "critical",
                        },
                        {
                            "id": "disclosure-costs",
                            "title": "Costs & charges disclosed",
                            "requirement": "Clear disclosure of adviser/platform/product costs.",
                            "pass_criteria": "Costs with % or £.",
                            "flag_criteria": "Costs mentioned but no figures.",
                            "fail_criteria": "No costs mentioned.",
                            "handbook_refs": ["COBS 6", "COBS 6.1ZA"],
                            "severity": "major",
                        },
                    ],
                }
            ],
        },
        {
            "id": "suitability",
            "title": "COBS 9: Suitability",
            "subsections": [
                {
                    "id": "objectives",
                    "title": "Client objectives & rationale",
                    "rules": [
                        {
                            "id": "obj-stated",
                            "title": "Objectives stated",
                            "requirement": "Documented objectives & time horizon.",
                            "pass_criteria": "Clear objective + horizon.",
                            "flag_criteria": "Vague objective.",
                            "fail_criteria": "No objective.",
                            "handbook_refs": ["COBS 9A.2"],
                            "severity": "major",
                        },
                        {
                            "id": "rationale-evidence",
                            "title": "Recommendation rationale",
                            "requirement": "Explain why rec meets needs, risk, capacity.",
                            "pass_criteria": "Rationale links to risk/capacity/objectives.",
                            "flag_criteria": "Rationale thin.",
                            "fail_criteria": "No rationale.",
                            "handbook_refs": ["COBS 9A.2.1R"],
                            "severity": "major",
                        },
                    ],
                },
                {
                    "id": "risk",
                    "title": "Risk & capacity for loss",
                    "rules": [
                        {
                            "id": "risk-declared",
                            "title": "Risk profile declared",
                            "requirement": "State risk tolerance and capacity for loss.",
                            "pass_criteria": "Both present and consistent.",
                            "flag_criteria": "Only one or vague.",
                            "fail_criteria": "Neither present.",
                            "handbook_refs": ["COBS 9A"],
                            "severity": "major",
                        }
                    ],
                },
                {
                    "id": "replacement",
                    "title": "Replacement business",
                    "rules": [
                        {
                            "id": "rep-like",
                            "title": "Like-for-like comparison (if switching)",
                            "requirement": "Compare charges/features; best-interest rationale.",
                            "pass_criteria": "Quantified comparison + tailored rationale.",
                            "flag_criteria": "Mentions switch but lacks figures/features.",
                            "fail_criteria": "No comparison.",
                            "handbook_refs": ["COBS 9A"],
                            "severity": "critical",
                            "context": {"advice_type": ["replacement"]},
                        }
                    ],
                },
                {
                    "id": "retirement",
                    "title": "Retirement income (drawdown)",
                    "rules": [
                        {
                            "id": "draw-sustain",
                            "title": "Withdrawal sustainability & sequencing risk",
                            "requirement": "Discuss sustainability and contingencies.",
                            "pass_criteria": "Rate + stress/sustainability + contingency.",
                            "flag_criteria": "Mentions withdrawals without detail.",
                            "fail_criteria": "No sustainability discussion.",
                            "handbook_refs": ["COBS 9A", "FG21/5"],
                            "severity": "major",
                            "context": {"advice_type": ["drawdown"], "age_band": ["55plus", "75plus"]},
                        }
                    ],
                },
            ],
        },
        {
            "id": "appropriateness",
            "title": "COBS 10A: Appropriateness (non-advised)",
            "subsections": [
                {
                    "id": "knowledge",
                    "title": "Knowledge & experience",
                    "rules": [
                        {
                            "id": "app-check",
                            "title": "Appropriateness test completed",
                            "requirement": "K&E assessed for complex products (non-advised).",
                            "pass_criteria": "K&E clearly assessed.",
                            "flag_criteria": "Partial/unclear.",
                            "fail_criteria": "No appropriateness test.",
                            "handbook_refs": ["COBS 10A"],
                            "severity": "critical",
                            "context": {"channel": ["nonadvised"]},
                        }
                    ],
                }
            ],
        },
        {
            "id": "ongoing",
            "title": "COBS 16: Ongoing requirements",
            "subsections": [
                {
                    "id": "statements",
                    "title": "Ongoing service & reports",
                    "rules": [
                        {
                            "id": "ongoing-service",
                            "title": "Ongoing service explained",
                            "requirement": "Explain ongoing service and reporting cadence.",
                            "pass_criteria": "Clear service & cadence.",
                            "flag_criteria": "Mentioned but vague.",
                            "fail_criteria": "No statement.",
                            "handbook_refs": ["COBS 16"],
                            "severity": "minor",
                        }
                    ],
                }
            ],
        },
    ],
}

DEFAULT_CATALOG = RuleCatalog.model_validate(FCA_COBS_RULESET)
