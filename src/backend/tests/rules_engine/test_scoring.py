import pytest

from common.rules_engine.models import OutcomeSet, RuleCatalog, RuleStatus, Verdict
from common.rules_engine.runner import evaluate
from common.rules_engine.ruleset import DEFAULT_CATALOG, FCA_COBS_RULESET
from common.rules_engine.scoring import (
    score_overall,
    score_section,
    score_subsection,
    summarize_scores,
)


def _outcomes(**statuses) -> OutcomeSet:
    return OutcomeSet(
        outcomes={rule_id.replace("_", "-"): Verdict(status=status) for rule_id, status in statuses.items()}
    )


def _section(section_id):
    return next(s for s in DEFAULT_CATALOG.sections if s.id == section_id)


def test_subsection_is_mean_of_weights(ctx):
    clarity = _section("comms").subsections[0]
    outcomes = _outcomes(no_absolute_claims=RuleStatus.PASS, disclosure_costs=RuleStatus.FLAG)
    assert score_subsection(clarity, outcomes, ctx) == pytest.approx(0.75)


def test_subsection_without_active_rules_is_none_not_zero(ctx):
    replacement = _section("suitability").subsections[2]
    outcomes = _outcomes(rep_like=RuleStatus.FAIL)
    # rep-like is inactive for standard advice, so its verdict is ignored.
    assert score_subsection(replacement, outcomes, ctx) is None


def test_subsection_skips_missing_and_not_evaluated_verdicts(ctx):
    clarity = _section("comms").subsections[0]
    outcomes = _outcomes(no_absolute_claims=RuleStatus.FAIL, disclosure_costs=RuleStatus.NOT_EVALUATED)
    assert score_subsection(clarity, outcomes, ctx) == 0.0
    assert score_subsection(clarity, OutcomeSet(), ctx) is None


def test_section_excludes_null_subsections(ctx):
    outcomes = _outcomes(
        obj_stated=RuleStatus.PASS,
        rationale_evidence=RuleStatus.FAIL,
        risk_declared=RuleStatus.PASS,
    )
    # objectives 0.5, risk 1.0, replacement/retirement inactive.
    assert score_section(_section("suitability"), outcomes, ctx) == pytest.approx(0.75)


def test_all_inapplicable_section_scores_none_and_does_not_move_overall(ctx, good_report):
    outcomes = evaluate(good_report, ctx)
    assert score_section(_section("appropriateness"), outcomes, ctx) is None

    baseline = score_overall(DEFAULT_CATALOG, outcomes, ctx)
    extended = dict(FCA_COBS_RULESET)
    extended["sections"] = list(FCA_COBS_RULESET["sections"]) + [
        {
            "id": "extra",
            "title": "Replacement-only checks",
            "subsections": [
                {
                    "id": "extra-sub",
                    "title": "Extra",
                    "rules": [
                        {
                            "id": "extra-rule",
                            "title": "Only for replacement",
                            "context": {"advice_type": ["replacement"]},
                        }
                    ],
                }
            ],
        }
    ]
    catalog = RuleCatalog.model_validate(extended)
    assert score_overall(catalog, outcomes, ctx) == baseline


def test_overall_none_when_nothing_scored(ctx):
    assert score_overall(DEFAULT_CATALOG, OutcomeSet(), ctx) is None


def test_summarize_scores_reports_every_level(ctx, bad_report):
    outcomes = evaluate(bad_report, ctx)
    summary = summarize_scores(DEFAULT_CATALOG, outcomes, ctx)
    assert set(summary.sections) == {s.id for s in DEFAULT_CATALOG.sections}
    assert summary.sections["appropriateness"] is None
    assert summary.subsections["replacement"] is None
    assert summary.overall == score_overall(DEFAULT_CATALOG, outcomes, ctx)


@pytest.mark.parametrize("advice_type", ["standard", "replacement", "drawdown", "db_transfer", "other"])
@pytest.mark.parametrize("channel", ["advised", "nonadvised"])
@pytest.mark.parametrize("age_band", ["under55", "55plus", "75plus"])
def test_scores_stay_within_bounds(make_ctx, good_report, bad_report, advice_type, channel, age_band):
    ctx = make_ctx(advice_type=advice_type, channel=channel, age_band=age_band)
    for text in (good_report, bad_report, ""):
        summary = summarize_scores(DEFAULT_CATALOG, evaluate(text, ctx), ctx)
        values = [summary.overall, *summary.sections.values(), *summary.subsections.values()]
        assert all(v is None or 0.0 <= v <= 1.0 for v in values)
