import pytest

from common.rules_engine.context import ADVICE_TYPES
from common.rules_engine.models import RuleStatus
from common.rules_engine.rules.no_absolute_claims import NO_ABSOLUTE_CLAIMS


def test_red_flag_phrase_fails_with_evidence(ctx):
    text = "Summary.\nThis fund offers guaranteed performance over any period."
    res = NO_ABSOLUTE_CLAIMS().evaluate(text, ctx)
    assert res.status == RuleStatus.FAIL
    assert "guaranteed performance" in res.snippet
    assert "\n" not in res.snippet


def test_cannot_lose_fails(ctx):
    res = NO_ABSOLUTE_CLAIMS().evaluate("You cannot lose with this plan.", ctx)
    assert res.status == RuleStatus.FAIL
    assert res.snippet.startswith("You cannot lose")


def test_clean_text_passes_without_evidence(ctx):
    res = NO_ABSOLUTE_CLAIMS().evaluate("Investments can fall as well as rise.", ctx)
    assert res.status == RuleStatus.PASS
    assert res.snippet is None


def test_bare_guaranteed_word_is_not_a_red_flag(ctx):
    res = NO_ABSOLUTE_CLAIMS().evaluate("The annuity is a guaranteed product.", ctx)
    assert res.status == RuleStatus.PASS


@pytest.mark.parametrize("advice_type", ADVICE_TYPES)
def test_negated_guarantee_passes_for_every_advice_type(make_ctx, advice_type):
    text = "Investment returns are not guaranteed. Guaranteed growth is not something we offer."
    res = NO_ABSOLUTE_CLAIMS().evaluate(text, make_ctx(advice_type=advice_type))
    assert res.status == RuleStatus.PASS
    assert res.snippet is None


def test_db_transfer_guaranteed_income_is_expected_terminology(make_ctx):
    text = "You would give up guaranteed income. There is no risk of shortfall."
    assert NO_ABSOLUTE_CLAIMS().evaluate(text, make_ctx(advice_type="db_transfer")).status == RuleStatus.PASS
    assert NO_ABSOLUTE_CLAIMS().evaluate(text, make_ctx(advice_type="standard")).status == RuleStatus.FAIL


def test_empty_text_passes(ctx):
    res = NO_ABSOLUTE_CLAIMS().evaluate("", ctx)
    assert res.status == RuleStatus.PASS
    assert res.snippet is None
