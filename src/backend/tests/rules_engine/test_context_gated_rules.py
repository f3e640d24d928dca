from common.rules_engine.models import RuleStatus
from common.rules_engine.rules.app_check import APP_CHECK
from common.rules_engine.rules.draw_sustain import DRAW_SUSTAIN
from common.rules_engine.rules.rep_like import REP_LIKE


def test_rep_like_switch_with_comparison_passes(make_ctx):
    res = REP_LIKE().evaluate("We recommend you switch; exit charges are nil.", make_ctx(advice_type="replacement"))
    assert res.status == RuleStatus.PASS
    assert "switch" in res.snippet


def test_rep_like_switch_without_comparison_flags(make_ctx):
    res = REP_LIKE().evaluate("We recommend you switch providers.", make_ctx(advice_type="replacement"))
    assert res.status == RuleStatus.FLAG


def test_rep_like_without_switching_fails(make_ctx):
    res = REP_LIKE().evaluate("Charges are 1%.", make_ctx(advice_type="replacement"))
    assert res.status == RuleStatus.FAIL
    assert res.snippet is None


def test_draw_sustain_withdrawal_only_flags(make_ctx):
    ctx = make_ctx(advice_type="drawdown", age_band="55plus")
    res = DRAW_SUSTAIN().evaluate("You plan a withdrawal each month.", ctx)
    assert res.status == RuleStatus.FLAG
    assert "withdrawal" in res.snippet


def test_draw_sustain_with_stress_test_passes(make_ctx):
    ctx = make_ctx(advice_type="drawdown", age_band="75plus")
    res = DRAW_SUSTAIN().evaluate("Drawdown plan stress tested with a cash buffer.", ctx)
    assert res.status == RuleStatus.PASS


def test_draw_sustain_nothing_fails(make_ctx):
    ctx = make_ctx(advice_type="drawdown", age_band="55plus")
    assert DRAW_SUSTAIN().evaluate("Objective: growth.", ctx).status == RuleStatus.FAIL


def test_app_check_advised_is_always_pass(make_ctx):
    res = APP_CHECK().evaluate("No knowledge or experience assessed.", make_ctx(channel="advised"))
    assert res.status == RuleStatus.PASS
    assert res.snippet is None
    assert APP_CHECK().evaluate("", make_ctx(channel="advised")).status == RuleStatus.PASS


def test_app_check_nonadvised_requires_knowledge_and_experience(make_ctx):
    ctx = make_ctx(channel="nonadvised")
    passed = APP_CHECK().evaluate("Knowledge and experience assessed via questionnaire.", ctx)
    assert passed.status == RuleStatus.PASS
    assert passed.snippet.startswith("Knowledge")
    failed = APP_CHECK().evaluate("Execution-only trade.", ctx)
    assert failed.status == RuleStatus.FAIL
    assert failed.snippet is None
