import pytest

from common.rules_engine.models import RuleStatus
from common.rules_engine.rules.ongoing_service import ONGOING_SERVICE


@pytest.mark.parametrize(
    "text",
    [
        "Ongoing service: annual review.",
        "We provide ongoing advice.",
        "Your plan is reviewed quarterly.",
        "We review annually and issue periodic statements.",
        "You will receive an annual review.",
    ],
)
def test_service_with_cadence_passes(ctx, text):
    assert ONGOING_SERVICE().evaluate(text, ctx).status == RuleStatus.PASS


def test_bare_ongoing_flags(ctx):
    res = ONGOING_SERVICE().evaluate("Adviser ongoing 0.50%.", ctx)
    assert res.status == RuleStatus.FLAG
    assert "ongoing" in res.snippet


def test_no_service_fails(ctx):
    res = ONGOING_SERVICE().evaluate("Recommendation: equity fund.", ctx)
    assert res.status == RuleStatus.FAIL
    assert res.snippet is None
