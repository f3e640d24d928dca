from unittest.mock import patch

import pytest

from common.rules_engine.models import RuleStatus
from connectors.analyzer.client import AnalyzerHttpError
from connectors.analyzer.config import AnalyzerConfig
from pipelines.analysis import (
    InvalidReportText,
    LocalOutcomeSource,
    RemoteOutcomeSource,
    analyze_report,
    get_outcome_source,
)

REMOTE = AnalyzerConfig(url="https://analyzer.example.com/analyze", max_retries=0)


@pytest.mark.parametrize("text", [None, "", "   \n ", 42, ["text"]])
def test_invalid_text_is_a_client_error(ctx, text):
    with pytest.raises(InvalidReportText):
        analyze_report(text, ctx)


def test_local_analysis_scores_sample(ctx, good_report):
    report = analyze_report(good_report, ctx)
    assert report.source == "local"
    assert report.scores.overall == 1.0
    assert report.filters == {
        "advice_type": "standard",
        "channel": "advised",
        "age_band": "55plus",
        "vulnerable": False,
    }
    assert report.outcomes["risk-declared"].status == RuleStatus.PASS


def test_remote_outcomes_are_used_when_usable(ctx, good_report):
    payload = {"outcomes": {"obj-stated": {"status": "fail", "snippet": None}}}
    with patch("pipelines.analysis.analyze_remote", return_value=payload) as remote:
        report = analyze_report(good_report, ctx, source="remote", config=REMOTE)
    remote.assert_called_once()
    assert report.source == "remote"
    assert report.outcomes.ids() == ["obj-stated"]
    assert report.scores.overall == 0.0


def test_remote_failure_falls_back_to_local(ctx, good_report):
    with patch("pipelines.analysis.analyze_remote", side_effect=AnalyzerHttpError(502, "Bad Gateway")):
        report = analyze_report(good_report, ctx, source="remote", config=REMOTE)
    assert report.source == "local"
    assert report.scores.overall == 1.0


def test_remote_without_outcomes_falls_back_to_local(ctx, good_report):
    with patch("pipelines.analysis.analyze_remote", return_value={"error": "no model"}):
        report = analyze_report(good_report, ctx, source="remote", config=REMOTE)
    assert report.source == "local"


def test_remote_not_configured_falls_back_without_calling(ctx, good_report):
    with patch("pipelines.analysis.analyze_remote") as remote:
        report = analyze_report(good_report, ctx, source="remote", config=AnalyzerConfig(url=""))
    remote.assert_not_called()
    assert report.source == "local"


def test_get_outcome_source():
    assert isinstance(get_outcome_source(""), LocalOutcomeSource)
    assert isinstance(get_outcome_source("REMOTE", REMOTE), RemoteOutcomeSource)
    with pytest.raises(ValueError):
        get_outcome_source("cloud")


@pytest.mark.parametrize(
    "payload",
    [
        {"sections": [{"rules": 5}]},
        {"sections": [{"subsections": [{"rules": "obj-stated"}]}]},
    ],
)
def test_malformed_remote_payload_falls_back_to_local(ctx, good_report, payload):
    with patch("pipelines.analysis.analyze_remote", return_value=payload):
        report = analyze_report(good_report, ctx, source="remote", config=REMOTE)
    assert report.source == "local"
    assert report.scores.overall == 1.0


def test_remote_read_timeout_falls_back_to_local(ctx, good_report):
    with patch("connectors.analyzer.client.urlopen") as urlopen:
        urlopen.return_value.__enter__.return_value.read.side_effect = TimeoutError("timed out")
        report = analyze_report(good_report, ctx, source="remote", config=REMOTE)
    assert report.source == "local"


def test_remote_verdicts_for_inactive_rules_are_not_reported(ctx, good_report):
    payload = {"outcomes": {"obj-stated": "pass", "rep-like": "fail"}}
    with patch("pipelines.analysis.analyze_remote", return_value=payload):
        report = analyze_report(good_report, ctx, source="remote", config=REMOTE)
    assert report.source == "remote"
    assert "rep-like" not in report.outcomes
    assert report.outcomes.ids() == ["obj-stated"]
