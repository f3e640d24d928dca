import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work,
# even when pytest's rootdir is the repository root.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.rules_engine.context import RunContext
from common.rules_engine.samples import SAMPLE_BAD, SAMPLE_GOOD


@pytest.fixture
def make_ctx():
    def _make(
        *,
        advice_type: str = "standard",
        channel: str = "advised",
        age_band: str = "55plus",
        vulnerable: bool = False,
    ) -> RunContext:
        return RunContext(
            advice_type=advice_type,
            channel=channel,
            age_band=age_band,
            vulnerable=vulnerable,
        )

    return _make


@pytest.fixture
def ctx(make_ctx) -> RunContext:
    return make_ctx()


@pytest.fixture
def good_report() -> str:
    return SAMPLE_GOOD


@pytest.fixture
def bad_report() -> str:
    return SAMPLE_BAD
