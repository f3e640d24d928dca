import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest


@pytest.fixture
def compliant_report() -> str:
    return (
        "Client objective: growth over a 15-year time horizon to support retirement.\n"
        "Risk: balanced. Capacity for loss: medium, confirmed in fact find.\n"
        "Charges: OCF 0.25%, platform fee 0.20%, adviser ongoing charge 0.50%.\n"
        "Rationale: the portfolio aligns with the client's objective and attitude to risk.\n"
        "Ongoing service: we review annually and send periodic statements."
    )
