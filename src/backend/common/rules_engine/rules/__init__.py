from .no_absolute_claims import NO_ABSOLUTE_CLAIMS
from .disclosure_costs import DISCLOSURE_COSTS
from .obj_stated import OBJ_STATED
from .rationale_evidence import RATIONALE_EVIDENCE
from .risk_declared import RISK_DECLARED
from .rep_like import REP_LIKE
from .draw_sustain import DRAW_SUSTAIN
from .app_check import APP_CHECK
from .ongoing_service import ONGOING_SERVICE

__all__ = [
    "NO_ABSOLUTE_CLAIMS",
    "DISCLOSURE_COSTS",
    "OBJ_STATED",
    "RATIONALE_EVIDENCE",
    "RISK_DECLARED",
    "REP_LIKE",
    "DRAW_SUSTAIN",
    "APP_CHECK",
    "ONGOING_SERVICE",
]
