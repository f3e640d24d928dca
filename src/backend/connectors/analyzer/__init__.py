"""Remote analyzer connector (network lives here; payload normalization lives in src/backend/adapters/analyzer)."""

from .client import AnalyzerHttpError, analyze_remote
from .config import AnalyzerConfig, AnalyzerConfigError, get_analyzer_config

__all__ = ["AnalyzerConfig", "AnalyzerConfigError", "AnalyzerHttpError", "analyze_remote", "get_analyzer_config"]
