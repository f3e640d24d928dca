from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

ANALYSIS_SOURCES = ("local", "remote")


class AnalyzerConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AnalyzerConfig:
    url: str = ""
    timeout_seconds: float = 30.0
    max_retries: int = 1
    source: str = "local"

    @property
    def enabled(self) -> bool:
        return bool(self.url)


def get_analyzer_config() -> AnalyzerConfig:
    """
    Load remote analyzer settings from environment variables.

    Reads:
      ANALYZER_URL, ANALYZER_TIMEOUT_SECONDS, ANALYZER_MAX_RETRIES, ANALYSIS_SOURCE
    An empty ANALYZER_URL disables remote delegation.
    """
    source = os.getenv("ANALYSIS_SOURCE", "local").strip().lower() or "local"
    if source not in ANALYSIS_SOURCES:
        raise AnalyzerConfigError("ANALYSIS_SOURCE must be 'local' or 'remote'.")

    return AnalyzerConfig(
        url=os.getenv("ANALYZER_URL", "").strip(),
        timeout_seconds=_env_number("ANALYZER_TIMEOUT_SECONDS", "30", float),
        max_retries=_env_number("ANALYZER_MAX_RETRIES", "1", int),
        source=source,
    )


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default).strip() or default
    try:
        value = cast(raw)
    except ValueError as exc:
        raise AnalyzerConfigError(f"Invalid value for environment variable {name}: {raw!r}") from exc
    if value < 0:
        raise AnalyzerConfigError(f"Environment variable {name} must not be negative.")
    return value
