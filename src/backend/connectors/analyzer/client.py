from __future__ import annotations

import http.client
import json
import logging
import time
from typing import Any
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from common.rules_engine.context import RunContext

from .config import AnalyzerConfig

logger = logging.getLogger(__name__)


class AnalyzerHttpError(RuntimeError):
    def __init__(self, status: int, message: str, body: str | None = None):
        super().__init__(f"Analyzer HTTP {status}: {message}")
        self.status = status
        self.body = body


def build_payload(text: str, ctx: RunContext) -> dict[str, Any]:
    return {
        "report_text": text,
        "advice_context": {
            "advice_type": ctx.advice_type,
            "channel": ctx.channel,
            "age_band": ctx.age_band,
            "vulnerable": bool(ctx.vulnerable),
        },
        "options": {
            "include_explanations": True,
            "include_fix_suggestions": True,
        },
    }


def analyze_remote(config: AnalyzerConfig, text: str, ctx: RunContext) -> dict[str, Any]:
    """
    POST a report to the remote analyzer and return the decoded JSON object.

    Retries 429/5xx responses and network errors up to `config.max_retries` times.
    """
    if not config.enabled:
        raise AnalyzerHttpError(0, "Analyzer URL not configured.")

    body = json.dumps(build_payload(text, ctx)).encode("utf-8")
    retries = 0
    backoff = 0.5

    while True:
        req = Request(config.url, data=body, method="POST")
        req.add_header("Content-Type", "application/json")
        req.add_header("Accept", "application/json")

        try:
            with urlopen(req, timeout=config.timeout_seconds) as resp:
                raw_bytes = resp.read()
                break
        except HTTPError as exc:
            err_body = _error_body(exc)
            status = exc.code

            if status in (429, 500, 502, 503, 504) and retries < config.max_retries:
                logger.warning("event=analyzer_retry status=%s attempt=%s", status, retries + 1)
                time.sleep(backoff)
                retries += 1
                backoff *= 2
                continue

            raise AnalyzerHttpError(status, str(exc.reason), err_body) from exc
        except (OSError, http.client.HTTPException) as exc:
            # URLError, timeouts and dropped connections during read().
            reason = getattr(exc, "reason", exc)
            if retries < config.max_retries:
                logger.warning("event=analyzer_retry reason=%s attempt=%s", reason, retries + 1)
                time.sleep(backoff)
                retries += 1
                backoff *= 2
                continue
            raise AnalyzerHttpError(0, str(exc)) from exc

    try:
        raw = raw_bytes.decode("utf-8")
    except UnicodeDecodeError as exc:
        lossy = raw_bytes.decode("utf-8", errors="replace")
        raise AnalyzerHttpError(200, "Analyzer response is not valid UTF-8.", lossy) from exc

    try:
        data = json.loads(raw) if raw else {}
    except json.JSONDecodeError as exc:
        raise AnalyzerHttpError(200, "Analyzer returned malformed JSON.", raw) from exc
    if not isinstance(data, dict):
        raise AnalyzerHttpError(200, "Analyzer response is not a JSON object.", raw)
    return data


def _error_body(exc: HTTPError) -> str | None:
    if not exc.fp:
        return None
    try:
        return exc.read().decode("utf-8", errors="replace")
    except (OSError, http.client.HTTPException):
        return None
