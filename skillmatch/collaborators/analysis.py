"""Client for the hosted ``analyze-resume`` function.

The function reads the application's job and resume, scores them with an
AI model and writes ``ats_score`` / ``is_high_scoring`` back to the
application.  We only invoke it and parse its reply.
"""
from __future__ import annotations

from typing import Any, Callable

import requests

from skillmatch.collaborators.base import CollaboratorError
from skillmatch.collaborators.records import coerce_skills
from skillmatch.log import get_logger
from skillmatch.models import ResumeAnalysis
from skillmatch.retry import retry

log = get_logger(__name__)

FUNCTION_NAME = "analyze-resume"


def analysis_from_payload(payload: dict[str, Any]) -> ResumeAnalysis:
    if "error" in payload:
        raise CollaboratorError(f"{FUNCTION_NAME} failed: {payload['error']}")
    try:
        score = int(round(float(payload.get("score", 0))))
    except (TypeError, ValueError) as exc:
        raise CollaboratorError(f"{FUNCTION_NAME} returned a non-numeric score") from exc
    return ResumeAnalysis(
        score=max(0, min(100, score)),
        skills=tuple(coerce_skills(payload.get("skills"))),
        summary=str(payload.get("summary") or ""),
        reasoning=str(payload.get("reasoning") or ""),
    )


class ResumeAnalyzer:
    def __init__(self, url: str, api_key: str, *, timeout: float = 60.0) -> None:
        if not url or not api_key:
            raise ValueError("Supabase URL and API key are required")
        self.endpoint = f"{url.rstrip('/')}/functions/v1/{FUNCTION_NAME}"
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_env(cls, env_getter: Callable[..., str]) -> "ResumeAnalyzer":
        return cls(env_getter("SUPABASE_URL"), env_getter("SUPABASE_ANON_KEY"))

    @retry(max_attempts=2, base_delay=2.0, retryable=(requests.ConnectionError, requests.Timeout))
    def _post(self, body: dict[str, Any]) -> requests.Response:
        return requests.post(
            self.endpoint,
            json=body,
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {self.api_key}",
            },
            timeout=self.timeout,
        )

    def analyze(self, application_id: str) -> ResumeAnalysis:
        try:
            r = self._post({"applicationId": application_id})
        except requests.RequestException as exc:
            raise CollaboratorError(f"{FUNCTION_NAME} unreachable: {exc}") from exc

        try:
            payload = r.json()
        except ValueError:
            payload = {}
        if not r.ok:
            reason = payload.get("error") if isinstance(payload, dict) else None
            raise CollaboratorError(f"{FUNCTION_NAME} returned HTTP {r.status_code}: {reason or r.text[:200]}")
        if not isinstance(payload, dict):
            raise CollaboratorError(f"{FUNCTION_NAME} returned an unexpected body")

        analysis = analysis_from_payload(payload)
        log.info("Analyzed application %s → %d%%", application_id, analysis.score)
        return analysis
