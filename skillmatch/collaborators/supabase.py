"""Read-only access to the hosted Postgres tables over the REST gateway.

Only the rows the scorer needs are read: open job listings, a candidate
profile and whether that candidate has uploaded a CV.
"""
from __future__ import annotations

from typing import Any, Callable

import requests

from skillmatch.collaborators.base import CollaboratorError, DataSource
from skillmatch.collaborators.records import job_from_record, profile_from_record
from skillmatch.log import get_logger
from skillmatch.models import CandidateProfile, Job
from skillmatch.retry import retry

log = get_logger(__name__)

APPLICATION_NAME = "skillmatch"


class SupabaseSource(DataSource):
    def __init__(
        self,
        url: str,
        api_key: str,
        *,
        access_token: str | None = None,
        timeout: float = 15.0,
    ) -> None:
        if not url or not api_key:
            raise ValueError("Supabase URL and API key are required")
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.access_token = access_token or api_key
        self.timeout = timeout

    @classmethod
    def from_env(cls, env_getter: Callable[..., str]) -> "SupabaseSource":
        return cls(
            env_getter("SUPABASE_URL"),
            env_getter("SUPABASE_ANON_KEY"),
            access_token=env_getter("SUPABASE_ACCESS_TOKEN") or None,
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
            "x-application-name": APPLICATION_NAME,
        }

    @retry(max_attempts=3, base_delay=1.0, retryable=(requests.ConnectionError, requests.Timeout))
    def _fetch(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        r = requests.get(
            f"{self.url}/rest/v1/{table}",
            params=params,
            headers=self.headers,
            timeout=self.timeout,
        )
        r.raise_for_status()
        return r.json()

    def _select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        try:
            rows = self._fetch(table, params)
        except (requests.RequestException, ValueError) as exc:
            raise CollaboratorError(f"Query on {table} failed: {exc}") from exc
        if not isinstance(rows, list):
            raise CollaboratorError(f"Query on {table} returned {type(rows).__name__}, expected a list")
        log.debug("%s returned %d row(s)", table, len(rows))
        return rows

    def list_open_jobs(self, limit: int | None = None) -> list[Job]:
        params = {
            "select": "*,company:companies(name,logo_url)",
            "status": "eq.open",
            "order": "created_at.desc",
        }
        if limit:
            params["limit"] = str(limit)
        return [job_from_record(row) for row in self._select("job_listings", params)]

    def has_cv_document(self, candidate_id: str) -> bool:
        rows = self._select(
            "candidate_documents",
            {
                "select": "id",
                "candidate_id": f"eq.{candidate_id}",
                "document_type": "eq.cv",
                "limit": "1",
            },
        )
        return bool(rows)

    def get_candidate_profile(self, candidate_id: str) -> CandidateProfile | None:
        rows = self._select(
            "candidate_profiles",
            {"select": "*", "id": f"eq.{candidate_id}", "limit": "1"},
        )
        if not rows:
            log.info("No profile for candidate %s", candidate_id)
            return None
        return profile_from_record(rows[0], has_cv=self.has_cv_document(candidate_id))
