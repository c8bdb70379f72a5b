"""Turn backend rows into model objects.

Rows come straight from the hosted Postgres tables and fields are often
missing or null.  Everything is coerced here so the scorer only ever sees
lists of strings.
"""
from __future__ import annotations

from typing import Any

from skillmatch.log import get_logger
from skillmatch.models import CandidateProfile, Job

log = get_logger(__name__)


def coerce_skills(value: Any) -> list[str]:
    """Skill array from a row field: null → [], entries forced to str.

    ``None`` entries are dropped; a bare string is a single skill.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, dict):
        log.debug("Ignoring mapping where a skill list was expected")
        return []
    try:
        items = list(value)
    except TypeError:
        return [str(value)]
    return [s if isinstance(s, str) else str(s) for s in items if s is not None]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _company_name(row: dict[str, Any]) -> str:
    company = row.get("company")
    if isinstance(company, dict):
        return _text(company.get("name"))
    return _text(company or row.get("company_name"))


def job_from_record(row: dict[str, Any]) -> Job:
    return Job(
        id=_text(row.get("id")),
        title=_text(row.get("title")),
        company=_company_name(row),
        location=_text(row.get("location")),
        required_skills=coerce_skills(row.get("required_skills")),
        job_type=row.get("job_type"),
        status=_text(row.get("status")) or "open",
        created_at=row.get("created_at"),
        raw=row,
    )


def profile_from_record(row: dict[str, Any] | None, *, has_cv: bool = False) -> CandidateProfile | None:
    if row is None:
        return None
    return CandidateProfile(
        id=_text(row.get("id")),
        full_name=_text(row.get("full_name")),
        bio=_text(row.get("bio")),
        linkedin_url=_text(row.get("linkedin_url")),
        skills=coerce_skills(row.get("skills")),
        detected_skills=coerce_skills(row.get("detected_skills")),
        has_cv=has_cv,
        raw=row,
    )
