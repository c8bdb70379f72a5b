"""Data models for jobs, candidates and match results."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Job:
    id: str
    title: str
    company: str = ""
    location: str = ""
    required_skills: list[str] = field(default_factory=list)
    job_type: str | None = None
    status: str = "open"
    created_at: str | None = None
    raw: dict = field(default_factory=dict)


@dataclass
class CandidateProfile:
    id: str
    full_name: str = ""
    bio: str = ""
    linkedin_url: str = ""
    skills: list[str] = field(default_factory=list)
    detected_skills: list[str] = field(default_factory=list)
    has_cv: bool = False
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one job's required skills against a candidate.

    ``matched_skills`` and ``missing_skills`` hold the job's original labels
    in the job's order; together they account for every required label.
    """

    score: int
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()

    @property
    def required_count(self) -> int:
        return len(self.matched_skills) + len(self.missing_skills)

    @property
    def is_perfect(self) -> bool:
        return bool(self.matched_skills) and not self.missing_skills


@dataclass(frozen=True)
class RankedJob:
    job: Job
    score: int
    match: MatchResult


@dataclass(frozen=True)
class ResumeAnalysis:
    score: int
    skills: tuple[str, ...] = ()
    summary: str = ""
    reasoning: str = ""
