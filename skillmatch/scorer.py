"""Score jobs against a candidate's skills and rank recommendations."""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from skillmatch.log import get_logger
from skillmatch.models import Job, MatchResult, RankedJob

log = get_logger(__name__)

HIGH_SCORE_THRESHOLD = 85

# Lower bound of each colour band, checked from the top down.
DEFAULT_TIERS: dict[str, int] = {"strong": 80, "good": 60, "fair": 40}
LOWEST_TIER = "weak"


def normalize_skill(label: str) -> str:
    """Comparison key for a skill label: trimmed and lowercased, nothing more."""
    return label.strip().lower()


def _percent(part: int, whole: int) -> int:
    # round-half-up in integer arithmetic; avoids float ties like 12.5 → 12
    return (200 * part + whole) // (2 * whole)


def compute_match(
    required_skills: Sequence[str] | None,
    candidate_skills: Iterable[str] | None,
) -> MatchResult:
    """Match a job's required skills against a candidate's skills.

    Labels are compared after trimming and lowercasing; there is no synonym or
    substring matching, so "ReactJS" and "React" are different skills.  Every
    required label is classified on its own, duplicates included, and reported
    with its original spelling.  Absent inputs count as empty; with no required
    skills the score is 0.
    """
    required = list(required_skills or [])
    have = {normalize_skill(s) for s in candidate_skills or []}

    matched: list[str] = []
    missing: list[str] = []
    for skill in required:
        if normalize_skill(skill) in have:
            matched.append(skill)
        else:
            missing.append(skill)

    score = _percent(len(matched), len(required)) if required else 0
    return MatchResult(
        score=score,
        matched_skills=tuple(matched),
        missing_skills=tuple(missing),
    )


def rank_jobs(
    jobs: Iterable[Job] | None,
    candidate_skills: Iterable[str] | None,
) -> list[RankedJob]:
    """Score every job and order by descending score.

    The sort is stable: jobs with equal scores keep their input order.  Nothing
    is filtered out here; see :func:`filter_by_min_score`.
    """
    skills = list(candidate_skills or [])
    ranked: list[RankedJob] = []
    for job in jobs or []:
        match = compute_match(job.required_skills, skills)
        ranked.append(RankedJob(job=job, score=match.score, match=match))
    ranked.sort(key=lambda r: r.score, reverse=True)
    if ranked:
        log.debug("Ranked %d jobs, best score %d%%", len(ranked), ranked[0].score)
    return ranked


def filter_by_min_score(ranked: Iterable[RankedJob], min_score: int) -> list[RankedJob]:
    return [r for r in ranked if r.score >= min_score]


def top_matches(ranked: Sequence[RankedJob], limit: int = 3) -> list[RankedJob]:
    if limit <= 0:
        return []
    return list(ranked[:limit])


def score_tier(score: int, bands: dict[str, int] | None = None) -> str:
    """Name of the colour band a score falls into ("strong", "good", ...)."""
    bands = bands or DEFAULT_TIERS
    for name, floor in sorted(bands.items(), key=lambda kv: kv[1], reverse=True):
        if score >= floor:
            return name
    return LOWEST_TIER


def is_high_scoring(score: int, threshold: int = HIGH_SCORE_THRESHOLD) -> bool:
    return score >= threshold
