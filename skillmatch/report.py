"""Markdown report of a candidate's job recommendations."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from skillmatch.config import REPORTS_DIR
from skillmatch.log import get_logger
from skillmatch.models import CandidateProfile, RankedJob
from skillmatch.scorer import HIGH_SCORE_THRESHOLD, is_high_scoring, normalize_skill, score_tier

log = get_logger(__name__)

_MISSING_SHOWN = 5


def _missing_line(missing: tuple[str, ...]) -> str:
    shown = ", ".join(missing[:_MISSING_SHOWN])
    extra = len(missing) - _MISSING_SHOWN
    return f"{shown} (+{extra} more)" if extra > 0 else shown


def _truncate(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def build_recommendation_report(
    profile: CandidateProfile,
    recommended: list[RankedJob],
    *,
    total_ranked: int | None = None,
    completeness: int | None = None,
    tiers: dict[str, int] | None = None,
    high_score_threshold: int = HIGH_SCORE_THRESHOLD,
) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    name = profile.full_name or profile.id
    lines: list[str] = [f"# Recommended Jobs for {name} ({date})", ""]

    total = len(recommended) if total_ranked is None else total_ranked
    summary = f"**{total}** jobs scored | **{len(recommended)}** recommended"
    if completeness is not None:
        summary += f" | profile **{completeness}%** complete"
    lines.append(summary)
    lines.append("")

    if not profile.skills:
        lines.append("_Add skills to your profile to get personalized recommendations._")
        lines.append("")

    listed = {normalize_skill(s) for s in profile.skills}
    detected = [s for s in profile.detected_skills if normalize_skill(s) not in listed]
    if detected:
        lines.append(f"**Detected in your CV but not on your profile:** {', '.join(detected)}")
        lines.append("")

    if not recommended:
        lines.append("No jobs match the current filters.")
        log.info("Built report for %s: no recommendations", profile.id)
        return "\n".join(lines)

    lines.append("## Top Matches")
    lines.append("")
    for r in recommended:
        job, match = r.job, r.match
        lines.append(f"### {job.title} @ {job.company}")
        lines.append(f"- **Match:** {r.score}% ({score_tier(r.score, tiers)})")
        if is_high_scoring(r.score, high_score_threshold):
            lines.append("- **High scoring** match")
        if job.location:
            lines.append(f"- **Location:** {job.location}")
        lines.append(f"- **Skills:** {len(match.matched_skills)}/{match.required_count}")
        if match.matched_skills:
            lines.append(f"- **You have:** {', '.join(match.matched_skills)}")
        if match.missing_skills:
            lines.append(f"- **Missing:** {_missing_line(match.missing_skills)}")
        elif match.is_perfect:
            lines.append("- Perfect match! You have all required skills.")
        lines.append("")

    lines.append("---")
    lines.append("")
    lines.append("## Quick Reference")
    lines.append("")
    lines.append("| # | Role | Company | Location | Match |")
    lines.append("|--:|------|---------|----------|------:|")
    for i, r in enumerate(recommended, 1):
        loc = r.job.location.split(",")[0][:18]
        lines.append(
            f"| {i} | {_truncate(r.job.title, 40)} | {_truncate(r.job.company, 22)} | {loc} | {r.score}% |"
        )
    lines.append("")

    log.info("Built report for %s: %d recommendation(s)", profile.id, len(recommended))
    return "\n".join(lines)


def write_report(content: str, candidate_id: str, reports_dir: Path | None = None) -> Path:
    reports_dir = reports_dir or REPORTS_DIR
    reports_dir.mkdir(parents=True, exist_ok=True)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = reports_dir / f"recommendations_{candidate_id}_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
