"""
Job recommendations for one candidate.

Runs: fetch profile → fetch open jobs → rank → threshold → top N → report.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from skillmatch.collaborators import CollaboratorError, DataSource, get_data_source
from skillmatch.config import get_env, load_settings
from skillmatch.log import get_logger
from skillmatch.profile import profile_completeness
from skillmatch.report import build_recommendation_report, write_report
from skillmatch.scorer import filter_by_min_score, is_high_scoring, rank_jobs, top_matches

log = get_logger(__name__)


def run(
    candidate_id: str,
    *,
    max_items: int | None = None,
    min_score: int | None = None,
    write: bool = True,
    source: DataSource | None = None,
    reports_dir: Path | None = None,
) -> dict[str, Any]:
    settings = load_settings()
    matching = settings["matching"]
    limit = max_items if max_items is not None else settings["recommendations"]["max_items"]
    threshold = min_score if min_score is not None else matching["min_score"]
    high_score = matching["high_score_threshold"]
    source = source or get_data_source(get_env)

    profile = source.get_candidate_profile(candidate_id)
    if profile is None:
        raise LookupError(f"No candidate profile for {candidate_id!r}")
    completeness = profile_completeness(profile)

    jobs = source.list_open_jobs()
    log.info("Fetched %d open jobs for candidate %s", len(jobs), candidate_id)

    ranked = rank_jobs(jobs, profile.skills)
    eligible = filter_by_min_score(ranked, threshold)
    recommended = top_matches(eligible, limit)
    log.info(
        "Ranked %d jobs → %d at or above %d%% → showing %d",
        len(ranked), len(eligible), threshold, len(recommended),
    )

    report = build_recommendation_report(
        profile,
        recommended,
        total_ranked=len(ranked),
        completeness=completeness,
        tiers=matching.get("tiers"),
        high_score_threshold=high_score,
    )
    report_path = write_report(report, candidate_id, reports_dir) if write else None

    return {
        "jobs_found": len(jobs),
        "ranked_count": len(ranked),
        "eligible_count": len(eligible),
        "recommended": [
            {
                "job_id": r.job.id,
                "title": r.job.title,
                "company": r.job.company,
                "score": r.score,
                "high_scoring": is_high_scoring(r.score, high_score),
            }
            for r in recommended
        ],
        "profile_completeness": completeness,
        "report_path": str(report_path) if report_path else None,
        "report_preview": report[:2000] + "..." if len(report) > 2000 else report,
    }


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="skillmatch-recommend",
        description="Rank open jobs by how well they match a candidate's skills.",
    )
    p.add_argument("candidate_id", help="candidate profile id")
    p.add_argument("--max-items", type=int, default=None, help="number of jobs to recommend")
    p.add_argument("--min-score", type=int, default=None, help="hide jobs below this match %%")
    p.add_argument("--no-report", action="store_true", help="do not write the markdown report")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        result = run(
            args.candidate_id,
            max_items=args.max_items,
            min_score=args.min_score,
            write=not args.no_report,
        )
    except (LookupError, ValueError, CollaboratorError) as exc:
        log.error("Recommendation run failed: %s", exc)
        return 1

    for i, rec in enumerate(result["recommended"], 1):
        log.info("  %d. %s @ %s (%d%%)", i, rec["title"], rec["company"], rec["score"])
    if result["report_path"]:
        log.info("Report: %s", result["report_path"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
