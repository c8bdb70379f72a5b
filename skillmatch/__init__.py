"""Candidate/job skill-match scoring and recommendation ranking."""
from skillmatch.models import CandidateProfile, Job, MatchResult, RankedJob, ResumeAnalysis
from skillmatch.scorer import compute_match, rank_jobs

__all__ = [
    "CandidateProfile", "Job", "MatchResult", "RankedJob", "ResumeAnalysis",
    "compute_match", "rank_jobs",
]
