"""Profile signals shown next to match scores on the candidate dashboard."""
from __future__ import annotations

from skillmatch.models import CandidateProfile

_POINTS_PER_ITEM = 20
_MIN_SKILLS = 3
_MIN_VERIFIED_BIO = 50


def profile_completeness(profile: CandidateProfile | None) -> int:
    """Percent complete: name, bio, LinkedIn, 3+ skills and a CV, 20 each."""
    if profile is None:
        return 0
    checks = (
        bool(profile.full_name),
        bool(profile.bio),
        bool(profile.linkedin_url),
        len(profile.skills) >= _MIN_SKILLS,
        profile.has_cv,
    )
    return _POINTS_PER_ITEM * sum(checks)


def is_verified(profile: CandidateProfile | None) -> bool:
    if profile is None:
        return False
    return (
        bool(profile.linkedin_url)
        and len(profile.skills) >= _MIN_SKILLS
        and len(profile.bio) > _MIN_VERIFIED_BIO
    )
