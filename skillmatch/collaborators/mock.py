"""In-memory data source for offline runs and tests."""
from __future__ import annotations

from skillmatch.collaborators.base import DataSource
from skillmatch.log import get_logger
from skillmatch.models import CandidateProfile, Job

log = get_logger(__name__)

MOCK_CANDIDATE_ID = "mock-candidate"


def _sample_jobs() -> list[Job]:
    return [
        Job(
            id="mock-1",
            title="Full Stack Engineer",
            company="TechCorp",
            location="Remote",
            required_skills=["React", "PostgreSQL", "Docker"],
            job_type="full-time",
        ),
        Job(
            id="mock-2",
            title="Frontend Developer",
            company="Pixel Labs",
            location="London",
            required_skills=["React", "TypeScript", "Tailwind CSS", "Jest"],
            job_type="full-time",
        ),
        Job(
            id="mock-3",
            title="Platform Engineer",
            company="CloudScale",
            location="Berlin, Remote",
            required_skills=["Kubernetes", "Terraform", "Go"],
            job_type="contract",
        ),
    ]


def _sample_profile() -> CandidateProfile:
    return CandidateProfile(
        id=MOCK_CANDIDATE_ID,
        full_name="Sam Rivera",
        bio="Full stack developer focused on React front ends and Node.js services.",
        linkedin_url="https://www.linkedin.com/in/example",
        skills=["react", "Node.js", "docker", "TypeScript"],
        has_cv=True,
    )


class MockSource(DataSource):
    def __init__(
        self,
        jobs: list[Job] | None = None,
        profiles: list[CandidateProfile] | None = None,
    ) -> None:
        self.jobs = _sample_jobs() if jobs is None else list(jobs)
        profiles = [_sample_profile()] if profiles is None else profiles
        self.profiles = {p.id: p for p in profiles}

    def list_open_jobs(self, limit: int | None = None) -> list[Job]:
        jobs = [j for j in self.jobs if j.status == "open"]
        if limit:
            jobs = jobs[:limit]
        log.info("MockSource serving %d sample jobs", len(jobs))
        return jobs

    def get_candidate_profile(self, candidate_id: str) -> CandidateProfile | None:
        return self.profiles.get(candidate_id)
