from __future__ import annotations

from abc import ABC, abstractmethod

from skillmatch.models import CandidateProfile, Job


class CollaboratorError(RuntimeError):
    """A backend call failed or returned something unusable."""


class DataSource(ABC):
    @abstractmethod
    def list_open_jobs(self, limit: int | None = None) -> list[Job]:
        pass

    @abstractmethod
    def get_candidate_profile(self, candidate_id: str) -> CandidateProfile | None:
        pass
