"""
Shared fixtures for skillmatch tests
"""

import os

os.environ.setdefault("SKILLMATCH_LOG_FILE", "false")

from unittest.mock import MagicMock

import pytest

from skillmatch.models import CandidateProfile, Job


@pytest.fixture
def default_settings(monkeypatch, tmp_path):
    """Point settings at a missing file so built-in defaults apply"""
    monkeypatch.setenv("SKILLMATCH_SETTINGS", str(tmp_path / "missing.yaml"))


@pytest.fixture
def no_sleep(monkeypatch):
    """Make retry backoff instant"""
    monkeypatch.setattr("skillmatch.retry.time.sleep", lambda _s: None)


@pytest.fixture
def sample_jobs():
    return [
        Job(id="j1", title="Full Stack Engineer", company="TechCorp",
            location="Remote", required_skills=["React", "PostgreSQL", "Docker"]),
        Job(id="j2", title="Data Engineer", company="DataWorks",
            location="Berlin", required_skills=["Python", "Spark"]),
        Job(id="j3", title="Frontend Developer", company="Pixel Labs",
            location="London, UK", required_skills=["React", "TypeScript"]),
        Job(id="j4", title="Office Manager", company="Acme",
            location="Paris", required_skills=[]),
    ]


@pytest.fixture
def sample_profile():
    return CandidateProfile(
        id="cand-1",
        full_name="Alex Doe",
        bio="Engineer with a decade of experience building web products end to end.",
        linkedin_url="https://www.linkedin.com/in/alexdoe",
        skills=["react", "Node.js", "docker", "typescript"],
        has_cv=True,
    )


def make_response(payload=None, status=200, text=""):
    """Build a requests.Response stand-in"""
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 400
    resp.text = text
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp
