from .base import CollaboratorError, DataSource
from .analysis import ResumeAnalyzer
from .mock import MockSource
from .supabase import SupabaseSource

from skillmatch.log import get_logger

log = get_logger(__name__)

__all__ = [
    "CollaboratorError", "DataSource", "MockSource", "ResumeAnalyzer",
    "SupabaseSource", "get_data_source",
]


def get_data_source(env_getter) -> DataSource:
    if env_getter("SUPABASE_URL") and env_getter("SUPABASE_ANON_KEY"):
        log.info("Using data source: Supabase")
        return SupabaseSource.from_env(env_getter)

    log.info("No Supabase credentials found, using MockSource")
    return MockSource()
