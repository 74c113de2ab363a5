import pytest

from src.config.settings import Settings, get_settings
from src.core.interview_orchestrator import InterviewOrchestrator
from src.core.session_store import InMemorySessionStore


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def orchestrator(store, settings) -> InterviewOrchestrator:
    return InterviewOrchestrator(store=store, settings=settings)
