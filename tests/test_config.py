import asyncio
import logging

from src import dependencies
from src.config.logging_config import configure_logging
from src.config.settings import Settings, get_settings
from src.models.interview import InterviewState


def test_defaults(settings) -> None:
    assert settings.app_name == "MockMate"
    assert settings.seconds_per_question == 120
    assert settings.checkpoint_interval == 5
    assert settings.session_expiry_hours == 24.0


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("MOCKMATE_CHECKPOINT_INTERVAL", "3")
    monkeypatch.setenv("MOCKMATE_DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.checkpoint_interval == 3
    assert settings.debug is True


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_configure_logging_uses_settings(monkeypatch) -> None:
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging(Settings(_env_file=None, log_level="warning"))

    assert calls["level"] == "WARNING"
    assert calls["format"] == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def test_debug_forces_debug_level(monkeypatch) -> None:
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging(Settings(_env_file=None, debug=True))

    assert calls["level"] == logging.DEBUG


def test_orchestrator_singleton() -> None:
    first = dependencies.get_orchestrator()

    assert dependencies.get_orchestrator() is first

    asyncio.run(dependencies.cleanup())
    assert dependencies.get_orchestrator() is not first
    asyncio.run(dependencies.cleanup())


def test_built_orchestrator_uses_checkpoint_interval() -> None:
    orchestrator = dependencies.build_orchestrator(
        settings=Settings(_env_file=None, checkpoint_interval=2),
    )

    async def scenario():
        started = await orchestrator.start_interview("user-1", "backend")
        await orchestrator.submit_answer(started["id"], "memory://a", 90_000)
        await orchestrator.continue_interview(started["id"])
        await orchestrator.submit_answer(started["id"], "memory://a", 90_000)
        return await orchestrator.continue_interview(started["id"])

    assert asyncio.run(scenario())["state"] == InterviewState.CHECKPOINT
