"""Shared test fixtures."""

import json
import logging
from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from fitmon.adapters.anthropic_client import ModelClient, ModelReply
from fitmon.api.app import create_app
from fitmon.app_logging import configure_logging
from fitmon.config import Settings
from fitmon.containers import AppContainer
from fitmon.services.analysis import AnalysisService

ALLOWED_ORIGIN = "https://fitmon-six.vercel.app"


def model_reply(payload: object, status_code: int = 200) -> ModelReply:
    """Build a successful reply whose text is the JSON-encoded payload."""
    return ModelReply(status_code=status_code, text=json.dumps(payload))


@dataclass
class FakeModelClient(ModelClient):
    """Fake model client that records calls and returns a fixed reply."""

    reply: ModelReply = field(
        default_factory=lambda: model_reply(
            {"activity": "running", "calories_burned": 500, "duration_minutes": 45}
        )
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        system: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> ModelReply:
        self.calls.append(
            {
                "model": model,
                "system": system,
                "prompt": prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings() -> Settings:
    return Settings(anthropic_api_key="test-key")


@pytest.fixture
def model_client() -> FakeModelClient:
    return FakeModelClient()


@pytest.fixture
def analysis_service(
    settings: Settings, model_client: FakeModelClient
) -> AnalysisService:
    return AnalysisService(
        client=model_client,
        model=settings.anthropic_model,
        max_tokens=settings.anthropic_max_tokens,
        temperature=settings.anthropic_temperature,
    )


@pytest.fixture
def container(settings: Settings, analysis_service: AnalysisService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def app_logs(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> pytest.LogCaptureFixture:
    """Capture records from the ``fitmon`` logger, which does not propagate."""
    configure_logging()
    monkeypatch.setattr(logging.getLogger("fitmon"), "propagate", True)
    caplog.set_level(logging.INFO, logger="fitmon")
    return caplog
