"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fitmon.adapters.anthropic_client import HttpxAnthropicClient
from fitmon.config import Settings
from fitmon.services.analysis import AnalysisService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: AnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    model_client = HttpxAnthropicClient.create(
        api_key=resolved_settings.anthropic_api_key,
        base_url=resolved_settings.anthropic_base_url,
        version=resolved_settings.anthropic_version,
    )
    analysis_service = AnalysisService(
        client=model_client,
        model=resolved_settings.anthropic_model,
        max_tokens=resolved_settings.anthropic_max_tokens,
        temperature=resolved_settings.anthropic_temperature,
    )

    async def close_resources() -> None:
        await model_client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
