"""Anthropic Messages API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


@dataclass(frozen=True)
class ModelReply:
    """Status and first text block of a completion call."""

    status_code: int
    text: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300  # noqa: PLR2004


class ModelClient(Protocol):
    """Interface for single-turn model completions."""

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        system: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> ModelReply:
        """Send one user message and return the reply."""


@dataclass
class HttpxAnthropicClient(ModelClient):
    """HTTPX-backed client for the Messages API."""

    api_key: str
    base_url: str
    version: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, api_key: str, base_url: str, version: str
    ) -> "HttpxAnthropicClient":
        """Create a client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            version=version,
            http_client=httpx.AsyncClient(),
        )

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        system: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> ModelReply:
        """Call the Messages API; non-2xx statuses are reported, not raised."""
        response = await self.http_client.post(
            f"{self.base_url}/v1/messages",
            headers={
                "x-api-key": self.api_key,
                "anthropic-version": self.version,
            },
            json={
                "model": model,
                "max_tokens": max_tokens,
                "messages": [{"role": "user", "content": prompt}],
                "system": system,
                "temperature": temperature,
            },
            timeout=30,
        )
        if not response.is_success:
            return ModelReply(status_code=response.status_code)
        return ModelReply(
            status_code=response.status_code,
            text=_first_text_block(response.json()),
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _first_text_block(envelope: object) -> str | None:
    """Pull ``content[0].text`` out of a Messages API envelope."""
    if not isinstance(envelope, dict):
        return None
    content = envelope.get("content")
    if not isinstance(content, list) or not content:
        return None
    block = content[0]
    if not isinstance(block, dict):
        return None
    text = block.get("text")
    return text if isinstance(text, str) else None
