"""HTTP client for OpenAI-compatible chat-completion endpoints."""

from __future__ import annotations

import json
from dataclasses import dataclass
from http.client import HTTPException
from typing import Callable, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..config import GenerationConfig
from ..errors import BackendTransportError
from ..logging import get_logger

NO_README_GENERATED = "No README generated."

logger = get_logger("llm.client")


@dataclass(frozen=True)
class PromptRequest:
    """A single chat-completion request for README generation."""

    prompt: str
    model: str
    max_tokens: int
    endpoint: str
    api_key: str
    request_timeout: float


class GenerationClient:
    """Sends a rendered prompt to the generation backend and returns its text."""

    def __init__(
        self,
        config: GenerationConfig,
        *,
        transport: Callable[[PromptRequest], str] | None = None,
    ) -> None:
        self.config = config
        self._transport = transport or self._http_transport

    def generate(
        self,
        prompt: str,
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Return the raw generated text for ``prompt``.

        Any backend failure is raised as :class:`BackendTransportError`; no
        retries are attempted.
        """
        request = PromptRequest(
            prompt=prompt,
            model=model or self.config.model,
            max_tokens=max_tokens if max_tokens is not None else self.config.max_tokens,
            endpoint=self.config.endpoint_url,
            api_key=self.config.api_key,
            request_timeout=self.config.request_timeout,
        )
        logger.info("Requesting README from %s (model %s)", request.endpoint, request.model)
        try:
            return self._transport(request)
        except BackendTransportError:
            raise
        except (HTTPException, OSError, ValueError) as exc:
            raise BackendTransportError(f"Generation request failed: {exc}") from exc

    @staticmethod
    def build_payload(request: PromptRequest) -> dict[str, object]:
        return {
            "model": request.model,
            "messages": [{"role": "user", "content": request.prompt}],
            "max_tokens": request.max_tokens,
        }

    @staticmethod
    def _http_transport(request: PromptRequest) -> str:
        data = json.dumps(GenerationClient.build_payload(request)).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {request.api_key}",
        }
        http_request = Request(request.endpoint, data=data, headers=headers, method="POST")

        try:
            with urlopen(http_request, timeout=request.request_timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
            message = detail.strip() or exc.reason
            raise BackendTransportError(
                f"Generation backend failed with status {exc.code}: {message}"
            ) from exc
        except URLError as exc:
            raise BackendTransportError(f"Generation backend unreachable: {exc.reason}") from exc
        except TimeoutError as exc:
            raise BackendTransportError("Generation backend timed out") from exc
        except HTTPException as exc:
            raise BackendTransportError(
                f"Generation backend sent a malformed response: {exc!r}"
            ) from exc

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise BackendTransportError("Generation backend returned invalid JSON") from exc

        return GenerationClient.extract_content(payload)

    @staticmethod
    def extract_content(payload: object) -> str:
        """Return ``choices[0].message.content`` or the fixed fallback text."""
        if not isinstance(payload, dict):
            return NO_README_GENERATED
        choices = payload.get("choices")
        if not isinstance(choices, list) or not choices:
            return NO_README_GENERATED
        first = choices[0]
        if not isinstance(first, dict):
            return NO_README_GENERATED
        message = first.get("message")
        if isinstance(message, dict):
            content = message.get("content")
            if isinstance(content, str):
                return content
        return NO_README_GENERATED


__all__ = ["GenerationClient", "NO_README_GENERATED", "PromptRequest"]
