from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from typing import Any, Protocol

from openai import APIError, APITimeoutError, AsyncOpenAI

from apps.api.app.core.config import get_settings
from apps.api.app.services.llm.errors import (
    MissingApiKeyError,
    ProviderRequestError,
    UnknownProviderError,
)
from apps.api.app.services.usage.meter import compute_cost_usd, cost_from_usage
from storia_llm import ModelSpec, get_model_spec

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextModelRequest:
    provider: str
    model: str
    payload: dict[str, Any]
    user_id: str
    workspace_id: str | None = None


@dataclass(frozen=True)
class CallOptions:
    expected_output_tokens: int | None = None
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True)
class TextModelUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    cached_input_tokens: int = 0
    reasoning_tokens: int = 0
    total_cost_usd: float | None = None


@dataclass(frozen=True)
class TextModelResponse:
    provider: str
    model: str
    output: str
    usage: TextModelUsage | None = None


class TextModelClient(Protocol):
    async def call(self, request: TextModelRequest, options: CallOptions | None = None) -> TextModelResponse: ...


class ProviderAdapter(Protocol):
    name: str

    def supports(self, model: str) -> bool: ...

    async def call(self, request: TextModelRequest, spec: ModelSpec) -> TextModelResponse: ...


def _read(obj: Any, key: str, default: Any = None) -> Any:
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(key, default)
    return getattr(obj, key, default)


def extract_output_text(response: Any) -> str:
    """Collect generated text from a Responses API result.

    Prefers the SDK's aggregated ``output_text`` and falls back to joining
    every ``output_text`` part of every output message.
    """
    output_text = _read(response, "output_text")
    if isinstance(output_text, str) and output_text:
        return output_text

    segments: list[str] = []
    for message in _read(response, "output") or []:
        for part in _read(message, "content") or []:
            if _read(part, "type") == "output_text":
                text = _read(part, "text")
                if isinstance(text, str):
                    segments.append(text)
    return "\n".join(segments).strip()


def extract_usage(response: Any) -> TextModelUsage | None:
    usage = _read(response, "usage")
    if usage is None:
        return None
    return TextModelUsage(
        input_tokens=_read(usage, "input_tokens", 0) or 0,
        output_tokens=_read(usage, "output_tokens", 0) or 0,
        cached_input_tokens=_read(_read(usage, "input_tokens_details"), "cached_tokens", 0) or 0,
        reasoning_tokens=_read(_read(usage, "output_tokens_details"), "reasoning_tokens", 0) or 0,
    )


class OpenAIResponsesAdapter:
    name = "openai"

    def __init__(self, client: AsyncOpenAI | None = None) -> None:
        self._client = client

    def supports(self, model: str) -> bool:
        try:
            get_model_spec(self.name, model)
        except ValueError:
            return False
        return True

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            settings = get_settings()
            if not settings.openai_api_key:
                raise MissingApiKeyError(self.name)
            self._client = AsyncOpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
                organization=settings.openai_organization_id,
                timeout=settings.llm_request_timeout_seconds,
                max_retries=0,
            )
        return self._client

    async def call(self, request: TextModelRequest, spec: ModelSpec) -> TextModelResponse:
        client = self._get_client()
        try:
            response = await client.responses.create(model=spec.name, **request.payload)
        except APITimeoutError as exc:
            raise ProviderRequestError(
                self.name,
                "Request timed out. The response may have completed on the provider side but was not received.",
            ) from exc
        except APIError as exc:
            raise ProviderRequestError(self.name, str(exc)) from exc

        return TextModelResponse(
            provider=self.name,
            model=spec.name,
            output=extract_output_text(response),
            usage=extract_usage(response),
        )


_providers: dict[str, ProviderAdapter] = {}


def register_provider(adapter: ProviderAdapter) -> None:
    _providers[adapter.name] = adapter


def get_provider(name: str) -> ProviderAdapter:
    adapter = _providers.get(name)
    if adapter is None:
        raise UnknownProviderError(name, list(_providers))
    return adapter


register_provider(OpenAIResponsesAdapter())


class ModelInvocationClient:
    async def call(self, request: TextModelRequest, options: CallOptions | None = None) -> TextModelResponse:
        options = options or CallOptions()
        spec = get_model_spec(request.provider, request.model)
        adapter = get_provider(request.provider)

        estimated_cost = None
        if options.expected_output_tokens:
            estimated_cost = compute_cost_usd(spec, input_tokens=0, output_tokens=options.expected_output_tokens)

        started = time.monotonic()
        response = await adapter.call(request, spec)
        latency_ms = int((time.monotonic() - started) * 1000)

        cost = cost_from_usage(spec, response.usage)
        if response.usage is not None:
            response = replace(response, usage=replace(response.usage, total_cost_usd=cost))

        _LOGGER.info(
            "Model call completed. provider=%s model=%s user_id=%s workspace_id=%s latency_ms=%s "
            "output_chars=%s cost_usd=%s estimated_output_cost_usd=%s metadata=%s",
            request.provider,
            request.model,
            request.user_id,
            request.workspace_id,
            latency_ms,
            len(response.output),
            cost,
            estimated_cost,
            options.metadata,
        )
        return response


_text_model_client: TextModelClient = ModelInvocationClient()


def get_text_model_client() -> TextModelClient:
    return _text_model_client
