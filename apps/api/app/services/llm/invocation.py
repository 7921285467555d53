"""Retry-governed, schema-validated model invocation shared by every agent.

An agent is a prompt builder, an output model and an ``AgentConfig``.
``run_structured_agent`` turns those into a call-parse-validate cycle that is
retried with linear backoff (1s, 2s, 3s, ...) and either returns a validated
result or re-raises the last failure unchanged once ``max_retries`` calls have
been made.
"""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from functools import partial
from typing import Any, Awaitable, Callable, Generic, TypeVar

from pydantic import BaseModel

from apps.api.app.services.llm.gateway import (
    CallOptions,
    TextModelClient,
    TextModelRequest,
    TextModelResponse,
)
from apps.api.app.services.llm.structured_output import json_schema_format
from storia_llm import supports_reasoning

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
ModelT = TypeVar("ModelT", bound=BaseModel)

ContentPart = dict[str, str]
UserContent = str | list[ContentPart]


@dataclass(frozen=True)
class AgentConfig:
    name: str
    provider: str
    model: str
    temperature: float
    max_retries: int
    expected_output_tokens: int | None = None
    reasoning_effort: str = "high"
    backoff_base_seconds: float = 1.0

    def __post_init__(self) -> None:
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be at least 1 (agent={self.name}).")

    def build_generation_params(self) -> dict[str, Any]:
        # Reasoning models reject temperature.
        if supports_reasoning(self.provider, self.model):
            return {"reasoning": {"effort": self.reasoning_effort}}
        return {"temperature": self.temperature}


@dataclass(frozen=True)
class PromptPair:
    system_prompt: str
    user_prompt: str


@dataclass(frozen=True)
class StructuredResult(Generic[ModelT]):
    value: ModelT
    cost: float | None

    def to_dict(self) -> dict[str, Any]:
        return {**self.value.model_dump(mode="json"), "cost": self.cost}


def linear_backoff(attempt: int, base_seconds: float = 1.0) -> float:
    return base_seconds * attempt


def build_messages(prompt: PromptPair, user_content: UserContent | None = None) -> list[dict[str, Any]]:
    return [
        {"role": "system", "content": prompt.system_prompt},
        {"role": "user", "content": user_content if user_content is not None else prompt.user_prompt},
    ]


async def invoke_with_retry(
    operation: Callable[[], Awaitable[R]],
    *,
    agent: str,
    max_retries: int,
    parse: Callable[[R], T],
    backoff: Callable[[int], float] = linear_backoff,
    sleep: Callable[[float], Awaitable[Any]] | None = None,
) -> T:
    """Run ``operation`` then ``parse`` until one attempt succeeds.

    Transport failures and parse/validation failures are treated alike.  The
    delay after failed attempt ``k`` is ``backoff(k)``; there is no delay after
    the final attempt.  When every attempt fails the last exception is
    re-raised as-is.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1.")
    sleeper = sleep or asyncio.sleep

    last_error: Exception | None = None
    for attempt in range(1, max_retries + 1):
        started = time.monotonic()
        _LOGGER.info("Agent attempt started. agent=%s attempt=%s max_retries=%s", agent, attempt, max_retries)
        try:
            result = parse(await operation())
        except Exception as exc:
            last_error = exc
            _LOGGER.warning(
                "Agent attempt failed. agent=%s attempt=%s max_retries=%s latency_ms=%s outcome=error "
                "error_type=%s error=%s",
                agent,
                attempt,
                max_retries,
                int((time.monotonic() - started) * 1000),
                type(exc).__name__,
                exc,
            )
            if attempt < max_retries:
                delay = backoff(attempt)
                _LOGGER.info("Retrying agent. agent=%s next_attempt=%s delay_seconds=%s", agent, attempt + 1, delay)
                await sleeper(delay)
            continue

        _LOGGER.info(
            "Agent attempt succeeded. agent=%s attempt=%s max_retries=%s latency_ms=%s outcome=success",
            agent,
            attempt,
            max_retries,
            int((time.monotonic() - started) * 1000),
        )
        return result

    _LOGGER.error(
        "Agent exhausted retries. agent=%s max_retries=%s outcome=exhausted error=%s",
        agent,
        max_retries,
        last_error,
    )
    if last_error is not None:
        raise last_error
    raise RuntimeError(f"Failed to run {agent}")


async def run_structured_agent(
    config: AgentConfig,
    *,
    prompt: PromptPair,
    output_model: type[ModelT],
    client: TextModelClient,
    user_id: str,
    workspace_id: str | None = None,
    user_content: UserContent | None = None,
    metadata: dict[str, Any] | None = None,
) -> StructuredResult[ModelT]:
    request = TextModelRequest(
        provider=config.provider,
        model=config.model,
        payload={
            **config.build_generation_params(),
            "input": build_messages(prompt, user_content),
            "text": json_schema_format(f"{config.name}_output", output_model),
        },
        user_id=user_id,
        workspace_id=workspace_id,
    )
    options = CallOptions(
        expected_output_tokens=config.expected_output_tokens,
        metadata={"agent": config.name, **(metadata or {})},
    )

    async def operation() -> TextModelResponse:
        return await client.call(request, options)

    def parse(response: TextModelResponse) -> StructuredResult[ModelT]:
        value = output_model.model_validate_json(response.output.strip())
        cost = response.usage.total_cost_usd if response.usage is not None else None
        return StructuredResult(value=value, cost=cost)

    return await invoke_with_retry(
        operation,
        agent=config.name,
        max_retries=config.max_retries,
        parse=parse,
        backoff=partial(linear_backoff, base_seconds=config.backoff_base_seconds),
    )
