from __future__ import annotations

from typing import TYPE_CHECKING

from storia_llm import ModelSpec

if TYPE_CHECKING:
    from apps.api.app.services.llm.gateway import TextModelUsage


def _cost_per_tokens(tokens: int, rate_per_1k: float) -> float:
    if tokens <= 0 or rate_per_1k <= 0:
        return 0.0
    return (tokens / 1000.0) * rate_per_1k


def compute_cost_usd(
    spec: ModelSpec,
    input_tokens: int,
    output_tokens: int,
    cached_input_tokens: int = 0,
) -> float:
    cached = max(cached_input_tokens, 0)
    fresh = max(input_tokens - cached, 0)
    output = max(output_tokens, 0)
    return (
        _cost_per_tokens(fresh, spec.input_cost_per_1k)
        + _cost_per_tokens(cached, spec.cached_input_cost_per_1k)
        + _cost_per_tokens(output, spec.output_cost_per_1k)
    )


def cost_from_usage(spec: ModelSpec, usage: TextModelUsage | None) -> float | None:
    if usage is None:
        return None
    if usage.total_cost_usd is not None:
        return usage.total_cost_usd
    return compute_cost_usd(
        spec,
        input_tokens=usage.input_tokens,
        output_tokens=usage.output_tokens,
        cached_input_tokens=usage.cached_input_tokens,
    )
