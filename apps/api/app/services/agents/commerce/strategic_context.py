from __future__ import annotations

import logging

from apps.api.app.services.agents.commerce.prompts import build_strategic_context_prompt
from apps.api.app.services.agents.commerce.schemas import (
    PacingProfile,
    StrategicContext,
    StrategicContextInput,
)
from apps.api.app.services.llm.gateway import TextModelClient
from apps.api.app.services.llm.invocation import AgentConfig, StructuredResult, run_structured_agent

_LOGGER = logging.getLogger(__name__)

STRATEGIC_CONTEXT_AGENT = AgentConfig(
    name="strategic_context",
    provider="openai",
    model="gpt-4o",
    temperature=0.5,
    max_retries=2,
    expected_output_tokens=800,
)

_DEFAULT_MOTION_DNA = (
    "Smooth, professional camera movements with a mix of slow dolly-ins and orbital moves around the product. "
    "Focus pulls reveal texture and detail, and shot timing follows the campaign rhythm."
)
_DEFAULT_IMAGE_INSTRUCTION = (
    "Photorealistic commercial render with soft key lighting and subtle rim light, shallow depth of field on a "
    "50mm lens, accurate material reproduction and a clean, premium color grade."
)


def default_pacing_for_duration(duration: int) -> PacingProfile:
    if duration <= 15:
        return "FAST_CUT"
    if duration <= 30:
        return "KINETIC_RAMP"
    return "STEADY_CINEMATIC"


def default_strategic_context(data: StrategicContextInput) -> StrategicContext:
    """Deterministic context for callers that want to continue without the model."""
    region = data.region or "a global market"
    directives = (
        f"Create a premium promotional video for {data.product_title} aimed at {data.target_audience} in {region}. "
        "Keep the product as the clear visual hero in every frame. "
        "Favor clean compositions, controlled lighting and a consistent color grade. "
        f"Pace the {data.duration}-second edit so every beat lands before the final reveal."
    )
    # Canned text is not held to the model output length limits.
    return StrategicContext.model_construct(
        strategic_directives=directives,
        pacing_profile=default_pacing_for_duration(data.duration),
        optimized_motion_dna=(data.custom_motion_instructions or "").strip() or _DEFAULT_MOTION_DNA,
        optimized_image_instruction=(data.custom_image_instructions or "").strip() or _DEFAULT_IMAGE_INSTRUCTION,
    )


async def optimize_strategic_context(
    data: StrategicContextInput,
    client: TextModelClient,
    *,
    user_id: str,
    workspace_id: str | None = None,
) -> StructuredResult[StrategicContext]:
    _LOGGER.info(
        "Optimizing strategic context. product=%s duration=%s region=%s",
        data.product_title[:60],
        data.duration,
        data.region,
    )
    result = await run_structured_agent(
        STRATEGIC_CONTEXT_AGENT,
        prompt=build_strategic_context_prompt(data),
        output_model=StrategicContext,
        client=client,
        user_id=user_id,
        workspace_id=workspace_id,
    )
    _LOGGER.info(
        "Strategic context ready. pacing_profile=%s directives_chars=%s cost_usd=%s",
        result.value.pacing_profile,
        len(result.value.strategic_directives),
        result.cost,
    )
    return result
