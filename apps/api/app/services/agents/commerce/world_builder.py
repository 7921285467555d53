from __future__ import annotations

import logging

import httpx

from apps.api.app.services.agents.commerce.prompts import WORLD_STYLE_REFERENCE_LABEL, build_world_builder_prompt
from apps.api.app.services.agents.commerce.schemas import WorldBuilderInput, WorldManifest
from apps.api.app.services.llm.attachments import build_user_content
from apps.api.app.services.llm.gateway import TextModelClient
from apps.api.app.services.llm.invocation import AgentConfig, StructuredResult, run_structured_agent

_LOGGER = logging.getLogger(__name__)

WORLD_BUILDER_AGENT = AgentConfig(
    name="world_builder",
    provider="openai",
    model="gpt-4o",
    temperature=0.6,
    max_retries=2,
    expected_output_tokens=900,
)


async def build_world(
    data: WorldBuilderInput,
    client: TextModelClient,
    *,
    user_id: str,
    workspace_id: str | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> StructuredResult[WorldManifest]:
    _LOGGER.info(
        "Building world. atmospheric_density=%s lighting=%s style_reference=%s",
        data.atmospheric_density,
        data.cinematic_lighting,
        bool(data.style_reference_url),
    )
    prompt = build_world_builder_prompt(data)
    user_content = await build_user_content(
        prompt.user_prompt,
        data.style_reference_url,
        label=WORLD_STYLE_REFERENCE_LABEL,
        title="style reference",
        client=http_client,
    )
    result = await run_structured_agent(
        WORLD_BUILDER_AGENT,
        prompt=prompt,
        output_model=WorldManifest,
        client=client,
        user_id=user_id,
        workspace_id=workspace_id,
        user_content=user_content,
    )
    manifest = result.value.visual_manifest
    _LOGGER.info(
        "World ready. particle_type=%s primary_hex=%s cost_usd=%s",
        manifest.physics_parameters.particle_type,
        manifest.chromatic_bible.primary_hex,
        result.cost,
    )
    return result
