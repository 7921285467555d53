from __future__ import annotations

import logging

import httpx

from apps.api.app.services.agents.commerce.prompts import NARRATIVE_IMAGE_LABEL, build_narrative_prompt
from apps.api.app.services.agents.commerce.schemas import Narrative, NarrativeInput
from apps.api.app.services.llm.attachments import build_user_content
from apps.api.app.services.llm.gateway import TextModelClient
from apps.api.app.services.llm.invocation import AgentConfig, StructuredResult, run_structured_agent

_LOGGER = logging.getLogger(__name__)

# gpt-5.2 is a reasoning model, so temperature is replaced by reasoning effort.
NARRATIVE_AGENT = AgentConfig(
    name="narrative",
    provider="openai",
    model="gpt-5.2",
    temperature=0.6,
    max_retries=2,
    expected_output_tokens=800,
)


async def create_narrative(
    data: NarrativeInput,
    client: TextModelClient,
    *,
    user_id: str,
    workspace_id: str | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> StructuredResult[Narrative]:
    _LOGGER.info(
        "Creating narrative. objective=%s pacing_profile=%s duration=%s product_image=%s",
        data.campaign_objective,
        data.pacing_profile,
        data.duration,
        bool(data.product_image_url),
    )
    prompt = build_narrative_prompt(data)
    user_content = await build_user_content(
        prompt.user_prompt,
        data.product_image_url,
        label=NARRATIVE_IMAGE_LABEL,
        title="product image",
        client=http_client,
    )
    result = await run_structured_agent(
        NARRATIVE_AGENT,
        prompt=prompt,
        output_model=Narrative,
        client=client,
        user_id=user_id,
        workspace_id=workspace_id,
        user_content=user_content,
    )
    manifest = result.value.script_manifest
    _LOGGER.info(
        "Narrative ready. energy=%s/%s/%s cta=%s cost_usd=%s",
        manifest.act_1_hook.target_energy,
        manifest.act_2_transform.target_energy,
        manifest.act_3_payoff.target_energy,
        bool(manifest.act_3_payoff.cta_text),
        result.cost,
    )
    return result
