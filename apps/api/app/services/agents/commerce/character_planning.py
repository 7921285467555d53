from __future__ import annotations

import logging

import httpx

from apps.api.app.services.agents.commerce.prompts import CHARACTER_REFERENCE_LABEL, build_character_planning_prompt
from apps.api.app.services.agents.commerce.schemas import CharacterPlan, CharacterPlanningInput
from apps.api.app.services.llm.attachments import build_user_content
from apps.api.app.services.llm.gateway import TextModelClient
from apps.api.app.services.llm.invocation import AgentConfig, StructuredResult, run_structured_agent

_LOGGER = logging.getLogger(__name__)

CHARACTER_PLANNING_AGENT = AgentConfig(
    name="character_planning",
    provider="openai",
    model="gpt-4o",
    temperature=0.6,
    max_retries=2,
    expected_output_tokens=4000,
)


async def plan_characters(
    data: CharacterPlanningInput,
    client: TextModelClient,
    *,
    user_id: str,
    workspace_id: str | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> StructuredResult[CharacterPlan]:
    """Return three casting recommendations for the requested character mode.

    A reference image, when given and reachable, is sent as vision input. The
    mode of every recommendation is expected to match the request; a mismatch
    is logged and the plan is still returned.
    """
    _LOGGER.info(
        "Planning characters. mode=%s description=%s reference_image=%s",
        data.character_mode,
        bool(data.character_description),
        bool(data.reference_image_url),
    )
    prompt = build_character_planning_prompt(data)
    user_content = await build_user_content(
        prompt.user_prompt,
        data.reference_image_url,
        label=CHARACTER_REFERENCE_LABEL,
        title="character reference",
        client=http_client,
    )
    result = await run_structured_agent(
        CHARACTER_PLANNING_AGENT,
        prompt=prompt,
        output_model=CharacterPlan,
        client=client,
        user_id=user_id,
        workspace_id=workspace_id,
        user_content=user_content,
    )
    mismatched = [rec.id for rec in result.value.recommendations if rec.mode != data.character_mode]
    if mismatched:
        _LOGGER.warning(
            "Character recommendations ignore requested mode. requested=%s ids=%s",
            data.character_mode,
            ",".join(mismatched),
        )
    _LOGGER.info(
        "Character plan ready. ids=%s cost_usd=%s",
        ",".join(rec.id for rec in result.value.recommendations),
        result.cost,
    )
    return result
