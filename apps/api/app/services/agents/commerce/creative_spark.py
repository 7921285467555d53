from __future__ import annotations

import logging

from apps.api.app.services.agents.commerce.prompts import build_creative_spark_prompt
from apps.api.app.services.agents.commerce.schemas import CreativeSpark, CreativeSparkInput
from apps.api.app.services.llm.gateway import TextModelClient
from apps.api.app.services.llm.invocation import AgentConfig, StructuredResult, run_structured_agent

_LOGGER = logging.getLogger(__name__)

CREATIVE_SPARK_AGENT = AgentConfig(
    name="creative_spark",
    provider="openai",
    model="gpt-4o",
    temperature=0.7,
    max_retries=2,
    expected_output_tokens=300,
)


async def generate_creative_spark(
    data: CreativeSparkInput,
    client: TextModelClient,
    *,
    user_id: str,
    workspace_id: str | None = None,
) -> StructuredResult[CreativeSpark]:
    _LOGGER.info(
        "Generating creative spark. pacing_profile=%s duration=%s human_element=%s",
        data.pacing_profile,
        data.duration,
        data.include_human_element,
    )
    result = await run_structured_agent(
        CREATIVE_SPARK_AGENT,
        prompt=build_creative_spark_prompt(data),
        output_model=CreativeSpark,
        client=client,
        user_id=user_id,
        workspace_id=workspace_id,
    )
    _LOGGER.info("Creative spark ready. chars=%s cost_usd=%s", len(result.value.creative_spark), result.cost)
    return result
