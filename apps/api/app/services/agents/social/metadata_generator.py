from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from apps.api.app.services.agents.social.prompts import build_prompt_pair
from apps.api.app.services.agents.social.schemas import (
    CaptionMetadata,
    SocialMetadataBatch,
    SocialMetadataInput,
    SocialMetadataResult,
    SocialPlatform,
    YouTubeMetadata,
)
from apps.api.app.services.llm.gateway import TextModelClient
from apps.api.app.services.llm.invocation import AgentConfig, run_structured_agent

_LOGGER = logging.getLogger(__name__)


def agent_config_for(platform: SocialPlatform) -> AgentConfig:
    return AgentConfig(
        name=f"social_metadata_{platform}",
        provider="openai",
        model="gpt-4o-mini",
        temperature=0.8,
        max_retries=3,
        expected_output_tokens=400,
    )


def empty_metadata(platform: SocialPlatform) -> SocialMetadataResult:
    if platform == "youtube":
        return SocialMetadataResult(platform=platform, title="", description="")
    return SocialMetadataResult(platform=platform, caption="")


async def generate_platform_metadata(
    data: SocialMetadataInput,
    client: TextModelClient,
    *,
    user_id: str,
    workspace_id: str | None = None,
) -> SocialMetadataResult:
    _LOGGER.info(
        "Generating social metadata. platform=%s duration=%s script_chars=%s",
        data.platform,
        data.duration,
        len(data.script_text or ""),
    )
    config = agent_config_for(data.platform)
    prompt = build_prompt_pair(data)

    if data.platform == "youtube":
        youtube = await run_structured_agent(
            config,
            prompt=prompt,
            output_model=YouTubeMetadata,
            client=client,
            user_id=user_id,
            workspace_id=workspace_id,
            metadata={"platform": data.platform},
        )
        result = SocialMetadataResult(
            platform=data.platform,
            title=youtube.value.title,
            description=youtube.value.description,
            cost=youtube.cost,
        )
    else:
        caption = await run_structured_agent(
            config,
            prompt=prompt,
            output_model=CaptionMetadata,
            client=client,
            user_id=user_id,
            workspace_id=workspace_id,
            metadata={"platform": data.platform},
        )
        result = SocialMetadataResult(platform=data.platform, caption=caption.value.caption, cost=caption.cost)

    _LOGGER.info(
        "Social metadata generated. platform=%s title_chars=%s caption_chars=%s cost_usd=%s",
        result.platform,
        len(result.title or ""),
        len(result.caption or ""),
        result.cost,
    )
    return result


async def generate_all_platform_metadata(
    platforms: Iterable[SocialPlatform],
    script_text: str,
    duration: float,
    client: TextModelClient,
    *,
    user_id: str,
    workspace_id: str | None = None,
) -> SocialMetadataBatch:
    """Generate metadata for several platforms concurrently.

    A platform whose generation fails after its retries is replaced by an
    empty placeholder; the batch itself never fails because of one platform.
    """
    targets = list(dict.fromkeys(platforms))

    async def _generate_isolated(platform: SocialPlatform) -> tuple[SocialMetadataResult, bool]:
        try:
            result = await generate_platform_metadata(
                SocialMetadataInput(platform=platform, script_text=script_text, duration=duration),
                client,
                user_id=user_id,
                workspace_id=workspace_id,
            )
        except Exception as exc:
            _LOGGER.error(
                "Social metadata failed; using empty placeholder. platform=%s error_type=%s error=%s",
                platform,
                type(exc).__name__,
                exc,
            )
            return empty_metadata(platform), False
        return result, True

    outcomes = await asyncio.gather(*(_generate_isolated(platform) for platform in targets))
    batch = SocialMetadataBatch(
        results=[result for result, _ in outcomes],
        failed_platforms=[result.platform for result, ok in outcomes if not ok],
    )
    _LOGGER.info(
        "Social metadata batch completed. platforms=%s failed=%s total_cost_usd=%s",
        len(targets),
        batch.failed_platforms,
        batch.total_cost,
    )
    return batch
