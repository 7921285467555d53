from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from apps.api.app.dependencies.context import RequestContext, get_request_context
from apps.api.app.schemas.social import SocialMetadataBatchCreate, SocialMetadataCreate
from apps.api.app.services.agents.social.metadata_generator import (
    generate_all_platform_metadata,
    generate_platform_metadata,
)
from apps.api.app.services.agents.social.schemas import SocialMetadataInput, SocialPlatform
from apps.api.app.services.llm.gateway import TextModelClient, get_text_model_client

router = APIRouter(prefix="/social", tags=["social"])
_LOGGER = logging.getLogger(__name__)


@router.post("/metadata")
async def create_metadata_batch(
    payload: SocialMetadataBatchCreate,
    context: RequestContext = Depends(get_request_context),
    client: TextModelClient = Depends(get_text_model_client),
) -> dict[str, Any]:
    batch = await generate_all_platform_metadata(
        payload.platforms,
        payload.script_text,
        payload.duration,
        client,
        user_id=context.user_id,
        workspace_id=context.workspace_id,
    )
    return {
        "results": [result.to_dict() for result in batch.results],
        "failed_platforms": batch.failed_platforms,
        "total_cost": batch.total_cost,
    }


@router.post("/metadata/{platform}")
async def create_platform_metadata(
    platform: SocialPlatform,
    payload: SocialMetadataCreate,
    context: RequestContext = Depends(get_request_context),
    client: TextModelClient = Depends(get_text_model_client),
) -> dict[str, Any]:
    try:
        result = await generate_platform_metadata(
            SocialMetadataInput(platform=platform, script_text=payload.script_text, duration=payload.duration),
            client,
            user_id=context.user_id,
            workspace_id=context.workspace_id,
        )
    except Exception as exc:
        _LOGGER.error("Social metadata request failed. platform=%s error=%s", platform, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return result.to_dict()
