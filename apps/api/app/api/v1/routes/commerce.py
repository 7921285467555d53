from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from apps.api.app.dependencies.context import RequestContext, get_request_context
from apps.api.app.schemas.commerce import (
    CharacterPlanCreate,
    CharacterPlanRead,
    CreativeSparkCreate,
    CreativeSparkRead,
    NarrativeCreate,
    NarrativeRead,
    StrategicContextCreate,
    StrategicContextRead,
    VoiceoverScriptCreate,
    VoiceoverScriptRead,
    WorldBuilderCreate,
    WorldManifestRead,
)
from apps.api.app.services.agents.commerce.character_planning import plan_characters
from apps.api.app.services.agents.commerce.creative_spark import generate_creative_spark
from apps.api.app.services.agents.commerce.narrative import create_narrative
from apps.api.app.services.agents.commerce.schemas import (
    CharacterPlanningInput,
    CreativeSparkInput,
    DialogueLine,
    NarrativeInput,
    StrategicContextInput,
    VisualBeats,
    VoiceoverBeat,
    VoiceoverScriptInput,
    WorldBuilderInput,
)
from apps.api.app.services.agents.commerce.strategic_context import optimize_strategic_context
from apps.api.app.services.agents.commerce.voiceover_script import generate_voiceover_script
from apps.api.app.services.agents.commerce.world_builder import build_world
from apps.api.app.services.llm.gateway import TextModelClient, get_text_model_client
from apps.api.app.services.llm.invocation import StructuredResult

router = APIRouter(prefix="/commerce", tags=["commerce"])
_LOGGER = logging.getLogger(__name__)

ReadT = TypeVar("ReadT", bound=BaseModel)


async def _run_agent(agent: str, call: Awaitable[StructuredResult], read_model: type[ReadT]) -> ReadT:
    try:
        result = await call
    except Exception as exc:
        _LOGGER.error("Commerce agent request failed. agent=%s error=%s", agent, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return read_model.model_validate(result.to_dict())


@router.post("/strategic-context", response_model=StrategicContextRead)
async def create_strategic_context(
    payload: StrategicContextCreate,
    context: RequestContext = Depends(get_request_context),
    client: TextModelClient = Depends(get_text_model_client),
) -> StrategicContextRead:
    call = optimize_strategic_context(
        StrategicContextInput(**payload.model_dump()),
        client,
        user_id=context.user_id,
        workspace_id=context.workspace_id,
    )
    return await _run_agent("strategic_context", call, StrategicContextRead)


@router.post("/creative-spark", response_model=CreativeSparkRead)
async def create_creative_spark(
    payload: CreativeSparkCreate,
    context: RequestContext = Depends(get_request_context),
    client: TextModelClient = Depends(get_text_model_client),
) -> CreativeSparkRead:
    call = generate_creative_spark(
        CreativeSparkInput(**payload.model_dump()),
        client,
        user_id=context.user_id,
        workspace_id=context.workspace_id,
    )
    return await _run_agent("creative_spark", call, CreativeSparkRead)


@router.post("/narrative", response_model=NarrativeRead)
async def create_campaign_narrative(
    payload: NarrativeCreate,
    context: RequestContext = Depends(get_request_context),
    client: TextModelClient = Depends(get_text_model_client),
) -> NarrativeRead:
    fields = payload.model_dump(exclude={"visual_beats"})
    call = create_narrative(
        NarrativeInput(**fields, visual_beats=VisualBeats(**payload.visual_beats.model_dump())),
        client,
        user_id=context.user_id,
        workspace_id=context.workspace_id,
    )
    return await _run_agent("narrative", call, NarrativeRead)


@router.post("/world", response_model=WorldManifestRead)
async def create_world(
    payload: WorldBuilderCreate,
    context: RequestContext = Depends(get_request_context),
    client: TextModelClient = Depends(get_text_model_client),
) -> WorldManifestRead:
    call = build_world(
        WorldBuilderInput(**payload.model_dump()),
        client,
        user_id=context.user_id,
        workspace_id=context.workspace_id,
    )
    return await _run_agent("world_builder", call, WorldManifestRead)


@router.post("/character-plan", response_model=CharacterPlanRead)
async def create_character_plan(
    payload: CharacterPlanCreate,
    context: RequestContext = Depends(get_request_context),
    client: TextModelClient = Depends(get_text_model_client),
) -> CharacterPlanRead:
    call = plan_characters(
        CharacterPlanningInput(**payload.model_dump()),
        client,
        user_id=context.user_id,
        workspace_id=context.workspace_id,
    )
    return await _run_agent("character_planning", call, CharacterPlanRead)


@router.post("/voiceover-script", response_model=VoiceoverScriptRead)
async def create_voiceover_script(
    payload: VoiceoverScriptCreate,
    context: RequestContext = Depends(get_request_context),
    client: TextModelClient = Depends(get_text_model_client),
) -> VoiceoverScriptRead:
    fields = payload.model_dump(exclude={"beats", "visual_beats", "existing_dialogue"})
    call = generate_voiceover_script(
        VoiceoverScriptInput(
            **fields,
            beats=tuple(VoiceoverBeat(**beat.model_dump()) for beat in payload.beats),
            visual_beats=VisualBeats(**payload.visual_beats.model_dump()),
            existing_dialogue=tuple(DialogueLine(**line.model_dump()) for line in payload.existing_dialogue),
        ),
        client,
        user_id=context.user_id,
        workspace_id=context.workspace_id,
    )
    return await _run_agent("voiceover_script", call, VoiceoverScriptRead)
