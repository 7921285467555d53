from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from apps.api.app.services.agents.commerce.prompts import (
    PAUSE_TAG_SECONDS,
    build_voiceover_script_prompt,
    tempo_budget,
)
from apps.api.app.services.agents.commerce.schemas import VoiceoverScript, VoiceoverScriptInput
from apps.api.app.services.llm.gateway import TextModelClient
from apps.api.app.services.llm.invocation import AgentConfig, StructuredResult, run_structured_agent

_LOGGER = logging.getLogger(__name__)

# gpt-5.2 is a reasoning model, so temperature is replaced by reasoning effort.
VOICEOVER_SCRIPT_AGENT = AgentConfig(
    name="voiceover_script",
    provider="openai",
    model="gpt-5.2",
    temperature=0.7,
    max_retries=2,
    expected_output_tokens=3000,
)

_TAG_PATTERN = re.compile(r"\[([^\]]+)\]")


@dataclass(frozen=True)
class ScriptTiming:
    word_count: int
    pause_count: int
    speaking_duration: float
    pause_duration: float

    @property
    def total_duration(self) -> float:
        return self.speaking_duration + self.pause_duration


def script_timing(script: str, tempo: str) -> ScriptTiming:
    """Measure a tagged script: words exclude tags, and only pause tags add time."""
    pause_count = 0
    pause_duration = 0.0
    for tag in _TAG_PATTERN.findall(script):
        seconds = PAUSE_TAG_SECONDS.get(tag.strip().lower())
        if seconds is not None:
            pause_count += 1
            pause_duration += seconds
    word_count = len(_TAG_PATTERN.sub(" ", script).split())
    return ScriptTiming(
        word_count=word_count,
        pause_count=pause_count,
        speaking_duration=word_count / tempo_budget(tempo).words_per_second,
        pause_duration=pause_duration,
    )


async def generate_voiceover_script(
    data: VoiceoverScriptInput,
    client: TextModelClient,
    *,
    user_id: str,
    workspace_id: str | None = None,
) -> StructuredResult[VoiceoverScript]:
    _LOGGER.info(
        "Generating voiceover script. beats=%s language=%s tempo=%s user_dialogue=%s",
        ",".join(beat.beat_id for beat in data.beats),
        data.language,
        data.tempo,
        len(data.existing_dialogue),
    )
    result = await run_structured_agent(
        VOICEOVER_SCRIPT_AGENT,
        prompt=build_voiceover_script_prompt(data),
        output_model=VoiceoverScript,
        client=client,
        user_id=user_id,
        workspace_id=workspace_id,
    )
    requested = [beat.beat_id for beat in data.beats]
    returned = [entry.beat_id for entry in result.value.beat_scripts]
    if returned != requested:
        _LOGGER.warning(
            "Voiceover beats differ from request. requested=%s returned=%s",
            ",".join(requested),
            ",".join(returned),
        )
    for entry in result.value.beat_scripts:
        timing = script_timing(entry.voiceover_script.script, data.tempo)
        if timing.total_duration > entry.voiceover_script.total_duration + 1.0:
            _LOGGER.warning(
                "Voiceover beat may overrun. beat_id=%s reported_s=%.2f measured_s=%.2f",
                entry.beat_id,
                entry.voiceover_script.total_duration,
                timing.total_duration,
            )
    _LOGGER.info(
        "Voiceover script ready. beats=%s words=%s duration_s=%s cost_usd=%s",
        len(returned),
        result.value.full_script.total_word_count,
        result.value.full_script.total_duration,
        result.cost,
    )
    return result
