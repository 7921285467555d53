from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
import json
import unittest
from unittest.mock import AsyncMock, patch

import httpx

from apps.api.app.services.agents.commerce.character_planning import CHARACTER_PLANNING_AGENT, plan_characters
from apps.api.app.services.agents.commerce.creative_spark import CREATIVE_SPARK_AGENT, generate_creative_spark
from apps.api.app.services.agents.commerce.narrative import NARRATIVE_AGENT, create_narrative
from apps.api.app.services.agents.commerce.schemas import (
    CharacterPlanningInput,
    CreativeSparkInput,
    NarrativeInput,
    StrategicContextInput,
    VisualBeats,
    VoiceoverBeat,
    VoiceoverScriptInput,
    WorldBuilderInput,
)
from apps.api.app.services.agents.commerce.strategic_context import (
    STRATEGIC_CONTEXT_AGENT,
    default_strategic_context,
    optimize_strategic_context,
)
from apps.api.app.services.agents.commerce.voiceover_script import (
    VOICEOVER_SCRIPT_AGENT,
    generate_voiceover_script,
    script_timing,
)
from apps.api.app.services.agents.commerce.world_builder import WORLD_BUILDER_AGENT, build_world
from apps.api.app.services.llm.errors import ProviderRequestError
from apps.api.app.services.llm.gateway import (
    CallOptions,
    TextModelRequest,
    TextModelResponse,
    TextModelUsage,
)

_SLEEP = "apps.api.app.services.llm.invocation.asyncio.sleep"

STRATEGIC_OUTPUT = {
    "strategic_directives": "Lead with warm amber light and geometric symmetry. " * 5,
    "pacing_profile": "FAST_CUT",
    "optimized_motion_dna": "Fast 24mm push-in at 0.5 m/s with whip transitions. " * 4,
    "optimized_image_instruction": "Photoreal 8K render, brushed brass materials, soft key at 45 degrees. " * 3,
}

NARRATIVE_OUTPUT = {
    "script_manifest": {
        "act_1_hook": {
            "text": "A single drop of perfume hangs in darkness, catching a thin blade of gold light.",
            "emotional_goal": "Curiosity",
            "target_energy": 0.4,
            "sfx_cue": "Low resonant hum with a crystalline drip",
        },
        "act_2_transform": {
            "text": "The bottle rises through swirling amber smoke as its facets ignite one by one.",
            "emotional_goal": "Desire",
            "target_energy": 0.55,
            "sfx_cue": "Silken whoosh layered with soft strings",
        },
        "act_3_payoff": {
            "text": "Full reveal on black marble, the logo glowing as the light settles into stillness.",
            "emotional_goal": "Aspiration",
            "target_energy": 0.85,
            "sfx_cue": "Warm orchestral swell resolving to silence",
            "cta_text": "Shop the collection",
        },
    }
}

WORLD_OUTPUT = {
    "visual_manifest": {
        "global_lighting_setup": "Key light at 45 degrees camera left, 3200K tungsten, 4:1 ratio with a 5600K rim from behind and soft bounce fill from below.",
        "physics_parameters": {
            "fog_density": 0.45,
            "moisture_level": 0.1,
            "wind_intensity": 0.2,
            "dust_frequency": 0.35,
            "particle_type": "floating_dust",
        },
        "chromatic_bible": {"primary_hex": "#C8A165", "secondary_hex": "#1B1B1F", "accent_hex": "#E94F37"},
        "environmental_anchor_prompt": "Vast sand dunes at first light, amber haze hanging low, cinematic 8K detail, anamorphic flares and long soft shadows.",
    }
}


@dataclass
class FakeTextModelClient:
    outputs: list[str | Exception]
    cost: float | None = 0.004
    calls: list[tuple[TextModelRequest, CallOptions | None]] = field(default_factory=list)

    async def call(self, request: TextModelRequest, options: CallOptions | None = None) -> TextModelResponse:
        self.calls.append((request, options))
        output = self.outputs[min(len(self.calls), len(self.outputs)) - 1]
        if isinstance(output, Exception):
            raise output
        usage = TextModelUsage(input_tokens=900, output_tokens=300, total_cost_usd=self.cost)
        return TextModelResponse(provider=request.provider, model=request.model, output=output, usage=usage)


def _image_client() -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"content-type": "image/webp"}, content=b"webp-bytes")

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _narrative_input(**overrides) -> NarrativeInput:
    values = {
        "creative_spark": "Fire becomes form.",
        "campaign_spark": "Ignite",
        "campaign_objective": "sales-cta",
        "visual_beats": VisualBeats(beat1="drop", beat2="rise", beat3="reveal"),
        "pacing_profile": "LUXURY_SLOW",
        "duration": 30,
    }
    values.update(overrides)
    return NarrativeInput(**values)


def _world_input(**overrides) -> WorldBuilderInput:
    values = {
        "strategic_directives": "Premium restraint.",
        "optimized_image_instruction": "Photoreal render.",
        "creative_spark": "Desert dawn.",
        "environment_concept": "Sand dunes",
        "atmospheric_density": 55,
        "cinematic_lighting": "golden hour",
        "visual_preset": "luxury",
    }
    values.update(overrides)
    return WorldBuilderInput(**values)


class AgentConfigTests(unittest.TestCase):
    def test_commerce_agent_settings(self) -> None:
        self.assertEqual(
            [(c.model, c.temperature, c.max_retries, c.expected_output_tokens) for c in (
                STRATEGIC_CONTEXT_AGENT,
                CREATIVE_SPARK_AGENT,
                NARRATIVE_AGENT,
                WORLD_BUILDER_AGENT,
                CHARACTER_PLANNING_AGENT,
                VOICEOVER_SCRIPT_AGENT,
            )],
            [
                ("gpt-4o", 0.5, 2, 800),
                ("gpt-4o", 0.7, 2, 300),
                ("gpt-5.2", 0.6, 2, 800),
                ("gpt-4o", 0.6, 2, 900),
                ("gpt-4o", 0.6, 2, 4000),
                ("gpt-5.2", 0.7, 2, 3000),
            ],
        )


class StrategicContextTests(unittest.TestCase):
    def test_returns_validated_context_with_cost(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(STRATEGIC_OUTPUT)])

        result = asyncio.run(
            optimize_strategic_context(
                StrategicContextInput(product_title="Oud Noir", target_audience="Gen Z", duration=15),
                client,
                user_id="user-1",
            )
        )

        self.assertEqual(result.value.pacing_profile, "FAST_CUT")
        self.assertEqual(result.to_dict()["cost"], 0.004)
        request, _ = client.calls[0]
        self.assertEqual(request.payload["temperature"], 0.5)
        self.assertEqual(request.payload["text"]["format"]["name"], "strategic_context_output")

    def test_invalid_pacing_profile_is_retried_then_raised(self) -> None:
        bad = json.dumps({**STRATEGIC_OUTPUT, "pacing_profile": "SUPER_FAST"})
        client = FakeTextModelClient(outputs=[bad])

        with patch(_SLEEP, new_callable=AsyncMock) as sleep:
            with self.assertRaises(ValueError):
                asyncio.run(
                    optimize_strategic_context(
                        StrategicContextInput(product_title="Mug", target_audience="All", duration=30),
                        client,
                        user_id="user-1",
                    )
                )

        self.assertEqual(len(client.calls), 2)
        self.assertEqual(sleep.await_count, 1)

    def test_too_short_directives_rejected(self) -> None:
        short = json.dumps({**STRATEGIC_OUTPUT, "strategic_directives": "Too short."})
        client = FakeTextModelClient(outputs=[short, json.dumps(STRATEGIC_OUTPUT)])

        with patch(_SLEEP, new_callable=AsyncMock):
            result = asyncio.run(
                optimize_strategic_context(
                    StrategicContextInput(product_title="Mug", target_audience="All", duration=30),
                    client,
                    user_id="user-1",
                )
            )

        self.assertEqual(len(client.calls), 2)
        self.assertGreaterEqual(len(result.value.strategic_directives), 200)

    def test_default_context_pacing_by_duration(self) -> None:
        for duration, expected in ((10, "FAST_CUT"), (15, "FAST_CUT"), (30, "KINETIC_RAMP"), (60, "STEADY_CINEMATIC")):
            context = default_strategic_context(
                StrategicContextInput(product_title="Mug", target_audience="All", duration=duration)
            )
            self.assertEqual(context.pacing_profile, expected)

    def test_default_context_keeps_custom_instructions(self) -> None:
        context = default_strategic_context(
            StrategicContextInput(
                product_title="Mug",
                target_audience="All",
                duration=20,
                custom_motion_instructions="  Slow orbit only.  ",
            )
        )
        self.assertEqual(context.optimized_motion_dna, "Slow orbit only.")
        self.assertIn("Mug", context.strategic_directives)


class CreativeSparkTests(unittest.TestCase):
    def test_generates_spark(self) -> None:
        spark = "Molten glass cools into the bottle's silhouette as dawn light sweeps across the dunes."
        client = FakeTextModelClient(outputs=[json.dumps({"creative_spark": spark})], cost=None)

        result = asyncio.run(
            generate_creative_spark(
                CreativeSparkInput(
                    strategic_directives="Premium restraint.",
                    target_audience="Luxury buyers",
                    duration=30,
                    pacing_profile="LUXURY_SLOW",
                ),
                client,
                user_id="user-1",
                workspace_id="ws-1",
            )
        )

        self.assertEqual(result.to_dict(), {"creative_spark": spark, "cost": None})
        self.assertEqual(client.calls[0][0].payload["temperature"], 0.7)

    def test_provider_error_reraised_verbatim(self) -> None:
        error = ProviderRequestError("openai", "quota exceeded")
        client = FakeTextModelClient(outputs=[error])

        with patch(_SLEEP, new_callable=AsyncMock):
            with self.assertRaises(ProviderRequestError) as ctx:
                asyncio.run(
                    generate_creative_spark(
                        CreativeSparkInput(strategic_directives="d", target_audience="a", duration=10, pacing_profile="FAST_CUT"),
                        client,
                        user_id="user-1",
                    )
                )
        self.assertIs(ctx.exception, error)


class NarrativeTests(unittest.TestCase):
    def test_reasoning_model_without_temperature(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(NARRATIVE_OUTPUT)])

        result = asyncio.run(create_narrative(_narrative_input(), client, user_id="user-1"))

        payload = client.calls[0][0].payload
        self.assertEqual(payload["reasoning"], {"effort": "high"})
        self.assertNotIn("temperature", payload)
        self.assertIsInstance(payload["input"][1]["content"], str)
        self.assertEqual(result.value.script_manifest.act_3_payoff.cta_text, "Shop the collection")

    def test_product_image_is_interleaved(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(NARRATIVE_OUTPUT)])

        async def run():
            async with _image_client() as http_client:
                return await create_narrative(
                    _narrative_input(product_image_url="https://cdn.example.com/p.webp"),
                    client,
                    user_id="user-1",
                    http_client=http_client,
                )

        asyncio.run(run())

        content = client.calls[0][0].payload["input"][1]["content"]
        self.assertEqual([part["type"] for part in content], ["input_text", "input_text", "input_image", "input_text"])
        self.assertEqual(content[1]["text"], "--- PRODUCT IMAGE ---")
        self.assertTrue(content[2]["image_url"].startswith("data:image/webp;base64,"))
        self.assertIn("BEAT 1 (Hook)", content[3]["text"])

    def test_malformed_product_image_url_falls_back_to_text(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(NARRATIVE_OUTPUT)])

        asyncio.run(create_narrative(_narrative_input(product_image_url="http://[::1"), client, user_id="user-1"))

        self.assertEqual(len(client.calls), 1)
        self.assertIsInstance(client.calls[0][0].payload["input"][1]["content"], str)

    def test_energy_out_of_range_rejected(self) -> None:
        bad = json.loads(json.dumps(NARRATIVE_OUTPUT))
        bad["script_manifest"]["act_1_hook"]["target_energy"] = 1.4
        client = FakeTextModelClient(outputs=[json.dumps(bad)])

        with patch(_SLEEP, new_callable=AsyncMock):
            with self.assertRaises(ValueError):
                asyncio.run(create_narrative(_narrative_input(), client, user_id="user-1"))
        self.assertEqual(len(client.calls), 2)

    def test_wrong_act_emotion_rejected(self) -> None:
        bad = json.loads(json.dumps(NARRATIVE_OUTPUT))
        bad["script_manifest"]["act_1_hook"]["emotional_goal"] = "Joy"
        client = FakeTextModelClient(outputs=[json.dumps(bad), json.dumps(NARRATIVE_OUTPUT)])

        with patch(_SLEEP, new_callable=AsyncMock):
            result = asyncio.run(create_narrative(_narrative_input(), client, user_id="user-1"))
        self.assertEqual(result.value.script_manifest.act_1_hook.emotional_goal, "Curiosity")


class WorldBuilderTests(unittest.TestCase):
    def test_builds_manifest(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(WORLD_OUTPUT)])

        result = asyncio.run(build_world(_world_input(), client, user_id="user-1"))

        manifest = result.value.visual_manifest
        self.assertEqual(manifest.physics_parameters.particle_type, "floating_dust")
        self.assertEqual(manifest.chromatic_bible.accent_hex, "#E94F37")
        self.assertEqual(client.calls[0][0].payload["temperature"], 0.6)

    def test_style_reference_is_attached(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(WORLD_OUTPUT)])

        async def run():
            async with _image_client() as http_client:
                return await build_world(
                    _world_input(style_reference_url="https://cdn.example.com/ref.webp"),
                    client,
                    user_id="user-1",
                    http_client=http_client,
                )

        asyncio.run(run())

        content = client.calls[0][0].payload["input"][1]["content"]
        self.assertEqual(content[1]["text"], "--- STYLE REFERENCE ---")
        self.assertEqual(content[2]["type"], "input_image")

    def test_invalid_hex_rejected(self) -> None:
        bad = json.loads(json.dumps(WORLD_OUTPUT))
        bad["visual_manifest"]["chromatic_bible"]["primary_hex"] = "gold"
        client = FakeTextModelClient(outputs=[json.dumps(bad)])

        with patch(_SLEEP, new_callable=AsyncMock):
            with self.assertRaises(ValueError):
                asyncio.run(build_world(_world_input(), client, user_id="user-1"))
        self.assertEqual(len(client.calls), 2)


def _recommendation(rec_id: str, mode: str = "hand-model") -> dict:
    return {
        "id": rec_id,
        "name": "Amber Precision",
        "mode": mode,
        "character_profile": {
            "identity_id": "LUXURY_ELEGANT_F1",
            "detailed_persona": "Woman in her early thirties with warm olive skin, defined knuckles and a calm presence. " * 3,
            "cultural_fit": "Reads as confident and successful to young Gulf professionals who value quiet luxury. " * 2,
        },
        "appearance": {
            "age_range": "30-35",
            "skin_tone": "warm olive",
            "build": "slender",
            "style_notes": "short nude manicure, fine silver ring",
        },
        "interaction_protocol": {
            "product_engagement": "Holds the watch between thumb and forefinger, rotating it slowly toward the key light. " * 2,
            "motion_limitations": "Movements stay slow and deliberate, with no fast gestures that blur the dial or hands. " * 2,
        },
        "identity_locking": {
            "strategy": "PROMPT_EMBEDDING",
            "vfx_anchor_tags": ["olive skin", "nude manicure", "silver ring", "slender fingers", "soft key light"],
            "reference_image_required": False,
        },
        "image_generation_prompt": "Close-up of elegant hands with short nude manicure, warm olive skin and a fine silver ring. " * 2,
        "thumbnail_prompt": "Elegant olive-skinned hands presenting a gold watch under soft studio light.",
    }


CHARACTER_PLAN_OUTPUT = {
    "recommendations": [
        _recommendation("REC_ASPIRATIONAL_001"),
        _recommendation("REC_RELATABLE_002"),
        _recommendation("REC_DISTINCTIVE_003"),
    ],
    "reasoning": "Three hand-model takes spanning premium, everyday and editorial looks.",
}

BEAT1_SCRIPT = "[excited] Discover the future of design. [pause] Every detail crafted with precision. [pause] Experience excellence today."


def _beat_script(beat_id: str, total_duration: float = 6.7) -> dict:
    return {
        "beat_id": beat_id,
        "voiceover_script": {
            "enabled": True,
            "language": "en",
            "tempo": "normal",
            "volume": "medium",
            "script": BEAT1_SCRIPT,
            "total_duration": total_duration,
            "total_word_count": 13,
            "pause_count": 2,
            "speaking_duration": 5.2,
            "pause_duration": 1.5,
            "script_summary": "Intrigue, then craft.",
        },
    }


VOICEOVER_OUTPUT = {
    "beat_scripts": [_beat_script("beat1"), _beat_script("beat2")],
    "full_script": {"text": f"{BEAT1_SCRIPT} {BEAT1_SCRIPT}", "total_duration": 13.4, "total_word_count": 26},
}


def _character_input(**overrides) -> CharacterPlanningInput:
    values = {
        "strategic_directives": "Premium restraint.",
        "target_audience": "Young Gulf professionals",
        "optimized_image_instruction": "Photoreal render.",
        "product_title": "Aurum Watch",
        "character_mode": "hand-model",
        "aspect_ratio": "9:16",
        "duration": 30,
    }
    values.update(overrides)
    return CharacterPlanningInput(**values)


def _voiceover_input(**overrides) -> VoiceoverScriptInput:
    values = {
        "beats": (
            VoiceoverBeat("beat1", "The Spark", "Watch face emerges from shadow", "hook", "mysterious"),
            VoiceoverBeat("beat2", "The Craft", "Macro on the brushed bezel", "transformation", "confident"),
        ),
        "language": "en",
        "tempo": "normal",
        "volume": "medium",
        "target_audience": "Young Gulf professionals",
        "campaign_objective": "feature-showcase",
        "product_name": "Aurum Watch",
        "creative_spark": "Time forged in gold.",
        "visual_beats": VisualBeats(beat1="shadow", beat2="bezel", beat3="reveal"),
    }
    values.update(overrides)
    return VoiceoverScriptInput(**values)


class CharacterPlanningTests(unittest.TestCase):
    def test_returns_three_recommendations(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(CHARACTER_PLAN_OUTPUT)])

        result = asyncio.run(plan_characters(_character_input(), client, user_id="user-1"))

        self.assertEqual(
            [rec.id for rec in result.value.recommendations],
            ["REC_ASPIRATIONAL_001", "REC_RELATABLE_002", "REC_DISTINCTIVE_003"],
        )
        self.assertEqual(result.to_dict()["cost"], 0.004)
        payload = client.calls[0][0].payload
        self.assertEqual(payload["temperature"], 0.6)
        self.assertEqual(payload["text"]["format"]["name"], "character_planning_output")
        self.assertIsInstance(payload["input"][1]["content"], str)

    def test_reference_image_is_attached(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(CHARACTER_PLAN_OUTPUT)])

        async def run():
            async with _image_client() as http_client:
                return await plan_characters(
                    _character_input(reference_image_url="https://cdn.example.com/ref.webp"),
                    client,
                    user_id="user-1",
                    http_client=http_client,
                )

        asyncio.run(run())

        content = client.calls[0][0].payload["input"][1]["content"]
        self.assertEqual(content[1]["text"], "--- CHARACTER REFERENCE ---")
        self.assertEqual(content[2]["type"], "input_image")

    def test_fewer_than_three_recommendations_retried(self) -> None:
        short = json.dumps({**CHARACTER_PLAN_OUTPUT, "recommendations": CHARACTER_PLAN_OUTPUT["recommendations"][:2]})
        client = FakeTextModelClient(outputs=[short, json.dumps(CHARACTER_PLAN_OUTPUT)])

        with patch(_SLEEP, new_callable=AsyncMock):
            result = asyncio.run(plan_characters(_character_input(), client, user_id="user-1"))

        self.assertEqual(len(client.calls), 2)
        self.assertEqual(len(result.value.recommendations), 3)

    def test_mode_mismatch_is_logged_not_raised(self) -> None:
        output = json.loads(json.dumps(CHARACTER_PLAN_OUTPUT))
        output["recommendations"][2] = _recommendation("REC_DISTINCTIVE_003", mode="full-body")
        client = FakeTextModelClient(outputs=[json.dumps(output)])

        with patch("apps.api.app.services.agents.commerce.character_planning._LOGGER") as logger:
            result = asyncio.run(plan_characters(_character_input(), client, user_id="user-1"))

        self.assertEqual(result.value.recommendations[2].mode, "full-body")
        logger.warning.assert_called_once()
        self.assertEqual(logger.warning.call_args.args[2], "REC_DISTINCTIVE_003")


class VoiceoverScriptTests(unittest.TestCase):
    def test_reasoning_model_returns_beat_scripts(self) -> None:
        client = FakeTextModelClient(outputs=[json.dumps(VOICEOVER_OUTPUT)])

        result = asyncio.run(generate_voiceover_script(_voiceover_input(), client, user_id="user-1"))

        payload = client.calls[0][0].payload
        self.assertEqual(payload["reasoning"], {"effort": "high"})
        self.assertNotIn("temperature", payload)
        self.assertEqual(payload["text"]["format"]["name"], "voiceover_script_output")
        self.assertEqual([entry.beat_id for entry in result.value.beat_scripts], ["beat1", "beat2"])
        self.assertEqual(result.value.full_script.total_word_count, 26)

    def test_beat_over_twelve_seconds_rejected(self) -> None:
        bad = {**VOICEOVER_OUTPUT, "beat_scripts": [_beat_script("beat1", total_duration=12.5), _beat_script("beat2")]}
        client = FakeTextModelClient(outputs=[json.dumps(bad)])

        with patch(_SLEEP, new_callable=AsyncMock):
            with self.assertRaises(ValueError):
                asyncio.run(generate_voiceover_script(_voiceover_input(), client, user_id="user-1"))
        self.assertEqual(len(client.calls), 2)

    def test_missing_beat_is_logged(self) -> None:
        partial = {**VOICEOVER_OUTPUT, "beat_scripts": [_beat_script("beat1")]}
        client = FakeTextModelClient(outputs=[json.dumps(partial)])

        with patch("apps.api.app.services.agents.commerce.voiceover_script._LOGGER") as logger:
            result = asyncio.run(generate_voiceover_script(_voiceover_input(), client, user_id="user-1"))

        self.assertEqual(len(result.value.beat_scripts), 1)
        logger.warning.assert_called_once()
        self.assertEqual(logger.warning.call_args.args[1:], ("beat1,beat2", "beat1"))

    def test_script_timing_counts_words_and_pauses(self) -> None:
        timing = script_timing(BEAT1_SCRIPT, "normal")

        self.assertEqual(timing.word_count, 13)
        self.assertEqual(timing.pause_count, 2)
        self.assertAlmostEqual(timing.pause_duration, 1.5)
        self.assertAlmostEqual(timing.total_duration, 6.7)

    def test_script_timing_long_pause_and_fast_tempo(self) -> None:
        timing = script_timing("[calm] Pure gold. [long pause] Yours. [short pause]", "fast")

        self.assertEqual(timing.word_count, 3)
        self.assertEqual(timing.pause_count, 2)
        self.assertAlmostEqual(timing.pause_duration, 2.05)
        self.assertAlmostEqual(timing.speaking_duration, 1.0)


if __name__ == "__main__":
    unittest.main()
