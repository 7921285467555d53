from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import Field

from apps.api.app.services.llm.structured_output import StrictModel

PacingProfile = Literal["FAST_CUT", "LUXURY_SLOW", "KINETIC_RAMP", "STEADY_CINEMATIC"]
ProductionLevel = Literal["raw", "casual", "balanced", "cinematic", "ultra"]
CampaignObjective = Literal["brand-awareness", "feature-showcase", "sales-cta"]
ParticleType = Literal["floating_dust", "rain", "snow", "embers", "smoke", "none"]

HookEmotion = Literal["Awe", "Curiosity", "Tension", "Excitement", "Surprise", "Recognition"]
TransformEmotion = Literal["Understanding", "Value", "Connection", "Trust", "Desire", "Discovery"]
PayoffEmotion = Literal["Desire", "Aspiration", "Action", "Satisfaction", "Pride", "Joy"]

_HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


# Strategic context


@dataclass(frozen=True)
class StrategicContextInput:
    product_title: str
    target_audience: str
    duration: int
    aspect_ratio: str = "9:16"
    product_description: str | None = None
    product_category: str | None = None
    region: str | None = None
    pacing_override: int | None = None
    visual_intensity: int | None = None
    production_level: ProductionLevel | None = None
    custom_motion_instructions: str | None = None
    custom_image_instructions: str | None = None


class StrategicContext(StrictModel):
    strategic_directives: str = Field(
        min_length=200,
        description="4-8 sentences covering cultural laws, visual hierarchy, emotional targeting, and quality standards",
    )
    pacing_profile: PacingProfile = Field(description="Rhythmic profile determining shot durations and transitions")
    optimized_motion_dna: str = Field(
        min_length=150,
        description="Professional cinematic movement description with camera/lens/timing specs (3-5 sentences)",
    )
    optimized_image_instruction: str = Field(
        min_length=150,
        description="Technical prompt with render quality, materials, lighting, lens, post-processing (3-5 sentences)",
    )


# Creative spark


@dataclass(frozen=True)
class CreativeSparkInput:
    strategic_directives: str
    target_audience: str
    duration: int
    pacing_profile: str
    region: str | None = None
    geometry_profile: str | None = None
    material_spec: str | None = None
    hero_feature: str | None = None
    origin_metaphor: str | None = None
    include_human_element: bool = False
    character_mode: str | None = None
    character_profile: str | None = None


class CreativeSpark(StrictModel):
    creative_spark: str = Field(
        min_length=50,
        max_length=800,
        description="2-4 sentence high-concept creative vision for the campaign",
    )


# Narrative (3-act script manifest)


@dataclass(frozen=True)
class VisualBeats:
    beat1: str
    beat2: str
    beat3: str


@dataclass(frozen=True)
class NarrativeInput:
    creative_spark: str
    campaign_spark: str
    campaign_objective: CampaignObjective
    visual_beats: VisualBeats
    pacing_profile: str
    duration: int
    product_image_url: str | None = None


class HookAct(StrictModel):
    text: str = Field(min_length=50, max_length=400)
    emotional_goal: HookEmotion
    target_energy: float = Field(ge=0.0, le=1.0)
    sfx_cue: str = Field(min_length=20, max_length=150)


class TransformAct(StrictModel):
    text: str = Field(min_length=50, max_length=400)
    emotional_goal: TransformEmotion
    target_energy: float = Field(ge=0.0, le=1.0)
    sfx_cue: str = Field(min_length=20, max_length=150)


class PayoffAct(StrictModel):
    text: str = Field(min_length=50, max_length=400)
    emotional_goal: PayoffEmotion
    target_energy: float = Field(ge=0.0, le=1.0)
    sfx_cue: str = Field(min_length=20, max_length=150)
    cta_text: str = Field(max_length=50, description="Call-to-action text. Use empty string if not applicable.")


class ScriptManifest(StrictModel):
    act_1_hook: HookAct
    act_2_transform: TransformAct
    act_3_payoff: PayoffAct


class Narrative(StrictModel):
    script_manifest: ScriptManifest


# Atmospheric world


@dataclass(frozen=True)
class WorldBuilderInput:
    strategic_directives: str
    optimized_image_instruction: str
    creative_spark: str
    environment_concept: str
    atmospheric_density: int
    cinematic_lighting: str
    visual_preset: str
    style_reference_url: str | None = None
    brand_primary_color: str | None = None
    brand_secondary_color: str | None = None


class PhysicsParameters(StrictModel):
    fog_density: float = Field(ge=0.0, le=1.0)
    moisture_level: float = Field(ge=0.0, le=1.0)
    wind_intensity: float = Field(ge=0.0, le=1.0)
    dust_frequency: float = Field(ge=0.0, le=1.0)
    particle_type: ParticleType


class ChromaticBible(StrictModel):
    primary_hex: str = Field(pattern=_HEX_COLOR)
    secondary_hex: str = Field(pattern=_HEX_COLOR)
    accent_hex: str = Field(pattern=_HEX_COLOR)


class VisualManifest(StrictModel):
    global_lighting_setup: str = Field(
        min_length=100,
        max_length=500,
        description="Technical lighting specification with angles, color temps, quality, ratios",
    )
    physics_parameters: PhysicsParameters
    chromatic_bible: ChromaticBible
    environmental_anchor_prompt: str = Field(
        min_length=100,
        max_length=500,
        description="Prefix prompt that establishes environmental DNA for all shots",
    )


class WorldManifest(StrictModel):
    visual_manifest: VisualManifest


# Character planning

CharacterMode = Literal["hand-model", "full-body", "silhouette"]
IdentityStrategy = Literal["IP_ADAPTER_STRICT", "PROMPT_EMBEDDING", "SEED_CONSISTENCY", "COMBINED"]


@dataclass(frozen=True)
class CharacterPlanningInput:
    strategic_directives: str
    target_audience: str
    optimized_image_instruction: str
    product_title: str
    character_mode: CharacterMode
    aspect_ratio: str
    duration: int
    character_description: str | None = None
    reference_image_url: str | None = None


class CharacterProfile(StrictModel):
    identity_id: str = Field(description="Unique reference code, e.g. LUXURY_ELEGANT_F1")
    detailed_persona: str = Field(min_length=200, max_length=600, description="Complete physical specification (4-6 sentences)")
    cultural_fit: str = Field(min_length=80, max_length=300, description="How the character matches the target audience")


class CharacterAppearance(StrictModel):
    age_range: str
    skin_tone: str
    build: str
    style_notes: str


class InteractionProtocol(StrictModel):
    product_engagement: str = Field(min_length=80, max_length=400)
    motion_limitations: str = Field(min_length=80, max_length=400)


class IdentityLocking(StrictModel):
    strategy: IdentityStrategy
    vfx_anchor_tags: list[str] = Field(description="5-7 keywords for shot-to-shot consistency")
    reference_image_required: bool


class CharacterRecommendation(StrictModel):
    id: str = Field(description="REC_ASPIRATIONAL_001, REC_RELATABLE_002 or REC_DISTINCTIVE_003")
    name: str
    mode: CharacterMode
    character_profile: CharacterProfile
    appearance: CharacterAppearance
    interaction_protocol: InteractionProtocol
    identity_locking: IdentityLocking
    image_generation_prompt: str = Field(min_length=100, max_length=1000)
    thumbnail_prompt: str


class CharacterPlan(StrictModel):
    recommendations: list[CharacterRecommendation] = Field(min_length=3, max_length=3)
    reasoning: str


# Voiceover script

BeatId = Literal["beat1", "beat2", "beat3"]
NarrativeRole = Literal["hook", "transformation", "payoff"]
VoiceoverLanguage = Literal["ar", "en"]
VoiceoverTempo = Literal["auto", "slow", "normal", "fast", "ultra-fast"]
VoiceoverVolume = Literal["low", "medium", "high"]

BEAT_DURATION_SECONDS = 12.0


@dataclass(frozen=True)
class VoiceoverBeat:
    beat_id: BeatId
    beat_name: str
    beat_description: str
    narrative_role: NarrativeRole
    emotional_tone: str
    duration: float = BEAT_DURATION_SECONDS


@dataclass(frozen=True)
class DialogueLine:
    line: str
    beat_id: str | None = None
    timestamp: float | None = None


@dataclass(frozen=True)
class VoiceoverScriptInput:
    beats: tuple[VoiceoverBeat, ...]
    language: VoiceoverLanguage
    tempo: VoiceoverTempo
    volume: VoiceoverVolume
    target_audience: str
    campaign_objective: CampaignObjective
    product_name: str
    creative_spark: str
    visual_beats: VisualBeats
    region: str | None = None
    product_description: str | None = None
    custom_instructions: str | None = None
    existing_dialogue: tuple[DialogueLine, ...] = ()
    character_persona: str | None = None
    character_cultural_fit: str | None = None


class BeatVoiceover(StrictModel):
    enabled: bool
    language: VoiceoverLanguage
    tempo: str
    volume: str
    script: str = Field(description="Full beat script with pause tags and audio tags, no SSML")
    total_duration: float = Field(ge=0.0, le=BEAT_DURATION_SECONDS)
    total_word_count: int = Field(ge=0, description="Word count excluding pause and audio tags")
    pause_count: int = Field(ge=0)
    speaking_duration: float = Field(ge=0.0)
    pause_duration: float = Field(ge=0.0)
    script_summary: str


class BeatScript(StrictModel):
    beat_id: BeatId
    voiceover_script: BeatVoiceover


class FullScript(StrictModel):
    text: str
    total_duration: float = Field(ge=0.0)
    total_word_count: int = Field(ge=0)


class VoiceoverScript(StrictModel):
    beat_scripts: list[BeatScript] = Field(min_length=1)
    full_script: FullScript
