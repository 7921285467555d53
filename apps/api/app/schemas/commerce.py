from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from apps.api.app.services.agents.commerce.schemas import (
    BEAT_DURATION_SECONDS,
    BeatId,
    CampaignObjective,
    CharacterMode,
    CharacterPlan,
    CreativeSpark,
    Narrative,
    NarrativeRole,
    ProductionLevel,
    StrategicContext,
    VoiceoverLanguage,
    VoiceoverScript,
    VoiceoverTempo,
    VoiceoverVolume,
    WorldManifest,
)


class StrategicContextCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_title: str = Field(min_length=1)
    target_audience: str = Field(min_length=1)
    duration: int = Field(gt=0)
    aspect_ratio: str = "9:16"
    product_description: str | None = None
    product_category: str | None = None
    region: str | None = None
    pacing_override: int | None = Field(default=None, ge=0, le=100)
    visual_intensity: int | None = Field(default=None, ge=0, le=100)
    production_level: ProductionLevel | None = None
    custom_motion_instructions: str | None = None
    custom_image_instructions: str | None = None


class CreativeSparkCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strategic_directives: str
    target_audience: str
    duration: int = Field(gt=0)
    pacing_profile: str
    region: str | None = None
    geometry_profile: str | None = None
    material_spec: str | None = None
    hero_feature: str | None = None
    origin_metaphor: str | None = None
    include_human_element: bool = False
    character_mode: str | None = None
    character_profile: str | None = None


class VisualBeatsCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    beat1: str
    beat2: str
    beat3: str


class NarrativeCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    creative_spark: str
    campaign_spark: str
    campaign_objective: CampaignObjective
    visual_beats: VisualBeatsCreate
    pacing_profile: str
    duration: int = Field(gt=0)
    product_image_url: str | None = None


class WorldBuilderCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strategic_directives: str
    optimized_image_instruction: str
    creative_spark: str
    environment_concept: str
    atmospheric_density: int = Field(ge=0, le=100)
    cinematic_lighting: str
    visual_preset: str
    style_reference_url: str | None = None
    brand_primary_color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    brand_secondary_color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")


class CharacterPlanCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strategic_directives: str = ""
    target_audience: str = Field(min_length=1)
    optimized_image_instruction: str = ""
    product_title: str = Field(min_length=1)
    character_mode: CharacterMode
    aspect_ratio: str = "9:16"
    duration: int = Field(gt=0)
    character_description: str | None = None
    reference_image_url: str | None = None


class VoiceoverBeatCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    beat_id: BeatId
    beat_name: str
    beat_description: str
    narrative_role: NarrativeRole
    emotional_tone: str
    duration: float = Field(default=BEAT_DURATION_SECONDS, gt=0, le=BEAT_DURATION_SECONDS)


class DialogueLineCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    line: str = Field(min_length=1)
    beat_id: BeatId | None = None
    timestamp: float | None = Field(default=None, ge=0)


class VoiceoverScriptCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    beats: list[VoiceoverBeatCreate] = Field(min_length=1, max_length=3)
    language: VoiceoverLanguage = "en"
    tempo: VoiceoverTempo = "normal"
    volume: VoiceoverVolume = "medium"
    target_audience: str
    campaign_objective: CampaignObjective
    product_name: str = Field(min_length=1)
    creative_spark: str
    visual_beats: VisualBeatsCreate
    region: str | None = None
    product_description: str | None = None
    custom_instructions: str | None = None
    existing_dialogue: list[DialogueLineCreate] = Field(default_factory=list)
    character_persona: str | None = None
    character_cultural_fit: str | None = None


class StrategicContextRead(StrategicContext):
    cost: float | None


class CreativeSparkRead(CreativeSpark):
    cost: float | None


class NarrativeRead(Narrative):
    cost: float | None


class WorldManifestRead(WorldManifest):
    cost: float | None


class CharacterPlanRead(CharacterPlan):
    cost: float | None


class VoiceoverScriptRead(VoiceoverScript):
    cost: float | None
