from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from apps.api.app.services.agents.social.schemas import SocialPlatform


class SocialMetadataBatchCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    platforms: list[SocialPlatform] = Field(min_length=1)
    script_text: str
    duration: float = Field(ge=0)


class SocialMetadataCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    script_text: str
    duration: float = Field(ge=0)
