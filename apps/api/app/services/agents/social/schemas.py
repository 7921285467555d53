from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import Field

from apps.api.app.services.llm.structured_output import StrictModel

SocialPlatform = Literal["youtube", "tiktok", "instagram", "facebook"]

SOCIAL_PLATFORMS: tuple[SocialPlatform, ...] = ("youtube", "tiktok", "instagram", "facebook")


@dataclass(frozen=True)
class SocialMetadataInput:
    platform: SocialPlatform
    script_text: str
    duration: float


class YouTubeMetadata(StrictModel):
    title: str = Field(max_length=100, description="Hook-first Shorts title, ideally under 60 characters.")
    description: str = Field(max_length=5000, description="2-4 sentence description ending with hashtags including #shorts.")


class CaptionMetadata(StrictModel):
    caption: str = Field(max_length=2200, description="Platform caption followed by hashtags.")


@dataclass(frozen=True)
class SocialMetadataResult:
    platform: SocialPlatform
    title: str | None = None
    description: str | None = None
    caption: str | None = None
    cost: float | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"platform": self.platform}
        for key in ("title", "description", "caption"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        payload["cost"] = self.cost
        return payload


@dataclass(frozen=True)
class SocialMetadataBatch:
    results: list[SocialMetadataResult]
    failed_platforms: list[SocialPlatform] = field(default_factory=list)

    @property
    def total_cost(self) -> float:
        return sum(result.cost or 0.0 for result in self.results)
