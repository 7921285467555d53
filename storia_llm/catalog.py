from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelSpec:
    provider: str
    name: str
    label: str
    input_cost_per_1k: float
    output_cost_per_1k: float
    cached_input_cost_per_1k: float = 0.0
    reasoning: bool = False
    vision: bool = False


class UnknownModelError(ValueError):
    def __init__(self, provider: str, model: str) -> None:
        supported = ", ".join(sorted(name for p, name in SUPPORTED_MODELS if p == provider))
        super().__init__(f"Unknown model '{model}' for provider '{provider}'. Supported: {supported or '(none)'}")
        self.provider = provider
        self.model = model


_OPENAI_MODELS: tuple[ModelSpec, ...] = (
    ModelSpec(
        provider="openai",
        name="gpt-5.2",
        label="GPT-5.2",
        input_cost_per_1k=0.00175,
        output_cost_per_1k=0.014,
        cached_input_cost_per_1k=0.000175,
        reasoning=True,
        vision=True,
    ),
    ModelSpec(
        provider="openai",
        name="gpt-5.1",
        label="GPT-5.1",
        input_cost_per_1k=0.00125,
        output_cost_per_1k=0.01,
        cached_input_cost_per_1k=0.000125,
        reasoning=True,
        vision=True,
    ),
    ModelSpec(
        provider="openai",
        name="gpt-5",
        label="GPT-5",
        input_cost_per_1k=0.00125,
        output_cost_per_1k=0.01,
        cached_input_cost_per_1k=0.000125,
        reasoning=True,
        vision=True,
    ),
    ModelSpec(
        provider="openai",
        name="gpt-5-mini",
        label="GPT-5 Mini",
        input_cost_per_1k=0.00025,
        output_cost_per_1k=0.002,
        cached_input_cost_per_1k=0.000025,
        reasoning=True,
        vision=True,
    ),
    ModelSpec(
        provider="openai",
        name="gpt-4o",
        label="GPT-4o",
        input_cost_per_1k=0.0025,
        output_cost_per_1k=0.01,
        cached_input_cost_per_1k=0.00125,
        vision=True,
    ),
    ModelSpec(
        provider="openai",
        name="gpt-4o-mini",
        label="GPT-4o Mini",
        input_cost_per_1k=0.00015,
        output_cost_per_1k=0.0006,
        cached_input_cost_per_1k=0.000075,
        vision=True,
    ),
    ModelSpec(
        provider="openai",
        name="o4-mini",
        label="o4 Mini",
        input_cost_per_1k=0.0011,
        output_cost_per_1k=0.0044,
        cached_input_cost_per_1k=0.000275,
        vision=True,
    ),
)

SUPPORTED_MODELS: dict[tuple[str, str], ModelSpec] = {
    (spec.provider, spec.name): spec for spec in _OPENAI_MODELS
}


def get_model_spec(provider: str, model: str) -> ModelSpec:
    spec = SUPPORTED_MODELS.get((provider, model))
    if spec is None:
        raise UnknownModelError(provider, model)
    return spec


def supports_reasoning(provider: str, model: str) -> bool:
    spec = SUPPORTED_MODELS.get((provider, model))
    return bool(spec and spec.reasoning)
