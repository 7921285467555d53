from .catalog import (
    SUPPORTED_MODELS,
    ModelSpec,
    UnknownModelError,
    get_model_spec,
    supports_reasoning,
)

__all__ = [
    "SUPPORTED_MODELS",
    "ModelSpec",
    "UnknownModelError",
    "get_model_spec",
    "supports_reasoning",
]
