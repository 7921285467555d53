from __future__ import annotations

from storia_llm import UnknownModelError


class LlmError(Exception):
    """Base class for failures raised by the model invocation client."""


class ProviderRequestError(LlmError):
    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"[{provider}] {message}")
        self.provider = provider


class MissingApiKeyError(LlmError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"API key for provider '{provider}' is not configured.")
        self.provider = provider


class UnknownProviderError(LlmError):
    def __init__(self, provider: str, supported: list[str]) -> None:
        super().__init__(f"Unknown provider '{provider}'. Supported: {', '.join(sorted(supported)) or '(none)'}")
        self.provider = provider


__all__ = [
    "LlmError",
    "MissingApiKeyError",
    "ProviderRequestError",
    "UnknownModelError",
    "UnknownProviderError",
]
