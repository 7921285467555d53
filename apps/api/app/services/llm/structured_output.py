"""Pydantic models for structured LLM output.

Agents declare their output contract as ``StrictModel`` subclasses.  The same
model is sent to the provider as a strict JSON Schema (``text.format``) and
used to validate the JSON the provider returns, so the requested shape and the
accepted shape can never drift apart.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

_SCHEMA_NOISE_KEYS = frozenset({"title", "default"})
_SCHEMA_MAP_KEYS = frozenset({"properties", "$defs"})


class StrictModel(BaseModel):
    """Base for output schemas: unknown keys are rejected.

    ``extra="forbid"`` makes pydantic emit ``additionalProperties: false`` on
    every object, which strict structured-output mode requires.  Fields must
    not declare defaults; strict mode requires every property to be listed in
    ``required``.
    """

    model_config = ConfigDict(extra="forbid")


def _clean_schema_node(node: Any) -> Any:
    if isinstance(node, list):
        return [_clean_schema_node(item) for item in node]
    if not isinstance(node, dict):
        return node
    cleaned: dict[str, Any] = {}
    for key, value in node.items():
        if key in _SCHEMA_NOISE_KEYS:
            continue
        if key in _SCHEMA_MAP_KEYS and isinstance(value, dict):
            # Keys of these maps are field / definition names, not schema keywords.
            cleaned[key] = {name: _clean_schema_node(sub) for name, sub in value.items()}
        else:
            cleaned[key] = _clean_schema_node(value)
    return cleaned


def strict_json_schema(model: type[BaseModel]) -> dict[str, Any]:
    return _clean_schema_node(model.model_json_schema())


def json_schema_format(name: str, model: type[BaseModel]) -> dict[str, Any]:
    return {
        "format": {
            "type": "json_schema",
            "name": name,
            "strict": True,
            "schema": strict_json_schema(model),
        }
    }
