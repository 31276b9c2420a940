"""Load introspection documents from disk (.json results or .graphql SDL)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from graphql import GraphQLError, build_schema, introspection_from_schema

from schemagraph.commands.graph.steps.base import StepValidationError

_SDL_SUFFIXES = {".graphql", ".gql", ".graphqls"}


class IntrospectionLoadError(StepValidationError):
    """Raised when a file does not hold a usable introspection document."""


def load_introspection(path: str | Path) -> dict[str, Any]:
    """Load an introspection document, returning ``{"__schema": ...}``.

    JSON files may hold the bare document or a full GraphQL response
    (``{"data": {"__schema": ...}}``). SDL files are built into a schema
    and introspected.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    if path.suffix.lower() in _SDL_SUFFIXES:
        return introspection_from_sdl(text, source=str(path))

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise IntrospectionLoadError(
            f"{path} is not valid JSON: {e}", {"path": str(path)}
        ) from e
    return unwrap_introspection(payload, source=str(path))


def introspection_from_sdl(sdl: str, source: str = "<sdl>") -> dict[str, Any]:
    try:
        schema = build_schema(sdl)
    except GraphQLError as e:
        raise IntrospectionLoadError(
            f"{source} is not a valid SDL schema: {e.message}", {"path": source}
        ) from e
    return dict(introspection_from_schema(schema, descriptions=True))


def unwrap_introspection(payload: Any, source: str = "<document>") -> dict[str, Any]:
    """Strip a GraphQL response envelope, if present."""
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        payload = payload["data"]
    if not isinstance(payload, dict) or "__schema" not in payload:
        raise IntrospectionLoadError(
            f"{source} has no __schema object", {"path": source}
        )
    return payload
