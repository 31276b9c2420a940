"""Shared test fixtures for schemagraph tests."""

from __future__ import annotations

from typing import Any

from graphql import build_schema, introspection_from_schema
import pytest

from schemagraph.commands.graph.pipeline import assemble_graph
from schemagraph.commands.graph.steps.types import TypeGraph

SAMPLE_SDL = '''
"""Something with an id"""
interface Node {
  id: ID!
}

"""A user of the application"""
type User implements Node {
  id: ID!
  name: String
  friends(first: Int = 10, after: String): [User!]!
  oldName: String @deprecated(reason: "Use name")
  wrapper: HiddenWrapper
  search: SearchResult
}

type Post implements Node {
  id: ID!
  author: User!
  title: String
}

union SearchResult = User | Post

type HiddenWrapper {
  value: [Int!]
  other: String
}

enum Role {
  ADMIN
  USER
}

input UserFilter {
  role: Role
  name: String = "x"
}

type Query {
  node(id: ID!): Node
  users(filter: UserFilter): [User]
  me: User
  labels: [String!]!
}

type Mutation {
  rename(name: String!): User
}
'''


def introspect_sdl(sdl: str) -> dict[str, Any]:
    """Return the introspection document of an SDL schema."""
    return dict(introspection_from_schema(build_schema(sdl), descriptions=True))


def make_raw_type(
    kind: str,
    name: str,
    fields: list[dict[str, Any]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Helper to create a raw introspection type with minimal boilerplate."""
    raw: dict[str, Any] = {
        "kind": kind,
        "name": name,
        "description": None,
        "fields": fields,
        "inputFields": None,
        "interfaces": [] if kind == "OBJECT" else None,
        "enumValues": None,
        "possibleTypes": None,
    }
    raw.update(extra)
    return raw


def named(name: str, kind: str = "OBJECT") -> dict[str, Any]:
    return {"kind": kind, "name": name, "ofType": None}


def wrapped(*wrappers: str, name: str, kind: str = "SCALAR") -> dict[str, Any]:
    """Build a wrapped type ref, outermost wrapper first."""
    ref = named(name, kind)
    for wrapper in reversed(wrappers):
        ref = {"kind": wrapper, "name": None, "ofType": ref}
    return ref


def make_raw_field(
    name: str,
    type_ref: dict[str, Any],
    args: list[dict[str, Any]] | None = None,
    is_deprecated: bool = False,
    deprecation_reason: str | None = None,
) -> dict[str, Any]:
    return {
        "name": name,
        "description": None,
        "args": args or [],
        "type": type_ref,
        "isDeprecated": is_deprecated,
        "deprecationReason": deprecation_reason,
    }


@pytest.fixture
def sample_introspection() -> dict[str, Any]:
    return introspect_sdl(SAMPLE_SDL)


@pytest.fixture
def sample_graph(sample_introspection: dict[str, Any]) -> TypeGraph:
    graph = assemble_graph(sample_introspection)
    assert graph is not None
    return graph
