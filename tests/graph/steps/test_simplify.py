"""Tests for the schema simplification step."""

from __future__ import annotations

from typing import Any

from schemagraph.commands.graph.steps.simplify import SimplifyStep, simplify_schema
from schemagraph.commands.graph.steps.types import ObjectType
from tests.conftest import make_raw_field, make_raw_type, named


def _raw_schema(**roots: Any) -> dict[str, Any]:
    return {
        "types": [
            make_raw_type("OBJECT", "Query", fields=[make_raw_field("hello", named("String", "SCALAR"))]),
            make_raw_type("SCALAR", "String"),
        ],
        "queryType": {"name": "Query"},
        **roots,
    }


class TestSimplifySchema:
    def test_types_keyed_by_name(self):
        schema = simplify_schema(_raw_schema())
        assert list(schema.types) == ["Query", "String"]
        assert isinstance(schema.types["Query"], ObjectType)

    def test_roots_default_to_none(self):
        schema = simplify_schema(_raw_schema())
        assert schema.query_type == "Query"
        assert schema.mutation_type is None
        assert schema.subscription_type is None

    def test_explicit_null_roots(self):
        schema = simplify_schema(_raw_schema(mutationType=None, subscriptionType=None))
        assert schema.mutation_type is None

    def test_mutation_root_captured(self):
        schema = simplify_schema(_raw_schema(mutationType={"name": "Mutation"}))
        assert schema.mutation_type == "Mutation"

    def test_last_duplicate_wins(self):
        raw = _raw_schema()
        raw["types"].append(make_raw_type("SCALAR", "Query", description="second"))
        schema = simplify_schema(raw)
        assert schema.types["Query"].description == "second"

    def test_step_runs_simplify(self, sample_introspection: dict[str, Any]):
        schema = SimplifyStep().run(sample_introspection["__schema"])
        assert {"User", "Post", "Node", "SearchResult", "Role", "UserFilter"} <= set(schema.types)
        assert schema.types["User"].fields["wrapper"].type == "HiddenWrapper"
