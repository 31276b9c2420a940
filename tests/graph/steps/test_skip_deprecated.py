"""Tests for dropping deprecated fields."""

from __future__ import annotations

from schemagraph.commands.graph.steps.skip_deprecated import SkipDeprecatedStep
from schemagraph.commands.graph.steps.types import (
    ObjectType,
    SimplifiedField,
    TypeGraph,
)


def _graph_with(*fields: SimplifiedField) -> TypeGraph:
    type_rec = ObjectType(
        name="Thing", id="TYPE::Thing", fields={f.name: f for f in fields}
    )
    return TypeGraph(types={"TYPE::Thing": type_rec}, query_type=type_rec)


class TestSkipDeprecated:
    def test_deprecated_fields_removed(self):
        graph = _graph_with(
            SimplifiedField(name="a", type="String"),
            SimplifiedField(name="b", type="String", is_deprecated=True),
        )
        out = SkipDeprecatedStep().run(graph)
        assert list(out.types["TYPE::Thing"].fields) == ["a"]
        assert list(graph.types["TYPE::Thing"].fields) == ["a", "b"]

    def test_type_kept_when_all_fields_removed(self):
        graph = _graph_with(SimplifiedField(name="b", type="String", is_deprecated=True))
        out = SkipDeprecatedStep().run(graph)
        assert "TYPE::Thing" in out.types
        assert out.types["TYPE::Thing"].fields == {}
        assert out.query_type is out.types["TYPE::Thing"]

    def test_sample_schema(self, sample_graph: TypeGraph):
        out = SkipDeprecatedStep().run(sample_graph)
        user = out.types["TYPE::User"]
        assert "oldName" not in user.fields
        assert "name" in user.fields
        assert user.fields["friends"].type is user
