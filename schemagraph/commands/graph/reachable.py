"""Cycle-safe traversal of the types reachable from a root type."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from schemagraph.commands.graph.steps.base import SchemaIntegrityError
from schemagraph.commands.graph.steps.types import (
    SimplifiedField,
    SimplifiedType,
    TypeEdge,
    TypeGraph,
    fields_of,
    related_types,
)
from schemagraph.helpers.naming import type_name_to_id

_LEAF_KINDS = {"SCALAR", "ENUM", "INPUT_OBJECT"}
_LEAF_FIELD_KINDS = {"SCALAR", "ENUM"}


@dataclass
class ReachableGraph:
    """The node-type subset of a graph reachable from one root, in BFS order."""

    root_id: str
    nodes: dict[str, SimplifiedType] = field(
        default_factory=lambda: dict[str, SimplifiedType]()
    )


def is_node(type_rec: SimplifiedType) -> bool:
    """Whether a type is drawn as a node (leaf and hidden types are not)."""
    return type_rec.kind not in _LEAF_KINDS and not type_rec.is_hidden_type


def is_leaf_field(fld: SimplifiedField) -> bool:
    """Whether a field resolves to a scalar or enum value."""
    return isinstance(fld.type, SimplifiedType) and fld.type.kind in _LEAF_FIELD_KINDS


def visible_fields(
    type_rec: SimplifiedType, show_leaf_fields: bool = False
) -> dict[str, SimplifiedField]:
    """Fields of *type_rec* to display; leaf fields only when asked for."""
    fields = fields_of(type_rec)
    if show_leaf_fields:
        return fields
    return {name: fld for name, fld in fields.items() if not is_leaf_field(fld)}


def edge_targets(type_rec: SimplifiedType) -> list[SimplifiedType]:
    """Node types linked from *type_rec* by fields and derived/possible types."""
    targets = [
        fld.type
        for fld in fields_of(type_rec).values()
        if isinstance(fld.type, SimplifiedType)
    ]
    # Interfaces a type implements are not followed, only downward links
    if type_rec.kind != "OBJECT":
        targets += [e.type for e in related_types(type_rec) if isinstance(e, TypeEdge)]
    return [t for t in targets if is_node(t)]


def get_type_graph(
    graph: TypeGraph,
    root_type: str | None = None,
    hide_root: bool = False,
) -> ReachableGraph:
    """Collect the types reachable from *root_type* (default: the query type).

    Every id is visited once, so cyclic schemas terminate.

    Raises:
        SchemaIntegrityError: the root type is not part of the graph.
    """
    if root_type is None:
        if graph.query_type is None:
            raise SchemaIntegrityError("Schema has no query type to start from")
        root_type = graph.query_type.name

    root_id = type_name_to_id(root_type)
    if root_id not in graph.types:
        raise SchemaIntegrityError(
            f"Unknown root type {root_type!r}", {"type": root_type}
        )

    nodes: dict[str, SimplifiedType] = {}
    queue = deque([graph.types[root_id]])
    while queue:
        type_rec = queue.popleft()
        if type_rec.id in nodes:
            continue
        nodes[type_rec.id] = type_rec
        queue.extend(t for t in edge_targets(type_rec) if t.id not in nodes)

    if hide_root:
        del nodes[root_id]
    return ReachableGraph(root_id=root_id, nodes=nodes)
