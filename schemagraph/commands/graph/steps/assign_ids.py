"""Step: Assign ids and resolve type-name references into a TypeGraph.

The simplified schema still refers to types by name. This step gives every
type, field, argument and edge a stable id derived from names only, replaces
each type name with the record it names, and finally re-keys the types by
id. Name lookups all go through the name-keyed map of the input, so the two
keyings are never mixed in one structure.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging

from schemagraph.commands.graph.steps.base import (
    MechanicalStep,
    SchemaIntegrityError,
    StepValidationError,
)
from schemagraph.commands.graph.steps.types import (
    InputObjectType,
    InterfaceType,
    ObjectType,
    SimplifiedIntrospection,
    SimplifiedType,
    TypeEdge,
    TypeGraph,
    UnionType,
    fields_of,
    related_types,
)
from schemagraph.helpers.naming import (
    argument_id,
    edge_id,
    field_id,
    type_name_to_id,
)

logger = logging.getLogger(__name__)


class AssignIdsStep(MechanicalStep[SimplifiedIntrospection, TypeGraph]):
    """Resolve a name-keyed simplified schema into an id-keyed TypeGraph."""

    name = "assign_ids"

    def _execute(self, input: SimplifiedIntrospection) -> TypeGraph:
        return assign_types_and_ids(input)

    def _validate_output(self, output: TypeGraph) -> None:
        seen: set[str] = set()
        for entity_id, type_ref in iter_graph_refs(output):
            if entity_id in seen:
                raise StepValidationError(
                    f"Duplicate id {entity_id}", {"id": entity_id}
                )
            seen.add(entity_id)
            if not isinstance(type_ref, SimplifiedType):
                raise StepValidationError(
                    f"Unresolved type reference on {entity_id}",
                    {"id": entity_id, "type": type_ref},
                )


def assign_types_and_ids(schema: SimplifiedIntrospection) -> TypeGraph:
    """Resolve every reference of *schema* and return the id-keyed graph.

    The records of *schema* are updated in place and become the nodes of
    the returned graph.

    Raises:
        SchemaIntegrityError: a field, argument, edge or root type names a
            type the schema does not define.
    """
    by_name = schema.types

    def resolve(type_name: str, referrer: str) -> SimplifiedType:
        try:
            return by_name[type_name]
        except KeyError:
            raise SchemaIntegrityError(
                f"{referrer} references unknown type {type_name!r}",
                {"type": type_name, "referrer": referrer},
            ) from None

    def resolve_edges(
        prefix: str, type_rec: SimplifiedType, names: list
    ) -> list[TypeEdge]:
        edges = []
        for other in names:
            eid = edge_id(prefix, type_rec.name, other)
            edges.append(TypeEdge(id=eid, type=resolve(other, eid)))
        return edges

    for type_rec in by_name.values():
        type_rec.id = type_name_to_id(type_rec.name)

        if isinstance(type_rec, InputObjectType):
            for input_field in type_rec.input_fields.values():
                input_field.id = field_id(type_rec.name, input_field.name)
                input_field.type = resolve(input_field.type, input_field.id)

        for fld in fields_of(type_rec).values():
            fld.id = field_id(type_rec.name, fld.name)
            fld.type = resolve(fld.type, fld.id)
            for arg in fld.args.values():
                arg.id = argument_id(type_rec.name, fld.name, arg.name)
                arg.type = resolve(arg.type, arg.id)

        if isinstance(type_rec, UnionType) and type_rec.possible_types:
            type_rec.possible_types = resolve_edges(
                "POSSIBLE_TYPE", type_rec, type_rec.possible_types
            )
        if isinstance(type_rec, InterfaceType) and type_rec.derived_types:
            type_rec.derived_types = resolve_edges(
                "DERIVED_TYPE", type_rec, type_rec.derived_types
            )
        if isinstance(type_rec, ObjectType) and type_rec.interfaces:
            type_rec.interfaces = resolve_edges(
                "INTERFACE", type_rec, type_rec.interfaces
            )

    def resolve_root(name: str | None) -> SimplifiedType | None:
        if name is None:
            return None
        return resolve(name, "schema root")

    graph = TypeGraph(
        types={type_rec.id: type_rec for type_rec in by_name.values()},
        query_type=resolve_root(schema.query_type),
        mutation_type=resolve_root(schema.mutation_type),
        subscription_type=resolve_root(schema.subscription_type),
    )
    logger.debug(f"Assigned ids to {len(graph.types)} types")
    return graph


def iter_graph_refs(graph: TypeGraph) -> Iterator[tuple[str, object]]:
    """Yield ``(id, type)`` for every type, field, argument and edge.

    Types yield themselves. The walk follows the id-keyed map, never the
    references, so it terminates on cyclic graphs.
    """
    for type_id, type_rec in graph.types.items():
        yield type_id, type_rec
        if isinstance(type_rec, InputObjectType):
            for input_field in type_rec.input_fields.values():
                yield input_field.id, input_field.type
        for fld in fields_of(type_rec).values():
            yield fld.id, fld.type
            for arg in fld.args.values():
                yield arg.id, arg.type
        for edge in related_types(type_rec):
            if isinstance(edge, TypeEdge):
                yield edge.id, edge.type
