"""Serialize a TypeGraph into a JSON-ready dict.

Type references are written as the referenced type's id, so cyclic graphs
serialize without recursion. Keys follow the introspection camelCase
convention.
"""

from __future__ import annotations

from typing import Any

from schemagraph.commands.graph.steps.types import (
    Argument,
    EnumType,
    InputObjectType,
    InterfaceType,
    ObjectType,
    SimplifiedField,
    SimplifiedType,
    TypeEdge,
    TypeGraph,
    TypeRef,
    UnionType,
)


def graph_to_dict(graph: TypeGraph) -> dict[str, Any]:
    return {
        "queryType": _ref_id(graph.query_type),
        "mutationType": _ref_id(graph.mutation_type),
        "subscriptionType": _ref_id(graph.subscription_type),
        "types": {type_id: type_to_dict(t) for type_id, t in graph.types.items()},
    }


def type_to_dict(type_rec: SimplifiedType) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": type_rec.id,
        "kind": type_rec.kind,
        "name": type_rec.name,
        "description": type_rec.description,
    }
    if type_rec.is_hidden_type:
        out["isHiddenType"] = True
        if type_rec.hidden_options:
            out["hiddenOptions"] = {
                "replaceField": type_rec.hidden_options.replace_field
            }

    if isinstance(type_rec, ObjectType):
        out["interfaces"] = [_edge_to_dict(e) for e in type_rec.interfaces]
        out["fields"] = {n: _field_to_dict(f) for n, f in type_rec.fields.items()}
    elif isinstance(type_rec, InterfaceType):
        out["derivedTypes"] = [_edge_to_dict(e) for e in type_rec.derived_types]
        out["fields"] = {n: _field_to_dict(f) for n, f in type_rec.fields.items()}
    elif isinstance(type_rec, UnionType):
        out["possibleTypes"] = [_edge_to_dict(e) for e in type_rec.possible_types]
    elif isinstance(type_rec, EnumType):
        out["enumValues"] = [dict(v) for v in type_rec.enum_values]
    elif isinstance(type_rec, InputObjectType):
        out["inputFields"] = {
            n: _arg_to_dict(a) for n, a in type_rec.input_fields.items()
        }
    return out


def _field_to_dict(fld: SimplifiedField) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": fld.id,
        "name": fld.name,
        "description": fld.description,
        "type": _ref_id(fld.type),
        "typeWrappers": list(fld.type_wrappers),
        "args": {n: _arg_to_dict(a) for n, a in fld.args.items()},
        "isDeprecated": fld.is_deprecated,
    }
    if fld.is_deprecated:
        out["deprecationReason"] = fld.deprecation_reason
    return out


def _arg_to_dict(arg: Argument) -> dict[str, Any]:
    return {
        "id": arg.id,
        "name": arg.name,
        "description": arg.description,
        "defaultValue": arg.default_value,
        "type": _ref_id(arg.type),
        "typeWrappers": list(arg.type_wrappers),
    }


def _edge_to_dict(edge: TypeEdge | str) -> dict[str, Any]:
    if isinstance(edge, str):
        return {"id": None, "type": edge}
    return {"id": edge.id, "type": _ref_id(edge.type)}


def _ref_id(ref: TypeRef | None) -> str | None:
    """Id of a resolved reference; unresolved names pass through unchanged."""
    if ref is None or isinstance(ref, str):
        return ref
    return ref.id
