"""Conversion of raw introspection type descriptions into simplified records.

Raw introspection nests wrapped types as ``{"kind": "NON_NULL", "ofType":
{"kind": "LIST", "ofType": {...}}}``. The converter flattens each chain
into a wrapper stack (outermost first) plus the bare type name, and keeps
only the attributes a browser needs for each kind of type.
"""

from __future__ import annotations

from typing import Any

from schemagraph.commands.graph.steps.types import (
    LIST,
    NON_NULL,
    Argument,
    EnumType,
    InputObjectType,
    InterfaceType,
    ObjectType,
    ScalarType,
    SimplifiedField,
    SimplifiedType,
    UnionType,
)

_WRAPPER_KINDS = (NON_NULL, LIST)


def unwrap_type(raw_type: dict[str, Any], wrappers: list[str]) -> str:
    """Push wrapper kinds onto *wrappers* until a named type is reached.

    Returns the bare type name.
    """
    while raw_type["kind"] in _WRAPPER_KINDS:
        wrappers.append(raw_type["kind"])
        raw_type = raw_type["ofType"]
    return raw_type["name"]


def convert_arg(raw_arg: dict[str, Any]) -> Argument:
    """Convert an argument or input field description."""
    arg = Argument(
        name=raw_arg["name"],
        description=raw_arg.get("description"),
        default_value=raw_arg.get("defaultValue"),
    )
    arg.type = unwrap_type(raw_arg["type"], arg.type_wrappers)
    return arg


convert_input_field = convert_arg


def convert_field(raw_field: dict[str, Any]) -> SimplifiedField:
    out = SimplifiedField(
        name=raw_field["name"],
        description=raw_field.get("description"),
        is_deprecated=bool(raw_field.get("isDeprecated")),
    )
    out.type = unwrap_type(raw_field["type"], out.type_wrappers)
    out.args = _key_by_name(convert_arg(a) for a in raw_field.get("args") or [])
    if out.is_deprecated:
        out.deprecation_reason = raw_field.get("deprecationReason")
    return out


def convert_type(raw_type: dict[str, Any]) -> SimplifiedType:
    """Convert one raw type description into the variant matching its kind."""
    kind = raw_type["kind"]
    common: dict[str, Any] = {
        "name": raw_type["name"],
        "description": raw_type.get("description"),
    }

    if kind == "OBJECT":
        return ObjectType(
            **common,
            interfaces=_unique_names(raw_type.get("interfaces")),
            fields=_key_by_name(convert_field(f) for f in raw_type.get("fields") or []),
        )
    if kind == "INTERFACE":
        return InterfaceType(
            **common,
            derived_types=_unique_names(raw_type.get("possibleTypes")),
            fields=_key_by_name(convert_field(f) for f in raw_type.get("fields") or []),
        )
    if kind == "UNION":
        return UnionType(
            **common, possible_types=_unique_names(raw_type.get("possibleTypes"))
        )
    if kind == "ENUM":
        return EnumType(
            **common,
            enum_values=[dict(v) for v in raw_type.get("enumValues") or []],
        )
    if kind == "INPUT_OBJECT":
        return InputObjectType(
            **common,
            input_fields=_key_by_name(
                convert_input_field(f) for f in raw_type.get("inputFields") or []
            ),
        )
    return ScalarType(**common)


def _unique_names(refs: list[dict[str, Any]] | None) -> list[str]:
    """Return the names of *refs*, de-duplicated, keeping first-seen order."""
    return list(dict.fromkeys(ref["name"] for ref in refs or []))


def _key_by_name(items: Any) -> dict[str, Any]:
    return {item.name: item for item in items}
