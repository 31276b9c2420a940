"""Identifier and type-name helpers shared across the graph builder and CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schemagraph.commands.graph.steps.types import Argument, SimplifiedField

_SEPARATOR = "::"


def build_id(*parts: str) -> str:
    """Join id parts with the '::' separator."""
    return _SEPARATOR.join(parts)


def type_name_to_id(name: str) -> str:
    return build_id("TYPE", name)


def field_id(type_name: str, field_name: str) -> str:
    return build_id("FIELD", type_name, field_name)


def argument_id(type_name: str, field_name: str, arg_name: str) -> str:
    return build_id("ARGUMENT", type_name, field_name, arg_name)


def edge_id(prefix: str, type_name: str, other_name: str) -> str:
    """Id of an interface, derived-type or possible-type edge.

    *prefix* is one of INTERFACE, DERIVED_TYPE or POSSIBLE_TYPE.
    """
    return build_id(prefix, type_name, other_name)


def extract_type_id(any_id: str) -> str:
    """Return the id of the type owning a type, field, argument or edge id.

    >>> extract_type_id("ARGUMENT::Query::user::id")
    'TYPE::Query'
    """
    parts = any_id.split(_SEPARATOR)
    if len(parts) < 2:
        raise ValueError(f"Not a schema graph id: {any_id!r}")
    return type_name_to_id(parts[1])


def wrapped_type_name(container: SimplifiedField | Argument) -> str:
    """Render a field or argument type with its wrappers, e.g. ``[User!]!``."""
    type_ref = container.type
    name = type_ref if isinstance(type_ref, str) else type_ref.name
    for wrapper in reversed(container.type_wrappers):
        if wrapper == "NON_NULL":
            name = f"{name}!"
        elif wrapper == "LIST":
            name = f"[{name}]"
    return name
