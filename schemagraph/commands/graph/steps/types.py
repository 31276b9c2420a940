"""Schema types passed between pipeline steps.

Three layers of types:
1. Simplified records: one per raw introspection type, with type
   references still held as bare type names
2. Simplified introspection: the name-keyed collection of those records
3. Type graph: the final output, keyed by id, with every type reference
   resolved to the record it names
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any, Union

NON_NULL = "NON_NULL"
LIST = "LIST"

# -- Fields, arguments and edges ---------------------------------------------


@dataclass
class Argument:
    """A field argument or an input object field."""

    name: str
    # Bare type name until the assembler resolves it to a SimplifiedType
    type: TypeRef = ""
    type_wrappers: list[str] = field(default_factory=lambda: list[str]())
    description: str | None = None
    default_value: Any = None
    id: str | None = None


@dataclass
class SimplifiedField:
    """An output field of an object or interface type."""

    name: str
    type: TypeRef = ""
    type_wrappers: list[str] = field(default_factory=lambda: list[str]())
    description: str | None = None
    args: dict[str, Argument] = field(default_factory=lambda: dict[str, Argument]())
    is_deprecated: bool = False
    deprecation_reason: str | None = None  # only set when deprecated
    id: str | None = None


@dataclass
class TypeEdge:
    """A link to a related type (interface, implementation or union member)."""

    id: str
    type: SimplifiedType


@dataclass
class HiddenOptions:
    replace_field: str
    pattern: str = ""  # rule that set replace_field


# -- Simplified types (one variant per kind) ----------------------------------


@dataclass(eq=False, repr=False)
class SimplifiedType:
    """Attributes shared by every kind of type.

    Records compare by identity and repr by name only, since a resolved
    graph may contain cycles.
    """

    name: str
    description: str | None = None
    id: str | None = None
    is_hidden_type: bool = False
    hidden_options: HiddenOptions | None = None

    kind = ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


@dataclass(eq=False, repr=False)
class ScalarType(SimplifiedType):
    kind = "SCALAR"


@dataclass(eq=False, repr=False)
class ObjectType(SimplifiedType):
    kind = "OBJECT"

    fields: dict[str, SimplifiedField] = field(
        default_factory=lambda: dict[str, SimplifiedField]()
    )
    # Interface names, replaced by TypeEdge records once resolved
    interfaces: list[EdgeRef] = field(default_factory=lambda: list[EdgeRef]())


@dataclass(eq=False, repr=False)
class InterfaceType(SimplifiedType):
    kind = "INTERFACE"

    fields: dict[str, SimplifiedField] = field(
        default_factory=lambda: dict[str, SimplifiedField]()
    )
    derived_types: list[EdgeRef] = field(default_factory=lambda: list[EdgeRef]())


@dataclass(eq=False, repr=False)
class UnionType(SimplifiedType):
    kind = "UNION"

    possible_types: list[EdgeRef] = field(default_factory=lambda: list[EdgeRef]())


@dataclass(eq=False, repr=False)
class EnumType(SimplifiedType):
    kind = "ENUM"

    enum_values: list[dict[str, Any]] = field(
        default_factory=lambda: list[dict[str, Any]]()
    )


@dataclass(eq=False, repr=False)
class InputObjectType(SimplifiedType):
    kind = "INPUT_OBJECT"

    input_fields: dict[str, Argument] = field(
        default_factory=lambda: dict[str, Argument]()
    )


TypeRef = Union[str, SimplifiedType]
EdgeRef = Union[str, TypeEdge]


def fields_of(type_rec: SimplifiedType) -> dict[str, SimplifiedField]:
    """Return the output fields of a type, or an empty dict for kinds without any."""
    if isinstance(type_rec, (ObjectType, InterfaceType)):
        return type_rec.fields
    return {}


def related_types(type_rec: SimplifiedType) -> list[EdgeRef]:
    """Return the interface, implementation or union-member entries of a type."""
    if isinstance(type_rec, ObjectType):
        return type_rec.interfaces
    if isinstance(type_rec, InterfaceType):
        return type_rec.derived_types
    if isinstance(type_rec, UnionType):
        return type_rec.possible_types
    return []


# -- Pipeline outputs ---------------------------------------------------------


@dataclass
class SimplifiedIntrospection:
    """Simplified schema keyed by type name, with root types held as names."""

    types: dict[str, SimplifiedType] = field(
        default_factory=lambda: dict[str, SimplifiedType]()
    )
    query_type: str | None = None
    mutation_type: str | None = None
    subscription_type: str | None = None


@dataclass
class TypeGraph:
    """Fully resolved schema keyed by type id."""

    types: dict[str, SimplifiedType] = field(
        default_factory=lambda: dict[str, SimplifiedType]()
    )
    query_type: SimplifiedType | None = None
    mutation_type: SimplifiedType | None = None
    subscription_type: SimplifiedType | None = None

    def copy(self) -> TypeGraph:
        """Return a copy whose records can be changed without touching this graph.

        Records are cloned one level deep and every reference is remapped
        through the id-keyed map, so the copy never recurses along
        references.
        """
        clones = {type_id: copy.copy(rec) for type_id, rec in self.types.items()}

        def remap(ref: TypeRef) -> TypeRef:
            if isinstance(ref, SimplifiedType) and ref.id in clones:
                return clones[ref.id]
            return ref

        def clone_arg(arg: Argument) -> Argument:
            return replace(arg, type=remap(arg.type), type_wrappers=list(arg.type_wrappers))

        def clone_edge(edge: EdgeRef) -> EdgeRef:
            if isinstance(edge, TypeEdge):
                return replace(edge, type=remap(edge.type))
            return edge

        for clone in clones.values():
            if clone.hidden_options is not None:
                clone.hidden_options = replace(clone.hidden_options)
            if isinstance(clone, (ObjectType, InterfaceType)):
                clone.fields = {
                    name: replace(
                        fld,
                        type=remap(fld.type),
                        type_wrappers=list(fld.type_wrappers),
                        args={n: clone_arg(a) for n, a in fld.args.items()},
                    )
                    for name, fld in clone.fields.items()
                }
            if isinstance(clone, ObjectType):
                clone.interfaces = [clone_edge(e) for e in clone.interfaces]
            elif isinstance(clone, InterfaceType):
                clone.derived_types = [clone_edge(e) for e in clone.derived_types]
            elif isinstance(clone, UnionType):
                clone.possible_types = [clone_edge(e) for e in clone.possible_types]
            elif isinstance(clone, EnumType):
                clone.enum_values = [dict(v) for v in clone.enum_values]
            elif isinstance(clone, InputObjectType):
                clone.input_fields = {
                    n: clone_arg(a) for n, a in clone.input_fields.items()
                }

        return TypeGraph(
            types=clones,
            query_type=remap(self.query_type) if self.query_type else None,
            mutation_type=remap(self.mutation_type) if self.mutation_type else None,
            subscription_type=(
                remap(self.subscription_type) if self.subscription_type else None
            ),
        )
