"""Step: Drop deprecated fields from every type."""

from __future__ import annotations

from schemagraph.commands.graph.steps.base import MechanicalStep
from schemagraph.commands.graph.steps.types import (
    InterfaceType,
    ObjectType,
    TypeGraph,
)


class SkipDeprecatedStep(MechanicalStep[TypeGraph, TypeGraph]):
    """Return a copy of the graph without deprecated fields.

    Types are kept even when no field remains: deprecation markers are not
    always applied consistently, and a non-deprecated field elsewhere may
    still point at them.
    """

    name = "skip_deprecated"

    def _execute(self, input: TypeGraph) -> TypeGraph:
        graph = input.copy()
        for type_rec in graph.types.values():
            if isinstance(type_rec, (ObjectType, InterfaceType)):
                type_rec.fields = {
                    name: fld
                    for name, fld in type_rec.fields.items()
                    if not fld.is_deprecated
                }
        return graph
