"""Step: Simplify a raw introspection schema into name-keyed type records."""

from __future__ import annotations

import logging
from typing import Any

from schemagraph.commands.graph.steps.base import MechanicalStep
from schemagraph.commands.graph.steps.convert import convert_type
from schemagraph.commands.graph.steps.types import SimplifiedIntrospection

logger = logging.getLogger(__name__)


class SimplifyStep(MechanicalStep[dict[str, Any], SimplifiedIntrospection]):
    """Convert every type of a raw ``__schema`` object, keyed by name."""

    name = "simplify"

    def _execute(self, input: dict[str, Any]) -> SimplifiedIntrospection:
        return simplify_schema(input)


def simplify_schema(raw_schema: dict[str, Any]) -> SimplifiedIntrospection:
    """Build a SimplifiedIntrospection from the ``__schema`` object.

    Type names are expected to be unique; a repeated name overwrites the
    earlier record.
    """
    types = {}
    for raw_type in raw_schema.get("types") or []:
        type_rec = convert_type(raw_type)
        types[type_rec.name] = type_rec

    logger.debug(f"Simplified {len(types)} types")
    return SimplifiedIntrospection(
        types=types,
        query_type=_root_name(raw_schema, "queryType"),
        mutation_type=_root_name(raw_schema, "mutationType"),
        subscription_type=_root_name(raw_schema, "subscriptionType"),
    )


def _root_name(raw_schema: dict[str, Any], key: str) -> str | None:
    root = raw_schema.get(key)
    if not root:
        return None
    return root.get("name")
