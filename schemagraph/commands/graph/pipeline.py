"""Orchestrator for the schema graph pipeline.

Coordinates the Step instances that turn an introspection document into a
TypeGraph: simplify → assign ids → hide types → skip deprecated. The last
two run only when their options ask for them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import logging
from typing import Any

from graphql import (
    build_client_schema,
    introspection_from_schema,
    lexicographic_sort_schema,
)

from schemagraph.commands.graph.loader import unwrap_introspection
from schemagraph.commands.graph.steps.assign_ids import AssignIdsStep
from schemagraph.commands.graph.steps.hide_types import HideTypesStep
from schemagraph.commands.graph.steps.simplify import SimplifyStep
from schemagraph.commands.graph.steps.skip_deprecated import SkipDeprecatedStep
from schemagraph.commands.graph.steps.types import TypeGraph
from schemagraph.formats.options import GraphOptions, HideRule

logger = logging.getLogger(__name__)


def assemble_graph(
    introspection: Mapping[str, Any] | None,
    sort_by_alphabet: bool = False,
    skip_deprecated: bool = False,
    show_hidden: bool = False,
    hide_rules: Iterable[HideRule | Mapping[str, Any]] = (),
    on_progress: Callable[[str], None] | None = None,
) -> TypeGraph | None:
    """Build a TypeGraph from an introspection document.

    Returns None when no document is supplied. *hide_rules* entries may be
    HideRule models or dicts such as ``{"pattern": "^Hidden", "proxyField":
    "value"}``.
    """

    def progress(msg: str) -> None:
        if on_progress:
            on_progress(msg)

    if not introspection:
        return None

    rules = [
        rule if isinstance(rule, HideRule) else HideRule.model_validate(rule)
        for rule in hide_rules
    ]

    # Round-trip through graphql-core so sorting applies to the raw document
    schema = build_client_schema(unwrap_introspection(dict(introspection)))
    if sort_by_alphabet:
        schema = lexicographic_sort_schema(schema)
    raw = introspection_from_schema(schema, descriptions=True)

    # Step 1: Simplify
    simple_schema = SimplifyStep().run(raw["__schema"])
    progress(f"Simplified {len(simple_schema.types)} types")

    # Step 2: Assign ids and resolve references
    graph = AssignIdsStep().run(simple_schema)

    # Step 3: Hide types
    if not show_hidden and rules:
        graph = HideTypesStep(rules).run(graph)
        hidden = sum(1 for t in graph.types.values() if t.is_hidden_type)
        progress(f"Hid {hidden} types matching {len(rules)} rules")

    # Step 4: Skip deprecated fields
    if skip_deprecated:
        graph = SkipDeprecatedStep().run(graph)
        progress("Removed deprecated fields")

    logger.debug(f"Graph assembled with {len(graph.types)} types")
    return graph


def assemble_graph_with_options(
    introspection: Mapping[str, Any] | None,
    options: GraphOptions,
    on_progress: Callable[[str], None] | None = None,
) -> TypeGraph | None:
    """Run assemble_graph with the build options of a GraphOptions model."""
    return assemble_graph(
        introspection,
        sort_by_alphabet=options.sort_by_alphabet,
        skip_deprecated=options.skip_deprecated,
        show_hidden=options.show_hidden,
        hide_rules=options.hide_rules,
        on_progress=on_progress,
    )
