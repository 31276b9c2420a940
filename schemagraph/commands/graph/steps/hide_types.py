"""Step: Hide types matching name patterns, splicing out proxied ones.

A hide rule marks every type whose name matches its pattern as hidden. When
the rule also names a proxy field, fields pointing at the hidden type are
rewritten to point at that proxy field's type instead, as if the hidden type
were transparent. Only one hop is followed.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from schemagraph.commands.graph.steps.base import ConfigurationError, MechanicalStep
from schemagraph.commands.graph.steps.types import (
    HiddenOptions,
    SimplifiedType,
    TypeGraph,
    fields_of,
)

if TYPE_CHECKING:
    from schemagraph.formats.options import HideRule

logger = logging.getLogger(__name__)


class HideTypesStep(MechanicalStep[TypeGraph, TypeGraph]):
    """Return a copy of the graph with hide rules applied.

    The input graph is left untouched.
    """

    name = "hide_types"

    def __init__(self, rules: list[HideRule]):
        self.rules = rules
        self._patterns = [_compile(rule) for rule in rules]

    def _execute(self, input: TypeGraph) -> TypeGraph:
        graph = input.copy()
        self._mark_hidden_types(graph)
        self._splice_proxied_fields(graph)
        return graph

    def _mark_hidden_types(self, graph: TypeGraph) -> None:
        for type_rec in graph.types.values():
            for rule, pattern in zip(self.rules, self._patterns):
                if not pattern.search(type_rec.name):
                    continue
                type_rec.is_hidden_type = True
                if rule.proxy_field:
                    type_rec.hidden_options = HiddenOptions(
                        replace_field=rule.proxy_field, pattern=rule.pattern
                    )
                logger.debug(f"Hiding {type_rec.name} (rule {rule.pattern!r})")

    def _splice_proxied_fields(self, graph: TypeGraph) -> None:
        for type_rec in graph.types.values():
            if type_rec.is_hidden_type:
                continue
            for fld in fields_of(type_rec).values():
                target = fld.type
                if not (
                    isinstance(target, SimplifiedType)
                    and target.is_hidden_type
                    and target.hidden_options
                ):
                    continue
                options = target.hidden_options
                proxy = fields_of(target).get(options.replace_field)
                if proxy is None:
                    raise ConfigurationError(
                        f"Hide rule {options.pattern!r}: hidden type {target.name} "
                        f"has no proxy field {options.replace_field!r}",
                        {
                            "pattern": options.pattern,
                            "type": target.name,
                            "proxy_field": options.replace_field,
                        },
                    )
                fld.type = proxy.type
                fld.type_wrappers = list(proxy.type_wrappers)


def _compile(rule: HideRule) -> re.Pattern[str]:
    try:
        return re.compile(rule.pattern)
    except re.error as e:
        raise ConfigurationError(
            f"Invalid hide rule pattern {rule.pattern!r}: {e}",
            {"pattern": rule.pattern},
        ) from e
