"""Pydantic models for graph building options (settings files are YAML)."""

from __future__ import annotations

from pathlib import Path
import re

from pydantic import BaseModel, ConfigDict, Field
import yaml

_PROXY_SUFFIX = re.compile(r"=([_A-Za-z][_0-9A-Za-z]*)?\Z")


class HideRule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pattern: str
    proxy_field: str | None = Field(default=None, alias="proxyField")


class GraphOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sort_by_alphabet: bool = Field(default=False, alias="sortByAlphabet")
    skip_deprecated: bool = Field(default=False, alias="skipDeprecated")
    show_hidden: bool = Field(default=False, alias="showHidden")
    hide_rules: list[HideRule] = Field(default_factory=list, alias="hideRules")
    root_type: str | None = Field(default=None, alias="rootType")  # defaults to the query type
    hide_root: bool = Field(default=False, alias="hideRoot")
    show_leaf_fields: bool = Field(default=False, alias="showLeafFields")


def load_options(path: str | Path) -> GraphOptions:
    """Load GraphOptions from a YAML settings file. An empty file yields defaults."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return GraphOptions.model_validate(data)


def parse_hide_rule(value: str) -> HideRule:
    """Parse a ``PATTERN`` or ``PATTERN=PROXY_FIELD`` command-line value.

    Only a trailing ``=NAME`` (a GraphQL field name) is read as the proxy field,
    so patterns such as ``^(?=Hidden)`` are kept whole.
    """
    match = _PROXY_SUFFIX.search(value)
    if match is None:
        return HideRule(pattern=value)
    return HideRule(pattern=value[: match.start()], proxy_field=match.group(1) or None)
