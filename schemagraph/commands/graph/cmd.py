"""CLI commands for the schema graph: build (export JSON) and inspect."""

from __future__ import annotations

from collections.abc import Callable
import json
from pathlib import Path
import sys
from typing import Any

import click
from graphql import GraphQLError
from rich.markup import escape
from rich.table import Table

from schemagraph.commands.graph.reachable import get_type_graph, visible_fields
from schemagraph.commands.graph.steps.base import StepValidationError
from schemagraph.commands.graph.steps.types import (
    SimplifiedType,
    TypeEdge,
    TypeGraph,
    related_types,
)
from schemagraph.formats.options import GraphOptions, load_options, parse_hide_rule
from schemagraph.helpers.console import console, truncate
from schemagraph.helpers.naming import type_name_to_id, wrapped_type_name

_RELATED_TITLES = {
    "UNION": "possible types",
    "INTERFACE": "implementations",
    "OBJECT": "implements",
}


def graph_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by every graph command."""
    decorators = [
        click.argument("introspection_path", type=click.Path(exists=True)),
        click.option(
            "--config",
            "config_path",
            envvar="SCHEMAGRAPH_CONFIG",
            type=click.Path(exists=True),
            default=None,
            help="YAML settings file (also read from SCHEMAGRAPH_CONFIG)",
        ),
        click.option("--sort", is_flag=True, default=False, help="Sort types and fields by name"),
        click.option(
            "--skip-deprecated", is_flag=True, default=False, help="Drop deprecated fields"
        ),
        click.option(
            "--show-hidden", is_flag=True, default=False, help="Ignore hide rules"
        ),
        click.option(
            "--hide",
            "hide_specs",
            multiple=True,
            help="Hide types matching a regex, as PATTERN or PATTERN=PROXY_FIELD. Can be repeated.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _resolve_options(
    config_path: str | None,
    sort: bool,
    skip_deprecated: bool,
    show_hidden: bool,
    hide_specs: tuple[str, ...],
) -> GraphOptions:
    """Merge the settings file (if any) with command-line flags."""
    options = load_options(config_path) if config_path else GraphOptions()
    options.sort_by_alphabet = options.sort_by_alphabet or sort
    options.skip_deprecated = options.skip_deprecated or skip_deprecated
    options.show_hidden = options.show_hidden or show_hidden
    options.hide_rules = [*options.hide_rules, *(parse_hide_rule(s) for s in hide_specs)]
    return options


def _load_graph(introspection_path: str, options: GraphOptions) -> TypeGraph:
    from schemagraph.commands.graph.loader import load_introspection
    from schemagraph.commands.graph.pipeline import assemble_graph_with_options

    def on_progress(msg: str) -> None:
        console.print(f"  {msg}")

    console.print(f"[bold]Loading introspection:[/bold] {introspection_path}")
    try:
        introspection = load_introspection(introspection_path)
        graph = assemble_graph_with_options(introspection, options, on_progress=on_progress)
    except (StepValidationError, GraphQLError, TypeError) as e:
        console.print(f"[red]Error building schema graph: {escape(str(e))}[/red]")
        sys.exit(1)
    assert graph is not None
    return graph


@click.command()
@graph_options
@click.option("-o", "--output", required=True, help="Output file path for the graph (.json)")
def build(
    introspection_path: str,
    config_path: str | None,
    sort: bool,
    skip_deprecated: bool,
    show_hidden: bool,
    hide_specs: tuple[str, ...],
    output: str,
) -> None:
    """Build the type graph of a schema and write it as JSON."""
    from schemagraph.commands.graph.export import graph_to_dict

    options = _resolve_options(config_path, sort, skip_deprecated, show_hidden, hide_specs)
    graph = _load_graph(introspection_path, options)

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(graph_to_dict(graph), f, indent=2)
        f.write("\n")
    console.print(f"[green]Type graph written to {output_path}[/green]")
    console.print(f"  {len(graph.types)} types")


@click.command()
@graph_options
@click.option("--type", "type_name", default=None, help="Show documentation for one type")
@click.option("--root", "root_type", default=None, help="Root type (defaults to the query type)")
@click.option("--hide-root", is_flag=True, default=False, help="Leave the root out of the listing")
@click.option(
    "--show-leaf-fields",
    is_flag=True,
    default=False,
    help="Include scalar and enum fields in field counts and type docs",
)
def inspect(
    introspection_path: str,
    config_path: str | None,
    sort: bool,
    skip_deprecated: bool,
    show_hidden: bool,
    hide_specs: tuple[str, ...],
    type_name: str | None,
    root_type: str | None,
    hide_root: bool,
    show_leaf_fields: bool,
) -> None:
    """Inspect the types of a schema reachable from a root type."""
    options = _resolve_options(config_path, sort, skip_deprecated, show_hidden, hide_specs)
    options.root_type = root_type or options.root_type
    options.hide_root = options.hide_root or hide_root
    options.show_leaf_fields = options.show_leaf_fields or show_leaf_fields
    graph = _load_graph(introspection_path, options)

    if type_name:
        type_rec = graph.types.get(type_name_to_id(type_name))
        if type_rec is None:
            console.print(f"[red]Type {type_name} not found[/red]")
            sys.exit(1)
        _print_type_doc(type_rec, options.show_leaf_fields)
        return

    try:
        reachable = get_type_graph(graph, options.root_type, options.hide_root)
    except StepValidationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title=f"Types reachable from {reachable.root_id}")
    table.add_column("ID", style="cyan")
    table.add_column("Kind")
    table.add_column("Fields", justify="right")
    table.add_column("Description")
    for node in reachable.nodes.values():
        table.add_row(
            node.id,
            node.kind,
            str(len(visible_fields(node, options.show_leaf_fields))),
            truncate(node.description or "", 60),
        )
    console.print(table)


def _print_type_doc(type_rec: SimplifiedType, show_leaf_fields: bool = False) -> None:
    """Print the documentation of one type."""
    console.print(f"[bold]{type_rec.name}[/bold] ({type_rec.kind})")
    console.print(f"  {escape(type_rec.description or 'No Description')}")

    edges = [e for e in related_types(type_rec) if isinstance(e, TypeEdge)]
    if edges:
        console.print()
        console.print(f"[bold]{_RELATED_TITLES[type_rec.kind]}[/bold]")
        for edge in edges:
            console.print(f"  [cyan]{edge.type.name}[/cyan]")

    fields = visible_fields(type_rec, show_leaf_fields)
    if not fields:
        return
    console.print()
    console.print("[bold]fields[/bold]")
    for fld in fields.values():
        line = f"  [cyan]{fld.name}[/cyan]"
        if fld.args:
            args = ", ".join(
                f"{arg.name}: {escape(wrapped_type_name(arg))}" for arg in fld.args.values()
            )
            line += f"({args})"
        line += f": {escape(wrapped_type_name(fld))}"
        if fld.is_deprecated:
            line += " [yellow](DEPRECATED)[/yellow]"
        console.print(line, highlight=False)
        if fld.description:
            console.print(f"    [dim]{escape(truncate(fld.description, 100))}[/dim]")
