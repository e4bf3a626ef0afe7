"""CLI for figma-api (swatches, outline, versions, comments)."""

import json
from pathlib import Path
from typing import Annotated, Any, TypeVar

import requests
import typer
from loguru import logger

from figma_api import endpoints
from figma_api.api import FigmaApi
from figma_api.client import FigmaClient
from figma_api.core.swatches import extract_swatches
from figma_api.core.tree.outline import render_outline
from figma_api.core.tree.traversal import find_subtree
from figma_api.endpoints import Endpoint
from figma_api.errors import ApiError, DecodeError
from figma_api.logging_config import configure_logging

R = TypeVar("R")

app = typer.Typer(help="Figma API: inspect Figma files from the command line.")

InputOption = Annotated[
    Path | None,
    typer.Option("--input", "-i", help="Decode a saved JSON response instead of calling the API"),
]
CacheOption = Annotated[
    bool,
    typer.Option("--cache", "-C", help="Cache API responses and reuse them (returns stale data)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _fetch(endpoint: Endpoint[R], input_path: Path | None, cache: bool) -> R:
    """Decode ``endpoint``'s response from disk or from the API, exiting on failure."""
    if input_path is not None and not input_path.exists():
        logger.error("Input file not found: {}", input_path)
        raise typer.Exit(1)
    try:
        if input_path is not None:
            body: Any = json.loads(input_path.read_text(encoding="utf-8"))
            return endpoint.decoder(body)
        return FigmaClient(FigmaApi(from_cache=cache)).send(endpoint)
    except requests.RequestException as e:
        logger.error("Request failed: {}", e)
        raise typer.Exit(1) from e
    except json.JSONDecodeError as e:
        logger.error("Input is not valid JSON: {}", e)
        raise typer.Exit(1) from e
    except DecodeError as e:
        logger.error("Could not parse response: {}", e)
        raise typer.Exit(1) from e
    except (ApiError, RuntimeError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


@app.command()
def swatches(
    file_key: str = typer.Argument(..., help="Figma file key"),
    gradients: bool = typer.Option(False, "--gradients", "-g", help="Include gradient stops"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    input_path: InputOption = None,
    cache: CacheOption = False,
) -> None:
    """List the unique colours used in a file."""
    response = _fetch(endpoints.get_file(file_key), input_path, cache)
    found = extract_swatches(response.document, include_gradients=gradients)

    if output_json:
        data = [
            {"hex": s.hex, "alpha": s.color.alpha, "node_id": s.node_id} for s in found
        ]
        typer.echo(json.dumps(data, indent=2))
        return

    if not found:
        typer.echo("No colours found.")
        return
    for s in found:
        typer.echo(f"{s.hex}  (first seen on {s.node_id})")


@app.command()
def outline(
    file_key: str = typer.Argument(..., help="Figma file key"),
    node: Annotated[
        str | None,
        typer.Option("--node", "-n", help="Start from this node id instead of the document"),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-d", help="Max levels to show"),
    ] = None,
    hidden: bool = typer.Option(True, "--hidden/--no-hidden", help="Include hidden nodes"),
    input_path: InputOption = None,
    cache: CacheOption = False,
) -> None:
    """Print the node tree of a file as an indented outline."""
    response = _fetch(endpoints.get_file(file_key), input_path, cache)
    root = response.document
    if node is not None:
        found = find_subtree(root, node)
        if found is None:
            typer.echo(f"Node '{node}' not found.")
            raise typer.Exit(1)
        root = found
    typer.echo(render_outline(root, max_depth=max_depth, include_hidden=hidden), nl=False)


@app.command()
def versions(
    file_key: str = typer.Argument(..., help="Figma file key"),
    input_path: InputOption = None,
    cache: CacheOption = False,
) -> None:
    """List the saved versions of a file."""
    found = _fetch(endpoints.get_file_versions(file_key), input_path, cache)
    for v in found:
        label = v.label or "(autosave)"
        typer.echo(f"{v.id}  {v.created_at:%Y-%m-%d %H:%M}  {v.user.handle}  {label}")


@app.command()
def comments(
    file_key: str = typer.Argument(..., help="Figma file key"),
    unresolved: bool = typer.Option(False, "--unresolved", "-u", help="Only unresolved comments"),
    input_path: InputOption = None,
    cache: CacheOption = False,
) -> None:
    """List the comments on a file."""
    found = _fetch(endpoints.get_comments(file_key), input_path, cache)
    for c in found:
        if unresolved and c.resolved_at is not None:
            continue
        prefix = "  " if c.parent_id else ""
        first_line = c.message.split("\n")[0]
        typer.echo(f"{prefix}[{c.user.handle}] {first_line}")
