"""CLI command: selectorkit render -- print a selector tree stored as JSON."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.errors import SelectorError
from selectorkit.model.selector import selector_from_dict
from selectorkit.objects import serialize

log = logging.getLogger(__name__)


@click.command()
@click.argument("treefile", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Print selector and tree as JSON")
@click.option("--indent", default=None, type=int, help="JSON indentation")
@click.option("--sort-keys", is_flag=True, help="Sort JSON object keys")
@click.pass_context
def render(
    ctx: click.Context,
    treefile: str,
    as_json: bool,
    indent: int | None,
    sort_keys: bool,
) -> None:
    """Rebuild a selector tree from a JSON file and print it.

    Compound selectors are written as {"parts": [{"kind": ..., "value": ...}]},
    combined ones as {"left": ..., "combinator": ..., "right": ...}.
    """
    tree_path = Path(treefile)
    base = (ctx.obj or {}).get("config") or SelectorkitConfig()
    config = replace(base, json_indent=indent, json_sort_keys=sort_keys)

    try:
        data = json.loads(tree_path.read_text(encoding="utf-8"))
        selector = selector_from_dict(data)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    except ValueError as exc:
        click.echo(f"Invalid selector tree: {exc}", err=True)
        sys.exit(1)

    log.info("Rendered %s", tree_path.name)

    if as_json:
        payload = {"selector": selector.stringify(), "tree": selector}
        click.echo(serialize(payload, config))
    else:
        click.echo(selector.stringify())
