"""CLI command: selectorkit render -- render a JSON selector document."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from selectorkit.selector import SelectorError, selector_from_document

logger = logging.getLogger(__name__)


@click.command()
@click.argument("docfile", type=click.Path(exists=True))
def render(docfile: str) -> None:
    """Load a JSON selector document and print the rendered selector."""
    doc_path = Path(docfile)

    try:
        data = json.loads(doc_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON in {doc_path.name}: {exc}", err=True)
        sys.exit(1)

    logger.debug("Loaded selector document from %s", doc_path)

    try:
        selector = selector_from_document(data)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.render())
