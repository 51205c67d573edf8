"""CLI command: selectorkit build -- assemble a selector from PART arguments."""

from __future__ import annotations

import sys

import click

from selectorkit.selector import (
    CompoundSelector,
    SelectorError,
    combine,
)
from selectorkit.selector.document import PART_METHODS
from selectorkit.selector.model import Renderable

# Word aliases for tokens that are awkward to pass through a shell.
_COMBINATOR_WORDS = {
    "descendant": " ",
    "child": ">",
    "adjacent": "+",
    "sibling": "~",
}
_COMBINATOR_TOKENS = {" ", ">", "+", "~"}


def assemble(parts: tuple[str, ...] | list[str]) -> Renderable:
    """Apply *parts* in order, folding combinators to the left."""
    result: Renderable | None = None
    pending: str | None = None
    current: CompoundSelector | None = None

    def flush() -> None:
        nonlocal result, current, pending
        if current is None:
            return
        if result is None:
            result = current
        else:
            result = combine(result, pending or " ", current)
        current = None
        pending = None

    for part in parts:
        token = _COMBINATOR_WORDS.get(part, part)
        if token in _COMBINATOR_TOKENS:
            if current is None:
                raise click.UsageError(f"Combinator {part!r} must follow a selector")
            flush()
            pending = token
            continue

        kind, sep, value = part.partition("=")
        method = PART_METHODS.get(kind)
        if not sep or method is None:
            raise click.UsageError(
                f"Invalid part {part!r}; expected kind=value or a combinator"
            )
        if current is None:
            current = CompoundSelector()
        method(current, value)

    if current is None:
        raise click.UsageError("Selector must not end with a combinator")
    flush()
    assert result is not None
    return result


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from PARTS and print it.

    Each part is kind=value (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: '>', '+', '~', or one of the words
    'descendant', 'child' (>), 'adjacent' (+) and 'sibling' (~).
    """
    try:
        selector = assemble(parts)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.render())
