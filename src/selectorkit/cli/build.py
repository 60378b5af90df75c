"""CLI command: selectorkit build -- assemble one compound selector."""

from __future__ import annotations

import click

from selectorkit.model.selector import CompoundSelector


@click.command()
@click.option("--element", "element_name", default=None, help="Element (type) name")
@click.option("--id", "id_name", default=None, help="Id, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name, repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute expression, repeatable")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, repeatable")
@click.option("--pseudo-element", default=None, help="Pseudo-element, without '::'")
def build(
    element_name: str | None,
    id_name: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Print a compound selector built from the given parts.

    Parts are applied in grammar order regardless of the order of the
    options on the command line.
    """
    selector = CompoundSelector()
    if element_name:
        selector = selector.element(element_name)
    if id_name:
        selector = selector.id(id_name)
    for name in classes:
        selector = selector.class_(name)
    for text in attrs:
        selector = selector.attr(text)
    for name in pseudo_classes:
        selector = selector.pseudo_class(name)
    if pseudo_element:
        selector = selector.pseudo_element(pseudo_element)

    click.echo(selector.stringify())
