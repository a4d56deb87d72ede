"""CLI command: bulmakit vocab -- list vocabularies and their class fragments."""

from __future__ import annotations

import sys
from enum import StrEnum

import click

from bulmakit import helpers
from bulmakit.utils.size import Size
from bulmakit.widgets import ColumnSize, GapSize, HeadingSize, HeroSize, ImageSize

VOCABULARIES: dict[str, type[StrEnum]] = {
    "text-color": helpers.TextColor,
    "background-color": helpers.BackgroundColor,
    "color": helpers.Color,
    "text-size": helpers.TextSize,
    "text-alignment": helpers.TextAlignment,
    "text-decoration": helpers.TextDecoration,
    "text-weight": helpers.TextWeight,
    "font-family": helpers.FontFamily,
    "display": helpers.Display,
    "viewport": helpers.Viewport,
    "direction": helpers.Direction,
    "spacing": helpers.Spacing,
    "flex-direction": helpers.FlexDirection,
    "flex-wrap": helpers.FlexWrap,
    "justify-content": helpers.JustifyContent,
    "align-content": helpers.AlignContent,
    "align-items": helpers.AlignItems,
    "align-self": helpers.AlignSelf,
    "flex-factor": helpers.FlexShrinkGrowFactor,
    "size": Size,
    "column-size": ColumnSize,
    "gap-size": GapSize,
    "heading-size": HeadingSize,
    "hero-size": HeroSize,
    "image-size": ImageSize,
}


@click.command()
@click.argument("name", required=False)
def vocab(name: str | None) -> None:
    """List vocabularies, or the members of NAME with their fragments."""
    if name is None:
        for key, vocabulary in VOCABULARIES.items():
            click.echo(f"{key:<18} {vocabulary.__name__} ({len(vocabulary)} members)")
        return

    vocabulary = VOCABULARIES.get(name)
    if vocabulary is None:
        click.echo(f"Error: unknown vocabulary {name!r}", err=True)
        sys.exit(2)

    for member in vocabulary:
        fragment = member.value if member.value else "(empty)"
        click.echo(f"{member.name.lower():<26} {fragment}")
