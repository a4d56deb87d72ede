"""CLI command: bulmakit compose -- print the classes for a set of helpers."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any

import click

from bulmakit.config import ComposeConfig, TokenOrder
from bulmakit.errors import BulmakitError, ConfigError
from bulmakit.utils.classes import ClassBuilder, OtherModifiers, class_attr

logger = logging.getLogger("bulmakit.cli")

_HELPER_NAMES = [f.name for f in fields(OtherModifiers)]


def _load_mapping(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read {path.name}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a JSON object")
    return data


@click.command()
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False),
              help="JSON file with a class configuration")
@click.option("--text-color", help="has-text-* color")
@click.option("--text-size", help="is-size-* value (1-7)")
@click.option("--text-viewport-size", multiple=True, metavar="SIZE:VIEWPORT")
@click.option("--text-alignment", help="has-text-* alignment")
@click.option("--text-viewport-alignment", multiple=True, metavar="ALIGN:VIEWPORT")
@click.option("--text-decoration", multiple=True, help="is-* text decoration")
@click.option("--text-weight", help="has-text-weight-* value")
@click.option("--font-family", help="is-family-* value")
@click.option("--background-color", help="has-background-* color")
@click.option("--color", help="is-* element color")
@click.option("--light/--no-light", default=None, help="Light color variant")
@click.option("--display", help="is-* display")
@click.option("--viewport-display", multiple=True, metavar="DISPLAY:VIEWPORT")
@click.option("--flex-direction")
@click.option("--flex-wrap")
@click.option("--justify-content")
@click.option("--align-content")
@click.option("--align-items")
@click.option("--align-self")
@click.option("--flex-grow")
@click.option("--flex-shrink")
@click.option("--margin", multiple=True, metavar="DIRECTION:SPACING",
              help="e.g. x:2 or all:0")
@click.option("--padding", multiple=True, metavar="DIRECTION:SPACING")
@click.option("--helper", multiple=True, type=click.Choice(_HELPER_NAMES),
              help="Enable a boolean helper (is-clearfix, is-relative...)")
@click.option("--custom-class", multiple=True, help="Raw class fragment, appended last")
@click.option("--sorted", "sort_tokens", is_flag=True,
              help="Sort multi-valued segments for stable output")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON list of tokens")
def compose(config_file: str | None, light: bool | None, helper: tuple[str, ...],
            sort_tokens: bool, as_json: bool, **options: Any) -> None:
    """Compose a Bulma class string from helper options.

    Options given on the command line override keys of the same name in the
    --config file. Prints the class attribute value, or a JSON list with
    --json. Exits with code 2 on unknown values.
    """
    try:
        mapping: dict[str, Any] = {}
        if config_file:
            mapping.update(_load_mapping(Path(config_file)))

        for key, value in _option_mapping(options).items():
            mapping[key] = value
        if light is not None:
            mapping["light"] = light
        for name in helper:
            mapping[name] = True

        logger.debug("Class configuration: %s", mapping)
        builder = ClassBuilder.from_mapping(mapping)
        config = (
            ComposeConfig(token_order=TokenOrder.SORTED)
            if sort_tokens
            else ComposeConfig.from_env()
        )
        tokens = builder.build(config)
    except BulmakitError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if as_json:
        click.echo(json.dumps(tokens))
    else:
        click.echo(class_attr(tokens))


# Command-line option name -> mapping key, for options whose names differ.
_RENAMED = {
    "text_viewport_size": "text_viewport_sizes",
    "text_viewport_alignment": "text_viewport_alignments",
    "text_decoration": "text_decorations",
    "viewport_display": "viewport_displays",
    "margin": "margins",
    "padding": "paddings",
    "custom_class": "custom_classes",
}


def _option_mapping(options: dict[str, Any]) -> dict[str, Any]:
    """Keep only the options the user actually set."""
    mapping: dict[str, Any] = {}
    for name, value in options.items():
        if value is None or value == ():
            continue
        key = _RENAMED.get(name, name)
        mapping[key] = list(value) if isinstance(value, tuple) else value
    return mapping
