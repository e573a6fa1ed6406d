"""
formbuilder CLI - render a form definition to HTML.

Usage:
    formbuilder render contact.json
    formbuilder render contact.json --data submitted.json

A definition file looks like:

    {
        "action": "/contact",
        "settings": {"id": "contact", "markup": "xhtml"},
        "inputs": [
            ["Your name", {"required": true}],
            ["Topic", {"type": "select", "options": {"a": "Sales"}}, "topic"]
        ]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
from pydantic import BaseModel, Field, ValidationError

from .builder import FormRenderer


# [label], [label, overrides] or [label, overrides, slug]
InputEntry = (
    tuple[str]
    | tuple[str, dict[str, Any] | None]
    | tuple[str, dict[str, Any] | None, str]
)


class FormDefinition(BaseModel):
    """A form described as data."""

    action: str = ""
    settings: dict[str, Any] = Field(default_factory=dict)
    inputs: list[InputEntry] = Field(default_factory=list)

    def build(self) -> FormRenderer:
        renderer = FormRenderer(self.action, self.settings)
        renderer.add_inputs(self.inputs)
        return renderer


def _load_definition(path: Path) -> FormDefinition:
    try:
        return FormDefinition.model_validate_json(path.read_text())
    except ValidationError as exc:
        raise click.BadParameter(f"invalid form definition: {exc}", param_hint="DEFINITION")


def _load_data(path: Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint="--data")
    if not isinstance(data, dict):
        raise click.BadParameter("request data must be a JSON object", param_hint="--data")
    return data


@click.group()
@click.version_option(package_name="formbuilder")
def cli():
    """formbuilder - declarative HTML forms."""
    pass


@cli.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--data",
    "-d",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON object of submitted values used to refill the form",
)
def render(definition: Path, data: Path | None):
    """Render DEFINITION to stdout."""
    form = _load_definition(definition)
    values = _load_data(data)
    try:
        renderer = form.build()
    except ValidationError as exc:
        raise click.UsageError(f"invalid field: {exc}")
    renderer.render(values, echo=True)


def main():
    cli()


if __name__ == "__main__":
    main()
