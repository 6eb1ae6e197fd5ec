"""
Command line entry point for pagesmith
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml

from pagesmith import __version__
from pagesmith.config import ProcessorConfig
from pagesmith.processors import create_processor
from pagesmith.utils import get_logger, setup_logging

app = typer.Typer(
    name="pagesmith",
    help="Render page templates through Jinja2.",
    add_completion=False,
)


class StagingMode(str, Enum):
    memory = "memory"
    file = "file"


def parse_variables(pairs: list[str] | None) -> dict[str, str]:
    """Turn repeated KEY=VALUE options into a mapping"""
    variables: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected KEY=VALUE, got '{pair}'")
        variables[key.strip()] = value
    return variables


def load_variables_file(path: Path) -> dict[str, Any]:
    """変数ファイル（YAML マッピング）を読み込む"""
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise typer.BadParameter(f"{path} is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path} must contain a YAML mapping")
    return data


@app.callback()
def main() -> None:
    """Render page templates through Jinja2."""


@app.command()
def version() -> None:
    """Print the pagesmith version."""
    typer.echo(__version__)


@app.command()
def render(
    template: Annotated[
        Path,
        typer.Argument(help="Template file to render", exists=True, dir_okay=False),
    ],
    var: Annotated[
        list[str] | None,
        typer.Option("--var", "-v", help="Template variable as KEY=VALUE"),
    ] = None,
    vars_file: Annotated[
        Path | None,
        typer.Option(
            "--vars-file",
            help="YAML file with template variables",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    staging: Annotated[
        StagingMode | None,
        typer.Option("--staging", help="Where the prepared template is staged"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the result here instead of stdout"),
    ] = None,
) -> None:
    """Render TEMPLATE and print the result."""
    setup_logging()
    logger = get_logger("main")

    variables: dict[str, Any] = {}
    if vars_file is not None:
        variables.update(load_variables_file(vars_file))
    variables.update(parse_variables(var))

    options: dict[str, Any] = {
        "template_dir": template.parent,
        "template_filename": template.name,
    }
    if staging is not None:
        options["staging"] = staging.value

    try:
        processor = create_processor("jinja", ProcessorConfig(**options))
        rendered = processor.render(variables=variables)
    except Exception as exc:
        logger.error("Rendering failed", template=str(template), error=str(exc))
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(rendered, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    logger.info("Wrote rendered template", output=str(output))


if __name__ == "__main__":
    app()
