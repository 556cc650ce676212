# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from licensed import __version__
from licensed.commands.list import list_licenses
from licensed.core.config import PROJECT_CONFIG_NAME, LicensedConfig, load_project_settings
from licensed.core.errors import ConfigError, TemplateReadError, TraversalError
from licensed.core.logger import configure_logging, get_logger
from licensed.core.template import load_template, render
from licensed.core.walker import WalkReport, walk

console = Console()
logger = get_logger("commands.license")


def version_callback(value: bool):
    if value:
        typer.echo(f"licensed {__version__}")
        raise typer.Exit()


def print_failures(report: WalkReport) -> None:
    table = Table(title="Files that could not be processed")
    table.add_column("Path", style="cyan")
    table.add_column("Error", style="red")
    for path, error in report.failures:
        table.add_row(escape(str(path)), escape(str(error)))
    console.print(table)


def write_license_file(path: Path, rendered_license: str) -> None:
    try:
        path.write_text(rendered_license, encoding="utf-8")
        logger.info(f"Wrote rendered license to {path}")
    except OSError as e:
        # Headers are already in place; a missing license file is not worth failing the run.
        console.print(f"[yellow]Error writing {escape(str(path))}: {escape(str(e))}[/yellow]")


def apply_licenses(
    ctx: typer.Context,
    license_id: Optional[str] = typer.Option(None, "--license", "-l", help="License name (see --list)."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Full name of the copyright holder."),
    year: Optional[str] = typer.Option(None, "--year", "-y", help="Copyright year."),
    list_: bool = typer.Option(False, "--list", help="List all supported licenses and exit."),
    project_dir: Path = typer.Option(Path("."), "--dir", help="Path to the project directory."),
    licenses_dir: Optional[Path] = typer.Option(
        None, "--licenses-dir", help="Directory holding <license>.txt templates (default: ./licenses)."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to write the rendered license (default: license.txt)."
    ),
    replace: Optional[bool] = typer.Option(
        None,
        "--replace/--keep-existing",
        help="Answer the 'replace different header?' question up front instead of prompting.",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help=f"Project settings file (default: <dir>/{PROJECT_CONFIG_NAME})."
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv, -vvv)."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
):
    """
    Prepend a license header to every source file in a project directory.
    """
    configure_logging(verbose)

    try:
        settings = load_project_settings(
            config_file or project_dir / PROJECT_CONFIG_NAME,
            required=config_file is not None,
        )
    except ConfigError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if licenses_dir is None and settings.get("licenses_dir"):
        licenses_dir = Path(settings["licenses_dir"])

    if list_:
        list_licenses(licenses_dir)
        raise typer.Exit()

    license_id = license_id or settings.get("license")
    name = name or settings.get("name")
    year = year or settings.get("year")
    if output is None and settings.get("output"):
        output = Path(settings["output"])
    if replace is None:
        replace = settings.get("replace")

    missing = [
        flag for flag, value in (("--license", license_id), ("--name", name), ("--year", year))
        if not value
    ]
    if missing:
        logger.debug(f"Missing required values: {missing}")
        console.print(f"[bold red]Error:[/bold red] Missing required option(s): {', '.join(missing)}")
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    try:
        template = load_template(license_id, licenses_dir)
    except TemplateReadError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    rendered_license = render(template, name, year)
    config = LicensedConfig.build(project_dir, replace_existing=replace, license_output=output)

    try:
        report = walk(config, rendered_license, name, year)
    except TraversalError as e:
        console.print(f"[bold red]Error traversing directory:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    write_license_file(config.license_output, rendered_license)

    if not report.ok:
        print_failures(report)
        console.print(f"[bold red]{len(report.failures)} file(s) could not be processed.[/bold red]")
        raise typer.Exit(code=1)

    console.print("[bold green]License headers added successfully.[/bold green]")
