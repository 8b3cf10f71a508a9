"""CLI entry point for rfd-processor."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from rfd_processor.config import RfdProcessorConfig, load_config
from rfd_processor.config.loader import DEFAULT_CONFIG_TEMPLATE, PROJECT_CONFIG
from rfd_processor.content import (
    AsciidoctorPdfConverter,
    ContentFormat,
    OutputIoError,
    RenderableRfd,
    RfdContentError,
    RfdNumber,
    RfdOutputError,
    RfdPdf,
)
from rfd_processor.log import setup_logging
from rfd_processor.vcs import GitHubRfdLocation, VCSError, VCSProvider, create_provider

app = typer.Typer(
    name="rfd-processor",
    help="Inspect, update and render RFDs.",
)

config_app = typer.Typer(help="Manage rfd-processor configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: RfdProcessorConfig | None = None

# Failures worth a clean one-line message instead of a traceback
_EXPECTED_ERRORS = (ValueError, VCSError, RfdContentError, RfdOutputError)


def _get_config() -> RfdProcessorConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to rfd-processor.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    setup_logging(_config.log_level, _config.log_format)


def _parse_number(number: int) -> RfdNumber:
    try:
        return RfdNumber(number)
    except ValueError as e:
        raise typer.BadParameter(str(e))


async def _fetch(
    provider: VCSProvider, number: RfdNumber, branch: str | None, cfg: RfdProcessorConfig
) -> tuple[GitHubRfdLocation, RenderableRfd]:
    location = await provider.locate(branch)
    readme = await provider.get_readme(number, location)
    rfd = RenderableRfd.from_readme(readme, workspace_root=cfg.render.workspace_root)
    return location, rfd


async def _render(
    provider: VCSProvider, number: RfdNumber, branch: str | None, cfg: RfdProcessorConfig
) -> RfdPdf:
    location, rfd = await _fetch(provider, number, branch, cfg)
    converter = AsciidoctorPdfConverter(cfg.render)
    if rfd.format() is ContentFormat.asciidoc and not converter.check_available():
        raise OutputIoError(f"{cfg.render.command[0]} not found on PATH")
    return await rfd.render_to_pdf(provider, number, location, converter)


def _display_attributes(
    number: RfdNumber, location: GitHubRfdLocation, rfd: RenderableRfd
) -> None:
    def _value(v: str | None) -> str:
        return escape(v) if v else "[dim](none)[/dim]"

    panel_text = (
        f"[bold]{_value(rfd.get_title())}[/bold]\n\n"
        f"[dim]Format:[/dim]     {rfd.format().value}\n"
        f"[dim]State:[/dim]      {_value(rfd.get_state())}\n"
        f"[dim]Authors:[/dim]    {_value(rfd.get_authors())}\n"
        f"[dim]Labels:[/dim]     {_value(rfd.get_labels())}\n"
        f"[dim]Discussion:[/dim] {_value(rfd.get_discussion())}\n"
        f"[dim]Branch:[/dim]     {location.branch} ({location.commit[:12]})"
    )
    rprint(Panel(panel_text, title=f"RFD {number}", border_style="blue"))


@app.command()
def show(
    number: int = typer.Argument(..., help="RFD number"),
    branch: str | None = typer.Option(None, "--branch", "-b", help="Branch to read from"),
) -> None:
    """Show an RFD's metadata."""
    cfg = _get_config()
    rfd_number = _parse_number(number)

    try:
        provider = create_provider(cfg.vcs)
        location, rfd = asyncio.run(_fetch(provider, rfd_number, branch, cfg))
    except _EXPECTED_ERRORS as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _display_attributes(rfd_number, location, rfd)


@app.command()
def render(
    number: int = typer.Argument(..., help="RFD number"),
    branch: str | None = typer.Option(None, "--branch", "-b", help="Branch to read from"),
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Where to write the PDF")
    ] = None,
) -> None:
    """Render an Asciidoc RFD, with its images, to PDF."""
    cfg = _get_config()
    rfd_number = _parse_number(number)
    rprint(f"[bold]Rendering[/bold] RFD {rfd_number} (provider: {cfg.vcs.provider})...")

    try:
        provider = create_provider(cfg.vcs)
        pdf = asyncio.run(_render(provider, rfd_number, branch, cfg))
        dest = pdf.write_to(output or pdf.filename())
    except OSError as e:
        rprint(f"[red]Error:[/red] Could not write PDF: {escape(str(e))}")
        raise typer.Exit(1)
    except _EXPECTED_ERRORS as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    rprint(f"[green]Written to[/green] {dest} ({len(pdf.contents)} bytes)")


@app.command()
def update(
    file: str = typer.Argument(..., help="Path to a README.adoc or README.md"),
    state: str | None = typer.Option(None, "--state", help="New state"),
    discussion: str | None = typer.Option(None, "--discussion", help="New discussion URL"),
    labels: str | None = typer.Option(None, "--labels", help="New comma separated labels"),
) -> None:
    """Update attributes of a local RFD file in place."""
    path = Path(file)
    try:
        fmt = ContentFormat.from_path(path)
        text = path.read_text(encoding="utf-8")
    except (ValueError, OSError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if state is None and discussion is None and labels is None:
        rprint("[yellow]Nothing to update.[/yellow] Pass --state, --discussion or --labels.")
        raise typer.Exit(0)

    rfd = RenderableRfd.new_from_text(fmt, text)
    if state is not None:
        rfd.update_state(state)
    if discussion is not None:
        rfd.update_discussion(discussion)
    if labels is not None:
        rfd.update_labels(labels)

    try:
        path.write_text(rfd.into_inner_content(), encoding="utf-8")
    except OSError as e:
        rprint(f"[red]Error:[/red] Could not write {escape(str(path))}: {escape(str(e))}")
        raise typer.Exit(1)
    rprint(f"[green]Updated[/green] {path}")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default rfd-processor.yaml in current directory."""
    target = Path(PROJECT_CONFIG)
    if target.exists() and not force:
        rprint("[yellow]rfd-processor.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
