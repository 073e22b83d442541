"""
Command line front end for the theme catalog.

Lists platforms and themes, manages custom themes and prints the composed
stylesheet a renderer would use.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from wenyan import __version__
from wenyan.app import build_theme_service
from wenyan.config.settings import AppSettings
from wenyan.errors import WenYanError, classify_exception, format_error_for_user
from wenyan.themes import catalog, selection as sel
from wenyan.themes.constants import CUSTOM_ID_PREFIX
from wenyan.themes.models import HighlightStyle, Platform, PreviewMode
from wenyan.themes.service import ThemeService

app = typer.Typer(help="WenYan Markdown themes for content platforms", no_args_is_help=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wenyan {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    settings_file: Path | None = typer.Option(
        None, "--settings", help="Read and write settings from this INI file"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    ctx.obj = settings_file


def _service(ctx: typer.Context) -> ThemeService:
    settings = AppSettings(ctx.obj)
    ctx.call_on_close(settings.sync)
    return build_theme_service(settings)


def _parse_platform(value: str | None) -> Platform | None:
    if value is None:
        return None
    try:
        return Platform(value.strip().lower())
    except ValueError:
        choices = ", ".join(platform.value for platform in Platform)
        raise typer.BadParameter(f"unknown platform {value!r}; choose from {choices}") from None


def _parse_named(enum_cls, value: str | None, option: str):
    if value is None:
        return None
    try:
        return enum_cls[value.strip().upper()]
    except KeyError:
        choices = ", ".join(member.name.lower() for member in enum_cls)
        raise typer.BadParameter(f"unknown {option} {value!r}; choose from {choices}") from None


def _fail(error: Exception) -> NoReturn:
    typer.echo(format_error_for_user(classify_exception(error)), err=True)
    raise typer.Exit(code=1)


@app.command("platforms")
def platforms_command() -> None:
    """List publishing platforms and their default theme."""
    for platform in catalog.list_platforms():
        default = catalog.default_theme(platform)
        typer.echo(f"{platform.value:<8} {default.value}  ({catalog.metadata(default).name})")


@app.command("themes")
def themes_command(
    ctx: typer.Context,
    platform: str | None = typer.Option(None, "--platform", "-p", help="Platform to list themes for"),
) -> None:
    """List the themes available for a platform, followed by custom themes."""
    service = _service(ctx)
    target = _parse_platform(platform)
    active = service.selection
    for choice in service.available_themes(target):
        marker = "*" if sel.equals(choice, active) else " "
        name = sel.display_name(choice) or "(unnamed)"
        by = sel.author(choice)
        suffix = f"  by {by}" if by else ""
        typer.echo(f"{marker} {sel.stable_id(choice)}  {name}{suffix}")


@app.command("select")
def select_command(
    ctx: typer.Context,
    theme_id: str = typer.Argument(..., help="Stable id of the theme to select"),
    platform: str | None = typer.Option(None, "--platform", "-p", help="Switch platform first"),
) -> None:
    """Select and remember a theme."""
    service = _service(ctx)
    target = _parse_platform(platform)
    ok, message = service.select_by_id(theme_id, platform=target)
    typer.echo(message, err=not ok)
    if not ok:
        raise typer.Exit(code=1)


@app.command("stylesheet")
def stylesheet_command(
    ctx: typer.Context,
    platform: str | None = typer.Option(None, "--platform", "-p", help="Platform to render for"),
    theme: str | None = typer.Option(None, "--theme", "-t", help="Stable id of the theme"),
    highlight: str | None = typer.Option(None, "--highlight", help="idea, monokai or github"),
    preview: str | None = typer.Option(None, "--preview", help="mobile or desktop"),
) -> None:
    """Print the combined base, theme and highlight stylesheet.

    Options only affect this output; saved settings are left as they are.
    """
    service = _service(ctx)
    target = _parse_platform(platform)
    highlight_style = _parse_named(HighlightStyle, highlight, "highlight style")
    preview_mode = _parse_named(PreviewMode, preview, "preview mode")
    try:
        bundle = service.preview_stylesheets(
            platform=target,
            theme_id=theme,
            highlight=highlight_style,
            preview_mode=preview_mode,
        )
    except WenYanError as exc:
        _fail(exc)
    typer.echo(bundle.combined())


@app.command("import-theme")
def import_theme_command(
    ctx: typer.Context,
    css_file: Path = typer.Argument(..., help="Stylesheet to import as a custom theme"),
    name: str | None = typer.Option(None, "--name", "-n", help="Display name"),
) -> None:
    """Import a stylesheet as a new custom theme."""
    service = _service(ctx)
    try:
        content = css_file.read_text(encoding="utf-8")
        theme = service.store.create_theme(name, content)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        _fail(exc)
    typer.echo(sel.stable_id(sel.custom(theme)))


@app.command("delete-theme")
def delete_theme_command(
    ctx: typer.Context,
    theme_id: str = typer.Argument(..., help="Custom theme id (with or without the custom/ prefix)"),
) -> None:
    """Delete a custom theme."""
    service = _service(ctx)
    if theme_id.startswith(CUSTOM_ID_PREFIX):
        theme_id = theme_id[len(CUSTOM_ID_PREFIX):]
    try:
        service.delete_custom_theme(theme_id)
    except (OSError, WenYanError) as exc:
        _fail(exc)
    typer.echo(f"Deleted custom theme {theme_id}")
