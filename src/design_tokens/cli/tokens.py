"""
Token resolution CLI commands.

``design-tokens resolve``  - Resolve tokens and print JSON, CSS or DTCG.
``design-tokens motion``   - Resolve motion tokens.
``design-tokens presets``  - List the built-in theme presets.
``design-tokens check``    - Report parameters that resolution would ignore.
``design-tokens init``     - Scaffold a tokens.yaml parameter file.
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from design_tokens.cli.utils import console, err_console, gather_params, write_output

PARAMS_HELP = "Token parameters as KEY=VALUE (e.g. theme=nord color=ECEFF4/2E3440)"


class OutputFormat(StrEnum):
    JSON = "json"
    CSS = "css"
    DTCG = "dtcg"


def resolve_command(
    params: list[str] | None = typer.Argument(None, help=PARAMS_HELP),
    query: str | None = typer.Option(
        None, "--query", "-q", help="URL query string, e.g. 'theme=nord&mode=light'"
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="tokens.yaml file or directory with default parameters"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON, "--format", "-f", help="Output format"
    ),
    both_modes: bool = typer.Option(
        False, "--both-modes", help="Resolve light and dark token sets together"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write to a file"),
) -> None:
    """Resolve design tokens from parameters."""
    from design_tokens.core.css_generator import generate_adaptive_css, generate_css
    from design_tokens.core.dtcg_export import generate_dtcg_tokens
    from design_tokens.core.motion import resolve_motion_tokens
    from design_tokens.core.resolver import (
        resolve_design_tokens,
        resolve_design_tokens_for_both_modes,
    )

    merged = gather_params(params, query, config)

    if both_modes:
        light, dark = resolve_design_tokens_for_both_modes(merged)
        if output_format == OutputFormat.CSS:
            content = generate_adaptive_css(light, dark)
        elif output_format == OutputFormat.DTCG:
            motion = resolve_motion_tokens(merged)
            content = json.dumps(
                {
                    "light": generate_dtcg_tokens(light, motion),
                    "dark": generate_dtcg_tokens(dark, motion),
                },
                indent=2,
            )
        else:
            content = json.dumps(
                {"light": light.model_dump(mode="json"), "dark": dark.model_dump(mode="json")},
                indent=2,
            )
    else:
        tokens = resolve_design_tokens(merged)
        if output_format == OutputFormat.CSS:
            content = generate_css(tokens)
        elif output_format == OutputFormat.DTCG:
            content = json.dumps(
                generate_dtcg_tokens(tokens, resolve_motion_tokens(merged)), indent=2
            )
        else:
            content = json.dumps(tokens.model_dump(mode="json"), indent=2)

    write_output(content, output)


def motion_command(
    params: list[str] | None = typer.Argument(None, help=PARAMS_HELP),
    query: str | None = typer.Option(None, "--query", "-q", help="URL query string"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON, "--format", "-f", help="Output format (json or css)"
    ),
) -> None:
    """Resolve motion tokens (durations and amplitudes)."""
    from design_tokens.core.css_generator import generate_motion_css
    from design_tokens.core.motion import resolve_motion_tokens

    motion = resolve_motion_tokens(gather_params(params, query))
    if output_format == OutputFormat.CSS:
        write_output(generate_motion_css(motion), None)
    else:
        write_output(json.dumps(motion.model_dump(mode="json"), indent=2), None)


def presets_command() -> None:
    """List the built-in theme presets."""
    from design_tokens.core.presets import get_theme_preset, list_theme_presets

    table = Table(title="Theme Presets")
    table.add_column("Name", style="cyan")
    table.add_column("Mode")
    table.add_column("Color")
    table.add_column("Background")
    table.add_column("Accent")
    table.add_column("Radius", justify="right")

    for name in list_theme_presets():
        preset = get_theme_preset(name)
        if preset is None:
            continue
        table.add_row(
            name,
            preset.mode.value,
            preset.color,
            preset.background,
            preset.accent,
            f"{preset.radius}px",
        )

    console.print(table)


def check_command(
    params: list[str] | None = typer.Argument(None, help=PARAMS_HELP),
    query: str | None = typer.Option(None, "--query", "-q", help="URL query string"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="tokens.yaml file or directory with default parameters"
    ),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 on warnings"),
) -> None:
    """Report parameters that resolution would ignore or fall back on."""
    from design_tokens.core.params import validate_params

    result = validate_params(gather_params(params, query, config))

    if result.is_clean:
        console.print("[green]✓[/green] Parameters OK", highlight=False)
        return

    for warning in result.warnings:
        err_console.print(f"[yellow]WARNING:[/yellow] {escape(warning)}", highlight=False)

    if strict:
        raise typer.Exit(code=1)


def init_command(
    path: Path = typer.Option(Path("."), "--path", "-p", help="Project directory"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing tokens.yaml"),
) -> None:
    """Create a tokens.yaml with default parameters."""
    from design_tokens.core.tokenspec_loader import get_tokenspec_path, scaffold_tokenspec

    created = scaffold_tokenspec(path, overwrite=force)
    if created is None:
        typer.echo(f"tokens.yaml already exists: {get_tokenspec_path(path)}")
        typer.echo("Use --force to overwrite.")
        raise typer.Exit(code=1)

    typer.echo(f"✓ Created {created}")
