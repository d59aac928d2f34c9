"""
design-tokens CLI Package.

- tokens.py: resolve, motion, presets, check and init commands
- utils.py: Shared utilities (version, logging, parameter gathering)
"""

import typer

from design_tokens.cli.tokens import (
    check_command,
    init_command,
    motion_command,
    presets_command,
    resolve_command,
)
from design_tokens.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""design-tokens – resolve design tokens from presets and parameters

Parameters are KEY=VALUE pairs, a --query string, or a tokens.yaml file:

  design-tokens resolve theme=nord-light accent=5E81AC
  design-tokens resolve --query 'accentColor=pink&grayColor=mauve' --format css
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """design-tokens CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="resolve")(resolve_command)
app.command(name="motion")(motion_command)
app.command(name="presets")(presets_command)
app.command(name="check")(check_command)
app.command(name="init")(init_command)


def main() -> None:
    """Entry point for the design-tokens command."""
    app()


__all__ = ["app", "main"]
