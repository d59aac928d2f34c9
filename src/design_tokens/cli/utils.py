"""
design-tokens CLI utilities.

Shared helpers used across CLI modules: version output, logging setup
and gathering parameters from files, query strings and arguments.
"""

import logging
import os
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from design_tokens._version import get_version
from design_tokens.core.errors import DesignTokensError

LOG_LEVEL_ENV = "DESIGN_TOKENS_LOG_LEVEL"

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        try:
            import design_tokens

            install_location = Path(design_tokens.__file__).parent
        except Exception:
            install_location = Path.cwd()

        typer.echo(f"design-tokens version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or the environment."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("design_tokens").setLevel(level)


def fail(error: DesignTokensError) -> typer.Exit:
    """Print an error to stderr and return the exit to raise."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    return typer.Exit(code=1)


def gather_params(
    args: list[str] | None,
    query: str | None = None,
    config: Path | None = None,
) -> dict[str, str]:
    """
    Merge parameters from all sources.

    Precedence: config file < query string < KEY=VALUE arguments.

    Raises:
        typer.Exit: If any source is malformed
    """
    from design_tokens.core.params import parse_param_args, parse_query_params
    from design_tokens.core.tokenspec_loader import load_token_params

    params: dict[str, str] = {}
    try:
        if config is not None:
            params.update(load_token_params(config, use_defaults=False))
        if query:
            params.update(parse_query_params(query))
        params.update(parse_param_args(args or []))
    except DesignTokensError as e:
        raise fail(e) from e
    return params


def write_output(content: str, output: Path | None) -> None:
    """Write to a file when given, otherwise to stdout."""
    if output is None:
        typer.echo(content, nl=not content.endswith("\n"))
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    err_console.print(f"[green]✓[/green] Wrote {escape(str(output))}", highlight=False)
