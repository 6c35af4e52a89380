"""
Genwith CLI - Command-line interface for client generation

Usage:
    genwith --package <name> [--client] [--token] [--config]
            [--endpoint | --endpoint-func] [--ratelimit] [--do]
            [--decoder json] [-o <output_dir>] [--dry-run] [--skip-format]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from genwith import __version__
from genwith.errors import ExternalToolError, GenwithError
from genwith.generator import Renderer, generate_file, invocation_summary
from genwith.regions import active_regions
from genwith.settings import get_settings
from genwith.spec import DEFAULT_DECODER, WithSpec

app = typer.Typer(
    name="genwith",
    help="Generate new functional option clients",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("genwith")


def configure_logging(level: str) -> None:
    """Send genwith logs to stderr through rich."""
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"genwith {__version__}")
        raise typer.Exit()


@app.command()
def generate(
    do: bool = typer.Option(False, "--do", help="Include client.do function"),
    token: bool = typer.Option(False, "--token", help="Include token-related options"),
    config: bool = typer.Option(False, "--config", help="Include config-related options"),
    endpoint: bool = typer.Option(
        False,
        "--endpoint",
        help="Include oauth2.Endpoint var in config instantiation",
    ),
    endpoint_func: bool = typer.Option(
        False,
        "--endpoint-func",
        help="Include oauth2.Endpoint func in config instantiation",
    ),
    client: bool = typer.Option(False, "--client", help="Include NewClient & options"),
    ratelimit: bool = typer.Option(
        False,
        "--ratelimit",
        help="Include a rate limiting transport option",
    ),
    package: str = typer.Option(
        "",
        "--package",
        help="The name of the package for generation (required)",
    ),
    decoder: str = typer.Option(DEFAULT_DECODER, "--decoder", help="The decoder to use"),
    output: Path = typer.Option(
        None,
        "--output", "-o",
        help="Output directory (defaults to the current directory)",
        file_okay=False,
        resolve_path=True,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the generated source without writing files",
    ),
    skip_format: bool = typer.Option(
        False,
        "--skip-format",
        help="Do not run gofmt and goimports on the generated file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Generate a Go functional-options client file."""
    try:
        settings = get_settings()
    except ValidationError as e:
        rprint(f"[red]✗[/red] invalid GENWITH_* settings: {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging("DEBUG" if verbose else settings.log_level)

    switches = {
        "do": do,
        "token": token,
        "config": config,
        "endpoint": endpoint,
        "endpoint-func": endpoint_func,
        "client": client,
        "ratelimit": ratelimit,
    }

    try:
        spec = WithSpec(
            **switches,
            package=package,
            decoder=decoder,
            flags=invocation_summary(sys.argv[1:]),
        )
        logger.debug("active regions: %s", ", ".join(active_regions(spec)) or "-")

        if dry_run:
            content = Renderer().render(spec)
            console.print(Syntax(content, "go", theme="ansi_dark"))
            return

        result = generate_file(
            spec,
            output or Path.cwd(),
            run_format=not skip_format,
            settings=settings,
        )
        rprint(f"[green]✓[/green] Generated {result.path}")

    except ExternalToolError as e:
        logger.error("%s: %s", e.stage, e)
        if e.output:
            err_console.print(Panel(Text(e.output), title=e.tool))
        raise typer.Exit(1)
    except GenwithError as e:
        logger.error("%s: %s", e.stage, e)
        rprint(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
