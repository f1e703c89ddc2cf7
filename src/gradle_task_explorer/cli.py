"""Command-line interface for Gradle Task Explorer."""

import asyncio
import logging
from pathlib import Path

import click

from .core.config import load_settings
from .core.errors import TaskExplorerError
from .core.host import LocalHost
from .core.orchestrator import Orchestrator
from .core.reporting import JsonReporter, TextReporter


@click.command()
@click.argument(
    "roots",
    nargs=-1,
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Settings file (default: .taskexplorer.yaml if present)",
)
@click.option(
    "--provider",
    "-p",
    multiple=True,
    help="Run specific provider(s). Can be specified multiple times.",
)
@click.option("--gradle-path", help="Gradle executable to use instead of the default")
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="Glob of build files to skip. Can be specified multiple times.",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--verbose", "-v", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@click.option(
    "--list-providers", is_flag=True, help="List available providers and exit"
)
def main(
    roots, config_path, provider, gradle_path, exclude, format, verbose, list_providers
):
    """
    Gradle Task Explorer - List tasks declared in Gradle build files.

    Searches each ROOTS directory (default: current directory) for *.gradle
    files and prints the tasks they declare.
    """
    # Setup logging
    if verbose == 1:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    elif verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        settings = load_settings(config_path)
    except TaskExplorerError as e:
        raise click.ClickException(str(e)) from e

    if gradle_path:
        settings.path_to_gradle = gradle_path
    if exclude:
        settings.exclude = [*settings.exclude, *exclude]

    host = LocalHost.from_paths(list(roots) or [Path(".")], settings)
    orchestrator = Orchestrator(host, settings)

    # List providers and exit
    if list_providers:
        click.echo("Available providers:")
        for provider_meta in orchestrator.list_providers():
            click.echo(f"  - {provider_meta['name']}: {provider_meta['description']}")
        return

    provider_filter = list(provider) if provider else None
    try:
        listing = asyncio.run(orchestrator.list_tasks(provider_filter=provider_filter))
    except TaskExplorerError as e:
        raise click.ClickException(str(e)) from e

    if format == "text":
        TextReporter().report(listing)
    elif format == "json":
        click.echo(JsonReporter().report(listing))


if __name__ == "__main__":
    main()
