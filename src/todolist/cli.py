"""todolist CLI entry point."""

from __future__ import annotations

import locale
from typing import Optional

import click

from . import __version__
from .api.http import HttpTaskAPI
from .config import Config
from .state.store import TaskStore
from .utils.logger import EventLog


def build_store(config: Config) -> TaskStore:
    """Wire the HTTP API and event log from configuration."""
    api = HttpTaskAPI(base_url=config.api_url, timeout=config.api_timeout)
    logger: Optional[EventLog]
    try:
        logger = EventLog(config.log_file)
    except OSError as exc:
        click.echo(f"Event log disabled: {exc}", err=True)
        logger = None
    return TaskStore(api, logger=logger)


def _start_tui(api_url: Optional[str], version_label: Optional[str]) -> None:
    """Helper to launch the Textual TUI."""
    try:
        from .interactive import TodoApp
    except Exception as exc:  # pragma: no cover - defensive fallback
        click.echo(f"Unable to start interactive mode: {exc}")
        return

    config = Config()
    if api_url:
        config.set("api.url", api_url)
    if version_label:
        config.set("app.version", version_label)

    try:
        # timestamps use the user's locale date-time format
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    app = TodoApp(build_store(config), version_label=config.version_label)
    app.run()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("--api-url", default=None, help="Base URL of the task service (default: from config)")
@click.option("--version-label", default=None, help="Version string shown in the footer")
@click.pass_context
def main(ctx: click.Context, api_url: Optional[str], version_label: Optional[str]) -> None:
    """todolist - terminal client for a REST to-do list."""
    if ctx.invoked_subcommand is None:
        _start_tui(api_url, version_label)


@main.command()
@click.option("--api-url", default=None, help="Base URL of the task service (default: from config)")
@click.option("--version-label", default=None, help="Version string shown in the footer")
def tui(api_url: Optional[str], version_label: Optional[str]) -> None:
    """Start Textual TUI."""
    _start_tui(api_url, version_label)


if __name__ == "__main__":
    main()
