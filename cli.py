#!/usr/bin/env python3
"""
scicalc CLI Tool

Command-line interface for running the scientific calculator, driving it
headlessly, or starting the MCP server.
"""

import logging
from pathlib import Path

import click

from scicalc import __version__
from scicalc.apps.calculator import CalculatorApp
from scicalc.config import CalculatorConfig
from scicalc.engine.keymap import KEYS
from scicalc.engine.session import CalculatorSession
from scicalc.logging_config import setup_logging
from scicalc.storage import StateStore


@click.group()
@click.version_option(version=__version__)
def cli():
    """scicalc - scientific calculator for the terminal."""
    pass


@cli.command()
@click.option('--state-file', type=click.Path(dir_okay=False, path_type=Path), help='Where memory and theme are saved')
@click.option('--log-file', type=click.Path(dir_okay=False, path_type=Path), help='Also write logs to this file')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def run(state_file: Path | None, log_file: Path | None, debug: bool):
    """Run the calculator in the terminal."""
    config = CalculatorConfig.from_env(
        state_file=state_file,
        log_file=log_file,
        log_level="DEBUG" if debug else None,
    )
    setup_logging(config.log_level, config.log_file, tui=True)
    app = CalculatorApp(store=StateStore(config.state_file))
    app.run()


@cli.command()
@click.argument('buttons', nargs=-1, required=True)
@click.option('--state-file', type=click.Path(dir_okay=False, path_type=Path),
              help='Load and save memory and theme here (default: nothing is persisted)')
def press(buttons: tuple[str, ...], state_file: Path | None):
    """Press BUTTONS in order and print the display.

    Example: scicalc press 9 9 + 3 3 =
    """
    setup_logging(logging.WARNING)
    session = CalculatorSession(store=StateStore(state_file) if state_file else None)
    session.load_preferences()

    for label in buttons:
        try:
            session.press(label)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="BUTTONS") from e

    state = session.state
    click.echo(state.display)
    if state.error:
        click.echo(f"Error: {state.error}", err=True)
    if state.celebrating:
        click.echo("🎉", err=True)


@cli.command()
def keys():
    """List the keyboard shortcuts."""
    click.echo("Keyboard shortcuts:")
    click.echo()
    for key, event in KEYS.items():
        click.echo(f"  {key:<8} {type(event).__name__}")


@cli.command()
def info():
    """Show information about the calculator app."""
    config = CalculatorApp.get_config()

    click.echo(f"Application: {config.name}")
    click.echo(f"Description: {config.description}")
    click.echo(f"Version: {config.version}")
    click.echo(f"Author: {config.author}")
    click.echo(f"Tags: {', '.join(config.tags)}")
    click.echo(f"State file: {CalculatorConfig.from_env().state_file}")


@cli.command()
def server():
    """Start the MCP server."""
    from scicalc.server.mcp_server import main as server_main

    click.echo("Starting scicalc MCP Server...", err=True)
    server_main()


if __name__ == "__main__":
    cli()
