"""
Command-line interface for WiFi Connector.

Provides commands to serve the credential form, list devices,
suggest a password and run a simulated send from the terminal.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from wificonnector import __version__
from wificonnector.config import DEFAULT_CONFIG_PATH, ConnectorConfig, load_config
from wificonnector.controller import FormController
from wificonnector.devices import DEVICES
from wificonnector.exceptions import ConfigError, PasswordSuggestionError
from wificonnector.form import CredentialForm, form_errors
from wificonnector.suggestion import PasswordSuggestionService


def _get_config(ctx: click.Context) -> ConnectorConfig:
    return ctx.obj["config"]


@click.group()
@click.version_option(version=__version__, prog_name="WiFi Connector")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, path_type=Path),
    default=None,
    help="Path to config file (default: /etc/wificonnector/config.yaml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """WiFi Connector - send WiFi credentials to a Bluetooth device.

    Sending is simulated: nothing leaves this machine.
    """
    ctx.ensure_object(dict)
    effective_path = config_path or DEFAULT_CONFIG_PATH
    if config_path and not config_path.exists():
        click.echo(f"Warning: Config file {config_path} not found, using defaults", err=True)
    try:
        config = load_config(effective_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj["config"] = config


@main.command()
@click.option("--host", default=None, help="Host to bind to (overrides config file)")
@click.option("--port", type=int, default=None, help="Port to listen on (overrides config file)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Serve the credential form in a web browser."""
    from wificonnector.web.app import run_server

    config = _get_config(ctx)
    run_server(host=host, port=port, reload=reload, config=config)


@main.command()
def devices() -> None:
    """List the devices credentials can be sent to."""
    click.echo(f"Bluetooth Devices ({len(DEVICES)} total)")
    click.echo("=" * 40)
    for i, name in enumerate(DEVICES):
        click.echo(f"[{i}] {name}")


@main.command()
@click.pass_context
def suggest(ctx: click.Context) -> None:
    """Ask the language model for a strong password."""
    service = PasswordSuggestionService(_get_config(ctx))
    try:
        password = asyncio.run(service.suggest_password())
    except PasswordSuggestionError as e:
        logging.getLogger(__name__).debug("Suggestion failed", exc_info=True)
        raise click.ClickException("Failed to generate a password. Please try again.") from e
    click.echo(password)


@main.command()
@click.option("--ssid", required=True, help="WiFi network name")
@click.option("--password", required=True, help="WiFi password (8+ characters)")
@click.option(
    "--device",
    type=click.Choice(DEVICES),
    required=True,
    help="Device to send the credentials to",
)
@click.pass_context
def send(ctx: click.Context, ssid: str, password: str, device: str) -> None:
    """Simulate sending WiFi credentials to a device.

    Waits for the configured delay, then reports success or failure.
    """
    try:
        form = CredentialForm(ssid=ssid, password=password, device=device)
    except ValidationError as e:
        messages = "; ".join(form_errors(e).values())
        raise click.UsageError(messages, ctx=ctx) from e

    controller = FormController.from_config(_get_config(ctx))

    async def _send() -> None:
        task = controller.submit(form)
        if task is not None:
            await task

    click.echo(f"Sending credentials for {ssid} to {device}...")
    asyncio.run(_send())

    failed = False
    for notification in controller.drain_notifications():
        click.echo(f"{notification.title} {notification.description}")
        failed = failed or notification.variant == "destructive"
    if failed:
        ctx.exit(1)


if __name__ == "__main__":
    main()
