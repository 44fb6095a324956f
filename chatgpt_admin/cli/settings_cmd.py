# -*- coding: utf-8 -*-
"""CLI commands for viewing and editing the ChatGPT configuration."""
from __future__ import annotations

import asyncio
from typing import Optional

import click

from ..app.store import mask_api_key
from ..providers import default_registry
from ..settings import (
    ConfigError,
    ConfigurationSession,
    FetchError,
    NotificationKind,
)
from .http import client, print_json


def echo_notification(kind: NotificationKind, message: str) -> None:
    """Print a session notification (green for success, yellow otherwise)."""
    color = "green" if kind is NotificationKind.SUCCESS else "yellow"
    click.echo(
        click.style(message, fg=color),
        err=kind is NotificationKind.WARNING,
    )


def _session(ctx: click.Context) -> ConfigurationSession:
    return ConfigurationSession(
        client(ctx),
        registry=default_registry(),
        notify=echo_notification,
    )


def _masked(payload: dict) -> dict:
    return {**payload, "apiKey": mask_api_key(payload.get("apiKey", ""))}


# ---------------------------------------------------------------------------
# providers
# ---------------------------------------------------------------------------


@click.command("providers")
def providers_cmd() -> None:
    """Show the available backends and their requirements."""
    for defn in default_registry().list_providers():
        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {defn.name} ({defn.id})")
        click.echo(f"{'─' * 44}")
        if defn.custom_url_required:
            url_mode = "required"
        elif defn.custom_url_allowed:
            url_mode = "optional"
        else:
            url_mode = "fixed"
        click.echo(f"  {'custom url':16s}: {url_mode}")
        click.echo(f"  {'default url':16s}: {defn.default_url or '(none)'}")
        if defn.require_custom_model_name:
            click.echo(f"  {'models':16s}: (enter a model name)")
        for model in defn.default_models:
            click.echo(f"  {'model':16s}: {model.value} - {model.label}")
    click.echo()


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@click.command("show")
@click.pass_context
def show_cmd(ctx: click.Context) -> None:
    """Print the stored configuration (API key masked)."""
    session = _session(ctx)
    try:
        document = asyncio.run(session.initialize())
    except FetchError:
        # The session has already reported the failure.
        raise SystemExit(1)
    print_json(_masked(document.to_payload()))


# ---------------------------------------------------------------------------
# fields
# ---------------------------------------------------------------------------


@click.command("fields")
@click.option(
    "--backend",
    default=None,
    help="Describe the fields as they would be for this backend",
)
@click.pass_context
def fields_cmd(ctx: click.Context, backend: Optional[str]) -> None:
    """Show which fields are required, enabled and their allowed values."""
    session = _session(ctx)
    try:
        asyncio.run(session.initialize())
    except FetchError:
        click.echo("Showing defaults.", err=True)
    if backend is not None:
        session.set_backend(backend)
    print_json(
        [
            field.model_dump()
            for field in session.fields()
            if field.name != "api_key"
        ],
    )


# ---------------------------------------------------------------------------
# set
# ---------------------------------------------------------------------------


async def _apply_and_save(
    session: ConfigurationSession,
    edits: dict,
    backend: Optional[str],
) -> dict:
    try:
        await session.initialize()
    except FetchError:
        # Editing on top of the defaults is still allowed.
        pass
    if backend is not None:
        session.set_backend(backend)
    for name, value in edits.items():
        if value is not None:
            session.set_field(name, value)
    document = await session.save()
    return document.to_payload()


@click.command("set")
@click.option("--backend", default=None, help="Backend id, e.g. open_ai")
@click.option("--api-key", default=None, help="API key of the backend")
@click.option("--model", "model_name", default=None, help="Model name")
@click.option("--max-tokens", default=None, help="Maximum tokens, e.g. 2048")
@click.option("--url", default=None, help="Backend endpoint URL")
@click.pass_context
def set_cmd(
    ctx: click.Context,
    backend: Optional[str],
    api_key: Optional[str],
    model_name: Optional[str],
    max_tokens: Optional[str],
    url: Optional[str],
) -> None:
    """Edit the configuration and save it.

    \b
    Examples:
      chatgpt-admin set --backend open_ai --api-key sk-... \\
          --model text-davinci-003
      chatgpt-admin set --backend azure_ai --url https://x.openai.azure.com/ \\
          --model my-deployment
    """
    session = _session(ctx)
    edits = {
        "api_key": api_key,
        "model_name": model_name,
        "max_tokens": max_tokens,
        "url": url,
    }
    try:
        payload = asyncio.run(_apply_and_save(session, edits, backend))
    except ConfigError:
        raise SystemExit(1)
    print_json(_masked(payload))
