# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
from typing import Optional

import click

from ..constant import ADMIN_TOKEN, BACKEND_URL, LOG_LEVEL_ENV
from .settings_cmd import fields_cmd, providers_cmd, set_cmd, show_cmd


@click.group()
@click.option(
    "--base-url",
    default=BACKEND_URL,
    show_default=True,
    help="Admin backend URL",
)
@click.option(
    "--token",
    default=ADMIN_TOKEN,
    help="Admin bearer token",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"]),
    help=f"Log level (default: ${LOG_LEVEL_ENV} or warning)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    base_url: str,
    token: str,
    log_level: Optional[str],
) -> None:
    """Manage the ChatGPT integration settings."""
    level = log_level or os.environ.get(LOG_LEVEL_ENV, "warning")
    logging.basicConfig(level=level.upper())
    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url
    ctx.obj["token"] = token


cli.add_command(providers_cmd)
cli.add_command(show_cmd)
cli.add_command(fields_cmd)
cli.add_command(set_cmd)


if __name__ == "__main__":
    cli()
