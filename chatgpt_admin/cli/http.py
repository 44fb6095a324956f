# -*- coding: utf-8 -*-
from __future__ import annotations

import json
from typing import Any

import click

from ..settings import ConfigClient


def client(ctx: click.Context) -> ConfigClient:
    """Build the endpoint client from the group options in ``ctx.obj``."""
    obj = ctx.obj or {}
    return ConfigClient(
        base_url=obj["base_url"],
        token=obj.get("token"),
        transport=obj.get("transport"),
    )


def print_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))
