# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from .routers.config import get_config_path, router as config_router


def create_app(config_path: Optional[Path] = None) -> FastAPI:
    """Build the app serving the configuration endpoint.

    *config_path* overrides where config.json is kept.
    """
    app = FastAPI(title="ChatGPT configuration")
    app.include_router(config_router)
    if config_path is not None:
        app.dependency_overrides[get_config_path] = lambda: config_path
    return app
