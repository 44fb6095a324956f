# -*- coding: utf-8 -*-
from .config import router as config_router

__all__ = ["config_router"]
