# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("CHATGPT_ADMIN_WORKING_DIR", "~/.chatgpt-admin"))
    .expanduser()
    .resolve()
)

CONFIG_FILE = os.environ.get("CHATGPT_ADMIN_CONFIG_FILE", "config.json")

# Admin backend the settings page talks to (same variable as the admin panel).
BACKEND_URL = os.environ.get(
    "STRAPI_ADMIN_BACKEND_URL",
    "http://127.0.0.1:1337",
)
ADMIN_TOKEN = os.environ.get("STRAPI_ADMIN_TOKEN", "")

CONFIG_READ_PATH = os.environ.get(
    "CHATGPT_CONFIG_READ_PATH",
    "/strapi-chatgpt/config",
)
CONFIG_WRITE_PATH = os.environ.get(
    "CHATGPT_CONFIG_WRITE_PATH",
    "/strapi-chatgpt/config/update",
)

HTTP_TIMEOUT = float(os.environ.get("CHATGPT_ADMIN_HTTP_TIMEOUT", "30"))

# Env key for log level (used by the CLI).
LOG_LEVEL_ENV = "CHATGPT_ADMIN_LOG_LEVEL"

DEFAULT_BACKEND = "open_ai"
DEFAULT_MODEL_NAME = "text-davinci-003"
DEFAULT_MAX_TOKENS = 2048
