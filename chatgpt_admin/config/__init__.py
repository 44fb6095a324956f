# -*- coding: utf-8 -*-
from .config import BackendConf, ChatGPTConfig, parse_max_tokens

__all__ = ["BackendConf", "ChatGPTConfig", "parse_max_tokens"]
