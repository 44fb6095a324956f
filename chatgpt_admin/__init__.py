# -*- coding: utf-8 -*-
"""Admin-side configuration of the ChatGPT integration."""

__version__ = "0.1.0"
