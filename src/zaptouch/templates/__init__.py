"""Public template exports for zaptouch."""

from __future__ import annotations

from .context import parse_context
from .plugins import (
    ENTRY_POINT,
    PluginRegistry,
    load_plugin,
    load_plugins_from_dir,
)
from .renderer import TemplateRenderer

__all__ = [
    "TemplateRenderer",
    "PluginRegistry",
    "ENTRY_POINT",
    "load_plugin",
    "load_plugins_from_dir",
    "parse_context",
]
