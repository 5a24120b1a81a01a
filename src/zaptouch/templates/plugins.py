"""Template function plugins loaded from the config plugins directory."""

from __future__ import annotations

import importlib.util
import logging
import os
from typing import Any, Callable

from jinja2 import Environment

from zaptouch.errors import PluginLoadError

logger = logging.getLogger(__name__)

ENTRY_POINT: str = "register_template_functions"
PLUGIN_SUFFIXES: tuple[str, ...] = (".py",)


class PluginRegistry:
    """
    Capability registry handed to plugins.

    A plugin module defines::

        def register_template_functions(registry):
            registry.register("shout", lambda input: input.upper() + "!!!")

    Registered callables become template globals.
    """

    def __init__(self, env: Environment) -> None:
        self._env = env
        self._names: list[str] = []

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def register(self, name: str, func: Callable[..., Any]) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("plugin function name must be a non-empty string")
        if not callable(func):
            raise TypeError(f"plugin function '{name}' is not callable")
        self._env.globals[name] = func
        if name not in self._names:
            self._names.append(name)

    def __contains__(self, name: object) -> bool:
        return name in self._names


def load_plugin(registry: PluginRegistry, path: str) -> None:
    """
    Import one plugin file and call its entry point.

    Raises:
        PluginLoadError: on import failure, missing entry point, or a failing entry point.
    """
    stem = os.path.splitext(os.path.basename(path))[0]
    spec = importlib.util.spec_from_file_location(f"zaptouch_plugin_{stem}", path)
    if spec is None or spec.loader is None:
        raise PluginLoadError(f"cannot load plugin: {path}", details={"path": path})

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise PluginLoadError(
            f"failed to import plugin {path}: {exc}",
            details={"path": path},
            cause=exc,
        ) from exc

    register = getattr(module, ENTRY_POINT, None)
    if not callable(register):
        raise PluginLoadError(
            f"entry point '{ENTRY_POINT}' not found in plugin {path}",
            details={"path": path, "entry_point": ENTRY_POINT},
        )

    try:
        register(registry)
    except Exception as exc:
        raise PluginLoadError(
            f"plugin {path} failed during registration: {exc}",
            details={"path": path},
            cause=exc,
        ) from exc


def load_plugins_from_dir(registry: PluginRegistry, directory: str) -> list[str]:
    """
    Load every plugin file in directory (sorted by name).

    A missing directory loads nothing. A plugin that fails is logged and
    skipped; the others still load.

    Returns:
        Paths of the plugins that loaded.
    """
    if not os.path.isdir(directory):
        return []

    try:
        entries = sorted(
            entry.path
            for entry in os.scandir(directory)
            if entry.is_file() and entry.name.endswith(PLUGIN_SUFFIXES)
        )
    except OSError as exc:
        logger.warning("Failed to read plugin directory %s: %s", directory, exc)
        return []

    loaded: list[str] = []
    for path in entries:
        try:
            load_plugin(registry, path)
        except PluginLoadError as exc:
            logger.warning("Failed to load plugin %s: %s", path, exc)
            continue
        loaded.append(path)
        logger.debug("Loaded plugin %s", path)
    return loaded
