"""Jinja2-backed template rendering."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound
from jinja2 import TemplateError as JinjaTemplateError

from zaptouch.config import ZapConfig
from zaptouch.errors import TemplateNotFoundError, TemplateRenderError

from .plugins import PluginRegistry, load_plugins_from_dir

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """
    Renders named templates from a templates directory.

    Notes:
        - Undefined variables are errors (StrictUndefined).
        - Template text is reproduced exactly, including a trailing newline.
    """

    def __init__(self, templates_dir: str, *, plugins_dir: Optional[str] = None) -> None:
        self.templates_dir = templates_dir
        self._env = Environment(
            loader=FileSystemLoader(templates_dir),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.registry = PluginRegistry(self._env)
        if plugins_dir is not None:
            load_plugins_from_dir(self.registry, plugins_dir)

    @classmethod
    def from_config(cls, config: ZapConfig) -> TemplateRenderer:
        return cls(config.templates_dir, plugins_dir=config.plugins_dir)

    def render(self, template_name: str, context: Optional[Mapping[str, str]] = None) -> str:
        """
        Render template_name with context.

        Raises:
            TemplateNotFoundError: if the template does not exist.
            TemplateRenderError: on syntax errors, undecodable (non UTF-8) template
                files, undefined variables, or a failing plugin function.
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(
                f"template not found: {template_name}",
                details={"template": template_name, "templates_dir": self.templates_dir},
                cause=exc,
            ) from exc
        except (JinjaTemplateError, UnicodeDecodeError) as exc:
            raise TemplateRenderError(
                f"template '{template_name}' is invalid: {exc}",
                details={"template": template_name},
                cause=exc,
            ) from exc

        logger.debug("Rendering template %s", template_name)
        try:
            return template.render(dict(context or {}))
        except Exception as exc:
            raise TemplateRenderError(
                f"failed to render template '{template_name}': {exc}",
                details={"template": template_name},
                cause=exc,
            ) from exc
