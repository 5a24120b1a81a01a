"""Configuration directory lookup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from zaptouch.errors import ConfigDirNotFoundError

CONFIG_ENV_VAR: str = "ZAP_CONFIG"


@dataclass(frozen=True, slots=True)
class ZapConfig:
    """
    Where templates and template plugins live.

    Layout:
        <config_dir>/templates/<template_name>
        <config_dir>/plugins/*.py
    """

    config_dir: str

    @property
    def templates_dir(self) -> str:
        return os.path.join(self.config_dir, "templates")

    @property
    def plugins_dir(self) -> str:
        return os.path.join(self.config_dir, "plugins")

    def template_path(self, template_name: str) -> str:
        return os.path.join(self.templates_dir, template_name)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ZapConfig:
        """
        Resolve the config directory: $ZAP_CONFIG, else ~/.config/zap.

        Raises:
            ConfigDirNotFoundError: if neither is available.
        """
        env = os.environ if environ is None else environ
        override = env.get(CONFIG_ENV_VAR, "").strip()
        if override:
            return cls(config_dir=os.path.expanduser(override))

        home = os.path.expanduser("~")
        if not home or home == "~":
            raise ConfigDirNotFoundError(
                "could not find user config directory",
                details={"hint": f"set {CONFIG_ENV_VAR}"},
            )
        return cls(config_dir=os.path.join(home, ".config", "zap"))
