"""Configuration loader for drone-bazelisk-ecr."""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from bazeliskecr.constants import DEFAULT_COMMAND, ENV_PREFIX
from bazeliskecr.errors import ConfigInvalidValue, ConfigMissingRequired
from bazeliskecr.errors_catalog import actionable_error
from bazeliskecr.models import PluginConfig

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"", "0", "f", "F", "FALSE", "false", "False"}


class ConfigLoader:
    """Builds the plugin configuration from PLUGIN_* variables and optional YAML defaults."""

    SUPPORTED_KEYS = (
        "target",
        "registry",
        "create_repository",
        "repository",
        "tag",
        "access_key",
        "secret_key",
        "bazelrc",
        "command",
        "command_args",
        "engflow_bes_keywords",
        "target_args",
    )
    BOOL_KEYS = {"create_repository", "engflow_bes_keywords"}
    REQUIRED_KEYS = ("target", "registry")

    def env_key(self, key: str) -> str:
        return f"{ENV_PREFIX}{key.upper()}"

    def load(self, environ: Mapping[str, str], config_path: Optional[str] = None) -> PluginConfig:
        values = self.load_file(config_path)
        for key in self.SUPPORTED_KEYS:
            env_key = self.env_key(key)
            if env_key in environ:
                values[key] = environ[env_key]

        for key in self.REQUIRED_KEYS:
            if not values.get(key):
                raise ConfigMissingRequired(
                    actionable_error("missing_required", key=self.env_key(key), setting=key)
                )

        resolved: Dict[str, Any] = {}
        for key in self.SUPPORTED_KEYS:
            if key not in values:
                continue
            if key in self.BOOL_KEYS:
                resolved[key] = self.parse_bool(key, values[key])
            elif values[key] is None:
                resolved[key] = ""
            elif isinstance(values[key], str):
                resolved[key] = values[key]
            else:
                raise ConfigInvalidValue(
                    actionable_error("invalid_string", key=key, value=str(values[key]))
                )

        if not resolved.get("command"):
            resolved["command"] = DEFAULT_COMMAND

        return PluginConfig(**resolved)

    def load_file(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.exists():
            raise ConfigInvalidValue(f"Config file not found: {config_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise ConfigInvalidValue(f"Invalid config file '{config_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ConfigInvalidValue("Config file must contain a YAML mapping at the root.")

        unknown = sorted(set(parsed.keys()) - set(self.SUPPORTED_KEYS))
        if unknown:
            unknown_list = ", ".join(str(key) for key in unknown)
            raise ConfigInvalidValue(f"Unknown configuration keys: {unknown_list}")

        return dict(parsed)

    def parse_bool(self, key: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return False

        text = str(value)
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ConfigInvalidValue(actionable_error("invalid_bool", key=self.env_key(key), value=text))
