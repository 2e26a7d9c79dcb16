import os
from typing import Any, Dict, List, Optional

import yaml

from hostprobe.exceptions import ConfigurationError

CONFIG_SEARCH_PATHS = [
    "hostprobe.yaml",
    os.path.expanduser("~/.config/hostprobe/config.yaml"),
    "/etc/hostprobe/config.yaml",
]


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_timeout(value: Any, source: str) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        timeout = None
    if timeout is None or not timeout > 0 or timeout == float("inf"):
        raise ConfigurationError(f"{source} must be a positive number of seconds, got {value!r}")
    return timeout


class Config:
    command_timeout = _parse_timeout(os.getenv("HOSTPROBE_COMMAND_TIMEOUT", "30"), "HOSTPROBE_COMMAND_TIMEOUT")
    powershell = os.getenv("HOSTPROBE_POWERSHELL", "powershell")
    log_level = os.getenv("HOSTPROBE_LOG_LEVEL", "INFO").upper()

    # Pseudo-file roots read by the Linux adapter
    os_release_path = os.getenv("HOSTPROBE_OS_RELEASE_PATH", "/etc/os-release")
    proc_root = os.getenv("HOSTPROBE_PROC_ROOT", "/proc")
    sys_root = os.getenv("HOSTPROBE_SYS_ROOT", "/sys")

    # API
    cors_origins = _split_csv(os.getenv("HOSTPROBE_CORS_ORIGINS", "http://localhost:3000"))

    def update(self, values: Dict[str, Any]):
        """Override settings from a mapping, e.g. a parsed YAML file."""
        for key, value in values.items():
            if key.startswith("_") or not hasattr(Config, key) or callable(getattr(Config, key)):
                raise ValueError(f"Unknown configuration key: {key}")
            if key == "command_timeout":
                value = _parse_timeout(value, "command_timeout")
            elif key == "cors_origins" and isinstance(value, str):
                value = _split_csv(value)
            elif key == "log_level":
                value = str(value).upper()
            setattr(self, key, value)

    def load_file(self, path: Optional[str] = None) -> Optional[str]:
        """
        Load overrides from a YAML file.
        Uses the explicit path when given, otherwise the first existing
        file of CONFIG_SEARCH_PATHS. Returns the path that was loaded.
        """
        if path is None:
            path = next((p for p in CONFIG_SEARCH_PATHS if os.path.exists(p)), None)
            if path is None:
                return None

        with open(path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must be a YAML mapping")

        self.update(data)
        return path


config = Config()
