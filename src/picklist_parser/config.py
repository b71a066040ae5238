import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "picklist_parser.yml"
CONFIG_ENV_VAR = "PICKLIST_PARSER_CONFIG"

DEFAULT_PARSER_SETTINGS = {
    "max_line_length": 1024,
    "encoding": "utf-8",
}


class PLConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.parser = {**DEFAULT_PARSER_SETTINGS, **(data.get("parser") or {})}
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)

    @property
    def max_line_length(self) -> int:
        return int(self.parser["max_line_length"])

    @property
    def encoding(self) -> str:
        return str(self.parser["encoding"])


def load_config(path=None) -> 'PLConfig':
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        # Installed without the project tree; run on built-in defaults.
        return PLConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return PLConfig(data)

_config_cache = None

def get_config() -> 'PLConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
