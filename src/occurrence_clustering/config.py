import os
from pathlib import Path

import yaml

from occurrence_clustering.core.exceptions import ConfigError

CONFIG_ENV_VAR = "OCCURRENCE_CLUSTERING_CONFIG"
PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "occurrence_clustering.yml"

class ClusteringConfig:
    def __init__(self, data):
        self.logging = data.get("logging") or {}
        self.policy = data.get("policy") or {}
        self.debug = bool(data.get("debug", False))

def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return CONFIG_PATH

def load_config(path: Path | None = None) -> 'ClusteringConfig':
    path = path or config_path()
    if not path.exists():
        # installed without a config dir: run on defaults
        return ClusteringConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    return ClusteringConfig(data)

_config_cache = None

def get_config() -> 'ClusteringConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def reset_config() -> None:
    global _config_cache
    _config_cache = None
