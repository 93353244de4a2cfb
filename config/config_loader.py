import yaml
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"

_CONFIG_CACHE = {}


def load_config(path: str | Path | None = None) -> dict:
    """
    Load YAML config with per-file cache.
    Falls back to the bundled settings.yaml.
    """

    if path is None:
        path = DEFAULT_CONFIG_PATH

    key = str(path)
    if key in _CONFIG_CACHE:
        return _CONFIG_CACHE[key]

    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    _CONFIG_CACHE[key] = data
    return data
