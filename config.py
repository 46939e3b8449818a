"""Load/save simulation, window and hub parameters. Configs live in configs/ as {name}.json."""

import json
import os
import re
from pathlib import Path

from world.session import default_params

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
LAST_FILE = CONFIG_DIR / "last.txt"
DEFAULT_TOOLS_DIR = Path(__file__).resolve().parent / "public" / "tools"

# Environment overrides for the hub section.
_ENV_HUB_KEYS = {"HUB_TOOLS_DIR": "tools_dir", "HUB_BASE_URL": "base_url", "HUB_BRAND": "brand"}


def _sanitize_name(name: str) -> str:
    s = (name or "").strip()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"[\s-]+", "_", s).strip("_")
    return s[:64] or "unnamed"


def get_config_path(name: str) -> Path:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return CONFIG_DIR / f"{_sanitize_name(name)}.json"


def list_configs() -> list[str]:
    if not CONFIG_DIR.exists():
        return []
    return sorted(f.stem for f in CONFIG_DIR.glob("*.json"))


def get_last_config() -> str | None:
    if not LAST_FILE.exists():
        return None
    try:
        return LAST_FILE.read_text().strip() or None
    except OSError:
        return None


def set_last_config(name: str) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    LAST_FILE.write_text(_sanitize_name(name))


def load_config(path: Path | str | None = None, env: dict | None = None) -> dict:
    """Config from path, else from the last saved config, else defaults. Env overrides applied last."""
    env = os.environ if env is None else env
    if path is None:
        last = get_last_config()
        path = get_config_path(last) if last else None
    if path is None or not Path(path).exists():
        return _apply_env(_default_config(), env)
    with open(path, "r") as f:
        return _apply_env(_merge_defaults(json.load(f)), env)


def save_config(cfg: dict, name: str) -> Path:
    path = get_config_path(name)
    with open(path, "w") as f:
        json.dump(cfg, f, indent=2)
    set_last_config(name)
    return path


def _default_config() -> dict:
    return {
        "sim": {**default_params(), "seed": -1},
        "window": {"width": 960, "height": 640, "fps": 60, "title": "Tool Hub"},
        "hub": {
            "tools_dir": str(DEFAULT_TOOLS_DIR),
            "base_url": "",
            "brand": "Chatooly",
        },
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    for section in ("sim", "window", "hub"):
        if isinstance(data.get(section), dict):
            d[section] = {**d[section], **{k: v for k, v in data[section].items() if k in d[section]}}
    return d


def _apply_env(cfg: dict, env) -> dict:
    for var, key in _ENV_HUB_KEYS.items():
        if env.get(var):
            cfg["hub"][key] = env[var]
    return cfg


def delete_config(name: str) -> None:
    """Remove config from disk. Clear last if this was last."""
    p = get_config_path(name)
    p.unlink(missing_ok=True)
    if get_last_config() == _sanitize_name(name) and LAST_FILE.exists():
        LAST_FILE.unlink(missing_ok=True)
