import copy
import os
import logging
from pathlib import Path

import yaml
from dotenv import load_dotenv

log = logging.getLogger("colorz.config")

# Project root is one level up from src/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

DEFAULTS = {
    "window": {"title": "colorz", "width": 400, "height": 480},
    "app_bar": {"height": 56},
    "swatch": {"size": 200},
    "button": {"width": 50, "height": 30},
    "spacing": {"row": 20, "buttons": 20},
    "colors": {
        "blue": [33, 150, 243],
        "red": [244, 67, 54],
        "background": [255, 255, 255],
        "primary": [33, 150, 243],
        "title": [255, 255, 255],
        "label": [0, 0, 0],
    },
    "keys": {"blue": "b", "red": "r"},
}


def _merge(base: dict, override: dict, prefix: str = "") -> dict:
    for key, value in override.items():
        if value is None:
            # Empty YAML section or key: keep the default
            continue
        if isinstance(base.get(key), dict):
            if not isinstance(value, dict):
                raise ValueError(f"{prefix}{key} must be a mapping, got {value!r}")
            _merge(base[key], value, f"{prefix}{key}.")
        else:
            base[key] = value
    return base


def _channel(v) -> bool:
    # bool is an int subclass; YAML turns yes/no into True/False
    return isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255


def _rgb(name: str, value) -> tuple:
    if (not isinstance(value, (list, tuple)) or len(value) != 3
            or not all(_channel(v) for v in value)):
        raise ValueError(f"colors.{name} must be an RGB triple, got {value!r}")
    return tuple(value)


def _check_layout(config: dict) -> None:
    """Raise ValueError if the swatch or the button row does not fit the window."""
    window = config["window"]
    width, height = window["width"], window["height"]
    if width <= 0 or height <= 0:
        raise ValueError(f"window size must be positive, got {width}x{height}")

    size = config["swatch"]["size"]
    button = config["button"]
    spacing = config["spacing"]
    row_w = 2 * button["width"] + spacing["buttons"]
    column_h = (config["app_bar"]["height"] + size + spacing["row"]
                + button["height"])

    if size > width:
        raise ValueError(f"swatch.size {size} is wider than the window ({width})")
    if row_w > width:
        raise ValueError(f"button row ({row_w}px) is wider than the window ({width})")
    if column_h > height:
        raise ValueError(
            f"app bar, swatch and buttons ({column_h}px) are taller than the window ({height})"
        )


def load_config(config_path: str = None) -> dict:
    """Load configuration from YAML file with .env overrides."""
    load_dotenv(PROJECT_ROOT / ".env")

    config = copy.deepcopy(DEFAULTS)

    yaml_path = Path(config_path) if config_path else CONFIG_DIR / "default.yaml"
    if not yaml_path.exists():
        log.warning("Config file not found: %s, using defaults", yaml_path)
    else:
        with open(yaml_path) as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{yaml_path} must contain a mapping, got {type(loaded).__name__}")
        _merge(config, loaded)

    # Environment variable overrides
    window = config["window"]
    window["title"] = os.environ.get("COLORZ_TITLE", window["title"])
    window["width"] = int(os.environ.get("COLORZ_WIDTH", window["width"]))
    window["height"] = int(os.environ.get("COLORZ_HEIGHT", window["height"]))

    config["colors"] = {
        name: _rgb(name, value) for name, value in config["colors"].items()
    }
    _check_layout(config)

    log.info(
        "Config loaded: '%s' %dx%d, swatch %dpx",
        window["title"],
        window["width"],
        window["height"],
        config["swatch"]["size"],
    )
    return config
