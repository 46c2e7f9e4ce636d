import json
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# --- Constants ---
SETTINGS_FILE = "settings.json"
SETTINGS_ENV = "PALETTE_WHEEL_SETTINGS"
LOG_LEVEL_ENV = "PALETTE_WHEEL_LOG_LEVEL"

DEFAULT_SETTINGS = {
    "wheel_size": 200,
    "ring_margin": 10,
    "inner_ratio": 0.6,
    "slider_width": 200,
    "slider_height": 20,
    "indicator_radius": 6,
    "base_color": "#0B5BFF",
    "palette_type": "triadic",
    "swatch_export_size": 120,
    "contrast_threshold": 128,
    "log_level": "INFO",
}


@dataclass(frozen=True)
class WheelGeometry:
    """Fixed layout of the wheel and lightness slider, in pixels."""
    size: int = 200
    ring_margin: int = 10
    inner_ratio: float = 0.6
    slider_width: int = 200
    slider_height: int = 20
    indicator_radius: int = 6

    @property
    def center(self) -> float:
        return self.size / 2

    @property
    def outer_radius(self) -> float:
        return self.size / 2 - self.ring_margin

    @property
    def inner_radius(self) -> float:
        return self.outer_radius * self.inner_ratio

    @property
    def ring_mid_radius(self) -> float:
        return (self.outer_radius + self.inner_radius) / 2


def _settings_path(path=None):
    if path:
        return path
    return os.environ.get(SETTINGS_ENV) or os.path.join(
        os.path.dirname(os.path.abspath(__file__)), SETTINGS_FILE)


def load_settings(path=None):
    """
    Returns DEFAULT_SETTINGS overlaid with the JSON settings file, if any.

    The file is only read; an unreadable or malformed file is logged and the
    defaults are used.
    """
    settings = dict(DEFAULT_SETTINGS)
    path = _settings_path(path)
    if os.path.exists(path):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read settings from %s: %s; using defaults", path, e)
        else:
            if isinstance(data, dict):
                settings.update(data)
            else:
                logger.warning("Settings file %s is not a JSON object; using defaults", path)

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        settings["log_level"] = env_level
    return settings


def geometry_from_settings(settings):
    """Builds the wheel layout from settings; bad values fall back to the default layout."""
    try:
        return WheelGeometry(
            size=int(settings["wheel_size"]),
            ring_margin=int(settings["ring_margin"]),
            inner_ratio=float(settings["inner_ratio"]),
            slider_width=int(settings["slider_width"]),
            slider_height=int(settings["slider_height"]),
            indicator_radius=int(settings["indicator_radius"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Bad wheel geometry in settings (%s); using defaults", e)
        return WheelGeometry()


def contrast_threshold_from_settings(settings):
    try:
        return float(settings["contrast_threshold"])
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Bad contrast_threshold in settings (%s); using %s",
                       e, DEFAULT_SETTINGS["contrast_threshold"])
        return float(DEFAULT_SETTINGS["contrast_threshold"])


def configure_logging(settings):
    level = str(settings.get("log_level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
