# --- maze_lib/config.py ---
import configparser
import logging
from dataclasses import dataclass
from typing import Tuple

log = logging.getLogger("mazewiz.config")

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class MazeColors:
    """The reserved colors of a maze image and the color used to paint solutions."""

    entrance: RGB = (255, 0, 0)
    exit: RGB = (0, 0, 255)
    wall: RGB = (0, 0, 0)
    highlight: RGB = (0, 128, 0)


DEFAULT_COLORS = MazeColors()


def parse_rgb(value: str, key: str) -> RGB:
    """Parses an 'r,g,b' string into a color tuple."""
    parts = [p.strip() for p in value.split(",")]
    try:
        channels = tuple(int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Color '{key}' must be three integers, got '{value}'") from None
    if len(channels) != 3 or any(c < 0 or c > 255 for c in channels):
        raise ValueError(f"Color '{key}' must be three values in 0-255, got '{value}'")
    return channels


class ConfigService:
    """Reads maze color settings from an INI file such as mazewiz.cfg."""

    SECTION = "Colors"

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.defaults = {
            self.SECTION: {
                "entrance": "255,0,0",
                "exit": "0,0,255",
                "wall": "0,0,0",
                "highlight": "0,128,0",
            }
        }

    def get_settings(self) -> dict:
        """Reads settings from the config file, applying defaults if missing."""
        config = configparser.ConfigParser()
        for section, values in self.defaults.items():
            config[section] = values

        if not config.read(self.config_path):
            log.info("Config file not found at %s. Using defaults.", self.config_path)

        return {s: dict(config.items(s)) for s in config.sections()}

    def get_colors(self) -> MazeColors:
        colors = self.get_settings()[self.SECTION]
        parsed = {
            key: parse_rgb(colors[key], key)
            for key in ("entrance", "exit", "wall", "highlight")
        }
        if len({parsed["entrance"], parsed["exit"], parsed["wall"]}) != 3:
            raise ValueError("Entrance, exit and wall colors must all be different.")
        log.debug("Loaded maze colors: %s", parsed)
        return MazeColors(**parsed)
