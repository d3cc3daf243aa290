"""Simulation settings - ngspice location, output directory and timeout, stored as JSON."""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".gridspice" / "settings.json"


@dataclass
class SimulationSettings:
    """User-adjustable options for handing netlists to ngspice."""

    output_dir: str = "simulation_output"
    timeout: float = 60.0
    title: str = "gridspice circuit"
    # Explicit ngspice executable; looked up on PATH when None
    ngspice_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationSettings":
        """Build settings from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)


def load_settings(path: Optional[Path] = None) -> SimulationSettings:
    """
    Load settings from a JSON file.

    Falls back to defaults when the file is missing or unreadable.
    """
    path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not path.exists():
        return SimulationSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return SimulationSettings()

    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return SimulationSettings()

    try:
        return SimulationSettings.from_dict(data)
    except TypeError as e:
        logger.warning("Invalid settings in %s: %s", path, e)
        return SimulationSettings()


def save_settings(settings: SimulationSettings, path: Optional[Path] = None) -> Path:
    """Write settings as JSON, creating the parent directory. Returns the path."""
    path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=2)
    return path
