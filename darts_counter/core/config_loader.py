"""
Configuration loader with validation and defaults.
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from .io_utils import atomic_write_yaml, load_yaml

logger = logging.getLogger(__name__)

# Default location for the application-wide settings
DEFAULT_CONFIG_PATH = Path("config/default_config.yaml")


class Config:
    """
    Configuration container for match setup and computer-turn pacing.
    """

    DEFAULTS = {
        # Initial match parameters
        "match": {
            "mode": "501",  # "301" or "501"
            "player1_name": "Player 1",
            "player2_name": "Player 2",
            "computer_level": 6,  # 1-12
        },

        # Presentation pacing (seconds)
        "timing": {
            "computer_dart_interval_sec": 1.0,  # Between computer darts
            "computer_turn_hold_sec": 1.0,  # Board stays visible after last dart
            "bust_display_sec": 1.5,  # Caller clears the bust indicator after this
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                user_config = load_yaml(Path(config_path))
                self._merge_config(user_config)
                logger.info(f"Configuration loaded from {config_path}")
            except Exception as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
                self.data = copy.deepcopy(self.DEFAULTS)
        else:
            logger.info("Using default configuration")

        self._validate()

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Merge user config with defaults."""
        for section, values in user_config.items():
            if section in self.data and isinstance(values, dict):
                self.data[section].update(values)
            else:
                self.data[section] = values

    def _validate(self) -> None:
        """Reject values the engine cannot work with."""
        for section in self.DEFAULTS:
            if not isinstance(self.data.get(section), dict):
                raise ValueError(f"{section} must be a mapping, got {self.data.get(section)!r}")

        level = self.get("match", "computer_level")
        if not isinstance(level, int) or not 1 <= level <= 12:
            raise ValueError(f"computer_level must be 1-12, got {level!r}")

        if str(self.get("match", "mode")) not in ("301", "501"):
            raise ValueError(f"Unsupported game mode: {self.get('match', 'mode')!r}")

        for key, value in self.get_section("timing").items():
            if not isinstance(value, (int, float)) or value < 0:
                raise ValueError(f"timing.{key} must be a non-negative number")

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return self.data.get(section, {}).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section."""
        return self.data.get(section, {})

    def save(self, config_path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Write the current configuration to YAML."""
        atomic_write_yaml(Path(config_path), self.data)
        logger.info(f"Configuration saved to {config_path}")
