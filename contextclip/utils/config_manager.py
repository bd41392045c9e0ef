"""Configuration management module"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from loguru import logger


def default_config_dir() -> Path:
    """Directory holding the user's settings.yaml"""
    home = os.environ.get('CONTEXTCLIP_HOME')
    if home:
        return Path(home)
    return Path.home() / '.config' / 'contextclip'


class ConfigManager:
    """Manages application configuration"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager

        Args:
            config_path: Path to configuration file
        """
        if config_path is None:
            config_path = str(default_config_dir() / 'settings.yaml')

        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_config()

    def _load_defaults(self):
        """Load default configuration"""
        default_path = Path(__file__).parent.parent / 'config' / 'default_settings.yaml'

        try:
            if default_path.exists():
                with open(default_path, 'r', encoding='utf-8') as f:
                    self.config = yaml.safe_load(f) or {}
                logger.debug("Loaded default configuration")
            else:
                logger.warning(f"Default config not found: {default_path}")
                self._create_default_config()

        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load defaults: {e}")
            self._create_default_config()

    def _create_default_config(self):
        """Create default configuration in memory"""
        self.config = {
            'clipboard': {
                'check_interval': 1000,
                'preview_length': 50
            },
            'context': {
                'enabled': True,
                'script_timeout': 2.0
            },
            'cli': {
                'default_list_count': 10,
                'content_preview_length': 100
            },
            'logging': {
                'level': 'INFO',
                'file_logging': False,
                'log_dir': None,
                'retention': '7 days'
            }
        }

    def _load_config(self):
        """Load user configuration"""
        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    user_config = yaml.safe_load(f) or {}

                # Merge with defaults
                self._merge_config(self.config, user_config)
                logger.info(f"Loaded user configuration from {self.config_path}")

        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load user config: {e}")

    def _merge_config(self, base: Dict, updates: Dict):
        """
        Recursively merge configuration dictionaries

        Args:
            base: Base configuration
            updates: Updates to apply
        """
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value

        Args:
            key: Configuration key (dot notation supported)
            default: Default value if not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value

        Args:
            key: Configuration key (dot notation supported)
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        # Navigate to the parent
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        logger.debug(f"Set config: {key} = {value}")

    def validate(self) -> bool:
        """
        Validate configuration

        Returns:
            True if valid
        """
        required = [
            'clipboard.check_interval',
            'context.script_timeout'
        ]

        for key in required:
            if self.get(key) is None:
                logger.error(f"Missing required config: {key}")
                return False

        try:
            if self.get('clipboard.check_interval') < 100:
                logger.error("Check interval too small (min 100ms)")
                return False

            if self.get('context.script_timeout') <= 0:
                logger.error("Script timeout must be positive")
                return False

        except TypeError as e:
            logger.error(f"Configuration validation failed: {e}")
            return False

        return True
