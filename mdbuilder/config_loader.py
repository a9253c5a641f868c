# mdbuilder/config_loader.py

"""
Configuration loader for the Markdown builder CLI.
Loads settings from config.yaml and environment variables.
"""

import copy
import os
import yaml
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_TRUTHY = {'1', 'true', 'yes', 'on'}


class ConfigLoader:
    """Loads and manages configuration settings."""

    DEFAULT_CONFIG = {
        'output': {
            'directory': 'build',
            'html': False,
            'css': None
        },
        'logging': {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'file': None
        }
    }

    def __init__(self, config_path: str = 'config.yaml'):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to the configuration YAML file
        """
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from file or use defaults.

        Returns:
            Configuration dictionary
        """
        config = copy.deepcopy(self.DEFAULT_CONFIG)

        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    user_config = yaml.safe_load(f)
                if isinstance(user_config, dict):
                    config = self._merge_configs(config, user_config)
                    logger.info(f"Loaded configuration from {self.config_path}")
                elif user_config is not None:
                    logger.warning(f"Ignoring {self.config_path}: top level must be a mapping")
            except (OSError, yaml.YAMLError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to load config from {self.config_path}: {e}")
                logger.info("Using default configuration")
        else:
            logger.info(f"Config file not found at {self.config_path}, using defaults")

        return config

    def _merge_configs(self, default: Dict, user: Dict) -> Dict:
        """
        Recursively merge user config into default config.

        Args:
            default: Default configuration
            user: User configuration

        Returns:
            Merged configuration
        """
        merged = default.copy()

        for key, value in user.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_configs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'output.directory')
            default: Default value if key not found

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

    def get_output_dir(self) -> str:
        """Get output directory path."""
        return os.getenv('MDBUILDER_OUTPUT_DIR') or self.get('output.directory', 'build')

    def is_html_enabled(self) -> bool:
        """Check if HTML previews should be written next to the Markdown."""
        env = os.getenv('MDBUILDER_HTML')
        if env is not None:
            return env.strip().lower() in _TRUTHY
        return bool(self.get('output.html', False))

    def get_css_path(self) -> Optional[str]:
        """Get stylesheet path for HTML previews."""
        return self.get('output.css')

    def get_log_level(self) -> str:
        """Get logging level."""
        return os.getenv('MDBUILDER_LOG_LEVEL') or self.get('logging.level', 'INFO')

    def get_log_format(self) -> str:
        """Get logging format string."""
        return self.get('logging.format', '%(levelname)s - %(message)s')

    def get_log_file(self) -> Optional[str]:
        """Get log file path, None to log to stdout only."""
        return self.get('logging.file')
