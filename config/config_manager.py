"""
Configuration management for the team roster system.
"""

import os
import logging
import yaml
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = os.path.join("~", ".team_roster", "roster_data.json")


class ConfigManager:
    """Manages configuration loading and provides default values."""
    
    @staticmethod
    def load_config(config_file: Optional[str]) -> Dict[str, Any]:
        """Load configuration from YAML file, merged over the defaults."""
        config = ConfigManager.get_default_config()
        if not config_file:
            return config
        
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            logger.info(f"Configuration file '{config_file}' not found. Using default configuration.")
            return config
        except OSError as e:
            logger.error(f"Error reading configuration file '{config_file}': {e}. Using default configuration.")
            return config
        except yaml.YAMLError as e:
            logger.error(f"Error parsing configuration file: {e}. Using default configuration.")
            return config
        
        if isinstance(loaded, dict):
            config.update({key: value for key, value in loaded.items() if value is not None})
        elif loaded is not None:
            logger.warning(f"Configuration file '{config_file}' does not contain a mapping. Using default configuration.")
        return config
    
    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return {
            'data_file': DEFAULT_DATA_FILE,
            'log_level': 'INFO',
            'report_dir': 'reports',
            'leaderboard_size': 10
        }
    
    @staticmethod
    def resolve_data_file(config: Dict[str, Any]) -> str:
        """Return the absolute path of the roster data file."""
        data_file = config.get('data_file') or DEFAULT_DATA_FILE
        return os.path.abspath(os.path.expanduser(str(data_file)))
