"""
Configuration Management

Centralized configuration management with YAML file support
and environment variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field
import yaml
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/ielts_answers.log"
    max_size: str = "10MB"
    backup_count: int = 5
    json_format: bool = False


@dataclass
class GradingConfig:
    """Answer matching configuration."""
    date_order: str = "day_first"  # Options: day_first, month_first


@dataclass
class ScoringConfig:
    """Band score configuration."""
    default_module: str = "listening"  # Options: listening, academic_reading, general_reading
    questions_per_section: int = 40


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "IELTS Answer Checker"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    grading: GradingConfig = field(default_factory=GradingConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a nested dictionary."""
        config_data = {
            key: dict(value) if isinstance(value, dict) else value
            for key, value in config_data.items()
        }

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            # Merge app-level config into the main config
            config_data.update(app_config)

        # Apply environment variable overrides
        config_data = cls._apply_env_overrides(config_data)

        # Convert nested dictionaries to their corresponding dataclass objects
        if 'logging' in config_data and isinstance(config_data['logging'], dict):
            config_data['logging'] = LoggingConfig(**config_data['logging'])

        if 'grading' in config_data and isinstance(config_data['grading'], dict):
            config_data['grading'] = GradingConfig(**config_data['grading'])

        if 'scoring' in config_data and isinstance(config_data['scoring'], dict):
            config_data['scoring'] = ScoringConfig(**config_data['scoring'])

        return cls(**config_data)

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'LOG_LEVEL': ['logging', 'level'],
            'DATE_ORDER': ['grading', 'date_order'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                if env_var == 'DEBUG':
                    env_value = env_value.lower() in ('1', 'true', 'yes', 'on')
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        return config_data


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            # Default configuration path
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration if file doesn't exist
            _config = AppConfig.from_dict({})

    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
