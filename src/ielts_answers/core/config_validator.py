"""
Configuration Validator

Validates configuration files against schema requirements and
provides helpful error messages.
"""

from pathlib import Path
from typing import Dict, Any, List, Optional
import yaml

from .exceptions import ConfigurationError

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
DATE_ORDERS = ('day_first', 'month_first')
MODULES = ('listening', 'academic_reading', 'general_reading')


class ConfigValidator:
    """Configuration validator with schema validation."""

    def __init__(self):
        self.required_fields = {
            'logging': ['level', 'file'],
        }

        self.field_validators = {
            'logging.level': self._validate_log_level,
            'logging.console_level': self._validate_log_level,
            'logging.backup_count': self._validate_non_negative_int,
            'grading.date_order': self._validate_date_order,
            'scoring.default_module': self._validate_module,
            'scoring.questions_per_section': self._validate_positive_int,
        }

    def validate_config(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate configuration data against schema.

        Args:
            config_data: Configuration dictionary to validate

        Returns:
            Validated configuration data

        Raises:
            ConfigurationError: If validation fails
        """
        if not isinstance(config_data, dict):
            raise ConfigurationError("Configuration must be a mapping")

        errors = []

        # Check required fields
        errors.extend(self._check_required_fields(config_data))

        # Validate specific field values
        errors.extend(self._validate_field_values(config_data))

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in errors)
            raise ConfigurationError(error_msg)

        return config_data

    def validate_file(self, config_path: Path) -> Dict[str, Any]:
        """Load and validate a YAML configuration file."""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}")

        return self.validate_config(config_data)

    def _check_required_fields(self, config_data: Dict[str, Any]) -> List[str]:
        errors = []
        for section, fields in self.required_fields.items():
            if section not in config_data:
                continue
            section_data = config_data[section]
            if not isinstance(section_data, dict):
                errors.append(f"Section '{section}' must be a mapping")
                continue
            for field_name in fields:
                if field_name not in section_data:
                    errors.append(f"Missing required field: {section}.{field_name}")
        return errors

    def _validate_field_values(self, config_data: Dict[str, Any]) -> List[str]:
        errors = []
        for field_path, validator in self.field_validators.items():
            value = self._get_nested_value(config_data, field_path)
            if value is None:
                continue
            error = validator(value)
            if error:
                errors.append(f"{field_path}: {error}")
        return errors

    @staticmethod
    def _get_nested_value(data: Dict[str, Any], field_path: str) -> Optional[Any]:
        current = data
        for key in field_path.split('.'):
            if not isinstance(current, dict) or key not in current:
                return None
            current = current[key]
        return current

    @staticmethod
    def _validate_log_level(value: Any) -> Optional[str]:
        if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
            return f"must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
        return None

    @staticmethod
    def _validate_date_order(value: Any) -> Optional[str]:
        if value not in DATE_ORDERS:
            return f"must be one of {', '.join(DATE_ORDERS)}, got {value!r}"
        return None

    @staticmethod
    def _validate_module(value: Any) -> Optional[str]:
        if value not in MODULES:
            return f"must be one of {', '.join(MODULES)}, got {value!r}"
        return None

    @staticmethod
    def _validate_positive_int(value: Any) -> Optional[str]:
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            return f"must be a positive integer, got {value!r}"
        return None

    @staticmethod
    def _validate_non_negative_int(value: Any) -> Optional[str]:
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            return f"must be a non-negative integer, got {value!r}"
        return None
