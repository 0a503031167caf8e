"""
Configuration validation utilities for passgen.
"""

from typing import Optional

from ..config import GenerationConfig, Mode
from ..exceptions import ConfigurationError


def get_validation_error_message(config: GenerationConfig) -> Optional[str]:
    """
    Get a descriptive error message for an invalid configuration.

    Args:
        config: The configuration to check

    Returns:
        Error message describing why the configuration is invalid, or None
    """
    if config.length < 1:
        return "Length must be a positive integer"

    if config.count < 1:
        return "Count must be a positive integer"

    if config.mode is Mode.RANDOM and not config.enabled_classes():
        return "At least one character type must be enabled"

    if config.mode is Mode.MEMORABLE and not (config.use_lowercase or config.use_uppercase):
        return "Memorable mode needs lowercase or uppercase letters enabled"

    if config.mode is Mode.PASSPHRASE:
        if config.word_count < 1:
            return "Word count must be a positive integer"
        if not config.separator:
            return "Separator cannot be empty"
        if any(c.isalpha() for c in config.separator):
            return "Separator cannot contain letters"

    if config.clipboard and config.count > 1:
        return "Cannot use --clipboard with --count greater than 1"

    if not config.display and not (config.output_path or config.clipboard):
        return "--no-display requires --output or --clipboard"

    return None


def validate_config(config: GenerationConfig) -> bool:
    """
    Validate a configuration before any generation work begins.

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    message = get_validation_error_message(config)
    if message:
        raise ConfigurationError(message)
    return True
