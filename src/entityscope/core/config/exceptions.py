"""Configuration exception module.

This module defines exception types specific to the configuration system.
"""

from entityscope.core.exceptions import EntityScopeError


class ConfigError(EntityScopeError):
    """Exception raised for configuration errors.

    This includes errors such as:
    - Invalid YAML in the configuration file
    - File access errors
    - Configuration validation failures
    """
    pass
