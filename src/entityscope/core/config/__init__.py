"""entityscope configuration system.

Configuration is loaded from a YAML file and ``ENTITYSCOPE_*`` environment
variables, with ``${VAR}`` substitution and Pydantic validation.

Example usage:
```python
from entityscope.core.config import load_config

config = load_config()
indent = config.export.indent
level = config.logging.level
```
"""

from .exceptions import ConfigError
from .loader import load_config
from .schema import EntityScopeConfig, ExportSettings, FilterDefaults, LoggingSettings

__all__ = [
    "ConfigError",
    "EntityScopeConfig",
    "ExportSettings",
    "FilterDefaults",
    "LoggingSettings",
    "load_config",
]
