"""Configuration schema module.

This module defines the data structures used for configuring entityscope.
The schemas are minimal and validated through Pydantic.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

_OBJECT_KINDS = ("everything", "mesh", "point")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ExportSettings(BaseModel):
    """Settings for writing export documents.

    Attributes:
        indent: Number of spaces used to indent the JSON document
        default_filename: File name suggested when no output path is given
        ensure_ascii: Escape non-ASCII characters in the written JSON
    """

    indent: int = Field(default=2, ge=0)
    default_filename: str = "entities_export.json"
    ensure_ascii: bool = False


class FilterDefaults(BaseModel):
    """Initial filter criteria applied by hosts before user input.

    Attributes:
        object_kind: One of "everything", "mesh" or "point"
        match_whole_value: Compare values by exact equality instead of substring
    """

    object_kind: str = "everything"
    match_whole_value: bool = False

    @field_validator("object_kind")
    @classmethod
    def _check_object_kind(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _OBJECT_KINDS:
            raise ValueError(
                f"object_kind must be one of {', '.join(_OBJECT_KINDS)}; got {value!r}"
            )
        return normalized


class LoggingSettings(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Format string handed to ``logging.Formatter``
    """

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown logging level {value!r}")
        return normalized


class EntityScopeConfig(BaseModel):
    """Root configuration.

    Attributes:
        export: Export document settings
        filters: Default filter criteria
        logging: Logging configuration
    """

    export: ExportSettings = Field(default_factory=ExportSettings)
    filters: FilterDefaults = Field(default_factory=FilterDefaults)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {"extra": "forbid"}
