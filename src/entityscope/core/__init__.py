"""Core infrastructure for entityscope: exceptions, configuration and logging."""

from entityscope.core.exceptions import (
    EmptySelectionError,
    EntityDataError,
    EntityScopeError,
)

__all__ = [
    "EntityScopeError",
    "EmptySelectionError",
    "EntityDataError",
]
