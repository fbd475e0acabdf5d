class EntityScopeError(Exception):
    """Base class for all custom exceptions in the entityscope library."""

    pass


class EmptySelectionError(EntityScopeError):
    """Raised when an export is requested for an empty selection."""

    pass


class EntityDataError(EntityScopeError):
    """Raised when an entity collection document is structurally malformed."""

    pass


__all__ = [
    "EntityScopeError",
    "EmptySelectionError",
    "EntityDataError",
]
