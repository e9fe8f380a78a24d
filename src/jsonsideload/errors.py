"""Exceptions raised while resolving a sideloaded JSON document."""

from __future__ import annotations


class SideloadError(Exception):
    """Base class for every error raised by jsonsideload."""


class MalformedJSONError(SideloadError, ValueError):
    """Raised when the payload does not decode into a JSON object."""


class BadDirectiveError(SideloadError, ValueError):
    """Raised when a ``Sideload`` directive string does not follow the grammar."""

    def __init__(self, message: str, model: type | None = None, field: str | None = None) -> None:
        if model is not None and field is not None:
            message = f"{model.__name__}.{field}: {message}"
        super().__init__(message)
        self.model = model
        self.field = field


class TypeMismatchError(SideloadError, TypeError):
    """Raised when a tagged field's annotation does not fit its directive mode."""

    def __init__(self, message: str, model: type | None = None, field: str | None = None) -> None:
        if model is not None and field is not None:
            message = f"{model.__name__}.{field}: {message}"
        super().__init__(message)
        self.model = model
        self.field = field


class StructuralMismatchError(SideloadError, ValueError):
    """Raised when a node cannot be bound onto the target model."""

    def __init__(self, model: type, detail: str | None = None) -> None:
        message = f"Data is not a jsonsideload representation of '{model.__name__}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.model = model
