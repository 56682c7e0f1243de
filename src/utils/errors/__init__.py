"""Exceções compartilhadas."""

from .exceptions import (
    BackendQueryError,
    FormValidationError,
    InfrastructureError,
    PanelError,
    PendingDeleteError,
    ReadOnlyPanelError,
)

__all__ = [
    "BackendQueryError",
    "FormValidationError",
    "InfrastructureError",
    "PanelError",
    "PendingDeleteError",
    "ReadOnlyPanelError",
]
