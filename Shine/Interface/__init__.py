# Shine/Interface/__init__.py
"""
Interface layer for hardware-agnostic abstractions.

This package defines the abstract torch driver contract used by higher layers
(Control, Service, App) and implemented by lower-level drivers (Drivers/).

Example:
    from Shine.Interface import TorchDriverInterface, TorchAccessError
"""

from .torch_interface import (
    ErrorPolicy,
    TorchAccessError,
    TorchDriverInterface,
    TorchState,
    TorchUnavailableError,
)

__all__ = [
    "ErrorPolicy",
    "TorchAccessError",
    "TorchDriverInterface",
    "TorchState",
    "TorchUnavailableError",
]
