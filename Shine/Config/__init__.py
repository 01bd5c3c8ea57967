# Shine/Config/__init__.py
"""
Configuration package for the torch bridge.

This package centralizes the factory and configuration logic.
It acts as a high-level access point for hardware and driver selection.

Upper layers (Service, App) import only from this package
to obtain preconfigured drivers and controllers.

Example:
    from Shine.Config import TorchFactory

    controller = TorchFactory.create_controller()
    controller.set_torch(True)
"""

from .torch_factory import TorchFactory

__all__ = ["TorchFactory"]
