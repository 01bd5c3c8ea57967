# Shine/Control/__init__.py
"""Control layer: the torch controller driving a TorchDriverInterface."""

from .torch_controller import TorchController

__all__ = ["TorchController"]
