# Shine/Drivers/mock_torch.py
"""
In-memory torch driver implementing the TorchDriverInterface.

Used on desktops without camera hardware and by the test-suite.
Every torch request is recorded in `calls`, failures can be injected.
"""

from __future__ import annotations

from Shine.Interface.torch_interface import TorchAccessError, TorchDriverInterface


class MockTorch(TorchDriverInterface):
    """
    Fake camera subsystem.

    Typical usage:
        torch = MockTorch(camera_ids=["0", "1"])
        torch.set_torch_mode("0", True)
        torch.calls     # [("0", True)]
        torch.lit       # {"0"}
    """

    def __init__(
        self,
        camera_ids: list[str] | None = None,
        supported: bool = True,
        fail_enumeration: bool = False,
        fail_torch: bool = False,
        **kwargs,
    ) -> None:
        """
        Args:
            camera_ids: identifiers reported by `camera_ids()` (default: ["0"])
            supported: value returned by `supports_torch()`
            fail_enumeration: make `camera_ids()` raise TorchAccessError
            fail_torch: make `set_torch_mode()` raise TorchAccessError
            **kwargs: ignored additional hardware configuration fields
                      (for compatibility with factory)
        """
        super().__init__()
        self._camera_ids = list(camera_ids) if camera_ids is not None else ["0"]
        self.supported = supported
        self.fail_enumeration = fail_enumeration
        self.fail_torch = fail_torch
        self.calls: list[tuple[str, bool]] = []
        self.lit: set[str] = set()
        self.closed = False
        self._name = "MockTorch"

    def supports_torch(self) -> bool:
        return self.supported

    def camera_ids(self) -> list[str]:
        if self.fail_enumeration:
            raise TorchAccessError("Camera list unavailable")
        return list(self._camera_ids)

    def set_torch_mode(self, camera_id: str, enabled: bool) -> None:
        self.calls.append((camera_id, enabled))
        if self.fail_torch:
            raise TorchAccessError(f"Camera {camera_id} is in use")
        if camera_id not in self._camera_ids:
            raise TorchAccessError(f"Unknown camera {camera_id!r}")

        if enabled:
            self.lit.add(camera_id)
        else:
            self.lit.discard(camera_id)

    def close(self) -> None:
        self.closed = True
