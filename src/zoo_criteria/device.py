"""Compute device descriptors."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_NAME_PATTERN = re.compile(r"^(?P<type>[a-z]+)(?:\((?P<paren>\d*)\)|(?P<bare>\d+))?$")


@dataclass(frozen=True)
class Device:
    """A target compute device, e.g. ``cpu()`` or ``gpu(1)``."""

    CPU = "cpu"
    GPU = "gpu"

    device_type: str
    device_id: int = -1

    @classmethod
    def cpu(cls) -> "Device":
        return cls(cls.CPU)

    @classmethod
    def gpu(cls, device_id: int = 0) -> "Device":
        return cls(cls.GPU, device_id)

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Device":
        """Parse a CPU or GPU device name.

        Accepts ``cpu``, ``gpu``, ``gpu1`` and ``gpu(1)``. An empty name
        selects the CPU.

        Raises:
            ValueError: If the name cannot be parsed
        """
        if name is None or not name.strip():
            return cls.cpu()

        match = _NAME_PATTERN.match(name.strip().lower())
        if match is None:
            raise ValueError(f"Invalid device name: {name!r}")

        device_type = match.group("type")
        if device_type == cls.CPU:
            if match.group("bare") or match.group("paren"):
                raise ValueError(f"Invalid device name: {name!r}")
            return cls.cpu()
        if device_type != cls.GPU:
            raise ValueError(f"Invalid device name: {name!r}")

        index = match.group("paren") or match.group("bare")
        return cls(device_type, int(index) if index else 0)

    def is_gpu(self) -> bool:
        return self.device_type == self.GPU

    def __str__(self) -> str:
        if self.device_id < 0:
            return f"{self.device_type}()"
        return f"{self.device_type}({self.device_id})"
