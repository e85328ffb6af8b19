from __future__ import annotations

import os
from dataclasses import dataclass


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class Options:
    # Render `integer` and string tokens with the reference tool's shared codes.
    wire_compatible: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls, *, wire_compatible: bool = False, debug: bool = False) -> "Options":
        """Explicit flags win; MINIPAS_WIRE_COMPATIBLE / MINIPAS_DEBUG can only switch on."""
        return cls(
            wire_compatible=wire_compatible or _env_flag("MINIPAS_WIRE_COMPATIBLE"),
            debug=debug or _env_flag("MINIPAS_DEBUG"),
        )
