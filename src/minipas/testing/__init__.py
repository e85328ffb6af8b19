from __future__ import annotations

from .corpus import generate_pascal_sources

__all__ = ["generate_pascal_sources"]
