"""
Module: fonts

Purpose:
    FontDescriptor - the opaque font handle passed to the measurement
    provider and layout engine.

Dependencies:
    - dataclasses (std)

Used By:
    - measurement.provider: Cache keys and backend font resolution
    - layout.engine: Line and layout cache keys
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


DEFAULT_FONT_SIZE_PX = 18.0


@dataclass(frozen=True, slots=True)
class FontDescriptor:
    """
    Font identity used for measurement (immutable).

    Attributes:
        id: Stable cache-key component for one visual font
        family: Family name used by measurement backends
        size: Nominal size in pixels
        name: Display name (optional, defaults to family)
        path: TrueType/OpenType file for the Pillow backend (optional)

    Example:
        >>> font = FontDescriptor(id="caveat", family="Caveat")
        >>> font.display_name
        'Caveat'
    """

    id: str
    family: str
    size: float = DEFAULT_FONT_SIZE_PX
    name: Optional[str] = None
    path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate descriptor on construction."""
        if not self.id:
            raise ValueError("font id must be a non-empty string")
        if self.size <= 0:
            raise ValueError(f"font size must be positive: {self.size}")

    @property
    def display_name(self) -> str:
        """Human-readable font name."""
        return self.name or self.family

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        result: dict[str, Any] = {"id": self.id, "family": self.family, "size": self.size}
        if self.name is not None:
            result["name"] = self.name
        if self.path is not None:
            result["path"] = self.path
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontDescriptor":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            family=data.get("family", data["id"]),
            size=float(data.get("size", DEFAULT_FONT_SIZE_PX)),
            name=data.get("name"),
            path=data.get("path"),
        )
