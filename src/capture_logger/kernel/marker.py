"""Kernel – Marker value object."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Marker:
    """Named tag that can be attached to a log call.

    Markers may reference other markers; :meth:`contains` searches the
    whole reference graph.
    """

    name: str
    references: tuple["Marker", ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Marker name must not be empty")

    def with_reference(self, child: "Marker") -> "Marker":
        if child == self or child in self.references:
            return self
        return dataclasses.replace(self, references=(*self.references, child))

    def contains(self, other: "Marker | str") -> bool:
        name = other.name if isinstance(other, Marker) else other
        if self.name == name:
            return True
        return any(ref.contains(name) for ref in self.references)

    def __str__(self) -> str:
        if not self.references:
            return self.name
        return f"{self.name} [ {', '.join(str(r) for r in self.references)} ]"


__all__ = ["Marker"]
