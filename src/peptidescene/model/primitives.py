"""
Scene Primitives
================
The three renderable record types produced by the translator.

Classes:
    Residue: One monomer of a chain (a sphere).
    Socket: A directional attachment point anchored to one residue (a cylinder).
    Ball: A flexible joint connecting exactly two sockets (a sphere).

All three are immutable once created; only the external simulation engine
moves them afterwards, on its own copies.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from peptidescene.model.geometry_primitives import Point, Transform


@dataclass(frozen=True)
class Residue:
    id: str
    symbol: str
    radius: float
    position: Point

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise ValueError(f"Residue symbol must be a single character, got '{self.symbol}'.")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "symbol": self.symbol,
            "radius": self.radius,
            "position": [self.position.x, self.position.y, self.position.z],
        }


@dataclass(frozen=True)
class Socket:
    # Back-reference only: the socket does not own its residue
    id: str
    residue_id: str
    radius: float
    length: float
    transform: Transform = field(default_factory=Transform.identity)
    is_bond: bool = False

    @property
    def position(self) -> Point:
        return self.transform.position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "residue_id": self.residue_id,
            "radius": self.radius,
            "length": self.length,
            "matrix": self.transform.to_list(),
            "is_bond": self.is_bond,
        }


@dataclass(frozen=True)
class Ball:
    id: str
    socket1_id: str
    socket2_id: str
    radius: float
    transform: Transform = field(default_factory=Transform.identity)

    @property
    def position(self) -> Point:
        return self.transform.position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "socket1_id": self.socket1_id,
            "socket2_id": self.socket2_id,
            "radius": self.radius,
            "matrix": self.transform.to_list(),
        }
