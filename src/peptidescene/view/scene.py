"""
Scene Collaborator Interface
============================
The translator pushes every primitive it creates into a scene object through
three fire-and-forget registration calls. It never reads anything back.

Classes:
    SceneInterface: Protocol every scene/physics backend implements.
    RecordingScene: In-memory backend that keeps primitives in creation order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, runtime_checkable

from peptidescene.model.primitives import Residue, Socket, Ball


@runtime_checkable
class SceneInterface(Protocol):
    def add_residue(self, residue: Residue) -> None: ...
    def add_socket(self, socket: Socket) -> None: ...
    def add_ball(self, ball: Ball) -> None: ...


@dataclass
class RecordingScene:
    """Scene backend that just records what it receives."""
    residues: List[Residue] = field(default_factory=list)
    sockets: List[Socket] = field(default_factory=list)
    balls: List[Ball] = field(default_factory=list)

    def add_residue(self, residue: Residue) -> None:
        self.residues.append(residue)

    def add_socket(self, socket: Socket) -> None:
        self.sockets.append(socket)

    def add_ball(self, ball: Ball) -> None:
        self.balls.append(ball)

    def counts(self) -> Dict[str, int]:
        return {
            "residues": len(self.residues),
            "sockets": len(self.sockets),
            "balls": len(self.balls),
        }

    def socket(self, socket_id: str) -> Socket:
        for s in self.sockets:
            if s.id == socket_id:
                return s
        raise KeyError(f"No socket with id '{socket_id}'")

    def clear(self) -> None:
        self.residues.clear()
        self.sockets.clear()
        self.balls.clear()
