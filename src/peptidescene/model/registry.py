"""
Chain Registry
==============
Maps chain names to their ordered residue sequences.

Both the layout engine (which fills chains) and the cross-link resolver
(which looks residues up by 1-based number) read from the same registry.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import Dict, Iterator, List, Optional

from peptidescene.model.primitives import Residue

logger = logging.getLogger(__name__)


class DuplicatePolicy(StrEnum):
    """What to do when a chain name is registered a second time."""
    REPLACE = "replace"
    REJECT = "reject"


class DuplicateChainError(KeyError):
    """Raised under DuplicatePolicy.REJECT when a chain name is already taken."""


@dataclass
class Chain:
    """A named, ordered sequence of residues. Residues are only ever appended."""
    name: str
    residues: List[Residue] = field(default_factory=list)

    def append(self, residue: Residue) -> None:
        self.residues.append(residue)

    def residue_at(self, number: int) -> Optional[Residue]:
        """Residue by 1-based number, or None when out of range."""
        if number < 1 or number > len(self.residues):
            return None
        return self.residues[number - 1]

    @property
    def sequence(self) -> str:
        return "".join(r.symbol for r in self.residues)

    def __len__(self) -> int:
        return len(self.residues)

    def __iter__(self) -> Iterator[Residue]:
        return iter(self.residues)


class ChainRegistry:
    def __init__(self, policy: DuplicatePolicy = DuplicatePolicy.REPLACE) -> None:
        self.policy = DuplicatePolicy(policy)
        self._chains: Dict[str, Chain] = {}

    def register(self, chain: Chain) -> None:
        if chain.name in self._chains:
            if self.policy == DuplicatePolicy.REJECT:
                raise DuplicateChainError(f"Chain '{chain.name}' is already registered.")
            logger.warning(f"Chain '{chain.name}' is already registered; replacing it.")
        self._chains[chain.name] = chain

    def get(self, name: str) -> Optional[Chain]:
        return self._chains.get(name)

    def residue_at(self, name: str, number: int) -> Optional[Residue]:
        chain = self._chains.get(name)
        if chain is None:
            return None
        return chain.residue_at(number)

    def names(self) -> list[str]:
        return list(self._chains.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._chains

    def __len__(self) -> int:
        return len(self._chains)

    def __iter__(self) -> Iterator[Chain]:
        return iter(self._chains.values())
