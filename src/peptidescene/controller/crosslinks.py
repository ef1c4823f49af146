"""
Cross-Link Parsing & Resolution
===============================
Reads a cross-link string such as ``"A:C14-B:7;A:K3-A:E9"`` and joins the
named residues with a socket pair and a ball.

Grammar (case-sensitive)::

    spec     := clause (";" clause)*
    clause   := endpoint "-" endpoint
    endpoint := chainName ":" token
    token    := alpha* digits

The alphabetic prefix of a token is the symbol the residue is expected to
carry; when it is omitted the symbol is not checked. The digits are the
1-based residue number within the chain. Anything after the digits (``"1K"``,
``"C14x9"``) is a parse error.

Every clause stands alone. A clause that cannot be parsed is reported as
failed, a clause whose residues do not check out is reported as skipped, and
neither stops the remaining clauses.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
import re
from typing import List, Optional, Tuple, Union, TYPE_CHECKING

from peptidescene.config import GeometryConfig
from peptidescene.model.geometry_primitives import Transform, Vector
from peptidescene.model.primitives import Residue, Socket, Ball
from peptidescene.model.registry import ChainRegistry
from peptidescene.utils import new_id

if TYPE_CHECKING:
    from peptidescene.view.scene import SceneInterface

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = ";"
ENDPOINT_SEPARATOR = "-"
CHAIN_SEPARATOR = ":"

_DIGITS_RE = re.compile(r"\d+")
_TOKEN_RE = re.compile(r"(?P<symbol>[A-Za-z]*)(?P<index>\d+)")


class CrossLinkParseError(ValueError):
    """A cross-link clause does not follow the grammar."""


class SkipReason(StrEnum):
    CHAIN_NOT_FOUND = "chain not found"
    INDEX_OUT_OF_RANGE = "index out of range"
    SYMBOL_MISMATCH = "symbol mismatch"


@dataclass(frozen=True)
class CrossLinkEndpoint:
    chain: str
    symbol: Optional[str]
    index: int

    def __str__(self) -> str:
        return f"{self.chain}{CHAIN_SEPARATOR}{self.symbol or ''}{self.index}"


@dataclass(frozen=True)
class CrossLink:
    first: CrossLinkEndpoint
    second: CrossLinkEndpoint
    text: str


@dataclass(frozen=True)
class EndpointMiss:
    """Why an endpoint did not resolve to a residue."""
    reason: SkipReason
    detail: str


@dataclass(frozen=True)
class SkippedClause:
    text: str
    reason: SkipReason
    detail: str


@dataclass(frozen=True)
class FailedClause:
    text: str
    error: str


@dataclass
class CrossLinkReport:
    """Outcome of one resolve() call, clause by clause."""
    linked: List[Ball] = field(default_factory=list)
    skipped: List[SkippedClause] = field(default_factory=list)
    failed: List[FailedClause] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped and not self.failed

    @property
    def total(self) -> int:
        return len(self.linked) + len(self.skipped) + len(self.failed)

    def summary(self) -> str:
        return (
            f"{self.total} cross-link clause(s): {len(self.linked)} linked, "
            f"{len(self.skipped)} skipped, {len(self.failed)} failed"
        )


def split_clauses(spec: str) -> List[str]:
    """Split a spec on ';', dropping blank clauses."""
    return [c.strip() for c in spec.split(CLAUSE_SEPARATOR) if c.strip()]


def parse_endpoint(text: str) -> CrossLinkEndpoint:
    """Parse ``chain:token`` into its chain name, expected symbol and number."""
    parts = text.strip().split(CHAIN_SEPARATOR)
    if len(parts) != 2:
        raise CrossLinkParseError(f"Endpoint '{text}' must look like 'chain{CHAIN_SEPARATOR}token'.")

    chain, token = parts[0].strip(), parts[1].strip()
    if not chain:
        raise CrossLinkParseError(f"Endpoint '{text}' has an empty chain name.")

    digits = _DIGITS_RE.search(token)
    if digits is None:
        raise CrossLinkParseError(f"Token '{token}' in endpoint '{text}' has no residue number.")

    match = _TOKEN_RE.fullmatch(token)
    if match is None:
        raise CrossLinkParseError(
            f"Token '{token}' in endpoint '{text}' must be letters followed by a residue number."
        )
    return CrossLinkEndpoint(chain=chain, symbol=match.group("symbol") or None, index=int(match.group("index")))


def parse_clause(text: str) -> CrossLink:
    """Parse ``endpoint-endpoint``."""
    endpoints = text.split(ENDPOINT_SEPARATOR)
    if len(endpoints) != 2:
        raise CrossLinkParseError(
            f"Clause '{text}' must contain exactly two endpoints separated by '{ENDPOINT_SEPARATOR}'."
        )
    return CrossLink(
        first=parse_endpoint(endpoints[0]),
        second=parse_endpoint(endpoints[1]),
        text=text.strip(),
    )


class CrossLinkResolver:
    def __init__(
        self,
        registry: ChainRegistry,
        scene: SceneInterface,
        config: GeometryConfig,
        balls: List[Ball],
    ) -> None:
        self.registry = registry
        self.scene = scene
        self.config = config
        self.balls = balls

    def resolve(self, spec: str) -> CrossLinkReport:
        report = CrossLinkReport()

        for text in split_clauses(spec):
            try:
                link = parse_clause(text)
            except CrossLinkParseError as e:
                logger.warning(f"Cross-link '{text}' rejected: {e}")
                report.failed.append(FailedClause(text=text, error=str(e)))
                continue

            residue1 = self._lookup(link.first)
            if isinstance(residue1, EndpointMiss):
                self._skip(report, link, residue1)
                continue
            residue2 = self._lookup(link.second)
            if isinstance(residue2, EndpointMiss):
                self._skip(report, link, residue2)
                continue

            report.linked.append(self._link(residue1, residue2))

        logger.info(report.summary())
        return report

    def _lookup(self, endpoint: CrossLinkEndpoint) -> Union[Residue, EndpointMiss]:
        """Resolve one endpoint, or describe why it does not resolve."""
        chain = self.registry.get(endpoint.chain)
        if chain is None:
            return EndpointMiss(SkipReason.CHAIN_NOT_FOUND, f"no chain named '{endpoint.chain}'")

        residue = chain.residue_at(endpoint.index)
        if residue is None:
            return EndpointMiss(
                SkipReason.INDEX_OUT_OF_RANGE,
                f"chain '{endpoint.chain}' has {len(chain)} residue(s), asked for #{endpoint.index}",
            )

        if endpoint.symbol is not None and endpoint.symbol != residue.symbol:
            return EndpointMiss(
                SkipReason.SYMBOL_MISMATCH,
                f"{endpoint} expected '{endpoint.symbol}', found '{residue.symbol}'",
            )
        return residue

    @staticmethod
    def _skip(report: CrossLinkReport, link: CrossLink, miss: EndpointMiss) -> None:
        logger.debug(f"Cross-link '{link.text}' skipped: {miss.reason} ({miss.detail})")
        report.skipped.append(SkippedClause(text=link.text, reason=miss.reason, detail=miss.detail))

    def _link(self, residue1: Residue, residue2: Residue) -> Ball:
        """Emit the socket pair and the ball joining two resolved residues."""
        transform1, transform2, ball_transform = self._placement(residue1, residue2)
        cfg = self.config

        socket1 = Socket(new_id(), residue1.id, cfg.socket_radius, cfg.socket_length, transform1)
        self.scene.add_socket(socket1)
        socket2 = Socket(new_id(), residue2.id, cfg.socket_radius, cfg.socket_length, transform2)
        self.scene.add_socket(socket2)
        ball = Ball(new_id(), socket1.id, socket2.id, cfg.ball_radius, ball_transform)
        self.scene.add_ball(ball)
        self.balls.append(ball)
        return ball

    def _placement(self, residue1: Residue, residue2: Residue) -> Tuple[Transform, Transform, Transform]:
        """
        Socket transforms sit on each residue's surface facing the partner;
        the ball sits halfway between the residue centres.
        """
        offset = self.config.residue_radius + self.config.socket_length / 2
        direction: Vector = (residue2.position - residue1.position).normalize()

        transform1 = (
            Transform.from_translation(residue1.position + direction * offset)
            @ Transform.aligning(direction)
        )
        transform2 = (
            Transform.from_translation(residue2.position - direction * offset)
            @ Transform.aligning(-direction)
        )
        ball_transform = Transform.from_translation(residue1.position.midpoint(residue2.position))
        return transform1, transform2, ball_transform
