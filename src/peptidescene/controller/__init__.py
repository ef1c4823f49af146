from peptidescene.controller.crosslinks import (
    CrossLinkParseError,
    CrossLinkReport,
    CrossLinkResolver,
    SkipReason,
    parse_clause,
    parse_endpoint,
)
from peptidescene.controller.layout import ChainLayoutEngine
from peptidescene.controller.world import DescWorld

__all__ = [
    "ChainLayoutEngine",
    "CrossLinkParseError",
    "CrossLinkReport",
    "CrossLinkResolver",
    "DescWorld",
    "SkipReason",
    "parse_clause",
    "parse_endpoint",
]
