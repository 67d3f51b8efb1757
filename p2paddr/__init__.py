"""Multiaddr resolution and peer identity helpers for libp2p transports."""

from .exceptions import BaseP2PAddrError
from .network.config import ResolverConfig
from .network.dns_resolver import DNSResolver, resolve_multiaddr
from .network.exceptions import (
    IdentityMismatchError,
    LookupTimeout,
    NameResolutionFailure,
    OperationCancelled,
    ResolverError,
)
from .network.multiaddr_utils import (
    IdentityMismatch,
    expand_http_shorthand,
    get_peer_id,
    has_peer_id,
    is_loopback,
    require_peer_id,
    with_peer_id,
    without_peer_id,
)
from .network.name_lookup import NameLookup, ResolvedAddress, SystemNameLookup

__all__ = [
    "BaseP2PAddrError",
    "DNSResolver",
    "IdentityMismatch",
    "IdentityMismatchError",
    "LookupTimeout",
    "NameLookup",
    "NameResolutionFailure",
    "OperationCancelled",
    "ResolvedAddress",
    "ResolverConfig",
    "ResolverError",
    "SystemNameLookup",
    "expand_http_shorthand",
    "get_peer_id",
    "has_peer_id",
    "is_loopback",
    "require_peer_id",
    "resolve_multiaddr",
    "with_peer_id",
    "without_peer_id",
]
