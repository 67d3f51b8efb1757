#!/usr/bin/env python3
"""
Example demonstrating multiaddr resolution before dialing.

This example shows how to:
1. Expand /dns4/, /dns6/ and /dns/ multiaddrs into /ip4/ and /ip6/ ones
2. Attach the expected peer ID to each dialable address
3. Skip addresses that name a different peer
4. Bound lookups with a timeout and cancel them on demand

Usage: python resolve_example.py [MULTIADDR ...]
"""

import logging
import sys

from multiaddr import Multiaddr
import trio

from p2paddr.network.config import ResolverConfig
from p2paddr.network.dns_resolver import DNSResolver
from p2paddr.network.exceptions import NameResolutionFailure, OperationCancelled
from p2paddr.network.multiaddr_utils import (
    IdentityMismatch,
    is_loopback,
    with_peer_id,
    without_peer_id,
)

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

BOOTSTRAP_PEER_ID = "QmNnooDu7bfjPFoTZYxMNLWUQJyrVwtbZg5gBMjTezGAJN"

DEFAULT_ADDRS = [
    f"/dns4/localhost/tcp/4001/p2p/{BOOTSTRAP_PEER_ID}",
    "/ip6/::1/tcp/4001",
    "/dns/localhost/https",
]


async def collect_dial_addrs(
    resolver: DNSResolver, addrs: list[str], peer_id: str
) -> list[Multiaddr]:
    """Resolve ``addrs`` and return those that can be dialed to reach ``peer_id``."""
    dialable: list[Multiaddr] = []
    for addr in addrs:
        maddr = Multiaddr(addr)
        try:
            resolved = await resolver.resolve(maddr)
        except NameResolutionFailure as e:
            logger.info(f"❌ {maddr}: {e}")
            continue
        except OperationCancelled as e:
            logger.info(f"⏱ {maddr}: {e}")
            continue

        for resolved_addr in resolved:
            result = with_peer_id(resolved_addr, peer_id)
            if isinstance(result, IdentityMismatch):
                logger.info(
                    f"❌ {resolved_addr} belongs to {result.expected}, "
                    f"not {result.found}"
                )
                continue
            logger.info(
                f"✅ {result} (loopback={is_loopback(result)}, "
                f"transport={without_peer_id(result)})"
            )
            dialable.append(result)

    return dialable


async def main(argv: list[str]) -> None:
    """Resolve the given multiaddrs, or a default set, for the bootstrap peer."""
    addrs = argv or DEFAULT_ADDRS
    resolver = DNSResolver(ResolverConfig.from_host(lookup_timeout=5.0))
    try:
        dialable = await collect_dial_addrs(resolver, addrs, BOOTSTRAP_PEER_ID)
        logger.info(f"{len(dialable)} dialable address(es)")
    except Exception as e:
        logger.error(f"Example failed: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    trio.run(main, sys.argv[1:])
