"""
DNS resolution for multiaddrs.

This module turns multiaddrs carrying /dns/, /dns4/ or /dns6/ components
into dialable /ip4/ and /ip6/ multiaddrs, after expanding the /http and
/https shorthand protocols into explicit TCP ports.
"""

import logging
import math
import socket

from multiaddr import Multiaddr
import trio

from .config import ResolverConfig
from .exceptions import LookupTimeout, OperationCancelled
from .multiaddr_utils import assemble, components, expand_http_shorthand
from .name_lookup import NameLookup, ResolvedAddress, SystemNameLookup

logger = logging.getLogger("p2paddr.network.dns_resolver")

DNS_PROTOCOL_PREFIX = "dns"

# Address families each DNS protocol may resolve to. Other protocols sharing
# the prefix (e.g. dnsaddr) resolve to nothing.
DNS_FAMILIES: dict[str, tuple[socket.AddressFamily, ...]] = {
    "dns": (socket.AF_INET, socket.AF_INET6),
    "dns4": (socket.AF_INET,),
    "dns6": (socket.AF_INET6,),
}


class DNSResolver:
    """
    DNS resolver for multiaddrs.

    Holds no state besides its configuration: results are never cached and
    failed lookups are never retried.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        lookup: NameLookup | None = None,
    ) -> None:
        """
        Initialize DNS resolver.

        Parameters
        ----------
        config : ResolverConfig | None
            Host capabilities and lookup timeout (default: probed from the host)
        lookup : NameLookup | None
            Name lookup service (default: the operating system resolver)

        """
        self.config = config if config is not None else ResolverConfig.from_host()
        self.lookup: NameLookup = lookup if lookup is not None else SystemNameLookup()

    async def resolve(
        self, multiaddr: Multiaddr, signal: trio.CancelScope | None = None
    ) -> list[Multiaddr]:
        """
        Resolve a multiaddr into the multiaddrs that can be dialed.

        Parameters
        ----------
        multiaddr : Multiaddr
            Multiaddr to resolve
        signal : trio.CancelScope | None
            Cancel scope guarding the name lookup; cancelling it aborts the
            lookup. A cancel scope can only be used for one call.

        Returns
        -------
        list[Multiaddr]
            ``[multiaddr]`` (after shorthand expansion) when it has no DNS
            component, otherwise one multiaddr per matching resolved address,
            in lookup order; empty when no address matches

        Raises
        ------
        NameResolutionFailure
            If the host name cannot be resolved
        OperationCancelled
            If ``signal`` was cancelled before the lookup completed
        LookupTimeout
            If the configured lookup timeout expired

        """
        normalized = expand_http_shorthand(multiaddr)
        parts = components(normalized)
        index = next(
            (
                i
                for i, (name, _) in enumerate(parts)
                if name.startswith(DNS_PROTOCOL_PREFIX)
            ),
            None,
        )
        if index is None:
            logger.debug(f"No DNS component in {normalized}, returning as-is")
            return [normalized]

        protocol_name = parts[index][0]
        hostname = str(list(normalized.items())[index][1])
        wanted_families = DNS_FAMILIES.get(protocol_name, ())

        resolved_addrs: list[Multiaddr] = []
        for family, address in await self._lookup(hostname, signal):
            prefix = self.config.family_prefix(family)
            if prefix is None:
                logger.debug(f"Dropping {address} for {hostname}: {family!r} disabled")
                continue
            if family not in wanted_families:
                continue

            try:
                component = Multiaddr(f"/{prefix}/{address}")
            except ValueError as e:
                logger.debug(f"Failed to create multiaddr from {address}: {e}")
                continue

            new_parts = list(parts)
            new_parts[index] = (prefix, component)
            resolved_addrs.append(assemble(new_parts))

        logger.debug(f"Resolved {multiaddr} to {len(resolved_addrs)} address(es)")
        return resolved_addrs

    async def _lookup(
        self, hostname: str, signal: trio.CancelScope | None
    ) -> list[ResolvedAddress]:
        scope = signal if signal is not None else trio.CancelScope()
        timeout = self.config.lookup_timeout
        deadline = math.inf if timeout is None else trio.current_time() + timeout

        with trio.CancelScope(deadline=deadline):
            with scope:
                return await self.lookup.lookup(hostname)
            logger.debug(f"Lookup of {hostname} cancelled")
            raise OperationCancelled(hostname)

        logger.debug(f"Lookup of {hostname} timed out")
        raise LookupTimeout(hostname, timeout if timeout is not None else 0.0)


_default_resolver: DNSResolver | None = None


def get_default_resolver() -> DNSResolver:
    """Return the module resolver, probing the host on first use."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = DNSResolver()
    return _default_resolver


async def resolve_multiaddr(
    multiaddr: Multiaddr, signal: trio.CancelScope | None = None
) -> list[Multiaddr]:
    """
    Resolve a multiaddr using the default resolver.

    Parameters
    ----------
    multiaddr : Multiaddr
        Multiaddr to resolve
    signal : trio.CancelScope | None
        Optional cancel scope guarding the name lookup

    Returns
    -------
    list[Multiaddr]
        List of resolved multiaddrs

    """
    return await get_default_resolver().resolve(multiaddr, signal)
