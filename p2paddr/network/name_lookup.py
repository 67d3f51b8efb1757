"""
Host name lookup used by the DNS resolver.

The resolver only needs the addresses bound to a host name together with
their address family; anything able to provide that can be plugged in
through the :class:`NameLookup` protocol.
"""

import logging
import socket
from typing import NamedTuple, Protocol

import trio

from .exceptions import NameResolutionFailure

logger = logging.getLogger("p2paddr.network.name_lookup")


class ResolvedAddress(NamedTuple):
    family: socket.AddressFamily
    address: str


class NameLookup(Protocol):
    """Protocol for host name lookup services."""

    async def lookup(self, hostname: str) -> list[ResolvedAddress]:
        """
        Look up all addresses bound to a host name.

        Parameters
        ----------
        hostname : str
            Host name to look up

        Returns
        -------
        list[ResolvedAddress]
            Addresses in the order returned by the service

        Raises
        ------
        NameResolutionFailure
            If the host name cannot be resolved

        """
        ...


class SystemNameLookup:
    """Look up host names with the operating system resolver via trio."""

    async def lookup(self, hostname: str) -> list[ResolvedAddress]:
        try:
            addr_info = await trio.socket.getaddrinfo(
                hostname, None, type=socket.SOCK_STREAM
            )
        except OSError as e:
            # socket.gaierror for unknown hosts and resolver failures
            logger.debug(f"Lookup failed for {hostname}: {e}")
            raise NameResolutionFailure(hostname, str(e)) from e

        resolved: list[ResolvedAddress] = []
        for family, _, _, _, sockaddr in addr_info:
            if family not in (socket.AF_INET, socket.AF_INET6):
                continue
            # Drop the zone index of link-local IPv6 results (fe80::1%eth0)
            address = str(sockaddr[0]).split("%", 1)[0]
            entry = ResolvedAddress(socket.AddressFamily(family), address)
            if entry not in resolved:
                resolved.append(entry)

        logger.debug(f"Looked up {hostname}: {[a.address for a in resolved]}")
        return resolved
