"""
Configuration for multiaddr resolution.

Holds the host capability flags that decide which resolved address
families may be dialed, probed once at process start.
"""

from dataclasses import dataclass
import logging
import socket

logger = logging.getLogger("p2paddr.network.config")

_FAMILY_PREFIXES: dict[socket.AddressFamily, str] = {
    socket.AF_INET: "ip4",
    socket.AF_INET6: "ip6",
}


def _host_supports(family: socket.AddressFamily) -> bool:
    try:
        sock = socket.socket(family, socket.SOCK_STREAM)
    except OSError:
        return False
    sock.close()
    return True


@dataclass(frozen=True)
class ResolverConfig:
    """
    Configuration for DNS resolution of multiaddrs.

    Parameters
    ----------
    ipv4_supported : bool
        Whether the host can dial IPv4 addresses (default: True)
    ipv6_supported : bool
        Whether the host can dial IPv6 addresses (default: True)
    lookup_timeout : float | None
        Seconds to wait for a name lookup, ``None`` to wait forever

    """

    ipv4_supported: bool = True
    ipv6_supported: bool = True
    lookup_timeout: float | None = None

    def __post_init__(self) -> None:
        if self.lookup_timeout is not None and self.lookup_timeout <= 0:
            raise ValueError("Lookup timeout should be positive")

    @classmethod
    def from_host(cls, lookup_timeout: float | None = None) -> "ResolverConfig":
        """Probe the running host for IPv4 and IPv6 socket support."""
        config = cls(
            ipv4_supported=_host_supports(socket.AF_INET),
            ipv6_supported=socket.has_ipv6 and _host_supports(socket.AF_INET6),
            lookup_timeout=lookup_timeout,
        )
        logger.debug(
            f"Host address families: ipv4={config.ipv4_supported} "
            f"ipv6={config.ipv6_supported}"
        )
        return config

    def supports(self, family: socket.AddressFamily) -> bool:
        if family == socket.AF_INET:
            return self.ipv4_supported
        if family == socket.AF_INET6:
            return self.ipv6_supported
        return False

    def family_prefix(self, family: socket.AddressFamily) -> str | None:
        """
        Multiaddr protocol name for a supported address family.

        Returns ``None`` when the family is unknown or disabled on this host.
        """
        if not self.supports(family):
            return None
        return _FAMILY_PREFIXES.get(family)
