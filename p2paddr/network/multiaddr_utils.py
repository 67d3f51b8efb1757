"""
Multiaddr helpers used before dialing.

Loopback detection, peer ID attachment and removal, and expansion of the
``/http`` and ``/https`` shorthand protocols into an explicit TCP port.
Multiaddrs are immutable: every rewrite builds a new one from the
components returned by ``Multiaddr.split()``.
"""

from dataclasses import dataclass
import logging
from typing import Any

from multiaddr import Multiaddr

from .exceptions import IdentityMismatchError

logger = logging.getLogger("p2paddr.network.multiaddr_utils")

PEER_ID_PROTOCOLS = ("p2p", "ipfs")
LOOPBACK_ADDRESSES = {"ip4": "127.0.0.1", "ip6": "::1"}
SHORTHAND_PORTS = (("http", 80), ("https", 443))


@dataclass(frozen=True)
class IdentityMismatch:
    """
    Result of attaching a peer ID to a multiaddr that names another peer.

    ``expected`` is the peer ID already present in the multiaddr, ``found``
    the one the caller tried to attach.
    """

    expected: str
    found: str

    def to_exception(self) -> IdentityMismatchError:
        return IdentityMismatchError(self.expected, self.found)


def components(maddr: Multiaddr) -> list[tuple[str, Multiaddr]]:
    """Split a multiaddr into ``(protocol name, single component)`` pairs."""
    return [
        (proto.name, part) for proto, part in zip(maddr.protocols(), maddr.split())
    ]


def assemble(parts: list[tuple[str, Multiaddr]]) -> Multiaddr:
    """Inverse of :func:`components`."""
    return Multiaddr.join(*(part for _, part in parts))


def is_loopback(maddr: Multiaddr) -> bool:
    """
    Check whether a multiaddr references a loopback address.

    Parameters
    ----------
    maddr : Multiaddr
        Multiaddr to check

    Returns
    -------
    bool
        True if any ``/ip4/127.0.0.1`` or ``/ip6/::1`` component is present

    """
    return any(
        LOOPBACK_ADDRESSES.get(proto.name) == value for proto, value in maddr.items()
    )


def has_peer_id(maddr: Multiaddr) -> bool:
    return any(proto.name in PEER_ID_PROTOCOLS for proto in maddr.protocols())


def get_peer_id(maddr: Multiaddr) -> str | None:
    """Return the value of the last peer ID component, if any."""
    peer_id = None
    for proto, value in maddr.items():
        if proto.name in PEER_ID_PROTOCOLS:
            peer_id = value
    return peer_id


def with_peer_id(maddr: Multiaddr, peer_id: Any) -> Multiaddr | IdentityMismatch:
    """
    Get a multiaddr that ends with the given peer ID.

    Parameters
    ----------
    maddr : Multiaddr
        Multiaddr to extend
    peer_id : Any
        Peer ID, as a base58 string or any object whose ``str()`` is one

    Returns
    -------
    Multiaddr | IdentityMismatch
        ``maddr`` itself when it already carries ``peer_id``, a new multiaddr
        with ``/p2p/<peer_id>`` appended when it carries no peer ID, or an
        :class:`IdentityMismatch` when it carries a different one

    """
    requested = str(peer_id)
    if has_peer_id(maddr):
        present = str(get_peer_id(maddr))
        if present != requested:
            logger.debug(f"Peer ID mismatch on {maddr}: wanted {requested}")
            return IdentityMismatch(expected=present, found=requested)
        return maddr

    return maddr.encapsulate(f"/p2p/{requested}")


def require_peer_id(maddr: Multiaddr, peer_id: Any) -> Multiaddr:
    """
    Like :func:`with_peer_id`, but raise on a conflicting peer ID.

    Raises
    ------
    IdentityMismatchError
        If ``maddr`` already names a different peer

    """
    result = with_peer_id(maddr, peer_id)
    if isinstance(result, IdentityMismatch):
        raise result.to_exception()
    return result


def without_peer_id(maddr: Multiaddr) -> Multiaddr:
    """
    Get a multiaddr without any peer ID component.

    Every ``/p2p`` and ``/ipfs`` component is removed, even though a
    well-formed multiaddr carries at most one. Returns ``maddr`` itself when
    there is nothing to remove.
    """
    if not has_peer_id(maddr):
        return maddr
    return assemble(
        [
            (name, part)
            for name, part in components(maddr)
            if name not in PEER_ID_PROTOCOLS
        ]
    )


def expand_http_shorthand(maddr: Multiaddr) -> Multiaddr:
    """
    Insert the default TCP port after ``/http`` or ``/https``.

    ``/http`` gets ``/tcp/80`` and ``/https`` gets ``/tcp/443``, inserted
    right after the marker, unless a ``/tcp`` component is present anywhere
    in the multiaddr. The ``https`` check sees the port added for ``http``.

    Returns
    -------
    Multiaddr
        ``maddr`` itself when nothing was inserted, otherwise a new multiaddr

    """
    parts = components(maddr)
    changed = False
    for marker, port in SHORTHAND_PORTS:
        names = [name for name, _ in parts]
        if marker not in names or "tcp" in names:
            continue
        index = names.index(marker)
        parts.insert(index + 1, ("tcp", Multiaddr(f"/tcp/{port}")))
        changed = True
        logger.debug(f"Added /tcp/{port} after /{marker} in {maddr}")

    if not changed:
        return maddr
    return assemble(parts)
