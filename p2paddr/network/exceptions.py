from p2paddr.exceptions import (
    BaseP2PAddrError,
)


class ResolverError(BaseP2PAddrError):
    pass


class NameResolutionFailure(ResolverError):
    """The host name of a ``dns*`` component could not be resolved at all."""

    def __init__(self, hostname: str, reason: str = "") -> None:
        self.hostname = hostname
        self.reason = reason
        message = f"Failed to resolve host name {hostname!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class OperationCancelled(ResolverError):
    """The caller's cancellation signal fired before the lookup completed."""

    def __init__(self, hostname: str, message: str | None = None) -> None:
        self.hostname = hostname
        super().__init__(message or f"Resolution of {hostname!r} was cancelled")


class LookupTimeout(OperationCancelled):
    def __init__(self, hostname: str, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(
            hostname, f"Resolution of {hostname!r} timed out after {timeout}s"
        )


class IdentityMismatchError(ResolverError):
    """
    A multiaddr already carries a peer ID other than the one requested.

    ``expected`` is the peer ID present in the multiaddr, ``found`` the one
    the caller tried to attach.
    """

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Expected a multiaddr with peer ID of '{found}', not '{expected}'"
        )
