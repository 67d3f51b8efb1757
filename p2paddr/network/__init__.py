"""
Network layer helpers for p2paddr.

This package provides multiaddr normalization, peer identity handling,
and DNS resolution of multiaddrs into dialable addresses.
"""
