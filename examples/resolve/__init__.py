"""
Multiaddr resolution examples.

This package contains examples demonstrating how a dialer prepares
multiaddrs before connecting, including:
- Loopback detection
- Peer ID attachment and removal
- HTTP/HTTPS shorthand expansion
- DNS resolution with address family filtering and cancellation
"""
