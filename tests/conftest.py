from fakes import StaticNameLookup, v4, v6
import pytest

from p2paddr.network.config import ResolverConfig


@pytest.fixture
def name_lookup() -> StaticNameLookup:
    return StaticNameLookup(
        {
            "localhost": [v4("127.0.0.1")],
            "example.com": [
                v6("2606:2800:220:1:248:1893:25c8:1946"),
                v4("93.184.216.34"),
            ],
            "v6only.example.com": [v6("2001:db8::1")],
            "dual.example.com": [
                v4("192.0.2.1"),
                v6("2001:db8::2"),
                v4("192.0.2.2"),
            ],
        }
    )


@pytest.fixture
def dual_stack_config() -> ResolverConfig:
    return ResolverConfig(ipv4_supported=True, ipv6_supported=True)
