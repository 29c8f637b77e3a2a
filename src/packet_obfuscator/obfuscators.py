"""Value obfuscators: one function per kind of sensitive value.

Every obfuscator maps an original string to a placeholder and records the
result in the caller's ObfuscationCache, so repeated values inside one run
always come out identical:

    cache = ObfuscationCache()
    obfuscate_ip("10.0.1.5", cache)          # "XXX.XXX.XXX.1f3"
    obfuscate_email("bob@corp.io", cache)    # "user_9a1c2e@domain_77b0d4.com"

Placeholders are non-reversible and built from short fingerprints, so two
unrelated inputs may share a placeholder.
"""

from __future__ import annotations
import re

from .cache import ObfuscationCache
from .hashing import fingerprint

REDACTED = "***REDACTED***"
REDACTED_DSN = "***REDACTED_DSN***"
OBFUSCATED_EMAIL = "***OBFUSCATED_EMAIL***"

_IP_PREFIX = re.compile(r"\d+\.\d+\.\d+\.\d+", re.ASCII)


def obfuscate_password(password: str, cache: ObfuscationCache | None = None) -> str:
    """Passwords keep no information at all, not even a fingerprint."""
    if password == "":
        return ""
    return REDACTED


def obfuscate_api_key(key: str, cache: ObfuscationCache) -> str:
    if key == "":
        return ""
    return cache.get_or_create(key, lambda: f"OBFUSCATED_KEY_{fingerprint(key)}")


def obfuscate_username(username: str, cache: ObfuscationCache) -> str:
    if username == "":
        return ""
    return cache.get_or_create(username, lambda: f"user_{fingerprint(username)}")


def obfuscate_email(email: str, cache: ObfuscationCache) -> str:
    """Mask both halves of an address, keeping the ``local@domain`` shape."""
    cached = cache.lookup(email)
    if cached is not None:
        return cached

    parts = email.split("@")
    if len(parts) != 2:
        return OBFUSCATED_EMAIL

    local, domain = parts
    return cache.get_or_create(
        email,
        lambda: f"user_{fingerprint(local)[:6]}@domain_{fingerprint(domain)[:6]}.com",
    )


def obfuscate_ip(ip: str, cache: ObfuscationCache) -> str:
    """Mask all four octets; only a 3-hex suffix tells addresses apart."""
    return cache.get_or_create(ip, lambda: f"XXX.XXX.XXX.{fingerprint(ip)[:3]}")


def obfuscate_identifier(record_id: str, cache: ObfuscationCache) -> str:
    return cache.get_or_create(record_id, lambda: f"id_{fingerprint(record_id)}")


def obfuscate_host(host: str, cache: ObfuscationCache) -> str:
    """Mask a ``host[:port]`` pair as an IP, keeping the port verbatim."""
    address, *rest = host.split(":")
    masked = obfuscate_ip(address, cache)
    if rest:
        masked += ":" + rest[0]
    return masked


def obfuscate_url(url: str, cache: ObfuscationCache) -> str:
    """Mask the host of a URL; scheme, port, path and query survive.

    Hosts that start with an IPv4 shape go through the IP obfuscator,
    anything else becomes ``host_<6 hex>.example.com``.  A URL without a
    scheme is reassembled as ``http://``.
    """
    return cache.get_or_create(url, lambda: _build_url(url, cache))


def _build_url(url: str, cache: ObfuscationCache) -> str:
    scheme = "http"
    remaining = url
    if url.startswith("https://"):
        scheme = "https"
        remaining = url[len("https://"):]
    elif url.startswith("http://"):
        remaining = url[len("http://"):]

    host, sep, path = remaining.partition("/")

    if _IP_PREFIX.match(host):
        masked_host = obfuscate_host(host, cache)
    else:
        # The fingerprint covers the port too; only the port is kept.
        masked_host = f"host_{fingerprint(host)[:6]}.example.com"
        port = host.split(":")
        if len(port) > 1:
            masked_host += ":" + port[1]

    return f"{scheme}://{masked_host}{sep}{path}"
