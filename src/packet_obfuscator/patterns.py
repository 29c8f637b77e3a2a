"""Text pipeline: ordered regex rewrites for log and plain-text files.

Steps run one after another over the evolving text, not over the original:

    1. IPv4 addresses
    2. email addresses
    3. http(s) URLs
    4. long alphanumeric tokens (40+ characters)
    5. 26-character lowercase record IDs

Because IPs are masked first, a URL such as ``https://10.0.0.5:8065/api``
reaches step 3 as ``https://XXX.XXX.XXX.1f3:8065/api`` and its host is then
treated as a domain.  Reordering the steps changes the output.
"""

from __future__ import annotations
import re
from typing import Callable, Iterable

from .cache import ObfuscationCache
from .obfuscators import (
    obfuscate_api_key,
    obfuscate_email,
    obfuscate_identifier,
    obfuscate_ip,
    obfuscate_url,
)

# Shorter runs match the token pattern but are kept, to spare hashes and IDs
TOKEN_MIN_LENGTH = 40

Handler = Callable[[str, ObfuscationCache], str]
Step = tuple[str, re.Pattern, Handler]


def _obfuscate_token(token: str, cache: ObfuscationCache) -> str:
    if len(token) >= TOKEN_MIN_LENGTH:
        return obfuscate_api_key(token, cache)
    return token


# Each step: (name, compiled_regex, handler)
PIPELINE: tuple[Step, ...] = (
    ("IP_ADDRESS", re.compile(
        r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b", re.ASCII
    ), obfuscate_ip),

    ("EMAIL", re.compile(
        r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b", re.ASCII
    ), obfuscate_email),

    ("URL", re.compile(
        r"https?://[^\s<>\"{}|\\^`\[\]]+"
    ), obfuscate_url),

    ("TOKEN", re.compile(
        r"\b[A-Za-z0-9]{32,}\b", re.ASCII
    ), _obfuscate_token),

    # Mattermost record IDs
    ("RECORD_ID", re.compile(
        r"\b[a-z0-9]{26}\b", re.ASCII
    ), obfuscate_identifier),
)


def scrub_text(
    text: str,
    cache: ObfuscationCache,
    *,
    extra_steps: Iterable[Step] = (),
    allow_list: frozenset[str] | set[str] = frozenset(),
) -> str:
    """Run every pipeline step over *text*, then any *extra_steps*.

    Matches found in *allow_list* are left as they are.
    """
    for _name, pattern, handler in (*PIPELINE, *extra_steps):
        text = pattern.sub(_replacer(handler, cache, allow_list), text)
    return text


def _replacer(
    handler: Handler,
    cache: ObfuscationCache,
    allow_list: frozenset[str] | set[str],
) -> Callable[[re.Match], str]:
    def replace(m: re.Match) -> str:
        found = m.group()
        if found in allow_list:
            return found
        return handler(found, cache)
    return replace
