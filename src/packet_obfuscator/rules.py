"""Classification rules for string fields in structured config data.

The table is evaluated top to bottom against the lower-cased field name
(and, for some rules, the value); the first matching rule decides how the
value is rewritten.  Values that match no rule are left alone.

Order matters: ``"ApiTokenSecret"`` hits the secret rule before the token
rule, and ``"SiteURL"`` with an ``https://`` value is caught by the generic
URL rule before the ``siteurl`` fallback ever runs.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable

from .cache import ObfuscationCache
from .dsn import obfuscate_dsn
from .obfuscators import (
    obfuscate_api_key,
    obfuscate_email,
    obfuscate_ip,
    obfuscate_password,
    obfuscate_url,
    obfuscate_username,
)

_IP_ANYWHERE = re.compile(r"\d+\.\d+\.\d+\.\d+", re.ASCII)


@dataclass(frozen=True, slots=True)
class Rule:
    """One (predicate, action) row of the classification table."""
    name: str
    matches: Callable[[str, str], bool]                # (lower_key, value)
    action: Callable[[str, ObfuscationCache], str]     # (value, cache) → new value


def _contains(*needles: str) -> Callable[[str, str], bool]:
    return lambda key, value: any(n in key for n in needles)


def _equals(*names: str) -> Callable[[str, str], bool]:
    return lambda key, value: key in names


def _is_http(value: str) -> bool:
    return value.startswith("http://") or value.startswith("https://")


def _mask_embedded_ips(value: str, cache: ObfuscationCache) -> str:
    """Replace each IPv4-shaped substring, leaving the rest of the value."""
    return _IP_ANYWHERE.sub(lambda m: obfuscate_ip(m.group(), cache), value)


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule("password", _contains("password"), obfuscate_password),
    Rule("secret", _contains("secret"), obfuscate_api_key),
    Rule("api_key", _contains("apikey", "api_key"), obfuscate_api_key),
    Rule("token", _contains("token"), obfuscate_api_key),
    Rule("key", lambda key, value: "key" in key and len(value) > 10, obfuscate_api_key),
    Rule("salt", _contains("salt"), obfuscate_api_key),
    Rule("dsn", _equals("datasource", "connectionurl"), obfuscate_dsn),
    Rule("url", lambda key, value: "url" in key and _is_http(value), obfuscate_url),
    Rule("email", lambda key, value: "email" in key and "@" in value, obfuscate_email),
    Rule("username", lambda key, value: "username" in key and value != "", obfuscate_username),
    Rule("siteurl", _equals("siteurl"), obfuscate_url),
    Rule(
        "address",
        lambda key, value: ("address" in key or "host" in key) and bool(_IP_ANYWHERE.search(value)),
        _mask_embedded_ips,
    ),
)


def classify(key: str, value: str, rules: tuple[Rule, ...] = DEFAULT_RULES) -> Rule | None:
    """Return the first rule matching *key*/*value*, or None."""
    lower_key = key.lower()
    for rule in rules:
        if rule.matches(lower_key, value):
            return rule
    return None


def apply_rules(
    key: str,
    value: str,
    cache: ObfuscationCache,
    rules: tuple[Rule, ...] = DEFAULT_RULES,
) -> str:
    """Rewrite *value* according to the first rule matching its field name."""
    rule = classify(key, value, rules)
    if rule is None:
        return value
    return rule.action(value, cache)
