"""Hash oracle: one-way fingerprints that keep placeholders stable.

Fingerprints are short on purpose.  Placeholders embed only 3, 6 or 8 hex
characters, so unrelated inputs can collide; the placeholder formats are
part of the output contract and the digest is never widened.
"""

from __future__ import annotations
import hashlib

FINGERPRINT_LENGTH = 8


def fingerprint(value: str) -> str:
    """SHA-256 of the UTF-8 bytes of *value*, first 8 hex characters."""
    digest = hashlib.sha256(value.encode("utf-8", "surrogateescape")).hexdigest()
    return digest[:FINGERPRINT_LENGTH]
