"""Deterministic seeding helpers for content synthesis.

A batch may run seeded (``content.seeded`` or ``FAKEDATA_SEED``) so the same
references produce the same documents.  Each submission then gets its own seed
derived from the batch seed and the reference with SHA-256 under a fixed
namespace, so submissions stay reproducible yet distinct from one another.

Unseeded batches return ``None`` and every :class:`ContentSource` draws from
fresh OS entropy.  Manifest identifiers never use these seeds.
"""

from __future__ import annotations

import hashlib
import re
import unicodedata
from typing import Final

_NS_SUBMISSION: Final = b"fakedata/v1/submission"


def canonicalize_key(key: str) -> str:
    """Normalize a submission reference for hashing.

    The normalization steps are:

    - strip leading/trailing whitespace
    - collapse internal whitespace runs to a single space
    - NFC normalize

    Case is preserved because references are case-sensitive identifiers.
    """

    normalized = unicodedata.normalize("NFC", key.strip())
    return re.sub(r"\s+", " ", normalized)


def derive_seed(base_seed: int, key: str) -> int:
    """Return a 64-bit seed for ``key`` derived from ``base_seed``.

    The seed is ``SHA256(namespace || base_seed || canonical key)`` truncated to
    eight bytes, big-endian.
    """

    data = (
        _NS_SUBMISSION
        + str(base_seed).encode("ascii")
        + b"\x00"
        + canonicalize_key(key).encode("utf-8")
    )
    digest = hashlib.sha256(data).digest()
    return int.from_bytes(digest[:8], "big")


def submission_seed(base_seed: int | None, key: str) -> int | None:
    """Seed for one submission, or ``None`` when the batch is unseeded."""

    if base_seed is None:
        return None
    return derive_seed(base_seed, key)


__all__ = ["canonicalize_key", "derive_seed", "submission_seed"]
