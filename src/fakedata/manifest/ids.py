"""Random manifest identifiers."""

from __future__ import annotations

import secrets
import string
from typing import Final

ID_ALPHABET: Final = string.ascii_lowercase + string.digits
ID_LENGTH: Final = 16


def new_id(length: int = ID_LENGTH) -> str:
    """Return ``length`` characters drawn from ``[a-z0-9]`` with :mod:`secrets`."""

    if length < 1:
        raise ValueError("length must be positive")
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


__all__ = ["ID_ALPHABET", "ID_LENGTH", "new_id"]
