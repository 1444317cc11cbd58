"""Generation of new local user IDs."""

from __future__ import annotations

import secrets
import string

_LENGTH = 36
_CHAR_SET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def gen_user_id() -> str:
    """Generate a new random local user ID.

    Keep one ID per user and treat it like a password; do not generate a new
    one each time a client starts.
    """
    return "".join(secrets.choice(_CHAR_SET) for _ in range(_LENGTH))