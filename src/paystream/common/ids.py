from __future__ import annotations

import uuid


def new_id() -> str:
    """Random 128-bit identifier, safe to use as a primary key."""
    return uuid.uuid4().hex
