from __future__ import annotations

from typing import Any, Optional, Protocol


class SettingsRepository(Protocol):
    """Generic key/value settings table."""

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def upsert(self, key: str, value: Any) -> None:
        raise NotImplementedError
