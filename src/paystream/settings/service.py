from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..core.constants import (
    DEFAULT_DEPARTMENTS,
    DEFAULT_POSITIONS,
    SETTINGS_KEY_DEPARTMENTS,
    SETTINGS_KEY_POSITIONS,
)
from .repository import SettingsRepository

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkforceVocabulary:
    departments: tuple[str, ...]
    positions: tuple[str, ...]


class SettingsService:
    """Use case: the department/position vocabularies.

    Each list lives under its own key and is rewritten whole on every change.
    """

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def _read_list(self, key: str, default: Sequence[str]) -> tuple[str, ...]:
        value = self._settings.get(key)
        if not isinstance(value, list):
            return tuple(default)
        return tuple(str(v) for v in value)

    def load(self) -> WorkforceVocabulary:
        return WorkforceVocabulary(
            departments=self._read_list(SETTINGS_KEY_DEPARTMENTS, DEFAULT_DEPARTMENTS),
            positions=self._read_list(SETTINGS_KEY_POSITIONS, DEFAULT_POSITIONS),
        )

    def add_value(self, key: str, current: Sequence[str], value: str) -> tuple[str, ...]:
        value = (value or "").strip()
        if not value or value in current:
            return tuple(current)
        updated = (*current, value)
        self._settings.upsert(key, list(updated))
        log.info("Added %r to %s", value, key)
        return updated

    def remove_value(self, key: str, current: Sequence[str], value: str) -> tuple[str, ...]:
        if value not in current:
            return tuple(current)
        updated = tuple(v for v in current if v != value)
        self._settings.upsert(key, list(updated))
        log.info("Removed %r from %s", value, key)
        return updated
