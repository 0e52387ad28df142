from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def insert_many(self, entries: Sequence[AttendanceEntry]) -> None:
        raise NotImplementedError
