from __future__ import annotations

import json
from typing import Any, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT `value` FROM app_settings WHERE `key`=%s", (key,))
            row = fetchone(cur)
            if not row or row.get("value") is None:
                return None
            value = row["value"]
            if isinstance(value, (bytes, bytearray)):
                value = value.decode("utf-8")
            return json.loads(value) if isinstance(value, str) else value

    def upsert(self, key: str, value: Any) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_settings(`key`, `value`)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE `value`=VALUES(`value`)
                """,
                (key, json.dumps(value)),
            )
