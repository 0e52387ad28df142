"""Field access that tolerates the key casing of the backing store.

Rows may come back with the exact column casing (``baseSalary``), folded to
lower case (``basesalary``) or in snake_case (``base_salary``). The helpers
here resolve a logical field name against whichever form is present so the
row mappers do not have to know which one the store used.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

_UPPER = re.compile(r"(?<!^)([A-Z])")


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def to_snake_case(name: str) -> str:
    """``salaryAdvance`` -> ``salary_advance``."""
    return _UPPER.sub(lambda m: "_" + m.group(1).lower(), name)


def get_field(record: Any, name: str) -> Any:
    """Return the value stored under ``name`` or ``MISSING``.

    Lookup order: exact key, lower-cased key, snake_case key, then a
    case-insensitive scan over all keys.
    """
    if not isinstance(record, Mapping) or not isinstance(name, str):
        return MISSING

    for candidate in (name, name.lower(), to_snake_case(name)):
        if candidate in record:
            return record[candidate]

    wanted = name.lower()
    for key in record:
        if isinstance(key, str) and key.lower() == wanted:
            return record[key]
    return MISSING


def to_number(value: Any) -> float:
    """Coerce a raw value to float; absent or non-numeric becomes 0."""
    if value is MISSING or value is None:
        return 0.0
    try:
        if isinstance(value, (bool, int, float, Decimal)):
            result = float(value)
        elif isinstance(value, str):
            text = value.strip()
            if not text:
                return 0.0
            result = float(text)
        else:
            return 0.0
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(result) else result


def get_number(record: Any, name: str) -> float:
    return to_number(get_field(record, name))


def get_text(record: Any, name: str, default: str = "") -> str:
    value = get_field(record, name)
    if value is MISSING or value is None:
        return default
    return str(value)
