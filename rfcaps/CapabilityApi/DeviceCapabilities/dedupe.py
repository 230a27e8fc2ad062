# DeviceCapabilities/dedupe.py

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, TypeVar

T = TypeVar("T")


def _identity(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def dedupe_by_id(records: Optional[Iterable[T]], key: str = "id") -> List[T]:
    """
    Keeps one record per identity. A repeated identity moves to the position
    of its last occurrence and keeps that record. Records without an identity
    are never merged with each other.
    """
    unique: Dict[Any, T] = {}
    for record in records or []:
        identity = _identity(record, key)
        if identity is None:
            unique[object()] = record
            continue
        unique.pop(identity, None)
        unique[identity] = record
    return list(unique.values())
