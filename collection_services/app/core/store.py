"""
In‑memory record storage.

Each service owns one ``RecordStore``: an ordered, append‑only list of
client‑supplied records that lives as long as the process.  Nothing is
persisted.  The store is attached to the application state by
``create_app`` and handed to request handlers through the
``get_store`` dependency, so every application instance (and every
test) works on its own collection.

Handlers never await while touching the store, so access is
serialised by the event loop and needs no lock.
"""

from typing import Any, Iterator, List

from fastapi import Request


class RecordStore:
    """Ordered, append‑only collection of records."""

    def __init__(self) -> None:
        self._records: List[Any] = []

    def append(self, record: Any) -> Any:
        """Append ``record`` unchanged and return it."""
        self._records.append(record)
        return record

    def all(self) -> List[Any]:
        """Return all records in insertion order.

        A new list is returned so callers cannot reorder or truncate
        the underlying collection.
        """
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(records={len(self._records)})"


def get_store(request: Request) -> RecordStore:
    """FastAPI dependency returning the store of the current application."""
    return request.app.state.store
