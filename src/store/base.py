"""Document store interface and the in-process / JSON-file backends."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Protocol

ARTICLES = "articles"
KEYWORDS = "keywords"
RANKINGS = "rankings"
SUBSCRIPTIONS = "subscriptions"

COLLECTIONS = (ARTICLES, KEYWORDS, RANKINGS, SUBSCRIPTIONS)


class DocumentStore(Protocol):
    """Owner-scoped document storage.

    ``where`` is an equality filter, ``order_by`` a (field, "asc"|"desc") pair.
    Records are plain dicts with camelCase keys.
    """

    def list(
        self,
        collection: str,
        where: dict | None = None,
        order_by: tuple[str, str] | None = None,
        limit: int | None = None,
    ) -> list[dict]: ...

    def create(self, collection: str, record: dict) -> None: ...

    def update(self, collection: str, record_id: str, partial: dict) -> None: ...

    def delete(self, collection: str, record_id: str) -> None: ...


def query_records(
    records: list[dict],
    where: dict | None = None,
    order_by: tuple[str, str] | None = None,
    limit: int | None = None,
) -> list[dict]:
    """Apply where/order_by/limit to a list of records.

    Values are compared as strings so spreadsheet cells ("5") match ints (5).
    Records missing the sort field go last in either direction.
    """
    rows = records
    if where:
        rows = [
            r for r in rows
            if all(str(r.get(k, "")) == str(v) for k, v in where.items())
        ]
    if order_by:
        field, direction = order_by
        present = [r for r in rows if r.get(field) not in (None, "")]
        missing = [r for r in rows if r.get(field) in (None, "")]
        present.sort(key=lambda r: str(r[field]), reverse=direction.lower() == "desc")
        rows = present + missing
    if limit is not None:
        rows = rows[:limit]
    return [dict(r) for r in rows]


class MemoryStore:
    """Keeps collections in memory. Mostly useful for tests and dry runs."""

    def __init__(self, data: dict[str, list[dict]] | None = None):
        self._data: dict[str, list[dict]] = {c: [] for c in COLLECTIONS}
        for collection, records in (data or {}).items():
            self._data[collection] = [dict(r) for r in records]

    def _records(self, collection: str) -> list[dict]:
        return self._data.setdefault(collection, [])

    def _index_of(self, collection: str, record_id: str) -> int:
        for i, record in enumerate(self._records(collection)):
            if str(record.get("id")) == str(record_id):
                return i
        raise KeyError(f"{collection}: no record with id {record_id!r}")

    def list(self, collection, where=None, order_by=None, limit=None):
        return query_records(self._records(collection), where, order_by, limit)

    def create(self, collection, record):
        if not record.get("id"):
            raise ValueError(f"{collection}: record has no id")
        self._records(collection).append(copy.deepcopy(record))
        self._saved(collection)

    def update(self, collection, record_id, partial):
        i = self._index_of(collection, record_id)
        self._records(collection)[i].update(copy.deepcopy(partial))
        self._saved(collection)

    def delete(self, collection, record_id):
        i = self._index_of(collection, record_id)
        del self._records(collection)[i]
        self._saved(collection)

    def _saved(self, collection: str) -> None:
        """Hook called after every mutation."""


class JsonFileStore(MemoryStore):
    """One JSON file per collection, rewritten after each mutation."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        data = {}
        for collection in COLLECTIONS:
            path = self._path(collection)
            if path.exists():
                data[collection] = json.loads(path.read_text())
        super().__init__(data)

    def _path(self, collection: str) -> Path:
        return self.directory / f"{collection}.json"

    def _saved(self, collection: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(collection).write_text(
            json.dumps(self._records(collection), indent=2)
        )
