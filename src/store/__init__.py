"""Document store backends: in-memory, JSON files and Google Sheets."""

from src.store.base import (
    ARTICLES,
    KEYWORDS,
    RANKINGS,
    SUBSCRIPTIONS,
    DocumentStore,
    JsonFileStore,
    MemoryStore,
)


def open_store() -> DocumentStore:
    """Google Sheets when SHEETS_SPREADSHEET_ID is set, local JSON files otherwise."""
    from src.config import SHEETS_SPREADSHEET_ID, STORE_DIR

    if SHEETS_SPREADSHEET_ID:
        from src.store.sheets import SheetsStore
        return SheetsStore(SHEETS_SPREADSHEET_ID)
    return JsonFileStore(STORE_DIR)


__all__ = [
    "ARTICLES",
    "KEYWORDS",
    "RANKINGS",
    "SUBSCRIPTIONS",
    "DocumentStore",
    "JsonFileStore",
    "MemoryStore",
    "open_store",
]
