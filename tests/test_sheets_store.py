from unittest.mock import MagicMock

import pytest
from googleapiclient.errors import HttpError

from src.store.base import ARTICLES, RANKINGS
from src.store.sheets import COLUMNS, SheetsStore, column_letter
from src.store.setup import apply_formatting, create_store_sheet

RANKING_ROWS = [
    COLUMNS[RANKINGS],
    ["r1", "u1", "a1", "seo tools", "7", "https://example.com/seo", "2026-03-01T00:00:00Z"],
    [],
    ["r2", "u2", "a2", "seo", "", "https://example.com/x", "2026-03-02T00:00:00Z"],
    ["r3", "u1", "a1", "content"],
]


def _service(rows=None) -> MagicMock:
    service = MagicMock()
    values = service.spreadsheets.return_value.values.return_value
    values.get.return_value.execute.return_value = {"values": rows or []}
    return service


def test_column_letter() -> None:
    assert column_letter(1) == "A"
    assert column_letter(len(COLUMNS[ARTICLES])) == "K"


def test_list_maps_rows_to_records() -> None:
    store = SheetsStore("sheet-id", service=_service(RANKING_ROWS))

    records = store.list(RANKINGS, where={"userId": "u1"})

    assert [r["id"] for r in records] == ["r1", "r3"]
    assert records[0]["position"] == "7"
    assert records[1]["position"] == ""  # short rows are padded


def test_list_empty_tab() -> None:
    assert SheetsStore("sheet-id", service=_service([])).list(ARTICLES) == []


def test_create_appends_row_in_column_order() -> None:
    service = _service()
    store = SheetsStore("sheet-id", service=service)

    store.create(RANKINGS, {
        "id": "r9", "userId": "u1", "articleId": "a1", "keyword": "seo",
        "position": None, "url": "https://example.com/a", "checkedAt": "2026-03-05T00:00:00Z",
    })

    append = service.spreadsheets.return_value.values.return_value.append
    kwargs = append.call_args.kwargs
    assert kwargs["range"] == "Rankings!A:G"
    assert kwargs["body"] == {"values": [[
        "r9", "u1", "a1", "seo", "", "https://example.com/a", "2026-03-05T00:00:00Z",
    ]]}


def test_update_rewrites_the_matching_row() -> None:
    service = _service(RANKING_ROWS)
    store = SheetsStore("sheet-id", service=service)

    store.update(RANKINGS, "r2", {"position": 12})

    update = service.spreadsheets.return_value.values.return_value.update
    kwargs = update.call_args.kwargs
    assert kwargs["range"] == "Rankings!A4:G4"
    assert kwargs["body"]["values"][0][4] == 12


def test_update_unknown_id_raises() -> None:
    store = SheetsStore("sheet-id", service=_service(RANKING_ROWS))
    with pytest.raises(KeyError):
        store.update(RANKINGS, "missing", {"position": 1})


def test_delete_removes_sheet_row() -> None:
    service = _service(RANKING_ROWS)
    service.spreadsheets.return_value.get.return_value.execute.return_value = {
        "sheets": [
            {"properties": {"sheetId": 1, "title": "Articles"}},
            {"properties": {"sheetId": 3, "title": "Rankings"}},
        ]
    }
    store = SheetsStore("sheet-id", service=service)

    store.delete(RANKINGS, "r1")

    body = service.spreadsheets.return_value.batchUpdate.call_args.kwargs["body"]
    dimension = body["requests"][0]["deleteDimension"]["range"]
    assert dimension == {"sheetId": 3, "dimension": "ROWS", "startIndex": 1, "endIndex": 2}


def test_missing_spreadsheet_exits() -> None:
    service = MagicMock()
    values = service.spreadsheets.return_value.values.return_value
    values.get.return_value.execute.side_effect = HttpError(
        MagicMock(status=404, reason="Not Found"), b"{}"
    )
    store = SheetsStore("sheet-id", service=service)

    with pytest.raises(SystemExit):
        store.list(ARTICLES)


def test_read_settings() -> None:
    store = SheetsStore("sheet-id", service=_service([["model", "claude-x"], ["blank"], ["temperature", "0.2"]]))
    assert store.read_settings() == {"model": "claude-x", "temperature": "0.2"}


def test_create_store_sheet_writes_headers(capsys) -> None:
    service = MagicMock()
    service.spreadsheets.return_value.create.return_value.execute.return_value = {
        "spreadsheetId": "new-id"
    }

    assert create_store_sheet(service=service) == "new-id"

    batch = service.spreadsheets.return_value.values.return_value.batchUpdate
    data = batch.call_args.kwargs["body"]["data"]
    ranges = {d["range"]: d["values"] for d in data}
    assert ranges["Rankings!A1"] == [COLUMNS[RANKINGS]]
    assert "SHEETS_SPREADSHEET_ID=new-id" in capsys.readouterr().out


def test_apply_formatting_targets_existing_tabs(capsys) -> None:
    service = MagicMock()
    service.spreadsheets.return_value.get.return_value.execute.return_value = {
        "sheets": [
            {"properties": {"sheetId": 7, "title": "Articles"}},
            {"properties": {"sheetId": 9, "title": "Scratch"}},
        ]
    }

    apply_formatting("sheet-id", service=service)

    requests = service.spreadsheets.return_value.batchUpdate.call_args.kwargs["body"]["requests"]
    widths = [r for r in requests if "updateDimensionProperties" in r]
    assert len(widths) == len(COLUMNS[ARTICLES])
    assert {r["updateDimensionProperties"]["range"]["sheetId"] for r in widths} == {7}
    assert any("updateSheetProperties" in r for r in requests)
    assert "Formatted 1 tabs." in capsys.readouterr().out


def test_apply_formatting_without_store_tabs(capsys) -> None:
    service = MagicMock()
    service.spreadsheets.return_value.get.return_value.execute.return_value = {"sheets": []}

    apply_formatting("sheet-id", service=service)

    service.spreadsheets.return_value.batchUpdate.assert_not_called()
    assert "No store tabs found." in capsys.readouterr().out
