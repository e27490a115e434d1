"""Create the Google Sheet that backs the document store."""

from __future__ import annotations

from src.store.base import ARTICLES, KEYWORDS, RANKINGS, SUBSCRIPTIONS
from src.store.sheets import COLUMNS, TABS, build_sheets_service

# Stable sheet IDs for referencing tabs in formatting requests
_SHEET_IDS = {
    "settings": 0,
    ARTICLES: 1,
    KEYWORDS: 2,
    RANKINGS: 3,
    SUBSCRIPTIONS: 4,
}

SETTINGS_DEFAULTS = [
    ["Setting", "Value"],
    ["model", "claude-sonnet-4-5-20250929"],
    ["estimator_model", "claude-haiku-4-5-20251001"],
    ["temperature", "0.7"],
    ["content_max_tokens", "2500"],
    ["meta_max_tokens", "100"],
    ["image_model", "dall-e-3"],
]

# ── Formatting ────────────────────────────────────────────────────────────

_HEADER_BG = {"red": 0.20, "green": 0.24, "blue": 0.35, "alpha": 1}
_HEADER_FG = {"red": 1, "green": 1, "blue": 1, "alpha": 1}

_WIDE_COLUMNS = {"title": 320, "content": 420, "url": 320, "featuredImage": 320,
                 "metaDescription": 320, "keywords": 240, "keyword": 240}
_DEFAULT_WIDTH = 140  # pixels


def _col_widths(key: str) -> list[int]:
    if key == "settings":
        return [260, 360]
    return [_WIDE_COLUMNS.get(name, _DEFAULT_WIDTH) for name in COLUMNS[key]]


def _tab_format_requests(sheet_id: int, key: str) -> list[dict]:
    """Column widths plus a coloured, bold, frozen header row for one tab."""
    widths = _col_widths(key)
    requests = [
        {"updateDimensionProperties": {
            "range": {"sheetId": sheet_id, "dimension": "COLUMNS",
                      "startIndex": i, "endIndex": i + 1},
            "properties": {"pixelSize": width},
            "fields": "pixelSize",
        }}
        for i, width in enumerate(widths)
    ]
    requests.append({"repeatCell": {
        "range": {"sheetId": sheet_id, "startRowIndex": 0, "endRowIndex": 1,
                  "startColumnIndex": 0, "endColumnIndex": len(widths)},
        "cell": {"userEnteredFormat": {
            "backgroundColor": _HEADER_BG,
            "textFormat": {"bold": True, "foregroundColor": _HEADER_FG},
        }},
        "fields": "userEnteredFormat(backgroundColor,textFormat)",
    }})
    requests.append({"updateSheetProperties": {
        "properties": {"sheetId": sheet_id, "gridProperties": {"frozenRowCount": 1}},
        "fields": "gridProperties.frozenRowCount",
    }})
    return requests


def _format_requests(sheet_ids: dict[str, int]) -> list[dict]:
    """Formatting requests for every tab in ``sheet_ids`` (tab key -> sheetId)."""
    requests: list[dict] = []
    for key, sheet_id in sheet_ids.items():
        requests += _tab_format_requests(sheet_id, key)
    return requests


# ── Public entry points ───────────────────────────────────────────────────


def create_store_sheet(title: str = "SEO Content Dashboard", service=None) -> str:
    """Create a new Google Sheet with a tab per collection, fully formatted.

    Returns the spreadsheet ID.
    """
    service = service or build_sheets_service()

    sheets = [{"properties": {"sheetId": _SHEET_IDS["settings"], "title": "Settings"}}]
    sheets += [
        {"properties": {"sheetId": _SHEET_IDS[c], "title": TABS[c]}}
        for c in (ARTICLES, KEYWORDS, RANKINGS, SUBSCRIPTIONS)
    ]
    spreadsheet = service.spreadsheets().create(
        body={"properties": {"title": title}, "sheets": sheets}
    ).execute()
    spreadsheet_id = spreadsheet["spreadsheetId"]

    data = [{"range": "Settings!A1", "values": SETTINGS_DEFAULTS}]
    data += [
        {"range": f"{TABS[c]}!A1", "values": [COLUMNS[c]]}
        for c in (ARTICLES, KEYWORDS, RANKINGS, SUBSCRIPTIONS)
    ]
    service.spreadsheets().values().batchUpdate(
        spreadsheetId=spreadsheet_id,
        body={"valueInputOption": "RAW", "data": data},
    ).execute()

    service.spreadsheets().batchUpdate(
        spreadsheetId=spreadsheet_id,
        body={"requests": _format_requests(_SHEET_IDS)},
    ).execute()

    url = f"https://docs.google.com/spreadsheets/d/{spreadsheet_id}"
    print(f"\nSheet created: {url}")
    print(f"\nAdd this to your .env file:")
    print(f"  SHEETS_SPREADSHEET_ID={spreadsheet_id}")
    print(f"\nTabs created: Settings, {', '.join(TABS.values())}")
    print(f"  - Settings: model, temperature, token budgets")
    print(f"  - Articles / Keywords / Rankings / Subscriptions: one row per record")

    return spreadsheet_id


def apply_formatting(spreadsheet_id: str, service=None) -> None:
    """Re-apply column widths and header formatting to an existing store sheet."""
    service = service or build_sheets_service()
    meta = (
        service.spreadsheets()
        .get(spreadsheetId=spreadsheet_id, fields="sheets(properties(sheetId,title))")
        .execute()
    )
    title_to_id = {
        s["properties"]["title"]: s["properties"]["sheetId"]
        for s in meta.get("sheets", [])
    }
    titles = {"settings": "Settings", **TABS}
    sheet_ids = {
        key: title_to_id[title] for key, title in titles.items() if title in title_to_id
    }
    if not sheet_ids:
        print("No store tabs found.")
        return
    service.spreadsheets().batchUpdate(
        spreadsheetId=spreadsheet_id,
        body={"requests": _format_requests(sheet_ids)},
    ).execute()
    print(f"Formatted {len(sheet_ids)} tabs.")
