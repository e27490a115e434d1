"""Google Sheets document store: one tab per collection, header row of fields."""

from __future__ import annotations

import sys
from pathlib import Path

from googleapiclient.errors import HttpError

from src.config import GOOGLE_CREDENTIALS_PATH
from src.store.base import ARTICLES, KEYWORDS, RANKINGS, SUBSCRIPTIONS, query_records

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_PATH = Path("sheets_token.json")

TABS = {
    ARTICLES: "Articles",
    KEYWORDS: "Keywords",
    RANKINGS: "Rankings",
    SUBSCRIPTIONS: "Subscriptions",
}

COLUMNS = {
    ARTICLES: [
        "id", "userId", "title", "content", "slug", "keywords",
        "metaDescription", "featuredImage", "status", "createdAt", "updatedAt",
    ],
    KEYWORDS: ["id", "userId", "keyword", "searchVolume", "difficulty", "createdAt"],
    RANKINGS: ["id", "userId", "articleId", "keyword", "position", "url", "checkedAt"],
    SUBSCRIPTIONS: [
        "id", "userId", "planType", "status", "stripeCustomerId",
        "stripeSubscriptionId", "currentPeriodStart", "currentPeriodEnd",
        "articlesGenerated", "createdAt", "updatedAt",
    ],
}


def column_letter(count: int) -> str:
    """1 -> 'A', 11 -> 'K'. Collections never exceed 26 columns."""
    return chr(ord("A") + count - 1)


def load_credentials(scopes: list[str] = SCOPES, token_path: Path = TOKEN_PATH):
    """Load cached OAuth credentials, refreshing or running the browser flow."""
    from google.oauth2.credentials import Credentials
    from google_auth_oauthlib.flow import InstalledAppFlow
    from google.auth.transport.requests import Request

    creds = None
    if token_path.exists():
        creds = Credentials.from_authorized_user_file(str(token_path), scopes)

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            if not Path(GOOGLE_CREDENTIALS_PATH).exists():
                raise FileNotFoundError(
                    f"Missing credentials file: {GOOGLE_CREDENTIALS_PATH}\n"
                    "Download OAuth credentials from Google Cloud Console."
                )
            flow = InstalledAppFlow.from_client_secrets_file(
                GOOGLE_CREDENTIALS_PATH, scopes
            )
            creds = flow.run_local_server(port=0)
        token_path.write_text(creds.to_json())
    return creds


def build_sheets_service():
    from googleapiclient.discovery import build

    return build("sheets", "v4", credentials=load_credentials())


def _cell(value) -> str | int | float:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return str(value)


class SheetsStore:
    """Articles, keywords, rankings and subscriptions kept in a Google Sheet."""

    def __init__(self, spreadsheet_id: str, service=None):
        self.spreadsheet_id = spreadsheet_id
        self.service = service or build_sheets_service()

    # ── Read helpers ──────────────────────────────────────────────────────

    def _get_values(self, range_name: str) -> list[list[str]]:
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_name)
                .execute()
            )
            return result.get("values", [])
        except HttpError as e:
            if e.resp.status == 404:
                sys.exit(
                    "Spreadsheet not found (404). Verify SHEETS_SPREADSHEET_ID in .env\n"
                    "and that you have access. Run: python setup_sheets.py to create a new one."
                )
            raise

    def _read_rows(self, collection: str) -> list[tuple[int, dict]]:
        """Return (sheet row number, record) pairs for a collection tab."""
        tab = TABS[collection]
        columns = COLUMNS[collection]
        rows = self._get_values(f"{tab}!A1:{column_letter(len(columns))}")
        if not rows:
            return []
        header = [h.strip() for h in rows[0]] or columns
        records = []
        for i, row in enumerate(rows[1:]):
            if not any(cell.strip() for cell in row if isinstance(cell, str)):
                continue
            record = {name: (row[j] if j < len(row) else "") for j, name in enumerate(header)}
            records.append((i + 2, record))  # 1-indexed, skip header
        return records

    def _row_number(self, collection: str, record_id: str) -> tuple[int, dict]:
        for row_number, record in self._read_rows(collection):
            if str(record.get("id")) == str(record_id):
                return row_number, record
        raise KeyError(f"{collection}: no record with id {record_id!r}")

    def _sheet_id(self, tab_name: str) -> int | None:
        meta = (
            self.service.spreadsheets()
            .get(
                spreadsheetId=self.spreadsheet_id,
                fields="sheets(properties(sheetId,title))",
            )
            .execute()
        )
        for sheet in meta.get("sheets", []):
            if sheet.get("properties", {}).get("title") == tab_name:
                return sheet["properties"]["sheetId"]
        return None

    # ── DocumentStore ─────────────────────────────────────────────────────

    def list(self, collection, where=None, order_by=None, limit=None):
        records = [record for _, record in self._read_rows(collection)]
        return query_records(records, where, order_by, limit)

    def create(self, collection, record):
        columns = COLUMNS[collection]
        row = [_cell(record.get(name)) for name in columns]
        self.service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=f"{TABS[collection]}!A:{column_letter(len(columns))}",
            valueInputOption="RAW",
            insertDataOption="INSERT_ROWS",
            body={"values": [row]},
        ).execute()

    def update(self, collection, record_id, partial):
        columns = COLUMNS[collection]
        row_number, record = self._row_number(collection, record_id)
        record.update(partial)
        last = column_letter(len(columns))
        self.service.spreadsheets().values().update(
            spreadsheetId=self.spreadsheet_id,
            range=f"{TABS[collection]}!A{row_number}:{last}{row_number}",
            valueInputOption="RAW",
            body={"values": [[_cell(record.get(name)) for name in columns]]},
        ).execute()

    def delete(self, collection, record_id):
        tab = TABS[collection]
        row_number, _ = self._row_number(collection, record_id)
        sheet_id = self._sheet_id(tab)
        if sheet_id is None:
            raise KeyError(f"Tab not found: {tab}")
        self.service.spreadsheets().batchUpdate(
            spreadsheetId=self.spreadsheet_id,
            body={
                "requests": [{
                    "deleteDimension": {
                        "range": {
                            "sheetId": sheet_id,
                            "dimension": "ROWS",
                            "startIndex": row_number - 1,
                            "endIndex": row_number,  # exclusive
                        }
                    }
                }]
            },
        ).execute()

    # ── Settings tab ──────────────────────────────────────────────────────

    def read_settings(self) -> dict:
        """Read Settings tab as key-value pairs (column A = name, B = value)."""
        rows = self._get_values("Settings!A2:B")
        settings = {}
        for row in rows:
            if len(row) >= 2 and row[0].strip():
                settings[row[0].strip()] = row[1].strip()
        return settings
