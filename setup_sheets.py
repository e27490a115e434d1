#!/usr/bin/env python3
"""Create the Google Sheet that stores articles, keywords and rankings (first-time setup).

Usage:
    python setup_sheets.py                          # Create a new sheet
    python setup_sheets.py --title "Client Blog"    # Create with a custom title
    python setup_sheets.py --format                 # Re-apply data formatting to SHEETS_SPREADSHEET_ID
"""

import argparse
import sys

from src.config import SHEETS_SPREADSHEET_ID
from src.store.setup import apply_formatting, create_store_sheet


def main():
    parser = argparse.ArgumentParser(description="Set up the Google Sheet document store")
    parser.add_argument("--title", type=str, default="SEO Content Dashboard",
                        help="Title of the new spreadsheet")
    parser.add_argument("--format", action="store_true",
                        help="Re-apply formatting to the existing store sheet")
    args = parser.parse_args()

    try:
        if args.format:
            if not SHEETS_SPREADSHEET_ID:
                print("Error: SHEETS_SPREADSHEET_ID not set in .env")
                sys.exit(1)
            apply_formatting(SHEETS_SPREADSHEET_ID)
        else:
            create_store_sheet(args.title)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
