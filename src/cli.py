"""Helpers shared by the command-line scripts."""

from __future__ import annotations

import sys

import src.config as config


def add_user_argument(parser) -> None:
    parser.add_argument("--user", type=str, default="",
                        help="Owner id (defaults to SEO_USER_ID from .env)")


def require_user(args) -> str:
    """Owner id from --user or SEO_USER_ID; exits when neither is set."""
    user_id = (getattr(args, "user", "") or config.SEO_USER_ID).strip()
    if not user_id:
        print("Error: SEO_USER_ID not set in .env (or pass --user)")
        sys.exit(1)
    return user_id


def apply_sheet_settings(settings: dict):
    """Override config.py values with settings from the Google Sheet."""
    mapping = {
        "model": ("CLAUDE_MODEL", str),
        "estimator_model": ("ESTIMATOR_MODEL", str),
        "temperature": ("CLAUDE_TEMPERATURE", float),
        "content_max_tokens": ("CONTENT_MAX_TOKENS", int),
        "meta_max_tokens": ("META_MAX_TOKENS", int),
        "image_model": ("IMAGE_MODEL", str),
    }

    for key, (attr, converter) in mapping.items():
        if key in settings and settings[key]:
            try:
                setattr(config, attr, converter(settings[key]))
                print(f"  Sheet override: {attr} = {getattr(config, attr)}")
            except (ValueError, TypeError):
                print(f"  Warning: invalid value for {key}: {settings[key]}")


def load_store_settings(store) -> None:
    """Apply the Settings tab when the store is a spreadsheet."""
    read_settings = getattr(store, "read_settings", None)
    if read_settings is not None:
        print("Loading settings from Google Sheet...")
        apply_sheet_settings(read_settings())
