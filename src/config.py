"""Central configuration for the SEO content dashboard."""

import warnings

# Suppress noisy third-party warnings (OpenSSL/LibreSSL, google-auth)
warnings.filterwarnings("ignore", message=".*OpenSSL.*")
warnings.filterwarnings("ignore", category=FutureWarning, module="google")

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT_DIR / "data"
STORE_DIR = DATA_DIR / "store"
ARTICLE_OUTPUT_DIR = ROOT_DIR / "output" / "articles"

# ── API Keys ───────────────────────────────────────────────────────────────
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
GOOGLE_CREDENTIALS_PATH = os.getenv("GOOGLE_CREDENTIALS_PATH", "credentials.json")
GOOGLE_SEARCH_API_KEY = os.getenv("GOOGLE_SEARCH_API_KEY", "")
GOOGLE_SEARCH_ENGINE_ID = os.getenv("GOOGLE_SEARCH_ENGINE_ID", "")

# ── Account ────────────────────────────────────────────────────────────────
# Owner id used to scope every store query; there is no session state.
SEO_USER_ID = os.getenv("SEO_USER_ID", "")
SITE_URL = os.getenv("SITE_URL", "https://example.com")

# ── Google Sheets (document store) ────────────────────────────────────────
SHEETS_SPREADSHEET_ID = os.getenv("SHEETS_SPREADSHEET_ID", "")

# ── Claude settings ────────────────────────────────────────────────────────
CLAUDE_MODEL = "claude-sonnet-4-5-20250929"
CLAUDE_TEMPERATURE = 0.7
ESTIMATOR_MODEL = "claude-haiku-4-5-20251001"  # fast model for keyword metrics

# ── Image settings ─────────────────────────────────────────────────────────
IMAGE_MODEL = "dall-e-3"
IMAGE_SIZE = "1792x1024"  # closest to 16:9

# ── Article generation settings ────────────────────────────────────────────
CONTENT_MAX_TOKENS = 2500  # ~1500-2000 words
META_MAX_TOKENS = 100

# ── Dashboard settings ─────────────────────────────────────────────────────
RECENT_ARTICLES_LIMIT = 5

# ── Ranking check settings ─────────────────────────────────────────────────
RANKING_MAX_ARTICLES = 3
RANKING_MAX_KEYWORDS = 2
RANKING_RESULT_LIMIT = 50  # positions past this window count as not ranked
KEYWORD_RESULT_LIMIT = 10  # results fed to the keyword estimator
