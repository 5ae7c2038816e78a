"""Theme Header configuration — loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Root of the repo
REPO_ROOT = Path(__file__).resolve().parent.parent

# Site content (objects, custom fields, attachments, menus)
CONTENT_PATH = Path(os.environ.get("CONTENT_PATH", str(REPO_ROOT / "content" / "site.json")))

# Jinja2 templates (pages + template parts)
WEB_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

# Default ("mainsite") navigation feed
MAINSITE_NAV_URL = os.environ.get(
    "MAINSITE_NAV_URL", "https://www.ucf.edu/wp-json/ucf-rest-menus/v1/menus/23"
)
MAINSITE_NAV_CACHE_TTL = int(os.environ.get("MAINSITE_NAV_CACHE_TTL", str(60 * 60 * 24)))
NAV_FETCH_TIMEOUT = float(os.environ.get("NAV_FETCH_TIMEOUT", "5"))

# Bearer secret for admin endpoints (cache flush)
ADMIN_SECRET = os.environ.get("ADMIN_SECRET", "")

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
