#!/usr/bin/env python3
"""Theme Header — page header and navigation server.

Launch: python3 header_server.py
Serves at http://0.0.0.0:8000 (or PORT env var)
"""

import logging

import uvicorn

from theme_header.config import CONTENT_PATH, HOST, PORT, MAINSITE_NAV_URL


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  Theme Header")
    print("=" * 60)

    if not CONTENT_PATH.exists():
        print(f"\n  WARNING: content file not found at {CONTENT_PATH}")
        print("  Set CONTENT_PATH to your site.json. Headers will fall back to")
        print("  the site defaults and the mainsite nav.\n")

    print(f"  Default nav feed: {MAINSITE_NAV_URL}")
    url = f"http://{HOST}:{PORT}"
    print(f"\n  Preview: {url}/preview/front")
    print(f"  API docs: {url}/api/v1/docs")
    print("  Press Ctrl+C to stop\n")

    from theme_header.app import create_app
    app = create_app()
    uvicorn.run(app, host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()
