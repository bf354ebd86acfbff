"""
config.py
---------
Loads environment variables from .env and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _get_env(key: str, default: str = "") -> str:
	val = os.getenv(key)
	return val.strip() if val and val.strip() else default


# ── Slack ─────────────────────────────────────────────────
SLACK_BOT_TOKEN: str = _get_env("SLACK_BOT_TOKEN")
SLACK_SIGNING_SECRET: str = _get_env("SLACK_SIGNING_SECRET")
# Socket Mode 用 (xapp-...)。未設定なら HTTP モード
SLACK_APP_TOKEN: str = _get_env("SLACK_APP_TOKEN")

# ── /channel-list ─────────────────────────────────────────
CHANNEL_LIST_COMMAND: str = _get_env("CHANNEL_LIST_COMMAND", "/channel-list")
CHANNEL_PAGE_SIZE: int = int(_get_env("CHANNEL_PAGE_SIZE", "100"))
CHANNEL_MAX_PAGES: int = int(_get_env("CHANNEL_MAX_PAGES", "1000"))

# ── Server ────────────────────────────────────────────────
PORT: int = int(_get_env("PORT", "3001"))
LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO").upper()
