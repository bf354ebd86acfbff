import sys
import logging
from typing import Optional

from slack_bolt import App

import config

logger = logging.getLogger(__name__)


def create_bolt_app(token: Optional[str] = None, signing_secret: Optional[str] = None) -> App:
	bot_token = token if token is not None else config.SLACK_BOT_TOKEN
	secret = signing_secret if signing_secret is not None else config.SLACK_SIGNING_SECRET

	logger.info("[boltApp] 環境変数確認:")
	logger.info(f"  - SLACK_BOT_TOKEN: {'設定済み' if bot_token else '未設定'}")
	logger.info(f"  - SLACK_SIGNING_SECRET: {'設定済み' if secret else '未設定'}")
	logger.info(f"  - SLACK_APP_TOKEN: {'設定済み' if config.SLACK_APP_TOKEN else '未設定'}")

	if not bot_token:
		logger.error("[boltApp] SLACK_BOT_TOKEN が未設定です")
		print(
			"[設定不足] SLACK_BOT_TOKEN を .env に設定してください。\n",
			file=sys.stderr,
		)
	if not secret and not config.SLACK_APP_TOKEN:
		logger.warning("[boltApp] HTTP モードでは SLACK_SIGNING_SECRET が必要です")

	return App(token=bot_token or None, signing_secret=secret or None)
