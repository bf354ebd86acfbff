import logging

from flask import Flask, request
from slack_bolt import App
from slack_bolt.adapter.flask import SlackRequestHandler

import config
from boltApp import create_bolt_app
from handlers.channel_list import register_channel_list_command


def _setup_logging() -> None:
	logging.basicConfig(
		level=config.LOG_LEVEL,
		format="%(asctime)s %(levelname)s %(name)s - %(message)s",
	)

	# Slackライブラリ等のログは WARNING 以上のみ
	logging.getLogger("slack_bolt").setLevel(logging.WARNING)
	logging.getLogger("slack_sdk").setLevel(logging.WARNING)
	logging.getLogger("urllib3").setLevel(logging.ERROR)
	logging.getLogger("aiohttp").setLevel(logging.WARNING)
	logging.getLogger("werkzeug").setLevel(logging.ERROR)
	logging.getLogger("flask").setLevel(logging.ERROR)


def create_flask_app(bolt_app: App) -> Flask:
	flask_app = Flask(__name__)
	handler = SlackRequestHandler(bolt_app)

	@flask_app.route("/slack/events", methods=["POST"])
	def slack_events():  # type: ignore[no-redef]
		return handler.handle(request)

	@flask_app.get("/health")
	def health():
		return "ok", 200

	return flask_app


def main() -> int:
	_setup_logging()
	logger = logging.getLogger("channel-list-bot")

	bolt_app = create_bolt_app()
	register_channel_list_command(bolt_app, config.CHANNEL_LIST_COMMAND)

	if config.SLACK_APP_TOKEN:
		# Socket Mode: ポートは開かない
		from slack_bolt.adapter.socket_mode import SocketModeHandler

		logger.info("⚡️ Socket Mode で起動します (%s)", config.CHANNEL_LIST_COMMAND)
		SocketModeHandler(bolt_app, config.SLACK_APP_TOKEN).start()
		return 0

	logger.info("HTTP モードで起動します port=%d (%s)", config.PORT, config.CHANNEL_LIST_COMMAND)
	flask_app = create_flask_app(bolt_app)
	flask_app.run(host="0.0.0.0", port=config.PORT)
	return 0

if __name__ == "__main__":
	raise SystemExit(main())
