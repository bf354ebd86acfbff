"""
/channel-list スラッシュコマンド

One mentioned user gets a full channel list, two mentioned users get a
membership comparison (shared channels and channels unique to each).
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any, Callable, Optional, Protocol

from slack_bolt import App
from slack_sdk.web.async_client import AsyncWebClient

import config
from directory import DirectoryClient, FetchError, SlackDirectoryClient
from display.channel_report import SlackReportRenderer
from models.channel_report import (
    Channel,
    ComparisonReport,
    ErrorReport,
    FormattedReport,
    SingleUserReport,
    UsageReport,
    UserProfile,
    compare_channels,
)


logger = logging.getLogger(__name__)

MENTION_PATTERN = re.compile(r"<@([A-Z0-9]+)(?:\|[^>]*)?>")
MAX_USERS = 2


def extract_user_id(token: str) -> Optional[str]:
    match = MENTION_PATTERN.search(token)
    return match.group(1) if match else None


def parse_user_ids(text: Optional[str]) -> list[str]:
    """Pull user IDs out of mention tokens, in order, keeping duplicates."""
    tokens = (text or "").split()
    return [uid for uid in map(extract_user_id, tokens) if uid]


async def resolve_users(directory: DirectoryClient, user_ids: list[str]) -> list[UserProfile]:
    return list(await asyncio.gather(*(directory.resolve_user(uid) for uid in user_ids)))


async def fetch_user_channels(
    directory: DirectoryClient,
    user_id: str,
    max_pages: int = config.CHANNEL_MAX_PAGES,
) -> list[Channel]:
    """Follow ``next_cursor`` until exhausted and return every channel.

    Raises FetchError when the cursor repeats or more than ``max_pages``
    pages come back. Channels already seen (by ID) are skipped.
    """
    channels: list[Channel] = []
    seen_ids: set[str] = set()
    seen_cursors: set[str] = set()
    cursor: Optional[str] = None
    pages = 0

    while True:
        page = await directory.list_channels_page(user_id, cursor)
        pages += 1
        for channel in page.channels:
            if channel.id in seen_ids:
                logger.debug("duplicate channel %s for user %s skipped", channel.id, user_id)
                continue
            seen_ids.add(channel.id)
            channels.append(channel)

        cursor = page.next_cursor or None
        if not cursor:
            break
        if cursor in seen_cursors:
            raise FetchError(user_id, f"pagination cursor repeated after {pages} pages")
        if pages >= max_pages:
            raise FetchError(user_id, f"more than {max_pages} pages of channels")
        seen_cursors.add(cursor)

    logger.info("fetched %d channels for user %s in %d pages", len(channels), user_id, pages)
    return channels


class Responder(Protocol):
    async def send_message(self, report: FormattedReport) -> None: ...


class SayResponder:
    """Delivers reports through Bolt's ``say``."""

    def __init__(self, say: Callable[..., Any], renderer: SlackReportRenderer):
        self.say = say
        self.renderer = renderer

    async def send_message(self, report: FormattedReport) -> None:
        payload = self.renderer.render(report)
        # say は同期APIなのでスレッドで実行
        await asyncio.to_thread(self.say, **payload)


class ChannelListCommand:
    def __init__(
        self,
        directory: DirectoryClient,
        responder: Responder,
        command_name: str = config.CHANNEL_LIST_COMMAND,
        max_pages: int = config.CHANNEL_MAX_PAGES,
    ):
        self.directory = directory
        self.responder = responder
        self.command_name = command_name
        self.max_pages = max_pages

    async def handle(self, text: Optional[str]) -> FormattedReport:
        """Run one invocation and send exactly one response."""
        user_ids = parse_user_ids(text)

        if not 1 <= len(user_ids) <= MAX_USERS:
            logger.info("usage shown: %d user mentions in %r", len(user_ids), text)
            report: FormattedReport = UsageReport(self.command_name)
        else:
            try:
                report = await self.build_report(user_ids)
            except Exception as e:
                logger.exception("%s failed for users %s", self.command_name, user_ids)
                report = ErrorReport(str(e))

        await self.responder.send_message(report)
        return report

    async def build_report(self, user_ids: list[str]) -> FormattedReport:
        profiles = await resolve_users(self.directory, user_ids)

        if len(user_ids) == 1:
            channels = await fetch_user_channels(self.directory, user_ids[0], self.max_pages)
            return SingleUserReport(user=profiles[0], channels=channels)

        first_channels, second_channels = await asyncio.gather(
            fetch_user_channels(self.directory, user_ids[0], self.max_pages),
            fetch_user_channels(self.directory, user_ids[1], self.max_pages),
        )
        return ComparisonReport(
            first=profiles[0],
            second=profiles[1],
            first_channels=first_channels,
            second_channels=second_channels,
            result=compare_channels(first_channels, second_channels),
        )


def slack_directory(token: Optional[str]) -> DirectoryClient:
    return SlackDirectoryClient(AsyncWebClient(token=token), page_size=config.CHANNEL_PAGE_SIZE)


def register_channel_list_command(
    app: App,
    command_name: str = config.CHANNEL_LIST_COMMAND,
    directory_factory: Callable[[Optional[str]], DirectoryClient] = slack_directory,
) -> None:
    """Register the slash command listener on a Bolt app."""
    renderer = SlackReportRenderer(command_name)

    @app.command(command_name)
    def handle_channel_list(ack, command, say, client):  # type: ignore[no-redef]
        # 3秒以内に応答する必要があるため先に ack
        ack()

        handler = ChannelListCommand(
            directory_factory(client.token),
            SayResponder(say, renderer),
            command_name=command_name,
        )
        try:
            asyncio.run(handler.handle(command.get("text")))
        except Exception as e:
            # 返信に失敗した場合もエラーメッセージを1件返す
            logger.exception("%s reply failed", command_name)
            say(**renderer.render(ErrorReport(str(e))))
