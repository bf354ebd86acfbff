"""
Slack-backed user directory.

Only two Web API methods are needed: ``users.info`` to resolve a mention
into a profile and ``users.conversations`` to page through the channels a
user belongs to.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from models.channel_report import Channel, ChannelPage, UserProfile
from .errors import FetchError, ResolutionError


logger = logging.getLogger(__name__)

CHANNEL_TYPES = "public_channel,private_channel"


class DirectoryClient(Protocol):
    async def resolve_user(self, user_id: str) -> UserProfile: ...

    async def list_channels_page(self, user_id: str, cursor: Optional[str]) -> ChannelPage: ...


def _error_reason(e: SlackClientError) -> str:
    if isinstance(e, SlackApiError) and e.response is not None:
        return str(e.response.get("error") or e)
    return str(e)


def profile_from_user(user: dict[str, Any]) -> UserProfile:
    """Build a profile from a ``users.info`` user object."""
    user_id = user.get("id", "")
    display_name = user.get("real_name") or user.get("name") or user_id
    return UserProfile(id=user_id, display_name=display_name)


class SlackDirectoryClient:
    def __init__(self, client: AsyncWebClient, page_size: int = 100):
        self.client = client
        self.page_size = page_size

    async def resolve_user(self, user_id: str) -> UserProfile:
        try:
            res = await self.client.users_info(user=user_id)
        except SlackClientError as e:
            raise ResolutionError(user_id, _error_reason(e)) from e

        user = res.get("user")
        if not user:
            raise ResolutionError(user_id, "user_not_found")
        return profile_from_user(user)

    async def list_channels_page(self, user_id: str, cursor: Optional[str]) -> ChannelPage:
        try:
            res = await self.client.users_conversations(
                user=user_id,
                types=CHANNEL_TYPES,
                limit=self.page_size,
                cursor=cursor,
            )
        except SlackClientError as e:
            raise FetchError(user_id, _error_reason(e)) from e

        channels = [
            Channel(id=c["id"], name=c.get("name") or c["id"])
            for c in (res.get("channels") or [])
        ]
        next_cursor = (res.get("response_metadata") or {}).get("next_cursor") or None
        logger.debug("users.conversations user=%s got %d channels, next_cursor=%s", user_id, len(channels), bool(next_cursor))
        return ChannelPage(channels=channels, next_cursor=next_cursor)
