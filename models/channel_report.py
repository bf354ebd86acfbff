"""
models/channel_report.py
------------------------
Value types for the /channel-list command and the set arithmetic
behind the two-user comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class UserProfile:
    id: str
    display_name: str


@dataclass(frozen=True)
class Channel:
    id: str
    name: str


@dataclass(frozen=True)
class ChannelPage:
    channels: list[Channel] = field(default_factory=list)
    next_cursor: Optional[str] = None


@dataclass(frozen=True)
class ComparisonResult:
    shared: list[Channel]
    unique_to_first: list[Channel]
    unique_to_second: list[Channel]


def compare_channels(first: list[Channel], second: list[Channel]) -> ComparisonResult:
    """Split two channel sets by ID, keeping each source's fetch order."""
    first_ids = {c.id for c in first}
    second_ids = {c.id for c in second}
    return ComparisonResult(
        shared=[c for c in first if c.id in second_ids],
        unique_to_first=[c for c in first if c.id not in second_ids],
        unique_to_second=[c for c in second if c.id not in first_ids],
    )


# ── Reports ───────────────────────────────────────────────


@dataclass(frozen=True)
class UsageReport:
    command: str


@dataclass(frozen=True)
class SingleUserReport:
    user: UserProfile
    channels: list[Channel]

    @property
    def total(self) -> int:
        return len(self.channels)


@dataclass(frozen=True)
class ComparisonReport:
    first: UserProfile
    second: UserProfile
    first_channels: list[Channel]
    second_channels: list[Channel]
    result: ComparisonResult


@dataclass(frozen=True)
class ErrorReport:
    message: str


FormattedReport = Union[UsageReport, SingleUserReport, ComparisonReport, ErrorReport]
