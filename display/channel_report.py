"""/channel-list のレポートを Slack Block Kit に変換する"""
from __future__ import annotations

from typing import Any

from models.channel_report import (
	Channel,
	ComparisonReport,
	ErrorReport,
	FormattedReport,
	SingleUserReport,
	UsageReport,
)

# Slack の section text 上限
SECTION_TEXT_LIMIT = 3000
# 1メッセージあたりの block 上限
MESSAGE_BLOCK_LIMIT = 50


def channel_link(channel: Channel) -> str:
	return f"- <#{channel.id}|{channel.name}>"


def channel_lines(channels: list[Channel], placeholder: str) -> str:
	if not channels:
		return placeholder
	return "\n".join(channel_link(c) for c in channels)


def _section(text: str) -> dict[str, Any]:
	return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def _sections(text: str) -> list[dict[str, Any]]:
	"""長いテキストを行単位で分割し、複数の section にする"""
	blocks: list[dict[str, Any]] = []
	chunk = ""
	for line in text.split("\n"):
		candidate = f"{chunk}\n{line}" if chunk else line
		if chunk and len(candidate) > SECTION_TEXT_LIMIT:
			blocks.append(_section(chunk))
			candidate = line
		chunk = candidate
	blocks.append(_section(chunk))
	return blocks


def _channel_sections(heading: str, channels: list[Channel], placeholder: str, max_blocks: int) -> list[dict[str, Any]]:
	"""見出し + チャンネル一覧を最大 max_blocks 個の section にまとめる

	Channels that do not fit are summarised in the last section as
	"…and N more channels not shown."
	"""
	blocks = _sections(f"{heading}\n{channel_lines(channels, placeholder)}")
	if len(blocks) <= max_blocks:
		return blocks

	kept = blocks[:max_blocks - 1]
	shown = sum(
		1
		for block in kept
		for line in block["text"]["text"].split("\n")
		if line.startswith("- <#")
	)
	kept.append(_section(f"_…and {len(channels) - shown} more channels not shown._"))
	return kept


class SlackReportRenderer:
	"""Turns a report into keyword arguments for Bolt's ``say``."""

	def __init__(self, command: str = "/channel-list"):
		self.command = command

	def render(self, report: FormattedReport) -> dict[str, Any]:
		if isinstance(report, UsageReport):
			return self.render_usage(report)
		if isinstance(report, SingleUserReport):
			return self.render_single(report)
		if isinstance(report, ComparisonReport):
			return self.render_comparison(report)
		if isinstance(report, ErrorReport):
			return self.render_error(report)
		raise TypeError(f"unsupported report type: {type(report).__name__}")

	def render_usage(self, report: UsageReport) -> dict[str, Any]:
		command = report.command or self.command
		text = f"Please specify *one or two* users.\n\n*Usage:* `{command} @user1 [@user2]`"
		return {
			"blocks": [_section(text)],
			"text": f"Please specify one or two users. Usage: {command} @user1 [@user2]",
		}

	def render_single(self, report: SingleUserReport) -> dict[str, Any]:
		name = report.user.display_name
		heading = f"*Channels for {name}:*\n\n*Total Channels:* {report.total}\n"
		return {
			"blocks": _channel_sections(heading, report.channels, "_No channels found._", MESSAGE_BLOCK_LIMIT),
			"text": f"Channel list for {name}.",
		}

	def render_comparison(self, report: ComparisonReport) -> dict[str, Any]:
		first = report.first.display_name
		second = report.second.display_name
		result = report.result

		totals = (
			f"*Totals:* {len(report.first_channels)} for {first}, {len(report.second_channels)} for {second}\n"
			f"*Shared:* {len(result.shared)}\n"
			f"*Unique:* {len(result.unique_to_first)} vs {len(result.unique_to_second)}"
		)
		blocks: list[dict[str, Any]] = [
			_section(f"*Channel Membership Report for {first} and {second}*"),
			{"type": "divider"},
			_section(totals),
			{"type": "divider"},
		]
		# 残りの block 数を3つの一覧で均等に分ける
		per_list = (MESSAGE_BLOCK_LIMIT - len(blocks)) // 3
		blocks.extend(_channel_sections("*Shared Channels*", result.shared, "_No shared channels found._", per_list))
		blocks.extend(_channel_sections(f"*Unique to {first}*", result.unique_to_first, f"_{first} has no unique channels._", per_list))
		blocks.extend(_channel_sections(f"*Unique to {second}*", result.unique_to_second, f"_{second} has no unique channels._", per_list))
		return {"blocks": blocks, "text": "Channel membership report."}

	def render_error(self, report: ErrorReport) -> dict[str, Any]:
		return {"text": f"An error occurred while processing your request: {report.message}"}
