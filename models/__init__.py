from .channel_report import (
    Channel,
    ChannelPage,
    ComparisonReport,
    ComparisonResult,
    ErrorReport,
    FormattedReport,
    SingleUserReport,
    UsageReport,
    UserProfile,
    compare_channels,
)

__all__ = [
    'Channel',
    'ChannelPage',
    'ComparisonReport',
    'ComparisonResult',
    'ErrorReport',
    'FormattedReport',
    'SingleUserReport',
    'UsageReport',
    'UserProfile',
    'compare_channels',
]
