"""
ユーザーディレクトリ（Slack Web API）パッケージ
"""

from .client import DirectoryClient, SlackDirectoryClient
from .errors import DirectoryError, FetchError, ResolutionError

__all__ = [
    'DirectoryClient',
    'SlackDirectoryClient',
    'DirectoryError',
    'FetchError',
    'ResolutionError',
]
