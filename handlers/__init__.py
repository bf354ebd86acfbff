"""
スラッシュコマンドのハンドラーパッケージ
"""

from .channel_list import register_channel_list_command

__all__ = [
    'register_channel_list_command'
]
