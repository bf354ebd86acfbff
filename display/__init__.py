"""
/channel-list 表示パッケージ
"""
