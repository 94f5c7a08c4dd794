"""
歌词模块 - 歌曲匹配、歌词获取和解析功能

提供网易云音乐歌曲匹配，以及逐字、同步、非同步和翻译歌词的解析。
"""

from .matcher import search, build_search_query, select_candidate
from .lyrics_parser import (
    parse_timestamped_line,
    tokenize_karaoke,
    is_credit_line,
    get_karaoke,
    get_synced,
    get_unsynced,
    get_translation,
    get_romanization,
)
from .lyrics_client import NetEaseCloudMusicClient
from .lyrics_manager import LyricsManager

__all__ = [
    'search',
    'build_search_query',
    'select_candidate',
    'parse_timestamped_line',
    'tokenize_karaoke',
    'is_credit_line',
    'get_karaoke',
    'get_synced',
    'get_unsynced',
    'get_translation',
    'get_romanization',
    'NetEaseCloudMusicClient',
    'LyricsManager',
]
