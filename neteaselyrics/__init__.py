"""
neteaselyrics - 网易云音乐歌词匹配与解析

根据曲目元数据在网易云音乐目录中定位第一个匹配的歌曲，
并将其逐行、逐字和翻译歌词转换为统一的时间索引格式。
"""

from neteaselyrics.core.interfaces import (
    TrackQuery,
    Candidate,
    RawLyricPayload,
    ParsedLine,
    UnsyncedLine,
    KaraokeWord,
    KaraokeLine,
    LyricsResult,
)
from neteaselyrics.exceptions import LyricsError, NotFoundError, InvalidResponseError
from neteaselyrics.lyrics import (
    NetEaseCloudMusicClient,
    LyricsManager,
    get_karaoke,
    get_synced,
    get_unsynced,
    get_translation,
    get_romanization,
)

__version__ = "1.0.0"

__all__ = [
    'TrackQuery',
    'Candidate',
    'RawLyricPayload',
    'ParsedLine',
    'UnsyncedLine',
    'KaraokeWord',
    'KaraokeLine',
    'LyricsResult',
    'LyricsError',
    'NotFoundError',
    'InvalidResponseError',
    'NetEaseCloudMusicClient',
    'LyricsManager',
    'get_karaoke',
    'get_synced',
    'get_unsynced',
    'get_translation',
    'get_romanization',
]
