"""歌词管理器 - 协调歌曲匹配、歌词获取和解析"""

import logging
from typing import Optional

from neteaselyrics.core.interfaces import ILyricsProvider, TrackQuery, RawLyricPayload, LyricsResult
from neteaselyrics.exceptions import NotFoundError
from neteaselyrics.utils.config_manager import ConfigManager
from .lyrics_client import NetEaseCloudMusicClient
from .lyrics_parser import get_karaoke, get_synced, get_unsynced, get_translation, get_romanization

PROVIDER_NAME = "Netease"


class LyricsManager:
    """
    歌词管理器

    协调歌词提供者和解析器，将一次查找的所有歌词格式汇总为 LyricsResult。
    不缓存任何结果。
    """

    def __init__(self, provider: Optional[ILyricsProvider] = None, config: Optional[ConfigManager] = None):
        """
        初始化歌词管理器

        Args:
            provider: 歌词提供者，为None时创建网易云音乐客户端
            config: 配置管理器实例，仅在创建默认提供者时使用
        """
        self.logger = logging.getLogger("neteaselyrics.lyrics.lyrics_manager")
        self.provider = provider or NetEaseCloudMusicClient(config)

    async def get_lyrics(self, track: TrackQuery) -> LyricsResult:
        """
        获取曲目的所有歌词格式

        未找到匹配歌曲时返回带 error 的结果；网络错误直接抛出。

        Args:
            track: 曲目查询

        Returns:
            歌词汇总结果
        """
        self.logger.info(f"获取歌词: {track.title} - {track.artist}")

        try:
            payload = await self.provider.find_lyrics(track)
        except NotFoundError as e:
            self.logger.info(f"未找到匹配歌曲: {e.query}")
            return LyricsResult(provider=PROVIDER_NAME, error="No lyrics")

        result = self.parse_payload(payload)
        if not result.has_lyrics():
            self.logger.info(f"歌词内容为空: {track.title}")
        return result

    def parse_payload(self, payload: RawLyricPayload) -> LyricsResult:
        """
        将原始歌词数据解析为所有歌词格式

        Args:
            payload: 原始歌词数据

        Returns:
            歌词汇总结果
        """
        return LyricsResult(
            provider=PROVIDER_NAME,
            karaoke=get_karaoke(payload),
            synced=get_synced(payload),
            unsynced=get_unsynced(payload),
            translation=get_translation(payload),
            romanization=get_romanization(payload)
        )
