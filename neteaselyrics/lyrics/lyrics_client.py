"""网易云音乐API客户端 - 歌曲匹配和原始歌词获取"""

import logging
from functools import partial
from typing import Any, Optional

from neteaselyrics.core.interfaces import ILyricsProvider, TrackQuery, Candidate, RawLyricPayload
from neteaselyrics.lyrics import matcher
from neteaselyrics.lyrics.matcher import FetchJson
from neteaselyrics.utils.config_manager import ConfigManager, DEFAULT_SEARCH_API, DEFAULT_LYRICS_API
from neteaselyrics.utils.http_client import fetch_json as http_fetch_json, DEFAULT_TIMEOUT


class NetEaseCloudMusicClient(ILyricsProvider):
    """
    网易云音乐API客户端

    通过PyNCM镜像接口搜索歌曲并获取其歌词。客户端不保存任何跨调用的状态，
    多个查找可以并发执行。
    """

    def __init__(self, config: Optional[ConfigManager] = None, fetch_json: Optional[FetchJson] = None):
        """
        初始化网易云音乐客户端

        Args:
            config: 配置管理器实例，为None时使用默认API地址和超时
            fetch_json: 异步GET并返回JSON的函数，为None时使用aiohttp实现
        """
        self.logger = logging.getLogger("neteaselyrics.lyrics.lyrics_client")
        self.config = config

        # API端点
        if config:
            self.search_api = config.get_search_api()
            self.lyrics_api = config.get_lyrics_api()
            timeout = config.get_request_timeout()
            headers = config.get_request_headers()
        else:
            self.search_api = DEFAULT_SEARCH_API
            self.lyrics_api = DEFAULT_LYRICS_API
            timeout = DEFAULT_TIMEOUT
            headers = None

        self.fetch_json = fetch_json or partial(http_fetch_json, timeout=timeout, headers=headers)

        self.logger.debug("网易云音乐客户端初始化完成")

    async def search(self, track: TrackQuery) -> Candidate:
        """
        搜索曲目并返回第一个匹配的候选歌曲

        Args:
            track: 曲目查询

        Returns:
            匹配的候选歌曲

        Raises:
            NotFoundError: 没有候选满足专辑或时长匹配条件
        """
        return await matcher.search(track, self.fetch_json, self.search_api)

    async def get_lyrics(self, song_id: Any) -> RawLyricPayload:
        """
        获取歌曲的原始歌词

        Args:
            song_id: 网易云音乐歌曲ID

        Returns:
            原始歌词数据
        """
        self.logger.debug(f"获取歌曲ID的歌词: {song_id}")
        data = await self.fetch_json(f"{self.lyrics_api}{song_id}")
        payload = RawLyricPayload.from_response(data)

        if payload.is_empty():
            self.logger.info(f"歌曲ID没有歌词内容: {song_id}")
        else:
            self.logger.info(f"成功获取歌曲ID的歌词: {song_id}")
        return payload

    async def find_lyrics(self, track: TrackQuery) -> RawLyricPayload:
        """
        搜索曲目并获取其原始歌词

        Args:
            track: 曲目查询

        Returns:
            原始歌词数据

        Raises:
            NotFoundError: 没有候选满足专辑或时长匹配条件
        """
        candidate = await self.search(track)
        return await self.get_lyrics(candidate.id)
