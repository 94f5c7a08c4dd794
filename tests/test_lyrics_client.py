"""
网易云音乐客户端测试

测试客户端的配置读取、搜索与歌词获取流程，以及错误传播。
"""

import pytest
from unittest.mock import AsyncMock, Mock
from urllib.parse import quote

import aiohttp

from neteaselyrics.core.interfaces import TrackQuery, RawLyricPayload
from neteaselyrics.exceptions import NotFoundError, InvalidResponseError
from neteaselyrics.lyrics.lyrics_client import NetEaseCloudMusicClient
from neteaselyrics.utils.config_manager import ConfigManager, DEFAULT_SEARCH_API, DEFAULT_LYRICS_API
from neteaselyrics.utils.http_client import fetch_json as http_fetch_json

SEARCH_API = "https://example.com/search?keyword="
LYRICS_API = "https://example.com/lyric?id="

SEARCH_RESPONSE = {
    "result": {
        "songs": [
            {"id": 111, "name": "海阔天空", "dt": 326000, "al": {"name": "乐与怒"}},
            {"id": 222, "name": "海阔天空", "dt": 324000, "al": {"name": "海阔天空"}},
        ],
        "songCount": 2
    },
    "code": 200
}

LYRIC_RESPONSE = {
    "lrc": {"version": 1, "lyric": "[00:16.00]今天我\n[00:19.50]寒夜里看雪飘过"},
    "klyric": {"version": 0, "lyric": ""},
    "tlyric": {"version": 0, "lyric": ""},
    "code": 200
}


def make_fetch_json(responses):
    """根据URL前缀返回对应响应的模拟fetch_json"""
    async def fetch(url):
        for prefix, response in responses.items():
            if url.startswith(prefix):
                return response
        raise AssertionError(f"unexpected url: {url}")

    return AsyncMock(side_effect=fetch)


class TestNetEaseCloudMusicClient:
    """网易云音乐客户端测试类"""

    @pytest.fixture
    def mock_config(self):
        """创建模拟配置"""
        config = Mock(spec=ConfigManager)
        config.get_search_api.return_value = SEARCH_API
        config.get_lyrics_api.return_value = LYRICS_API
        config.get_request_timeout.return_value = 5
        config.get_request_headers.return_value = {"Cookie": "os=pc"}
        return config

    def test_defaults_without_config(self):
        """测试没有配置时使用默认API和aiohttp传输"""
        client = NetEaseCloudMusicClient()

        assert client.search_api == DEFAULT_SEARCH_API
        assert client.lyrics_api == DEFAULT_LYRICS_API
        assert client.fetch_json.func is http_fetch_json
        assert client.fetch_json.keywords["timeout"] == 10

    def test_reads_config(self, mock_config):
        """测试从配置读取API地址、超时和请求头"""
        client = NetEaseCloudMusicClient(mock_config)

        assert client.search_api == SEARCH_API
        assert client.lyrics_api == LYRICS_API
        assert client.fetch_json.keywords == {"timeout": 5, "headers": {"Cookie": "os=pc"}}

    @pytest.mark.asyncio
    async def test_find_lyrics_by_duration(self, mock_config):
        """测试按时长匹配后获取歌词"""
        fetch_json = make_fetch_json({SEARCH_API: SEARCH_RESPONSE, LYRICS_API: LYRIC_RESPONSE})
        client = NetEaseCloudMusicClient(mock_config, fetch_json=fetch_json)
        track = TrackQuery(title="海阔天空", artist="Beyond", album="Unknown", duration_ms=324500)

        payload = await client.find_lyrics(track)

        assert payload == RawLyricPayload(primary="[00:16.00]今天我\n[00:19.50]寒夜里看雪飘过")
        assert fetch_json.await_count == 2
        assert fetch_json.await_args_list[0].args[0] == SEARCH_API + quote("海阔天空 Beyond")
        assert fetch_json.await_args_list[1].args[0] == f"{LYRICS_API}222"

    @pytest.mark.asyncio
    async def test_find_lyrics_by_album(self, mock_config):
        """测试按专辑匹配时采用第一个满足条件的候选"""
        fetch_json = make_fetch_json({SEARCH_API: SEARCH_RESPONSE, LYRICS_API: LYRIC_RESPONSE})
        client = NetEaseCloudMusicClient(mock_config, fetch_json=fetch_json)
        track = TrackQuery(title="海阔天空", artist="Beyond", album="乐与怒", duration_ms=1)

        await client.find_lyrics(track)

        assert fetch_json.await_args_list[1].args[0] == f"{LYRICS_API}111"

    @pytest.mark.asyncio
    async def test_find_lyrics_not_found(self, mock_config):
        """测试没有匹配歌曲时抛出NotFoundError且不请求歌词"""
        fetch_json = make_fetch_json({SEARCH_API: SEARCH_RESPONSE})
        client = NetEaseCloudMusicClient(mock_config, fetch_json=fetch_json)
        track = TrackQuery(title="海阔天空", artist="Beyond", album="Other", duration_ms=100000)

        with pytest.raises(NotFoundError):
            await client.find_lyrics(track)

        assert fetch_json.await_count == 1

    @pytest.mark.asyncio
    async def test_get_lyrics_reads_all_blocks(self, mock_config):
        """测试读取全部四个歌词文本块"""
        fetch_json = AsyncMock(return_value={
            "lrc": {"lyric": "[00:01.00]a"},
            "klyric": {"lyric": "[1000,500](0,500)a"},
            "tlyric": {"lyric": "[00:01.00]甲"},
            "romalrc": {"lyric": "[00:01.00]a"},
        })
        client = NetEaseCloudMusicClient(mock_config, fetch_json=fetch_json)

        payload = await client.get_lyrics(42)

        assert payload.primary == "[00:01.00]a"
        assert payload.karaoke == "[1000,500](0,500)a"
        assert payload.translation == "[00:01.00]甲"
        assert payload.romanization == "[00:01.00]a"
        fetch_json.assert_awaited_once_with(f"{LYRICS_API}42")

    @pytest.mark.asyncio
    async def test_get_lyrics_without_content(self, mock_config):
        """测试没有歌词内容的响应"""
        client = NetEaseCloudMusicClient(mock_config, fetch_json=AsyncMock(return_value={"code": 200}))

        payload = await client.get_lyrics(42)

        assert payload.is_empty()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        aiohttp.ClientConnectionError("connection refused"),
        InvalidResponseError("收到空响应"),
    ])
    async def test_errors_propagate(self, mock_config, error):
        """测试传输错误直接抛出"""
        client = NetEaseCloudMusicClient(mock_config, fetch_json=AsyncMock(side_effect=error))

        with pytest.raises(type(error)):
            await client.get_lyrics(42)
