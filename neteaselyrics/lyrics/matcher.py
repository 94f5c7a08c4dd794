"""
歌曲匹配 - 在网易云音乐搜索结果中选择与曲目对应的候选歌曲

目录搜索是模糊文本匹配，没有可靠的唯一键。专辑名称和时长作为
两个独立的判别条件，按搜索结果的原始顺序返回第一个满足任一条件的候选。
"""

import logging
from typing import Any, Awaitable, Callable, Iterable, List
from urllib.parse import quote

from neteaselyrics.core.interfaces import TrackQuery, Candidate
from neteaselyrics.exceptions import NotFoundError
from neteaselyrics.utils.text_utils import (
    normalize,
    remove_song_feat,
    remove_extra_info,
    contains_han_character,
    to_simplified_chinese,
)

logger = logging.getLogger("neteaselyrics.lyrics.matcher")

# 时长差小于该值（毫秒）即视为匹配
DURATION_TOLERANCE_MS = 1000

FetchJson = Callable[[str], Awaitable[Any]]


def build_search_query(track: TrackQuery) -> str:
    """
    构建搜索关键词

    清理标题中的合作艺术家标注和附加信息后与艺术家名称拼接。

    Args:
        track: 曲目查询

    Returns:
        "<清理后的标题> <艺术家>" 形式的搜索关键词
    """
    clean_title = remove_extra_info(remove_song_feat(normalize(track.title)))
    return f"{clean_title} {track.artist}"


async def resolve_expected_album(album: str) -> str:
    """
    规范化查询的专辑名称，包含汉字时转换为简体中文

    网易云音乐的专辑名称通常为简体中文。

    Args:
        album: 查询中的专辑名称

    Returns:
        用于比较的专辑名称
    """
    normalized = normalize(album)
    if contains_han_character(normalized):
        return await to_simplified_chinese(normalized)
    return normalized


def is_album_match(expected_album: str, candidate: Candidate) -> bool:
    """检查候选歌曲的专辑名称是否与规范化后的查询专辑相同（两者都为空时也视为相同）"""
    return normalize(candidate.album_name) == expected_album


def is_duration_match(track: TrackQuery, candidate: Candidate) -> bool:
    """检查候选歌曲的时长是否与查询时长相差不到一秒"""
    if candidate.duration_ms is None:
        return False
    return abs(track.duration_ms - candidate.duration_ms) < DURATION_TOLERANCE_MS


def select_candidate(
    track: TrackQuery,
    candidates: Iterable[Candidate],
    expected_album: str
) -> Candidate:
    """
    按原始顺序返回第一个满足专辑匹配或时长匹配的候选

    Args:
        track: 曲目查询
        candidates: 搜索结果中的候选歌曲
        expected_album: resolve_expected_album 返回的专辑名称

    Returns:
        第一个被接受的候选

    Raises:
        NotFoundError: 没有候选满足任一条件
    """
    for candidate in candidates:
        if is_album_match(expected_album, candidate) or is_duration_match(track, candidate):
            logger.debug(f"接受候选歌曲: {candidate.id} (专辑: {candidate.album_name})")
            return candidate

    raise NotFoundError("Cannot find track", query=build_search_query(track))


def parse_search_response(data: Any) -> List[Candidate]:
    """
    从搜索API响应中读取候选歌曲列表

    Args:
        data: 搜索API返回的JSON

    Returns:
        候选歌曲列表，响应中没有歌曲时为空列表
    """
    result = data.get('result') if isinstance(data, dict) else None
    songs = result.get('songs') if isinstance(result, dict) else None
    if not songs:
        return []
    return [Candidate.from_song(song) for song in songs if isinstance(song, dict)]


async def search(track: TrackQuery, fetch_json: FetchJson, search_api: str) -> Candidate:
    """
    搜索曲目并选择匹配的候选歌曲

    Args:
        track: 曲目查询
        fetch_json: 异步GET并返回JSON的函数
        search_api: 搜索API地址，关键词经URL编码后拼接在末尾

    Returns:
        第一个被接受的候选

    Raises:
        NotFoundError: 搜索结果为空或没有候选满足匹配条件
    """
    query = build_search_query(track)
    logger.debug(f"搜索网易云音乐: {query}")

    data = await fetch_json(search_api + quote(query, safe="-_.!~*'()"))
    candidates = parse_search_response(data)
    logger.debug(f"找到 {len(candidates)} 个候选歌曲")

    expected_album = await resolve_expected_album(track.album)
    return select_candidate(track, candidates, expected_album)
