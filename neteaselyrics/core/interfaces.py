"""
核心接口定义 - 定义歌词模块间共享的数据类和抽象接口

所有数据对象在每次调用时新建，调用结束后丢弃，
不在调用之间共享或修改。
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrackQuery:
    """曲目查询数据类"""
    title: str
    artist: str
    album: str = ""
    duration_ms: int = 0  # 曲目时长（毫秒）

    def __post_init__(self):
        if self.duration_ms < 0:
            raise ValueError(f"曲目时长不能为负数: {self.duration_ms}")


@dataclass(frozen=True)
class Candidate:
    """
    搜索候选歌曲数据类

    远程目录搜索结果中的一项。结果列表的顺序仅作为遍历顺序，
    第一个满足匹配规则的候选即被采用。
    """
    id: Any
    duration_ms: Optional[int]
    album_name: str = ""

    @classmethod
    def from_song(cls, song: Dict[str, Any]) -> "Candidate":
        """
        从搜索API返回的歌曲数据构建候选对象

        Args:
            song: API返回的歌曲字典（包含 id、dt、al 字段）

        Returns:
            候选歌曲对象
        """
        duration = song.get('dt')
        album = song.get('al')
        album_name = album.get('name') if isinstance(album, dict) else None
        return cls(
            id=song.get('id'),
            duration_ms=int(duration) if isinstance(duration, (int, float)) else None,
            album_name=album_name if isinstance(album_name, str) else ""
        )


def _block_text(data: Dict[str, Any], key: str) -> Optional[str]:
    block = data.get(key)
    if not isinstance(block, dict):
        return None
    lyric = block.get('lyric')
    if not isinstance(lyric, str) or not lyric.strip():
        return None
    return lyric


@dataclass(frozen=True)
class RawLyricPayload:
    """
    原始歌词数据

    每个文本块都是可选的多行字符串，缺失时为None：
    - primary: 逐行同步歌词
    - karaoke: 逐字同步歌词
    - translation: 逐行同步翻译
    - romanization: 逐行同步罗马音
    """
    primary: Optional[str] = None
    karaoke: Optional[str] = None
    translation: Optional[str] = None
    romanization: Optional[str] = None

    @classmethod
    def from_response(cls, data: Optional[Dict[str, Any]]) -> "RawLyricPayload":
        """
        从歌词API响应构建原始歌词数据

        Args:
            data: API返回的JSON字典（lrc、klyric、tlyric、romalrc 字段）

        Returns:
            原始歌词数据，缺失或空白的文本块为None
        """
        if not isinstance(data, dict):
            return cls()
        return cls(
            primary=_block_text(data, 'lrc'),
            karaoke=_block_text(data, 'klyric'),
            translation=_block_text(data, 'tlyric'),
            romanization=_block_text(data, 'romalrc')
        )

    def is_empty(self) -> bool:
        return not any((self.primary, self.karaoke, self.translation, self.romanization))


@dataclass(frozen=True)
class TimestampedLine:
    """单行解析结果：时间标记和文本都可能缺失"""
    time: Optional[str] = None
    text: Optional[str] = None


@dataclass
class ParsedLine:
    """逐行同步歌词行（用于同步歌词和翻译）"""
    start_time_ms: int
    text: str


@dataclass
class UnsyncedLine:
    """非同步歌词行，时间保留为原始标记，不要求为数字"""
    time: Optional[str]
    text: str


@dataclass
class KaraokeWord:
    """逐字歌词中的单个词，偏移量相对于所在行的开始时间"""
    word: str
    offset_ms: int


@dataclass
class KaraokeLine:
    """逐字同步歌词行"""
    start_time_ms: int
    words: List[KaraokeWord] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(word.word for word in self.words)


@dataclass
class LyricsResult:
    """
    单次歌词查找的汇总结果

    各模式的结果为None表示"无数据"，与该文本块缺失无法区分。
    """
    provider: str
    karaoke: Optional[List[KaraokeLine]] = None
    synced: Optional[List[ParsedLine]] = None
    unsynced: Optional[List[UnsyncedLine]] = None
    translation: Optional[List[ParsedLine]] = None
    romanization: Optional[List[ParsedLine]] = None
    error: Optional[str] = None

    def has_lyrics(self) -> bool:
        return any((self.karaoke, self.synced, self.unsynced))


class ILyricsProvider(ABC):
    """
    歌词提供者接口

    定义根据曲目元数据获取原始歌词的契约。
    """

    @abstractmethod
    async def find_lyrics(self, track: TrackQuery) -> RawLyricPayload:
        """
        查找曲目的原始歌词

        Args:
            track: 曲目查询

        Returns:
            原始歌词数据

        Raises:
            NotFoundError: 没有候选歌曲满足匹配规则
        """
        pass
