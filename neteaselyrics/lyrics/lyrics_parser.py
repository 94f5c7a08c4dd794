"""
网易云音乐歌词解析器

将带时间标记的多行文本转换为四种规范化的歌词格式：
- 逐字歌词（karaoke）: 行开始时间 + 每个词的相对偏移
- 同步歌词（synced）: 行开始时间（毫秒）+ 文本
- 非同步歌词（unsynced）: 原始时间标记 + 文本
- 翻译歌词（translation）: 与同步歌词相同的格式

所有函数均为无状态的纯函数，对同一输入重复调用得到相同的输出。
"""

import logging
import math
import re
from typing import List, Optional, Callable, TypeVar

from neteaselyrics.core.interfaces import (
    RawLyricPayload,
    TimestampedLine,
    ParsedLine,
    UnsyncedLine,
    KaraokeWord,
    KaraokeLine,
)
from neteaselyrics.utils.text_utils import normalize, capitalize

logger = logging.getLogger("neteaselyrics.lyrics.lyrics_parser")

T = TypeVar('T')

# 纯音乐标记，出现在任意行即表示该曲目没有歌词
NO_LYRICS_NOTICE = "纯音乐, 请欣赏"

# 方括号标记与非方括号文本交替出现
_SPAN_PATTERN = re.compile(r'\[.*?\]|[^\[\]]+')

# 逐字标记 (a,b)，捕获第二个数字作为词的时间
_KARAOKE_MARKER_PATTERN = re.compile(r'\(\d+,(\d+)\)')

_LINE_SPLIT_PATTERN = re.compile(r'\r?\n')

# 制作人员信息：角色名称或制作关键词，后跟冒号
_CREDIT_PATTERNS = [
    # 作词、作曲、编曲、监制（简体和繁体）
    r'\s?作?\s*[词詞]|\s?作?\s*曲|\s?[编編]\s*曲?|\s?[监監]\s*[制製]?',
    # 制作相关关键词
    r'.*编写|.*編寫|.*和音|.*和声|.*和聲|.*合声|.*合聲|.*提琴|.*录|.*錄|.*工程|.*工作室|.*设计|.*設計'
    r'|.*剪辑|.*剪輯|.*制作|.*製作|.*发行|.*發行|.*出品|.*后期|.*後期|.*混音|.*缩混|.*縮混|.*母带|.*母帶',
    # 演奏和宣传
    r'原唱|翻唱|题字|題字|文案|海报|海報|古筝|古箏|二胡|钢琴|鋼琴|吉他|贝斯|貝斯|笛子|鼓|弦乐|弦樂',
    # 英文角色和制作关键词，可出现在冒号前的任意位置
    r'.*\b(?:lrc|lyrics? by|lyricists?|composed by|composers?|arranged by|arrangers?|arrangement'
    r'|published by|publishers?|publishing|vocals?|guitars?|programmed by|programmers?|programming'
    r'|produced by|producers?|written by|writers?|mixed by|mixing|mixers?|recorded by|recording'
    r'|engineers?|engineered by|studios?|mastered by|mastering)\b',
]
_CREDIT_PATTERN = re.compile(rf"^({'|'.join(_CREDIT_PATTERNS)}).*(:|：)", re.IGNORECASE)


def is_credit_line(text: str) -> bool:
    """
    检查文本是否为制作人员信息行（作词、作曲、混音等）

    Args:
        text: 歌词行文本

    Returns:
        如果是制作人员信息则返回True
    """
    return bool(text) and _CREDIT_PATTERN.match(text) is not None


def is_no_lyrics_notice(text: Optional[str]) -> bool:
    """检查文本是否为纯音乐标记"""
    return bool(text) and normalize(text, fold_case=False) == NO_LYRICS_NOTICE


def parse_timestamped_line(line: str) -> TimestampedLine:
    """
    解析单行带时间标记的歌词

    支持的形式：
        [ar:Beyond]            -> time="ar:Beyond"
        [03:10]lyrics          -> time="03:10", text="Lyrics"
        [03:10][03:20]lyrics   -> time="03:10", text="Lyrics"
        [1235,300]lyrics       -> time="1235,300", text="Lyrics"
        lyrics                 -> text="lyrics"

    Args:
        line: 单行原始文本

    Returns:
        解析结果，时间标记去除方括号，文本经过规范化和首字母大写
    """
    spans = _SPAN_PATTERN.findall(line)

    if len(spans) <= 1:
        if spans and spans[0].startswith('[') and spans[0].endswith(']'):
            return TimestampedLine(time=spans[0][1:-1])
        return TimestampedLine(text=line or None)

    text = None
    text_index = next((i for i, span in enumerate(spans) if not span.endswith(']')), -1)
    if text_index > -1:
        raw_text = spans.pop(text_index)
        text = capitalize(normalize(raw_text, fold_case=False)) or None

    time = spans[0].replace('[', '', 1).replace(']', '', 1)
    return TimestampedLine(time=time, text=text)


def tokenize_karaoke(text: str) -> List[KaraokeWord]:
    """
    将逐字歌词行的文本拆分为带偏移量的词

    文本中每个 (a,b) 标记后跟一个词，词的时间取标记的第二个数字，例如:
        (0,508)Don't(0,1) (0,151)want(0,1)

    仅由一个空格组成的片段是分隔符，不作为词输出。
    每个词末尾追加一个空格，以便重新拼接时保留自然间隔。

    Args:
        text: 逐字歌词行的文本部分

    Returns:
        按顺序排列的词列表
    """
    components = _KARAOKE_MARKER_PATTERN.split(text)
    # ["", "508", "Don't", "1", " ", "151", "want", "1", ""]
    words = []
    for i in range(1, len(components) - 1, 2):
        word = components[i + 1]
        if word in ("", " "):
            continue
        words.append(KaraokeWord(word=word + " ", offset_ms=int(components[i])))
    return words


def _parse_number(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _parse_pair(time: str, separator: str):
    parts = time.split(separator)
    if len(parts) < 2:
        return None, None
    return _parse_number(parts[0]), _parse_number(parts[1])


def _split_lines(block: str) -> List[str]:
    return [line for line in (raw.strip() for raw in _LINE_SPLIT_PATTERN.split(block)) if line]


def _extract(
    block: Optional[str],
    mode: str,
    convert: Callable[[TimestampedLine], Optional[T]],
    check_no_lyrics: bool = False
) -> Optional[List[T]]:
    if not block:
        return None

    lines = _split_lines(block)
    results = []
    no_lyrics = False

    for line in lines:
        parsed = parse_timestamped_line(line)
        if check_no_lyrics and is_no_lyrics_notice(parsed.text):
            no_lyrics = True
        if not parsed.text or is_credit_line(parsed.text):
            continue
        converted = convert(parsed)
        if converted is not None:
            results.append(converted)

    if no_lyrics:
        logger.info(f"检测到纯音乐标记，{mode} 歌词视为无数据")
        return None

    logger.debug(f"{mode}: 解析 {len(lines)} 行，保留 {len(results)} 行")
    return results or None


def _to_karaoke_line(parsed: TimestampedLine) -> Optional[KaraokeLine]:
    if not parsed.time:
        return None
    start, duration = _parse_pair(parsed.time, ',')
    if start is None or duration is None:
        return None

    words = tokenize_karaoke(parsed.text)
    if not words:
        # 没有逐字标记时整行作为一个词
        words = [KaraokeWord(word=parsed.text + " ", offset_ms=0)]
    return KaraokeLine(start_time_ms=round(start), words=words)


def _to_parsed_line(parsed: TimestampedLine) -> Optional[ParsedLine]:
    if not parsed.time:
        return None
    minutes, seconds = _parse_pair(parsed.time, ':')
    if minutes is None or seconds is None:
        return None
    return ParsedLine(start_time_ms=round((minutes * 60 + seconds) * 1000), text=parsed.text)


def _to_unsynced_line(parsed: TimestampedLine) -> UnsyncedLine:
    return UnsyncedLine(time=parsed.time, text=parsed.text)


def get_karaoke(payload: Optional[RawLyricPayload]) -> Optional[List[KaraokeLine]]:
    """
    提取逐字歌词

    时间标记为 "开始,时长" 形式，任一部分不是数字的行被丢弃。

    Args:
        payload: 原始歌词数据

    Returns:
        逐字歌词行列表，无数据时返回None
    """
    block = payload.karaoke if payload else None
    return _extract(block, "karaoke", _to_karaoke_line)


def get_synced(payload: Optional[RawLyricPayload]) -> Optional[List[ParsedLine]]:
    """
    提取逐行同步歌词

    时间标记为 "分:秒" 形式。任意一行为纯音乐标记时整块视为无数据。

    Args:
        payload: 原始歌词数据

    Returns:
        同步歌词行列表，无数据时返回None
    """
    block = payload.primary if payload else None
    return _extract(block, "synced", _to_parsed_line, check_no_lyrics=True)


def get_unsynced(payload: Optional[RawLyricPayload]) -> Optional[List[UnsyncedLine]]:
    """
    提取非同步歌词

    不要求时间标记为数字，保留原始时间标记和文本。
    任意一行为纯音乐标记时整块视为无数据。

    Args:
        payload: 原始歌词数据

    Returns:
        非同步歌词行列表，无数据时返回None
    """
    block = payload.primary if payload else None
    return _extract(block, "unsynced", _to_unsynced_line, check_no_lyrics=True)


def get_translation(payload: Optional[RawLyricPayload]) -> Optional[List[ParsedLine]]:
    """提取翻译歌词，格式与同步歌词相同，不检查纯音乐标记"""
    block = payload.translation if payload else None
    return _extract(block, "translation", _to_parsed_line)


def get_romanization(payload: Optional[RawLyricPayload]) -> Optional[List[ParsedLine]]:
    """提取罗马音歌词，规则与翻译歌词相同"""
    block = payload.romanization if payload else None
    return _extract(block, "romanization", _to_parsed_line)
