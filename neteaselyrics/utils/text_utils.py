"""
文本工具 - 标题清理、文本规范化和中文字形转换

为歌曲匹配和歌词解析提供纯函数：
- 全角标点和空白规范化
- 去除标题中的合作艺术家标注和附加信息
- 汉字检测和繁体到简体的转换
"""

import asyncio
import logging
import re
import unicodedata
from functools import lru_cache

logger = logging.getLogger("neteaselyrics.utils.text_utils")

# 全角标点到半角标点的映射（按顺序应用）
_PUNCTUATION_REPLACEMENTS = [
    (re.compile(r'（'), '('),
    (re.compile(r'）'), ')'),
    (re.compile(r'【'), '['),
    (re.compile(r'】'), ']'),
    (re.compile(r'。'), '. '),
    (re.compile(r'；'), '; '),
    (re.compile(r'：'), ': '),
    (re.compile(r'？'), '? '),
    (re.compile(r'！'), '! '),
    (re.compile(r'、|，'), ', '),
    (re.compile(r'‘|’|′|＇'), "'"),
    (re.compile(r'“|”'), '"'),
    (re.compile(r'〜'), '~'),
    (re.compile(r'·|・'), '•'),
]

_WHITESPACE_PATTERN = re.compile(r'\s+')

# 合作艺术家标注: "Song - feat. X"、"Song (feat. X)"、"Song [with X]"
_FEAT_SUFFIX_PATTERN = re.compile(r'-\s+(feat|with|prod)\b.*', re.IGNORECASE)
_FEAT_BRACKET_PATTERN = re.compile(r'(\(|\[)(feat|with|prod)\.?\s+.*(\)|\])$', re.IGNORECASE)

# 附加信息: "Song - Remastered 2011"、"Song (Live)"
_DASH_SUFFIX_PATTERN = re.compile(r'\s-\s.*')
_DESCRIPTIVE_BRACKET_PATTERN = re.compile(
    r'\s*[\(\[\{]\s*[^\)\]\}]*\b(?:remaster(?:ed)?|live|version|ver\.?|edit|mix|remix|mono|stereo|'
    r'deluxe|explicit|clean|acoustic|instrumental|bonus|demo|single)\b[^\)\]\}]*[\)\]\}]\s*$',
    re.IGNORECASE
)

# CJK统一表意文字及扩展区
_HAN_PATTERN = re.compile(
    '[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0002a6df\U0002a700-\U0002ebef]'
)

_CAPITALIZE_PATTERN = re.compile(r'^[a-z]')


def normalize(text: str, fold_case: bool = True) -> str:
    """
    规范化文本

    将全角标点替换为半角形式，进行NFKC规范化并合并多余空白。

    Args:
        text: 原始文本
        fold_case: 是否进行大小写折叠（用于比较）

    Returns:
        规范化后的文本
    """
    if not text:
        return ""

    result = text
    for pattern, replacement in _PUNCTUATION_REPLACEMENTS:
        result = pattern.sub(replacement, result)

    result = unicodedata.normalize('NFKC', result)
    if fold_case:
        result = result.casefold()

    return _WHITESPACE_PATTERN.sub(' ', result).strip()


def remove_song_feat(title: str) -> str:
    """
    去除标题中的合作艺术家标注

    Args:
        title: 歌曲标题

    Returns:
        去除标注后的标题；如果结果为空则返回原标题
    """
    cleaned = _FEAT_SUFFIX_PATTERN.sub('', title)
    cleaned = _FEAT_BRACKET_PATTERN.sub('', cleaned).strip()
    return cleaned or title


def remove_extra_info(title: str) -> str:
    """
    去除标题中的附加描述信息（破折号后缀和描述性括号）

    Args:
        title: 歌曲标题

    Returns:
        去除附加信息后的标题；如果结果为空则返回原标题
    """
    cleaned = _DASH_SUFFIX_PATTERN.sub('', title)
    cleaned = _DESCRIPTIVE_BRACKET_PATTERN.sub('', cleaned).strip()
    return cleaned or title


def contains_han_character(text: str) -> bool:
    """检查文本是否包含汉字"""
    return bool(text) and _HAN_PATTERN.search(text) is not None


def capitalize(text: str) -> str:
    """将首字母大写，其余字符保持不变"""
    return _CAPITALIZE_PATTERN.sub(lambda match: match.group(0).upper(), text)


@lru_cache(maxsize=1)
def _get_converter():
    # 延迟导入，仅在需要字形转换时加载OpenCC
    from opencc import OpenCC
    logger.debug("加载OpenCC繁简转换器 (t2s)")
    return OpenCC('t2s')


def convert_to_simplified(text: str) -> str:
    """将繁体中文转换为简体中文（同步版本）"""
    return _get_converter().convert(text)


async def to_simplified_chinese(text: str) -> str:
    """
    将繁体中文转换为简体中文

    转换在线程池中执行，避免阻塞事件循环。

    Args:
        text: 待转换文本

    Returns:
        简体中文文本
    """
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, convert_to_simplified, text)
