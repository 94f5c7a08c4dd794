"""歌词模块异常定义"""

from typing import Optional


class LyricsError(Exception):
    """歌词获取或处理异常基类"""
    pass


class NotFoundError(LyricsError):
    """
    未找到匹配歌曲异常

    当搜索结果中没有任何候选歌曲满足专辑或时长匹配规则时抛出。
    这是一次查找的最终失败，不会在内部重试，由调用方决定回退策略。
    """
    def __init__(self, message: str, query: Optional[str] = None):
        super().__init__(message)
        self.query = query


class InvalidResponseError(LyricsError):
    """
    API响应格式异常

    当远程接口返回空内容或无法解析为JSON的内容时抛出。
    """
    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url
