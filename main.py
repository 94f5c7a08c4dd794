#!/usr/bin/env python3
"""
neteaselyrics 命令行入口 - 根据曲目元数据查找网易云音乐歌词

负责配置加载、日志设置，并以所选格式输出歌词。
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import aiohttp

from neteaselyrics.core.interfaces import TrackQuery, LyricsResult
from neteaselyrics.exceptions import LyricsError
from neteaselyrics.lyrics import LyricsManager
from neteaselyrics.utils.config_manager import ConfigManager
from neteaselyrics.utils.logger import setup_logger

MODES = ("synced", "unsynced", "karaoke", "translation")


def format_time(milliseconds: float) -> str:
    """将毫秒格式化为 mm:ss.xx"""
    minutes, seconds = divmod(milliseconds / 1000, 60)
    return f"{int(minutes):02d}:{seconds:05.2f}"


def format_lyrics(result: LyricsResult, mode: str) -> List[str]:
    """
    将歌词结果格式化为输出行

    Args:
        result: 歌词汇总结果
        mode: 输出格式

    Returns:
        输出行列表，所选格式无数据时为空列表
    """
    if mode == "karaoke":
        return [f"[{format_time(line.start_time_ms)}] {line.text.strip()}" for line in result.karaoke or []]
    if mode == "unsynced":
        return [line.text for line in result.unsynced or []]
    lines = result.synced if mode == "synced" else result.translation
    return [f"[{format_time(line.start_time_ms)}] {line.text}" for line in lines or []]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="查找网易云音乐歌词")
    parser.add_argument("title", help="歌曲标题")
    parser.add_argument("artist", help="艺术家名称")
    parser.add_argument("--album", default="", help="专辑名称")
    parser.add_argument("--duration", type=int, default=0, help="曲目时长（毫秒）")
    parser.add_argument("--mode", choices=MODES, default="synced", help="输出格式")
    parser.add_argument("--config", default="config/config.yaml", help="配置文件路径")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    命令行主入口函数

    Returns:
        int: 退出代码（0表示成功，1表示未找到歌词或出错）
    """
    args = parse_args(argv)

    try:
        config = ConfigManager(args.config)
    except FileNotFoundError:
        config = None

    if config:
        setup_logger(
            log_level=config.get_log_level(),
            log_file=config.get_log_file(),
            max_size=config.get_log_max_size(),
            backup_count=config.get_log_backup_count()
        )
    else:
        setup_logger()
    logger = logging.getLogger("neteaselyrics")

    track = TrackQuery(title=args.title, artist=args.artist, album=args.album, duration_ms=args.duration)
    manager = LyricsManager(config=config)

    try:
        result = asyncio.run(manager.get_lyrics(track))
    except (aiohttp.ClientError, asyncio.TimeoutError, LyricsError) as e:
        logger.error(f"获取歌词失败: {e}")
        return 1

    if result.error:
        logger.error(f"未找到歌词: {track.title} - {track.artist}")
        return 1

    output = format_lyrics(result, args.mode)
    if not output:
        logger.warning(f"没有 {args.mode} 格式的歌词")
        return 1

    print("\n".join(output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
