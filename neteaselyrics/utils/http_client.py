"""HTTP传输 - 单次异步GET请求并解析JSON响应"""

import json
import logging
from typing import Optional, Dict, Any

import aiohttp

from neteaselyrics.exceptions import InvalidResponseError

logger = logging.getLogger("neteaselyrics.utils.http_client")

DEFAULT_TIMEOUT = 10

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "application/json",
}


async def fetch_json(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    headers: Optional[Dict[str, str]] = None
) -> Any:
    """
    发送单次GET请求并将响应解析为JSON

    不进行重试。网络错误、超时和非2xx状态码直接向调用方抛出。

    Args:
        url: 请求URL
        timeout: 总超时时间（秒）
        headers: 额外的请求头

    Returns:
        解析后的JSON数据

    Raises:
        aiohttp.ClientResponseError: 响应状态码不是2xx
        InvalidResponseError: 响应为空或不是有效的JSON
    """
    request_headers = dict(DEFAULT_HEADERS)
    if headers:
        request_headers.update(headers)

    logger.debug(f"GET {url}")

    async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout)) as session:
        async with session.get(url, headers=request_headers) as response:
            response.raise_for_status()

            # 无论内容类型如何，先读取文本再解析为JSON
            text_response = await response.text()
            logger.debug(f"响应文本长度: {len(text_response)}")

            if not text_response.strip():
                logger.warning(f"收到空响应: {url}")
                raise InvalidResponseError("收到空响应", url=url)

            try:
                return json.loads(text_response)
            except json.JSONDecodeError as e:
                logger.warning(f"响应不是有效的JSON: {e}")
                logger.debug(f"响应内容（前300字符）: {text_response[:300]}...")
                raise InvalidResponseError(f"响应不是有效的JSON: {e}", url=url) from e
