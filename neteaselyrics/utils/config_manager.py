"""Configuration manager for neteaselyrics."""
import logging
import os
from typing import Any, Dict, Optional
import yaml

DEFAULT_SEARCH_API = (
    "https://pyncmd.apis.imouto.in/api/pyncm"
    "?module=cloudsearch&method=GetSearchResult&keyword="
)
DEFAULT_LYRICS_API = (
    "https://pyncmd.apis.imouto.in/api/pyncm"
    "?module=track&method=GetTrackLyrics&song_id="
)


class ConfigManager:
    """
    Configuration manager for neteaselyrics.

    Handles loading and accessing configuration values from the config file.
    """

    def __init__(self, config_path: str = "config/config.yaml"):
        """
        Initialize the ConfigManager.

        Args:
            config_path: Path to the configuration file

        Raises:
            FileNotFoundError: If the configuration file does not exist
            yaml.YAMLError: If the configuration file is not valid YAML
        """
        self.logger = logging.getLogger("neteaselyrics.config")
        self.config_path = config_path
        self.config: Dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """
        Load the configuration from the config file.

        Raises:
            FileNotFoundError: If the configuration file does not exist
            yaml.YAMLError: If the configuration file is not valid YAML
        """
        if not os.path.exists(self.config_path):
            example_path = f"{self.config_path}.example"
            if os.path.exists(example_path):
                self.logger.error(
                    f"Configuration file {self.config_path} not found. "
                    f"Please copy {example_path} to {self.config_path} and update it."
                )
            else:
                self.logger.error(f"Configuration file {self.config_path} not found.")
            raise FileNotFoundError(f"Configuration file {self.config_path} not found")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as config_file:
                self.config = yaml.safe_load(config_file) or {}
                self.logger.debug(f"Loaded configuration from {self.config_path}")
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing configuration file: {e}")
            raise

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: The configuration key (dot notation for nested keys)
            default: Default value to return if the key is not found

        Returns:
            The configuration value or the default value if not found
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                self.logger.debug(f"Configuration key '{key}' not found, using default: {default}")
                return default

        return value

    # NetEase API Configuration Methods
    def get_search_api(self) -> str:
        """
        获取网易云音乐搜索API地址

        搜索关键词会经过URL编码后直接拼接在该地址末尾。

        Returns:
            搜索API地址
        """
        return self.get('netease.search_api', DEFAULT_SEARCH_API)

    def get_lyrics_api(self) -> str:
        """
        获取网易云音乐歌词API地址

        歌曲ID会直接拼接在该地址末尾。

        Returns:
            歌词API地址
        """
        return self.get('netease.lyrics_api', DEFAULT_LYRICS_API)

    def get_request_timeout(self) -> float:
        """
        获取请求总超时时间

        Returns:
            超时时间（秒）
        """
        return self.get('netease.timeout', 10)

    def get_request_headers(self) -> Dict[str, str]:
        """
        获取额外的请求头

        Returns:
            请求头字典，未配置时为空字典
        """
        headers = self.get('netease.headers', {})
        if not isinstance(headers, dict):
            self.logger.warning(f"请求头配置类型错误，期望dict，实际{type(headers)}，使用空字典")
            return {}
        return headers

    # Logging Configuration Methods
    def get_log_level(self) -> str:
        """
        Get the logging level.

        Returns:
            The logging level
        """
        return self.get('logging.level', 'INFO')

    def get_log_file(self) -> Optional[str]:
        """
        Get the log file path.

        Returns:
            The log file path or None if not set
        """
        return self.get('logging.file', None)

    def get_log_max_size(self) -> int:
        """
        Get the maximum log file size.

        Returns:
            The maximum log file size in bytes
        """
        return self.get('logging.max_size', 10485760)  # 10 MB

    def get_log_backup_count(self) -> int:
        """
        Get the number of backup log files to keep.

        Returns:
            The number of backup log files
        """
        return self.get('logging.backup_count', 5)
