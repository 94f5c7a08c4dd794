"""
配置管理器测试

测试YAML配置加载、嵌套键读取和各项默认值。
"""

import os
import tempfile
import unittest

import yaml

from neteaselyrics.utils.config_manager import ConfigManager, DEFAULT_SEARCH_API, DEFAULT_LYRICS_API


class TestConfigManager(unittest.TestCase):
    """配置管理器测试类"""

    def setUp(self):
        """设置测试环境"""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.temp_dir.name, "config.yaml")

    def tearDown(self):
        """清理测试环境"""
        self.temp_dir.cleanup()

    def write_config(self, data):
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, allow_unicode=True)
        return ConfigManager(self.config_path)

    def test_missing_file(self):
        """测试配置文件不存在时抛出FileNotFoundError"""
        with self.assertRaises(FileNotFoundError):
            ConfigManager(os.path.join(self.temp_dir.name, "missing.yaml"))

    def test_invalid_yaml(self):
        """测试无效YAML抛出解析错误"""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            f.write("netease: [unclosed\n")

        with self.assertRaises(yaml.YAMLError):
            ConfigManager(self.config_path)

    def test_empty_file_uses_defaults(self):
        """测试空配置文件使用默认值"""
        open(self.config_path, 'w').close()
        config = ConfigManager(self.config_path)

        self.assertEqual(config.config, {})
        self.assertEqual(config.get_search_api(), DEFAULT_SEARCH_API)
        self.assertEqual(config.get_lyrics_api(), DEFAULT_LYRICS_API)
        self.assertEqual(config.get_request_timeout(), 10)
        self.assertEqual(config.get_request_headers(), {})
        self.assertEqual(config.get_log_level(), "INFO")
        self.assertIsNone(config.get_log_file())
        self.assertEqual(config.get_log_max_size(), 10485760)
        self.assertEqual(config.get_log_backup_count(), 5)

    def test_reads_netease_section(self):
        """测试读取网易云音乐配置"""
        config = self.write_config({
            "netease": {
                "search_api": "https://mirror.example.com/search?q=",
                "lyrics_api": "https://mirror.example.com/lyric?id=",
                "timeout": 3,
                "headers": {"Cookie": "os=pc"},
            }
        })

        self.assertEqual(config.get_search_api(), "https://mirror.example.com/search?q=")
        self.assertEqual(config.get_lyrics_api(), "https://mirror.example.com/lyric?id=")
        self.assertEqual(config.get_request_timeout(), 3)
        self.assertEqual(config.get_request_headers(), {"Cookie": "os=pc"})

    def test_invalid_headers_type(self):
        """测试请求头配置不是字典时返回空字典"""
        config = self.write_config({"netease": {"headers": ["Cookie: os=pc"]}})
        self.assertEqual(config.get_request_headers(), {})

    def test_nested_get(self):
        """测试点号分隔的嵌套键读取"""
        config = self.write_config({"logging": {"level": "DEBUG", "file": "logs/lyrics.log"}})

        self.assertEqual(config.get("logging.level"), "DEBUG")
        self.assertEqual(config.get_log_file(), "logs/lyrics.log")
        self.assertIsNone(config.get("logging.level.deeper"))
        self.assertEqual(config.get("missing.key", "fallback"), "fallback")


if __name__ == '__main__':
    unittest.main()
