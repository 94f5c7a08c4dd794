"""
文本工具测试

测试文本规范化、标题清理、汉字检测和繁简转换。
"""

import unittest

import pytest

from neteaselyrics.utils.text_utils import (
    normalize,
    remove_song_feat,
    remove_extra_info,
    contains_han_character,
    capitalize,
    to_simplified_chinese,
)


class TestNormalize(unittest.TestCase):
    """文本规范化测试"""

    def test_full_width_punctuation(self):
        """测试全角标点替换"""
        self.assertEqual(normalize("纯音乐，请欣赏", fold_case=False), "纯音乐, 请欣赏")
        self.assertEqual(normalize("作词：林夕", fold_case=False), "作词: 林夕")
        self.assertEqual(normalize("【Live】（2020）", fold_case=False), "[Live](2020)")

    def test_whitespace_collapsed(self):
        """测试合并多余空白"""
        self.assertEqual(normalize("  Hello   World  "), "hello world")

    def test_fold_case(self):
        """测试大小写折叠"""
        self.assertEqual(normalize("Hello"), "hello")
        self.assertEqual(normalize("Hello", fold_case=False), "Hello")

    def test_full_width_letters(self):
        """测试全角字母转换为半角"""
        self.assertEqual(normalize("ＡＢＣ"), "abc")

    def test_empty(self):
        """测试空字符串"""
        self.assertEqual(normalize(""), "")


class TestTitleCleaning(unittest.TestCase):
    """标题清理测试"""

    def test_remove_song_feat(self):
        """测试去除合作艺术家标注"""
        cases = {
            "Song (feat. Someone)": "Song",
            "Song [with Someone]": "Song",
            "Song - feat. Someone": "Song",
            "Song (prod. Someone)": "Song",
            "Without You": "Without You",
            "Dance - Without Me": "Dance - Without Me",
        }
        for title, expected in cases.items():
            with self.subTest(title=title):
                self.assertEqual(remove_song_feat(title), expected)

    def test_remove_song_feat_keeps_original_when_empty(self):
        """测试清理结果为空时返回原标题"""
        self.assertEqual(remove_song_feat("(feat. Someone)"), "(feat. Someone)")

    def test_remove_extra_info(self):
        """测试去除附加描述信息"""
        cases = {
            "Yesterday - Remastered 2009": "Yesterday",
            "Song (Live)": "Song",
            "Song (Radio Edit)": "Song",
            "Song [Acoustic Version]": "Song",
            "Song (Part 2)": "Song (Part 2)",
            "海阔天空": "海阔天空",
        }
        for title, expected in cases.items():
            with self.subTest(title=title):
                self.assertEqual(remove_extra_info(title), expected)


class TestScriptHelpers(unittest.TestCase):
    """汉字检测和首字母大写测试"""

    def test_contains_han_character(self):
        """测试汉字检测"""
        self.assertTrue(contains_han_character("张学友"))
        self.assertTrue(contains_han_character("Jacky 張學友"))
        self.assertFalse(contains_han_character("Jacky Cheung"))
        self.assertFalse(contains_han_character("こんにちは"))
        self.assertFalse(contains_han_character(""))

    def test_capitalize(self):
        """测试只大写首字母，其余字符保持不变"""
        self.assertEqual(capitalize("lyrics"), "Lyrics")
        self.assertEqual(capitalize("hello World"), "Hello World")
        self.assertEqual(capitalize("Already"), "Already")
        self.assertEqual(capitalize("你好"), "你好")
        self.assertEqual(capitalize("(0,1)word"), "(0,1)word")
        self.assertEqual(capitalize(""), "")


@pytest.mark.asyncio
async def test_to_simplified_chinese():
    """测试繁体中文转换为简体中文"""
    assert await to_simplified_chinese("張學友") == "张学友"
    assert await to_simplified_chinese("吻別") == "吻别"
