"""缓存文件名策略

根据解析后的相对 URL 生成缓存文件名，策略可替换：
- SlugFilenameStrategy: 默认策略，URL slug + ".template"
- CallbackFilenameStrategy: 使用任意可调用对象
"""

import re
import unicodedata
from abc import ABC, abstractmethod
from typing import Callable

DEFAULT_FILENAME_SUFFIX = ".template"
DEFAULT_SEPARATOR = "-"


class ViewFilenameStrategy(ABC):
    """缓存文件名策略抽象基类"""

    @abstractmethod
    def determine(self, url: str) -> str:
        """根据相对 URL 返回缓存文件名

        Args:
            url: 经过映射和修改器处理后的相对 URL

        Returns:
            不含目录的文件名
        """
        pass


class SlugFilenameStrategy(ViewFilenameStrategy):
    """URL slug 文件名策略

    "dasLamm" -> "daslamm.template"，"/foo/bar" -> "foobar.template"
    """

    def __init__(
        self,
        suffix: str = DEFAULT_FILENAME_SUFFIX,
        separator: str = DEFAULT_SEPARATOR,
    ):
        self.suffix = suffix
        self.separator = separator
        sep = re.escape(separator)
        # 预编译正则表达式
        self._flip_pattern = re.compile(r"[_]+" if separator == "-" else r"[-]+")
        self._illegal_pattern = re.compile(rf"[^{sep}\w\s]+")
        self._collapse_pattern = re.compile(rf"[{sep}\s]+")

    def determine(self, url: str) -> str:
        return self.slug(url) + self.suffix

    def slug(self, text: str) -> str:
        """生成 URL 安全的 slug"""
        pipeline = [
            self._to_ascii,
            self._flip_separators,
            str.lower,
            self._replace_at,
            self._remove_illegal_characters,
            self._collapse_separators,
        ]

        cleaned = text
        for slug_func in pipeline:
            cleaned = slug_func(cleaned)
        return cleaned

    def _to_ascii(self, text: str) -> str:
        """Unicode 转写为 ASCII，无法转写的字符直接丢弃"""
        normalized = unicodedata.normalize("NFKD", text)
        return normalized.encode("ascii", "ignore").decode("ascii")

    def _flip_separators(self, text: str) -> str:
        return self._flip_pattern.sub(self.separator, text)

    def _replace_at(self, text: str) -> str:
        return text.replace("@", f"{self.separator}at{self.separator}")

    def _remove_illegal_characters(self, text: str) -> str:
        # \w 包含下划线，已在 _flip_separators 中替换
        return self._illegal_pattern.sub("", text)

    def _collapse_separators(self, text: str) -> str:
        return self._collapse_pattern.sub(self.separator, text).strip(self.separator)


class CallbackFilenameStrategy(ViewFilenameStrategy):
    """把普通函数包装成文件名策略"""

    def __init__(self, callback: Callable[[str], str]):
        self._callback = callback

    def determine(self, url: str) -> str:
        return self._callback(url)


def create_filename_strategy(suffix: str = DEFAULT_FILENAME_SUFFIX) -> ViewFilenameStrategy:
    """工厂函数：创建默认文件名策略"""
    return SlugFilenameStrategy(suffix=suffix)
