"""过滤模块

在映射、修改器、缓存和网络请求之前执行的两项检查：
1. 后缀过滤 - 静态资源后缀直接拒绝
2. 禁止路径过滤 - 目录部分或最后一段命中禁止列表时拒绝
"""

import posixpath
import urllib.parse
from typing import Iterable, Set, Tuple

from ..exceptions import IgnoredSuffixError, UrlForbiddenError
from ..models import HostConfig


def _url_path(url: str) -> str:
    """只取 URL 的路径部分，去掉查询串和片段"""
    return urllib.parse.urlsplit(url).path


def split_path(path: str) -> Tuple[str, str]:
    """返回 (目录部分, 最后一段)

    结尾的斜杠会先去掉，"typo3/" -> (".", "typo3")；
    没有目录时目录部分为 "."。
    """
    stripped = path.rstrip("/")
    if not stripped:
        return ("/" if path.startswith("/") else ".", "")
    dirname = posixpath.dirname(stripped)
    if not dirname:
        dirname = "."
    elif dirname != "/":
        dirname = dirname.rstrip("/") or "/"
    return dirname, posixpath.basename(stripped)


def extension_of(path: str) -> str:
    """最后一段中最后一个点之后的内容，没有点时为空串"""
    _, basename = split_path(path)
    if "." not in basename:
        return ""
    return basename.rsplit(".", 1)[1]


class FilterEngine:
    """后缀和禁止路径过滤器"""

    def __init__(
        self,
        ignored_suffixes: Iterable[str] = (),
        forbidden_paths: Iterable[str] = (),
    ):
        self.ignored_suffixes: Set[str] = set(ignored_suffixes)
        self.forbidden_paths: Set[str] = set(forbidden_paths)

    def check(self, path: str, host_config: HostConfig) -> None:
        """依次执行后缀检查和禁止路径检查"""
        self.check_suffix(path, host_config)
        self.check_forbidden(path, host_config)

    def check_suffix(self, path: str, host_config: HostConfig) -> None:
        """
        Raises:
            IgnoredSuffixError: 后缀在全局或主机忽略列表中
        """
        suffixes = self.ignored_suffixes | set(host_config.ignore_url_suffix)
        suffix = extension_of(_url_path(path))
        # 区分大小写
        if suffix in suffixes:
            raise IgnoredSuffixError(path, suffix=suffix)

    def check_forbidden(self, path: str, host_config: HostConfig) -> None:
        """
        Raises:
            UrlForbiddenError: 目录部分或最后一段在禁止列表中
        """
        forbidden = self.forbidden_paths | set(host_config.ignore_urls)
        dirname, basename = split_path(_url_path(path))
        if dirname in forbidden or basename in forbidden:
            raise UrlForbiddenError(path)
