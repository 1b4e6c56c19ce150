"""URL 解析模块

映射表 -> 前导斜杠规范化 -> 修改器链，得到尚未拼接主机的相对 URL
"""

from typing import Any, Sequence

from ..models import HostConfig, ResolutionContext
from ..modifiers import apply_modifiers


class UrlResolver:
    """相对 URL 解析器"""

    def __init__(self, modifiers: Sequence[Any] = ()):
        self.modifiers = list(modifiers)

    def map_route(self, path: str, host_config: HostConfig) -> str:
        """应用映射表并规范化前导斜杠"""
        route = host_config.mapping.get(path, path)
        # 斜杠出现在开头之后才补前导斜杠
        if route.find("/") > 0:
            return "/" + route
        return route

    def resolve(self, path: str, host_config: HostConfig, context: ResolutionContext) -> str:
        """返回应用了映射和修改器链的相对 URL"""
        route = self.map_route(path, host_config)
        return apply_modifiers(route, self.modifiers, context)


def build_absolute_url(host: str, url: str) -> str:
    """拼接主机和相对 URL，两侧多余的斜杠都会去掉"""
    return host.rstrip("/") + "/" + url.lstrip("/")
