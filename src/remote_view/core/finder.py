"""远程模板查找器

把远程标识符解析为本地缓存文件路径：

    解析标识符 -> 查找主机 -> 过滤 -> 解析URL -> 缓存寻址
        -> (命中缓存直接返回) -> 请求 -> 响应处理 -> 写入缓存

每次调用都在调用方线程上同步完成 (resolve)，
也可以在事件循环中直接 await (find_remote_path_view)。
"""

import logging
from typing import Any, Callable, Optional, Sequence

from ..async_adapter import smart_run
from ..exceptions import InvalidIdentifierError, RemoteFetchError
from ..filename import SlugFilenameStrategy, ViewFilenameStrategy
from ..handlers import ResponseDispatcher, ResponseHandlerRegistry
from ..models import HttpClientConfig, RemoteViewConfig, ResolutionContext
from .file_manager import FileManager
from .filters import FilterEngine
from .hosts import HostRegistry
from .identifier import IdentifierParser
from .network_client import TRANSPORT_ERRORS, HTTPClient, _sanitize_url_for_logging
from .url_resolver import UrlResolver, build_absolute_url

logger = logging.getLogger(__name__)

ClientFactory = Callable[[HttpClientConfig], HTTPClient]


class RemoteTemplateFinder:
    """远程模板解析与缓存引擎

    扩展点全部通过构造函数注入：
    - url_modifiers: 按顺序执行的 URL 修改器
    - filename_strategy: 缓存文件名策略
    - response_handlers: 状态码 -> 处理器 注册表
    """

    def __init__(
        self,
        config: RemoteViewConfig,
        url_modifiers: Sequence[Any] = (),
        filename_strategy: Optional[ViewFilenameStrategy] = None,
        response_handlers: Optional[ResponseHandlerRegistry] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self.config = config
        self.parser = IdentifierParser(config.remote_delimiter)
        self.hosts = HostRegistry(config.hosts)
        self.filters = FilterEngine(config.ignore_url_suffix, config.ignore_urls)
        self.url_resolver = UrlResolver(url_modifiers)
        self.filename_strategy = filename_strategy or SlugFilenameStrategy()
        self.response_handlers = response_handlers or ResponseHandlerRegistry()
        self.dispatcher = ResponseDispatcher(self.response_handlers)
        self.file_manager = FileManager(config.view_folder)
        self._client_factory = client_factory or HTTPClient

    @property
    def delimiter(self) -> str:
        return self.parser.delimiter

    def has_remote_information(self, name: str) -> bool:
        """名称是否为远程标识符"""
        return self.parser.has_remote_information(name)

    def resolve(self, identifier: str) -> str:
        """同步解析远程标识符，返回本地缓存文件路径"""
        return smart_run(self.find_remote_path_view(identifier))

    async def find_remote_path_view(self, identifier: str) -> str:
        """获取远程模板，写入本地缓存并返回本地文件路径

        Args:
            identifier: 带远程前缀的标识符，如 "remote:specific::dasLamm"

        Returns:
            本地缓存文件路径

        Raises:
            InvalidIdentifierError: 不是远程标识符或没有可用片段
            HostNotConfiguredError: 命名空间没有配置主机
            IgnoredSuffixError: 后缀在忽略列表中
            UrlForbiddenError: 路径在禁止列表中
            InvalidModifierError: URL 修改器不满足接口要求
            DirectoryCreateError: 缓存目录创建失败
            RemoteFetchError: 传输层错误
        """
        if not self.has_remote_information(identifier.strip()):
            raise InvalidIdentifierError(
                "Identifier is not a remote identifier", identifier=identifier
            )

        remote_id = self.parser.parse(identifier)
        host_config = self.hosts.lookup(remote_id.namespace)
        context = ResolutionContext(identifier=remote_id, host_config=host_config)

        self.filters.check(remote_id.path, host_config)

        context.url = self.url_resolver.resolve(remote_id.path, host_config, context)
        filename = self.filename_strategy.determine(context.url)
        path = await self.file_manager.view_path(remote_id.namespace, filename)
        context.cache_path = str(path)

        if host_config.cache and await self.file_manager.file_exists(path):
            logger.debug("Cache hit for %s: %s", identifier, path)
            return str(path)

        context.absolute_url = build_absolute_url(host_config.host, context.url)
        content = await self._fetch_content(context)
        await self.file_manager.write_file(path, content)
        logger.debug(
            "Stored %s as %s", _sanitize_url_for_logging(context.absolute_url), path
        )
        return str(path)

    async def _fetch_content(self, context: ResolutionContext) -> bytes:
        """请求上游、交给响应处理器并提取内容"""
        url = context.absolute_url
        host_config = context.host_config
        async with self._client_factory(self.config.http) as client:
            response = await client.get(url, host_config.request_options)
            try:
                result = await self.dispatcher.dispatch(response, host_config, context)
                return await self.dispatcher.extract_content(result)
            except TRANSPORT_ERRORS as e:
                # 读取响应体时连接中断
                raise RemoteFetchError(url, context={"reason": type(e).__name__}) from e
            finally:
                response.release()


def create_remote_finder(
    config: Optional[RemoteViewConfig] = None, **kwargs: Any
) -> RemoteTemplateFinder:
    """使用全局配置创建查找器的便捷函数"""
    if config is None:
        from ..config import get_config

        config = get_config()
    return RemoteTemplateFinder(config, **kwargs)
