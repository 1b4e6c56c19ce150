"""网络客户端模块

负责向上游主机发起 GET 请求：
- 默认不跟随重定向
- 任何状态码都不抛异常，原始响应交给调用方
- 传输层异常统一转换为 RemoteFetchError
"""

import asyncio
import inspect
import logging
import ssl
import urllib.parse
import warnings
from typing import Any, Dict, FrozenSet, Mapping, Optional, Union

import aiohttp

from ..exceptions import ConfigurationError, RemoteFetchError
from ..models import HttpClientConfig

logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError)


def _supported_request_options() -> FrozenSet[str]:
    """ClientSession 请求接受的关键字参数名"""
    parameters = inspect.signature(aiohttp.ClientSession._request).parameters
    return frozenset(
        name for name, param in parameters.items() if param.kind is param.KEYWORD_ONLY
    )


REQUEST_OPTION_NAMES = _supported_request_options()


def _sanitize_url_for_logging(url: str) -> str:
    """清理URL中的敏感信息用于日志记录

    Args:
        url: 原始URL

    Returns:
        清理后的URL，隐藏查询参数和敏感信息
    """
    try:
        parsed = urllib.parse.urlparse(url)
        sanitized = f"{parsed.scheme}://{parsed.hostname}{parsed.path}"
        return sanitized
    except Exception:
        return "[URL]"


class HTTPClient:
    """上游模板HTTP客户端

    负责创建和管理HTTP会话，包括:
    - 超时配置
    - SSL验证配置
    - 主机级请求选项合并
    """

    def __init__(self, config: Optional[HttpClientConfig] = None):
        """初始化HTTP客户端

        Args:
            config: HTTP客户端配置
        """
        self.config = config or HttpClientConfig()
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "HTTPClient":
        """异步上下文管理器入口"""
        await self._create_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """异步上下文管理器退出"""
        await self.close()

    async def _create_session(self) -> None:
        """创建HTTP会话"""
        if self._session is not None:
            return

        self._session = aiohttp.ClientSession(
            connector=self._create_connector(self._create_ssl_context()),
            timeout=self._create_timeout_config(),
            headers={"User-Agent": self.config.user_agent},
            auto_decompress=True,
            raise_for_status=False,
        )

    def _create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """创建SSL上下文配置

        Returns:
            ssl.SSLContext: 默认的SSL上下文（当ssl_verify=True时）
            False: 禁用SSL验证
        """
        if not self.config.ssl_verify:
            warnings.warn(
                "SSL verification is disabled. This is not recommended for production use.",
                UserWarning,
                stacklevel=2,
            )
            return False

        return ssl.create_default_context()

    def _create_connector(
        self, ssl_context: Union[ssl.SSLContext, bool]
    ) -> aiohttp.TCPConnector:
        """创建TCP连接器"""
        return aiohttp.TCPConnector(ssl=ssl_context, enable_cleanup_closed=True)

    def _create_timeout_config(self) -> aiohttp.ClientTimeout:
        """创建超时配置"""
        return aiohttp.ClientTimeout(
            total=self.config.timeout,
            connect=self.config.connect_timeout,
            sock_read=self.config.read_timeout,
            sock_connect=self.config.connect_timeout,
        )

    async def close(self) -> None:
        """关闭HTTP会话"""
        if self._session:
            await self._session.close()
            self._session = None

    def build_request_options(
        self, request_options: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """合并基础选项和主机级请求选项

        主机选项覆盖基础选项；"auth": [user, password] 转换为 BasicAuth，
        数字形式的 "timeout" 转换为 ClientTimeout。

        Raises:
            ConfigurationError: 出现 aiohttp 不支持的选项时
        """
        options: Dict[str, Any] = {"allow_redirects": self.config.allow_redirects}
        options.update(request_options or {})

        unknown = sorted(set(options) - REQUEST_OPTION_NAMES)
        if unknown:
            raise ConfigurationError(
                f"Unknown request options: {', '.join(unknown)}",
                config_key="request_options",
                config_value=unknown,
            )

        auth = options.get("auth")
        if isinstance(auth, (list, tuple)):
            user = auth[0] if len(auth) > 0 else ""
            password = auth[1] if len(auth) > 1 else ""
            options["auth"] = aiohttp.BasicAuth(user, password)

        timeout = options.get("timeout")
        if isinstance(timeout, (int, float)) and not isinstance(timeout, bool):
            options["timeout"] = aiohttp.ClientTimeout(total=timeout)

        return options

    async def get(
        self, url: str, request_options: Optional[Mapping[str, Any]] = None
    ) -> aiohttp.ClientResponse:
        """执行GET请求并返回原始响应

        Args:
            url: 绝对URL
            request_options: 主机级请求选项

        Returns:
            任意状态码的原始响应

        Raises:
            RemoteFetchError: DNS失败、连接被拒绝、超时等传输层错误
            ConfigurationError: 请求选项无效
        """
        if self._session is None:
            await self._create_session()

        options = self.build_request_options(request_options)
        logger.debug("GET %s", _sanitize_url_for_logging(url))
        try:
            response = await self._session.request("GET", url, **options)
        except TRANSPORT_ERRORS as e:
            logger.debug("GET %s failed: %s", _sanitize_url_for_logging(url), e)
            raise RemoteFetchError(url, context={"reason": type(e).__name__}) from e

        logger.debug(
            "GET %s -> %s", _sanitize_url_for_logging(url), response.status
        )
        return response
