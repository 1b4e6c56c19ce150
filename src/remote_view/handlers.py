"""响应处理器

按 HTTP 状态码注册处理器，处理器的返回值替换原始响应；
之后统一把响应内容提取为 bytes 再写入缓存。
"""

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, Optional, Union

from .models import HostConfig, ResolutionContext, TemplateResponse

logger = logging.getLogger(__name__)


class ResponseHandler(ABC):
    """响应处理器抽象基类"""

    @abstractmethod
    def handle(
        self, response: Any, host_config: HostConfig, context: ResolutionContext
    ) -> Any:
        """处理响应

        Args:
            response: 原始 aiohttp 响应
            host_config: 当前命名空间的主机配置
            context: 当前解析上下文

        Returns:
            新的响应对象、字符串或 bytes，也可以是 awaitable
        """
        pass


class CallbackResponseHandler(ResponseHandler):
    """把普通函数包装成响应处理器"""

    def __init__(self, callback: Callable[..., Any]):
        self._callback = callback

    def handle(
        self, response: Any, host_config: HostConfig, context: ResolutionContext
    ) -> Any:
        return self._callback(response, host_config, context)


HandlerLike = Union[ResponseHandler, Callable[..., Any]]


class ResponseHandlerRegistry:
    """状态码 -> 处理器 注册表，同一状态码以最后一次注册为准"""

    def __init__(self):
        self._handlers: Dict[int, ResponseHandler] = {}

    def push(self, status_codes: Union[int, Iterable[int]], handler: HandlerLike) -> None:
        """为一个或多个状态码注册处理器"""
        if not isinstance(handler, ResponseHandler):
            if not callable(handler):
                raise TypeError("Response handler must be callable")
            handler = CallbackResponseHandler(handler)

        codes = [status_codes] if isinstance(status_codes, int) else list(status_codes)
        for code in codes:
            self._handlers[int(code)] = handler

    def get(self, status_code: int) -> Optional[ResponseHandler]:
        return self._handlers.get(status_code)

    def __contains__(self, status_code: object) -> bool:
        return status_code in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


class ResponseDispatcher:
    """根据状态码把响应交给处理器，并提取最终内容"""

    def __init__(self, registry: Optional[ResponseHandlerRegistry] = None):
        self.registry = registry or ResponseHandlerRegistry()

    async def dispatch(
        self, response: Any, host_config: HostConfig, context: ResolutionContext
    ) -> Any:
        """调用注册的处理器；没有处理器时原样返回响应"""
        status = getattr(response, "status", None)
        handler = self.registry.get(status) if status is not None else None
        if handler is None:
            return response

        logger.debug("Dispatching status %s response to %s", status, type(handler).__name__)
        result = handler.handle(response, host_config, context)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def extract_content(self, response: Any) -> bytes:
        """把各种形态的响应统一为 bytes，None 写入空文件"""
        if response is None:
            return b""
        if isinstance(response, bytes):
            return response
        if isinstance(response, str):
            return response.encode("utf-8")
        # aiohttp 响应的 content 是流对象，必须走 read()
        if isinstance(response, TemplateResponse) or (
            hasattr(response, "content") and not hasattr(response, "read")
        ):
            return await self.extract_content(response.content)

        read = getattr(response, "read", None)
        if callable(read):
            body = read()
            if inspect.isawaitable(body):
                body = await body
            return await self.extract_content(body)

        return str(response).encode("utf-8")
