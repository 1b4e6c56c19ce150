"""异步适配器模块

为同步调用方提供运行协程的入口，解决事件循环嵌套问题：
在已有事件循环中调用时切换到线程池执行
"""

from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Awaitable, Optional, TypeVar

T = TypeVar("T")


class EventLoopState:
    """事件循环状态检测器"""

    @staticmethod
    def is_running() -> bool:
        """检测是否在运行中的事件循环内"""
        try:
            loop = asyncio.get_running_loop()
            return loop is not None
        except RuntimeError:
            return False


class AsyncAdapter:
    """智能异步适配器

    根据当前环境自动选择执行策略：
    - 在已有事件循环中：使用线程池执行
    - 在无事件循环环境中：创建新的事件循环
    """

    def __init__(self, max_workers: int = 4):
        self.max_workers = max_workers
        self._thread_pool: Optional[concurrent.futures.ThreadPoolExecutor] = None

    def run_sync(self, coro: Awaitable[T]) -> T:
        """运行协程直到完成并返回结果，异常原样抛出"""
        if EventLoopState.is_running():
            return self._run_in_thread_pool(coro)
        return asyncio.run(coro)

    def _run_in_thread_pool(self, coro: Awaitable[T]) -> T:
        """在线程池中运行协程"""
        if self._thread_pool is None:
            self._thread_pool = concurrent.futures.ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="remote-view-async"
            )

        def run_in_thread():
            """在新线程中创建事件循环并运行协程"""
            new_loop = asyncio.new_event_loop()
            asyncio.set_event_loop(new_loop)
            try:
                return new_loop.run_until_complete(coro)
            finally:
                new_loop.close()

        future = self._thread_pool.submit(run_in_thread)
        return future.result()

    def __del__(self):
        """清理线程池资源"""
        if self._thread_pool:
            self._thread_pool.shutdown(wait=False)


# 全局适配器实例
_default_adapter = AsyncAdapter()


def smart_run(coro: Awaitable[T]) -> T:
    """智能运行协程的便捷函数"""
    return _default_adapter.run_sync(coro)

