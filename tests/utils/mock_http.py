"""HTTP Mock工具

基于 aioresponses 的辅助函数和响应处理器替身
"""

from typing import Any, Dict, List

from aioresponses import aioresponses
from yarl import URL


def request_count(mocked: aioresponses) -> int:
    """已发出的请求总数"""
    return sum(len(calls) for calls in mocked.requests.values())


def request_kwargs(mocked: aioresponses, url: str) -> Dict[str, Any]:
    """返回某个URL第一次请求的参数"""
    return mocked.requests[("GET", URL(url))][0].kwargs


class RecordingHandler:
    """记录调用参数并返回固定内容的响应处理器"""

    def __init__(self, result: Any):
        self.result = result
        self.calls: List[tuple] = []

    def __call__(self, response, host_config, context):
        self.calls.append((response, host_config, context))
        return self.result
