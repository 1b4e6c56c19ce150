"""核心模块

这个包包含了远程模板解析引擎的各个阶段：
- identifier: 标识符解析
- hosts: 主机注册表
- filters: 后缀和禁止路径过滤
- url_resolver: 映射和修改器链
- network_client: 网络请求客户端
- file_manager: 缓存寻址和持久化
- finder: 串联以上阶段的引擎
"""

from .file_manager import FileManager
from .filters import FilterEngine
from .finder import RemoteTemplateFinder
from .hosts import HostRegistry
from .identifier import IdentifierParser
from .network_client import HTTPClient
from .url_resolver import UrlResolver

__all__ = [
    "FileManager",
    "FilterEngine",
    "HTTPClient",
    "HostRegistry",
    "IdentifierParser",
    "RemoteTemplateFinder",
    "UrlResolver",
]
