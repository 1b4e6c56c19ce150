"""remote-view - 远程模板获取与缓存

把 "remote:namespace::path" 形式的标识符解析为本地缓存的模板文件
"""

from .config import get_config, load_config, save_config
from .core.finder import RemoteTemplateFinder, create_remote_finder
from .exceptions import (
    ConfigurationError,
    DirectoryCreateError,
    FileOperationError,
    ForbiddenUrlError,
    HostNotConfiguredError,
    IgnoredSuffixError,
    InvalidIdentifierError,
    InvalidModifierError,
    RemoteFetchError,
    RemoteViewException,
    TemplateNotFoundError,
    UrlForbiddenError,
)
from .filename import CallbackFilenameStrategy, SlugFilenameStrategy, ViewFilenameStrategy
from .handlers import ResponseHandler, ResponseHandlerRegistry
from .models import (
    HostConfig,
    HttpClientConfig,
    RemoteIdentifier,
    RemoteViewConfig,
    ResolutionContext,
    TemplateResponse,
)
from .modifiers import QueryStringModifier, UrlModifier
from .view_finder import FileViewFinder

# 版本信息
__version__ = "1.0.0"
__title__ = "remote-view"
__license__ = "MIT"

# 公共API
__all__ = [
    # 核心类
    "RemoteTemplateFinder",
    "FileViewFinder",
    "create_remote_finder",
    # 数据模型
    "HostConfig",
    "HttpClientConfig",
    "RemoteIdentifier",
    "RemoteViewConfig",
    "ResolutionContext",
    "TemplateResponse",
    # 扩展点
    "UrlModifier",
    "QueryStringModifier",
    "ViewFilenameStrategy",
    "SlugFilenameStrategy",
    "CallbackFilenameStrategy",
    "ResponseHandler",
    "ResponseHandlerRegistry",
    # 配置管理
    "get_config",
    "load_config",
    "save_config",
    # 异常类
    "RemoteViewException",
    "InvalidIdentifierError",
    "HostNotConfiguredError",
    "IgnoredSuffixError",
    "UrlForbiddenError",
    "ForbiddenUrlError",
    "RemoteFetchError",
    "FileOperationError",
    "DirectoryCreateError",
    "ConfigurationError",
    "InvalidModifierError",
    "TemplateNotFoundError",
    # 元数据
    "__version__",
]
