"""数据模型定义

使用 Pydantic 进行类型安全的配置验证和模型定义
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_NAMESPACE = "default"
DEFAULT_REMOTE_DELIMITER = "remote:"
DEFAULT_IGNORE_URL_SUFFIX = ["png", "jpg", "jpeg", "css", "js", "woff", "ttf", "gif", "svg"]
DEFAULT_IGNORE_URLS = ["typo3", "typo3/"]
DEFAULT_VIEW_FOLDER = "resources/views/remote-view-cache"


class HttpClientConfig(BaseModel):
    """HTTP客户端配置"""

    allow_redirects: bool = Field(default=False, description="是否自动跟随重定向")
    timeout: float = Field(default=5, description="请求总超时时间(秒)")
    connect_timeout: float = Field(default=5, description="连接超时时间(秒)")
    read_timeout: float = Field(default=5, description="读取超时时间(秒)")
    user_agent: str = Field(default="remote-view/1.0", description="HTTP用户代理")
    ssl_verify: bool = Field(default=True, description="是否验证SSL证书")

    @field_validator("timeout", "connect_timeout", "read_timeout")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """验证必须为正数"""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class HostConfig(BaseModel):
    """单个命名空间的远程主机配置"""

    host: str = Field(default="", description="上游主机基础URL")
    cache: bool = Field(default=False, description="是否启用基于文件存在性的缓存")
    request_options: Dict[str, Any] = Field(
        default_factory=dict, description="合并到每个请求中的选项"
    )
    mapping: Dict[str, str] = Field(default_factory=dict, description="标识符到路由的映射表")
    ignore_url_suffix: List[str] = Field(
        default_factory=list, alias="ignore-url-suffix", description="额外忽略的后缀"
    )
    ignore_urls: List[str] = Field(
        default_factory=list, alias="ignore-urls", description="额外禁止的路径"
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)


class RemoteViewConfig(BaseModel):
    """应用配置模型"""

    remote_delimiter: str = Field(
        default=DEFAULT_REMOTE_DELIMITER, alias="remote-delimiter", description="远程标识前缀"
    )
    ignore_url_suffix: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_URL_SUFFIX),
        alias="ignore-url-suffix",
        description="全局忽略的文件后缀",
    )
    ignore_urls: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_URLS),
        alias="ignore-urls",
        description="全局禁止的路径",
    )
    view_folder: str = Field(
        default=DEFAULT_VIEW_FOLDER, alias="view-folder", description="缓存根目录"
    )
    view_paths: List[str] = Field(
        default_factory=list, alias="view-paths", description="本地模板查找目录"
    )
    view_extensions: List[str] = Field(
        default_factory=lambda: [".template", ".html"],
        alias="view-extensions",
        description="本地模板扩展名",
    )
    http: HttpClientConfig = Field(default_factory=HttpClientConfig)
    hosts: Dict[str, HostConfig] = Field(default_factory=dict)

    @field_validator("remote_delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """远程前缀不能为空"""
        if not v:
            raise ValueError("remote-delimiter must not be empty")
        return v

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RemoteIdentifier(BaseModel):
    """解析后的远程标识符"""

    namespace: str = Field(default=DEFAULT_NAMESPACE, description="命名空间")
    path: str = Field(..., description="命名空间之后的路径")

    model_config = ConfigDict(frozen=True)


class TemplateResponse(BaseModel):
    """框架级响应对象，响应处理器可以用它替换原始响应"""

    content: Union[str, bytes] = Field(default=b"", description="响应内容")
    status: int = Field(default=200, description="HTTP状态码")
    headers: Dict[str, str] = Field(default_factory=dict, description="响应头")


@dataclass
class ResolutionContext:
    """单次解析的上下文，只属于一次 resolve 调用"""

    identifier: RemoteIdentifier
    host_config: HostConfig
    url: str = ""
    absolute_url: Optional[str] = None
    cache_path: Optional[str] = None

    @property
    def namespace(self) -> str:
        return self.identifier.namespace
