"""异常定义模块

定义远程模板解析专用的异常类，所有异常都直接抛给 resolve 的调用方
"""

from typing import Any, Dict, Optional


class RemoteViewException(Exception):
    """remote-view 基础异常类"""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def _format(self, *parts: str) -> str:
        items = [self.message, *[part for part in parts if part]]
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            items.append(f"Context: {context_str}")
        return " | ".join(items)

    def __str__(self) -> str:
        return self._format()


class InvalidIdentifierError(RemoteViewException):
    """标识符格式无效"""

    def __init__(
        self,
        message: str,
        identifier: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context)
        self.identifier = identifier

    def __str__(self) -> str:
        return self._format(
            f"Identifier: {self.identifier}" if self.identifier is not None else ""
        )


class HostNotConfiguredError(RemoteViewException):
    """命名空间没有配置远程主机"""

    def __init__(
        self,
        namespace: str,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message
            or (
                f"No remote host configured for namespace # {namespace}. "
                "Please check your remote-view configuration."
            ),
            context,
        )
        self.namespace = namespace


class IgnoredSuffixError(RemoteViewException):
    """URL 后缀在忽略列表中"""

    def __init__(
        self,
        url: str,
        suffix: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(f"URL # {url} has an ignored suffix.", context)
        self.url = url
        self.suffix = suffix

    def __str__(self) -> str:
        return self._format(f"Suffix: {self.suffix}" if self.suffix else "")


class UrlForbiddenError(RemoteViewException):
    """URL 在禁止列表中"""

    def __init__(
        self,
        url: str,
        code: int = 404,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(f"URL # {url} is forbidden.", context)
        self.url = url
        self.code = code


# 别名，两种命名都可以捕获
ForbiddenUrlError = UrlForbiddenError


class RemoteFetchError(RemoteViewException):
    """远程模板获取失败

    传输层错误统一归为 "not found" 语义 (status_code=404)
    """

    def __init__(
        self,
        url: str,
        status_code: int = 404,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message or "Remote template not found", context)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        return self._format(f"URL: {self.url}", f"Status: {self.status_code}")


class FileOperationError(RemoteViewException):
    """文件操作异常"""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context)
        self.file_path = file_path
        self.operation = operation

    def __str__(self) -> str:
        return self._format(
            f"Operation: {self.operation}" if self.operation else "",
            f"File: {self.file_path}" if self.file_path else "",
        )


class DirectoryCreateError(FileOperationError):
    """缓存目录创建失败 (目录已存在不算失败)"""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, file_path=file_path, operation="mkdir", context=context)


class ConfigurationError(RemoteViewException):
    """配置异常"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context)
        self.config_key = config_key
        self.config_value = config_value

    def __str__(self) -> str:
        return self._format(
            f"Key: {self.config_key}" if self.config_key else "",
            f"Value: {self.config_value}" if self.config_value is not None else "",
        )


class InvalidModifierError(ConfigurationError):
    """注册的 URL 修改器不满足接口要求"""

    def __init__(
        self,
        modifier: Any,
        missing: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Invalid URL modifier: {type(modifier).__name__}"
        if missing:
            message += f" (missing callable '{missing}')"
        super().__init__(message, config_key="url_modifiers", context=context)
        self.modifier = modifier
        self.missing = missing


class TemplateNotFoundError(RemoteViewException):
    """本地视图目录中找不到模板"""

    def __init__(
        self,
        name: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(f"View [{name}] not found.", context)
        self.name = name
