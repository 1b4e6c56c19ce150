"""标识符解析模块

把 "remote:specific::dasLamm" 这样的原始标识符拆分为命名空间和路径
"""

from ..exceptions import InvalidIdentifierError
from ..models import DEFAULT_NAMESPACE, DEFAULT_REMOTE_DELIMITER, RemoteIdentifier

NAMESPACE_SEPARATOR = "::"


class IdentifierParser:
    """远程标识符解析器"""

    def __init__(self, delimiter: str = DEFAULT_REMOTE_DELIMITER):
        self.delimiter = delimiter

    def has_remote_information(self, name: str) -> bool:
        """名称是否以远程前缀开头"""
        return name.startswith(self.delimiter)

    def parse(self, raw: str) -> RemoteIdentifier:
        """解析原始标识符

        Args:
            raw: 可能带有远程前缀的原始标识符

        Returns:
            解析后的 RemoteIdentifier

        Raises:
            InvalidIdentifierError: 没有可用的片段时
        """
        name = raw.replace(self.delimiter, "", 1).strip()
        if not name:
            raise InvalidIdentifierError("Identifier has no usable segments", identifier=raw)

        segments = name.split(NAMESPACE_SEPARATOR)
        if len(segments) < 2:
            return RemoteIdentifier(namespace=DEFAULT_NAMESPACE, path=name)

        namespace = segments[0].strip()
        path = NAMESPACE_SEPARATOR.join(segments[1:]).strip()
        if not namespace or not path:
            raise InvalidIdentifierError(
                f"View [{name}] has an invalid name.", identifier=raw
            )
        return RemoteIdentifier(namespace=namespace, path=path)
