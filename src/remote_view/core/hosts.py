"""主机注册表模块"""

from typing import Dict, Iterator, List, Mapping, Tuple

from ..exceptions import HostNotConfiguredError
from ..models import HostConfig


class HostRegistry:
    """命名空间到主机配置的只读查找表"""

    def __init__(self, hosts: Mapping[str, HostConfig]):
        self._hosts: Dict[str, HostConfig] = dict(hosts)

    def lookup(self, namespace: str) -> HostConfig:
        """返回命名空间的主机配置

        Raises:
            HostNotConfiguredError: 命名空间未配置时
        """
        try:
            return self._hosts[namespace]
        except KeyError:
            raise HostNotConfiguredError(namespace) from None

    def namespaces(self) -> List[str]:
        return list(self._hosts)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._hosts

    def __iter__(self) -> Iterator[Tuple[str, HostConfig]]:
        return iter(self._hosts.items())
