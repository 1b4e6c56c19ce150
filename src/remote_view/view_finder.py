"""视图查找器

模板查找的统一入口：远程标识符交给 RemoteTemplateFinder，
其他名称在本地视图目录中查找。结果在查找器生命周期内缓存。
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .core.finder import RemoteTemplateFinder
from .exceptions import TemplateNotFoundError

HINT_PATH_DELIMITER = "::"


class FileViewFinder:
    """带记忆的视图查找器"""

    def __init__(
        self,
        remote_finder: RemoteTemplateFinder,
        paths: Optional[Iterable[Union[str, Path]]] = None,
        extensions: Optional[Sequence[str]] = None,
    ):
        self.remote_finder = remote_finder
        if paths is None:
            paths = remote_finder.config.view_paths
        self.paths: List[Path] = [Path(p) for p in paths]
        self.extensions: List[str] = list(
            extensions
            if extensions is not None
            else remote_finder.config.view_extensions
        )
        self.views: Dict[str, str] = {}

    def find(self, name: str) -> str:
        """返回模板的本地路径

        Raises:
            TemplateNotFoundError: 本地目录中找不到非远程模板时
            RemoteViewException: 远程解析失败时
        """
        name = name.strip()
        if name in self.views:
            return self.views[name]

        if self.remote_finder.has_remote_information(name):
            self.views[name] = self.remote_finder.resolve(name)
        else:
            self.views[name] = self.find_in_paths(name)
        return self.views[name]

    def find_in_paths(self, name: str) -> str:
        """在本地视图目录中查找，"emails.welcome" -> "emails/welcome.<ext>" """
        if HINT_PATH_DELIMITER in name:
            raise TemplateNotFoundError(name, context={"reason": "namespaced local views"})

        relative = name.replace(".", "/")
        for path in self.paths:
            for extension in self.extensions:
                candidate = path / f"{relative}{extension}"
                if candidate.is_file():
                    return str(candidate)

        raise TemplateNotFoundError(name)

    def add_location(self, location: Union[str, Path]) -> None:
        self.paths.append(Path(location))

    def flush(self) -> None:
        """清空已缓存的查找结果"""
        self.views.clear()
