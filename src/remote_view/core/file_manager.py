"""文件管理器模块

负责缓存文件的寻址和持久化：
- 按命名空间创建缓存目录
- 检查缓存文件是否存在
- 写入/读取缓存文件
"""

from pathlib import Path
from typing import Union

import aiofiles

from ..exceptions import DirectoryCreateError, FileOperationError


class FileManager:
    """缓存文件管理器

    缓存文件布局: <view_folder>/<namespace>/<filename>
    """

    def __init__(self, view_folder: Union[str, Path]):
        """初始化文件管理器

        Args:
            view_folder: 缓存根目录
        """
        self.view_folder = Path(view_folder)

    async def ensure_view_folder(self, namespace: str) -> Path:
        """返回命名空间的缓存目录，不存在时创建

        Raises:
            DirectoryCreateError: 创建失败且目录仍不存在时
        """
        folder = self.view_folder / namespace
        await self.create_directory(folder)
        return folder

    async def view_path(self, namespace: str, filename: str) -> Path:
        """计算候选缓存路径"""
        folder = await self.ensure_view_folder(namespace)
        return folder / filename

    async def create_directory(self, dir_path: Path) -> None:
        """创建目录，其他进程/线程抢先创建也视为成功

        Raises:
            DirectoryCreateError: 目录创建失败时
        """
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            if dir_path.is_dir():
                return
            raise DirectoryCreateError(
                f"Directory \"{dir_path}\" was not created: {e}",
                file_path=str(dir_path),
            ) from e

    async def file_exists(self, file_path: Path) -> bool:
        """检查文件是否存在"""
        return file_path.exists()

    async def write_file(self, file_path: Path, content: bytes) -> None:
        """写入文件，已存在时直接覆盖

        Raises:
            FileOperationError: 文件写入失败时
        """
        try:
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            raise FileOperationError(
                f"File write failed: {e}",
                file_path=str(file_path),
                operation="write",
            ) from e

