"""命令行界面模块

使用 Rich 库输出结果：
  remote-view warmup             预热所有映射表中配置的模板
  remote-view resolve IDENTIFIER 解析单个标识符
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from .config import get_config, load_config
from .core.finder import RemoteTemplateFinder
from .exceptions import RemoteViewException
from .models import RemoteViewConfig


class CLIApplication:
    """命令行应用程序"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_parser(self) -> argparse.ArgumentParser:
        """创建命令行参数解析器"""
        parser = argparse.ArgumentParser(
            prog="remote-view",
            description="远程模板缓存工具",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
使用示例:
  remote-view --config remote-view.json warmup -v
  remote-view resolve remote:specific::dasLamm
            """,
        )
        parser.add_argument("-c", "--config", help="JSON 配置文件 (默认: 环境变量/内置默认值)")
        parser.add_argument("-v", "--verbose", action="store_true", help="显示详细输出")
        parser.add_argument("--version", action="version", version="%(prog)s 1.0.0")

        # 子命令之后也接受 -v，未指定时不覆盖顶层的值
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument(
            "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="显示详细输出"
        )

        subparsers = parser.add_subparsers(dest="command")
        subparsers.add_parser("warmup", parents=[common], help="预热所有已配置映射的模板")
        resolve_parser = subparsers.add_parser(
            "resolve", parents=[common], help="解析单个远程标识符"
        )
        resolve_parser.add_argument("identifier", help="远程标识符，例如 remote:dasLamm")

        return parser

    def load_config(self, args) -> RemoteViewConfig:
        if args.config:
            return load_config(args.config)
        return get_config()

    def warmup_identifiers(self, finder: RemoteTemplateFinder) -> List[str]:
        """所有主机映射表中的标识符"""
        return [
            f"{finder.delimiter}{namespace}::{name}"
            for namespace, host_config in finder.hosts
            for name in host_config.mapping
        ]

    async def run_warmup(self, finder: RemoteTemplateFinder) -> int:
        """逐个解析映射表中的模板，返回退出码"""
        results: List[Tuple[str, bool, str]] = []
        for identifier in self.warmup_identifiers(finder):
            try:
                path = await finder.find_remote_path_view(identifier)
                results.append((identifier, True, path))
            except RemoteViewException as e:
                results.append((identifier, False, str(e)))

        table = Table(title="Warmup", show_header=True, border_style="dim")
        table.add_column("Template", style="bold cyan")
        table.add_column("Result")
        for identifier, ok, detail in results:
            table.add_row(identifier, f"[green]{detail}[/green]" if ok else f"[red]{detail}[/red]")
        self.console.print(table)

        failed = sum(1 for _, ok, _ in results if not ok)
        self.console.print(f"{len(results) - failed} cached, {failed} failed")
        return 1 if failed else 0

    async def run_resolve(self, finder: RemoteTemplateFinder, identifier: str) -> int:
        try:
            path = await finder.find_remote_path_view(identifier)
        except RemoteViewException as e:
            self.print_error(str(e))
            return 1
        self.console.print(path)
        return 0

    def print_error(self, error: str):
        """打印错误信息"""
        self.console.print(f"[bold red]❌ 错误: {error}[/bold red]")

    async def main(self, argv=None) -> int:
        """主入口函数"""
        parser = self.create_parser()
        args = parser.parse_args(argv)

        if not args.command:
            parser.print_help()
            return 1

        if args.verbose:
            logging.basicConfig(level=logging.DEBUG)

        try:
            finder = RemoteTemplateFinder(self.load_config(args))
        except RemoteViewException as e:
            self.print_error(str(e))
            return 1

        if args.command == "warmup":
            return await self.run_warmup(finder)
        return await self.run_resolve(finder, args.identifier)


def main(argv=None) -> int:
    """CLI入口点 - 同步包装器"""
    app = CLIApplication()

    try:
        return asyncio.run(app.main(argv))
    except KeyboardInterrupt:
        print("\n🛑 程序被用户中断")
        return 1


if __name__ == "__main__":
    sys.exit(main())
