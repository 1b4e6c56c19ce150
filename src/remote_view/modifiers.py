"""URL 修改器

修改器链按注册顺序执行，每个修改器可以向 URL 追加查询片段，
也可以中断后续修改器的执行。
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List

from .exceptions import InvalidModifierError
from .models import ResolutionContext

REQUIRED_CAPABILITIES = ("applicable", "query_fragment", "break_chain")


class UrlModifier(ABC):
    """URL 修改器抽象基类

    子类实现 applicable() 和 query_fragment()；
    将 break_the_cycle 设为 True 时，执行到该修改器后停止整条链。
    """

    break_the_cycle: bool = False

    @abstractmethod
    def applicable(self, context: ResolutionContext) -> bool:
        """当前解析是否应用此修改器"""
        pass

    @abstractmethod
    def query_fragment(self, context: ResolutionContext) -> str:
        """追加到 URL 末尾的片段，例如 "?lang=de" """
        pass

    def break_chain(self) -> bool:
        return self.break_the_cycle


class QueryStringModifier(UrlModifier):
    """固定追加查询片段的修改器"""

    def __init__(self, fragment: str, break_chain: bool = False):
        self.fragment = fragment
        self.break_the_cycle = break_chain

    def applicable(self, context: ResolutionContext) -> bool:
        return True

    def query_fragment(self, context: ResolutionContext) -> str:
        return self.fragment


def validate_modifier(modifier: Any) -> None:
    """检查修改器是否具备全部接口

    Raises:
        InvalidModifierError: 缺少任意一个可调用接口时
    """
    for capability in REQUIRED_CAPABILITIES:
        if not callable(getattr(modifier, capability, None)):
            raise InvalidModifierError(modifier, missing=capability)


def apply_modifiers(
    url: str, modifiers: Iterable[Any], context: ResolutionContext
) -> str:
    """按顺序执行修改器链

    Args:
        url: 映射后的相对 URL
        modifiers: 修改器序列
        context: 当前解析上下文

    Returns:
        追加了查询片段的 URL
    """
    chain = list(modifiers)
    # 任何一个修改器无效都在追加片段之前失败
    for modifier in chain:
        validate_modifier(modifier)

    fragments: List[str] = []
    for modifier in chain:
        if modifier.applicable(context):
            fragments.append(modifier.query_fragment(context))
        if modifier.break_chain():
            break
    return url + "".join(fragments)
