"""pytest配置文件"""

from pathlib import Path
from typing import Any, Dict

import pytest
from aioresponses import aioresponses

from remote_view.config import config_manager
from remote_view.core.finder import RemoteTemplateFinder
from remote_view.models import RemoteViewConfig


@pytest.fixture
def view_folder(tmp_path) -> Path:
    """缓存根目录fixture"""
    return tmp_path / "tests"


@pytest.fixture
def make_config(view_folder):
    """按主机配置构造 RemoteViewConfig 的工厂"""

    def factory(hosts: Dict[str, Any], **overrides: Any) -> RemoteViewConfig:
        data: Dict[str, Any] = {
            "remote-delimiter": "remote:",
            "ignore-url-suffix": [],
            "ignore-urls": [],
            "view-folder": str(view_folder),
            "hosts": hosts,
        }
        data.update(overrides)
        return RemoteViewConfig.model_validate(data)

    return factory


@pytest.fixture
def make_finder(make_config):
    """按主机配置构造 RemoteTemplateFinder 的工厂"""

    def factory(hosts: Dict[str, Any], finder_kwargs=None, **overrides: Any):
        return RemoteTemplateFinder(make_config(hosts, **overrides), **(finder_kwargs or {}))

    return factory


@pytest.fixture
def specific_host() -> Dict[str, Any]:
    """无缓存的 specific 命名空间"""
    return {"specific": {"cache": False, "host": "http://foo.bar"}}


@pytest.fixture
def mocked_http():
    """HTTP Mock fixture，未注册的URL会抛出连接错误"""
    with aioresponses() as mocked:
        yield mocked


@pytest.fixture(autouse=True)
def reset_config_manager():
    """每个测试后清理全局配置缓存"""
    yield
    config_manager.reset()

