"""过滤模块测试"""

import pytest

from remote_view.core.filters import FilterEngine, extension_of, split_path
from remote_view.exceptions import ForbiddenUrlError, IgnoredSuffixError, UrlForbiddenError
from remote_view.models import HostConfig


class TestPathHelpers:
    """路径辅助函数测试"""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("typo3", (".", "typo3")),
            ("typo3/", (".", "typo3")),
            ("typo3/index.php", ("typo3", "index.php")),
            ("foo/typo3/index.php", ("foo/typo3", "index.php")),
            ("/typo3", ("/", "typo3")),
            ("/", ("/", "")),
        ],
    )
    def test_split_path(self, path, expected):
        assert split_path(path) == expected

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("dasLamm.svg", "svg"),
            ("dasLamm", ""),
            ("foo.d/bar", ""),
            ("archive.tar.gz", "gz"),
            ("foo/Image.PNG", "PNG"),
        ],
    )
    def test_extension_of(self, path, expected):
        assert extension_of(path) == expected


class TestSuffixFilter:
    """后缀过滤测试"""

    def test_global_ignore_list(self):
        engine = FilterEngine(ignored_suffixes=["svg"])
        with pytest.raises(IgnoredSuffixError) as exc_info:
            engine.check("dasLamm.svg", HostConfig())

        assert exc_info.value.message == "URL # dasLamm.svg has an ignored suffix."
        assert exc_info.value.suffix == "svg"

    def test_host_ignore_list_is_additive(self):
        engine = FilterEngine(ignored_suffixes=["jpg"])
        host = HostConfig.model_validate({"ignore-url-suffix": ["svg"]})

        with pytest.raises(IgnoredSuffixError):
            engine.check("dasLamm.svg", host)
        with pytest.raises(IgnoredSuffixError):
            engine.check("dasLamm.jpg", host)

    def test_suffix_match_is_case_sensitive(self):
        engine = FilterEngine(ignored_suffixes=["svg"])
        engine.check("dasLamm.SVG", HostConfig())

    def test_query_string_is_ignored(self):
        engine = FilterEngine(ignored_suffixes=["css"])
        with pytest.raises(IgnoredSuffixError):
            engine.check("style.css?v=3", HostConfig())

    def test_suffix_runs_before_forbidden_check(self):
        engine = FilterEngine(ignored_suffixes=["php"], forbidden_paths=["typo3"])
        with pytest.raises(IgnoredSuffixError):
            engine.check("typo3/index.php", HostConfig())


class TestForbiddenFilter:
    """禁止路径过滤测试"""

    def test_host_forbidden_list(self):
        engine = FilterEngine()
        host = HostConfig.model_validate({"ignore-urls": ["typo3"]})
        with pytest.raises(UrlForbiddenError) as exc_info:
            engine.check("typo3/", host)

        assert exc_info.value.message == "URL # typo3/ is forbidden."
        assert exc_info.value.code == 404

    def test_global_forbidden_list(self):
        engine = FilterEngine(forbidden_paths=["typo3"])
        with pytest.raises(ForbiddenUrlError) as exc_info:
            engine.check("typo3", HostConfig())

        assert exc_info.value.message == "URL # typo3 is forbidden."

    def test_directory_component_matches(self):
        engine = FilterEngine(forbidden_paths=["typo3"])
        with pytest.raises(UrlForbiddenError):
            engine.check("typo3/index.php", HostConfig())

    def test_only_immediate_dirname_is_checked(self):
        engine = FilterEngine(forbidden_paths=["typo3"])
        engine.check("foo/typo3/index.php", HostConfig())

    def test_allowed_path(self):
        engine = FilterEngine(ignored_suffixes=["svg"], forbidden_paths=["typo3"])
        engine.check("foo/bar", HostConfig())
