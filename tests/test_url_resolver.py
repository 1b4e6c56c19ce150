"""URL 解析和修改器链测试"""

import pytest

from remote_view.core.url_resolver import UrlResolver, build_absolute_url
from remote_view.exceptions import ConfigurationError, InvalidModifierError
from remote_view.models import HostConfig, RemoteIdentifier, ResolutionContext
from remote_view.modifiers import QueryStringModifier, UrlModifier


class LanguageModifier(UrlModifier):
    """只对 specific 命名空间生效的修改器"""

    def applicable(self, context: ResolutionContext) -> bool:
        return context.namespace == "specific"

    def query_fragment(self, context: ResolutionContext) -> str:
        return "?lang=de"


class BrokenModifier:
    """缺少 break_chain 的修改器"""

    def applicable(self, context):
        return True

    def query_fragment(self, context):
        return "?broken=1"


@pytest.fixture
def context():
    host = HostConfig(host="http://foo.bar")
    return ResolutionContext(
        identifier=RemoteIdentifier(namespace="specific", path="dasLamm"),
        host_config=host,
    )


class TestMapping:
    """映射表和前导斜杠测试"""

    def test_mapping_replaces_path(self, context):
        host = HostConfig(mapping={"dasLamm": "foo/bar"})
        assert UrlResolver().resolve("dasLamm", host, context) == "/foo/bar"

    def test_unmapped_path_is_unchanged(self, context):
        assert UrlResolver().resolve("dasLamm", HostConfig(), context) == "dasLamm"

    def test_leading_slash_is_not_duplicated(self, context):
        assert UrlResolver().resolve("/foo/bar", HostConfig(), context) == "/foo/bar"

    def test_trailing_slash_gets_leading_slash(self, context):
        assert UrlResolver().resolve("typo3/", HostConfig(), context) == "/typo3/"


class TestModifierChain:
    """修改器链测试"""

    def test_applicable_modifier_appends_fragment(self, context):
        resolver = UrlResolver([LanguageModifier()])
        assert resolver.resolve("dasLamm", HostConfig(), context) == "dasLamm?lang=de"

    def test_not_applicable_modifier_is_skipped(self, context):
        other = ResolutionContext(
            identifier=RemoteIdentifier(path="dasLamm"), host_config=HostConfig()
        )
        resolver = UrlResolver([LanguageModifier(), QueryStringModifier("&v=1")])
        assert resolver.resolve("dasLamm", HostConfig(), other) == "dasLamm&v=1"

    def test_fragments_follow_registration_order(self, context):
        resolver = UrlResolver([QueryStringModifier("?a=1"), QueryStringModifier("&b=2")])
        assert resolver.resolve("dasLamm", HostConfig(), context) == "dasLamm?a=1&b=2"

    def test_break_chain_stops_iteration(self, context):
        resolver = UrlResolver(
            [QueryStringModifier("?a=1", break_chain=True), QueryStringModifier("&b=2")]
        )
        assert resolver.resolve("dasLamm", HostConfig(), context) == "dasLamm?a=1"

    def test_break_chain_applies_even_when_not_applicable(self, context):
        class Stopper(UrlModifier):
            break_the_cycle = True

            def applicable(self, context):
                return False

            def query_fragment(self, context):
                return "?never"

        resolver = UrlResolver([Stopper(), QueryStringModifier("?a=1")])
        assert resolver.resolve("dasLamm", HostConfig(), context) == "dasLamm"

    def test_invalid_modifier_fails_fast(self, context):
        resolver = UrlResolver([QueryStringModifier("?a=1"), BrokenModifier()])
        with pytest.raises(InvalidModifierError) as exc_info:
            resolver.resolve("dasLamm", HostConfig(), context)

        assert exc_info.value.missing == "break_chain"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_invalid_modifier_after_breaking_modifier_still_fails(self, context):
        resolver = UrlResolver([QueryStringModifier("?a=1", break_chain=True), object()])
        with pytest.raises(InvalidModifierError):
            resolver.resolve("dasLamm", HostConfig(), context)


@pytest.mark.parametrize(
    "host,url,expected",
    [
        ("http://foo.bar", "dasLamm", "http://foo.bar/dasLamm"),
        ("http://foo.bar/", "/foo/bar", "http://foo.bar/foo/bar"),
        ("http://foo.bar//", "//foo", "http://foo.bar/foo"),
    ],
)
def test_build_absolute_url(host, url, expected):
    assert build_absolute_url(host, url) == expected
