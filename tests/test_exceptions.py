"""异常类测试"""

import pytest

from remote_view.exceptions import (
    ConfigurationError,
    DirectoryCreateError,
    FileOperationError,
    ForbiddenUrlError,
    HostNotConfiguredError,
    IgnoredSuffixError,
    InvalidIdentifierError,
    InvalidModifierError,
    RemoteFetchError,
    RemoteViewException,
    TemplateNotFoundError,
    UrlForbiddenError,
)


class TestRemoteViewException:
    """基础异常测试"""

    def test_basic_exception(self):
        exc = RemoteViewException("Test error")
        assert str(exc) == "Test error"
        assert exc.context == {}

    def test_exception_with_context(self):
        exc = RemoteViewException("Test error", {"key": "value"})
        assert str(exc) == "Test error | Context: key=value"


class TestMessages:
    """用户可见的错误信息"""

    def test_host_not_configured(self):
        exc = HostNotConfiguredError("specific")
        assert str(exc) == (
            "No remote host configured for namespace # specific. "
            "Please check your remote-view configuration."
        )
        assert exc.namespace == "specific"

    def test_ignored_suffix(self):
        exc = IgnoredSuffixError("main.css", suffix="css")
        assert str(exc) == "URL # main.css has an ignored suffix. | Suffix: css"

    def test_forbidden(self):
        exc = UrlForbiddenError("typo3/")
        assert str(exc) == "URL # typo3/ is forbidden."
        assert exc.code == 404
        assert ForbiddenUrlError is UrlForbiddenError

    def test_remote_fetch(self):
        exc = RemoteFetchError("http://foo.bar/x", context={"reason": "ClientConnectionError"})
        assert str(exc) == (
            "Remote template not found | URL: http://foo.bar/x | Status: 404"
            " | Context: reason=ClientConnectionError"
        )

    def test_invalid_identifier(self):
        exc = InvalidIdentifierError("Identifier has no usable segments", identifier="remote:")
        assert str(exc) == "Identifier has no usable segments | Identifier: remote:"

    def test_file_operation(self):
        exc = FileOperationError("Failed", file_path="/tmp/x", operation="write")
        assert str(exc) == "Failed | Operation: write | File: /tmp/x"

    def test_invalid_modifier(self):
        exc = InvalidModifierError(object(), missing="applicable")
        assert exc.config_key == "url_modifiers"
        assert "missing callable 'applicable'" in str(exc)

    def test_template_not_found(self):
        assert str(TemplateNotFoundError("emails.welcome")) == "View [emails.welcome] not found."


@pytest.mark.parametrize(
    "exc, parent",
    [
        (InvalidIdentifierError("x"), RemoteViewException),
        (HostNotConfiguredError("x"), RemoteViewException),
        (IgnoredSuffixError("x"), RemoteViewException),
        (UrlForbiddenError("x"), RemoteViewException),
        (RemoteFetchError("x"), RemoteViewException),
        (DirectoryCreateError("x"), FileOperationError),
        (InvalidModifierError(object()), ConfigurationError),
        (TemplateNotFoundError("x"), RemoteViewException),
    ],
)
def test_exception_hierarchy(exc, parent):
    assert isinstance(exc, parent)
    assert isinstance(exc, Exception)
