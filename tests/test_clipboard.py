"""
Tests for copy-to-clipboard with a single fallback.
"""

from timecalc.services.clipboard import copy_text


def _failing(text):
    raise RuntimeError("clipboard unavailable")


class TestCopyText:

    def test_primary_success(self):
        copied = []
        result = copy_text("19积分", copied.append, _failing)
        assert result.success
        assert result.method == "primary"
        assert copied == ["19积分"]

    def test_fallback_used_once(self):
        calls = []
        result = copy_text("x", _failing, calls.append)
        assert result.success
        assert result.method == "fallback"
        assert calls == ["x"]

    def test_both_fail_reports_error(self):
        result = copy_text("x", _failing, _failing)
        assert not result.success
        assert result.method is None
        assert "clipboard unavailable" in result.error

    def test_no_fallback(self):
        result = copy_text("x", _failing)
        assert not result.success
        assert result.error == "clipboard unavailable"
