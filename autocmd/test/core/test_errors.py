"""Tests for autocmd.core.errors module."""

from autocmd.core.errors import ErrorCode


class TestErrorCode:
    def test_values(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.COMMAND_ERROR == 3

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in ErrorCode]
        assert len(values) == len(set(values))
